"""New command - add a bin entry to a local bin list file."""

from __future__ import annotations

import argparse

from pydantic import ValidationError

from bincli.commands.base import BaseCommand
from bincli.core.errors import BinError, LocalFileError
from bincli.core.models import BinList, new_bin
from bincli.ui.console import console, print_success
from bincli.ui.panels import create_bins_table


class NewCommand(BaseCommand):
    """Append a freshly built bin to a local JSON file.

    The file is created when it does not exist yet, so this is how a
    document for -create is usually put together.
    """

    name = "new"
    description = "Add a new bin entry to a local bin list file"
    usage = "-new -file=<path> -binName=<name> [-private]"
    required = ("file", "bin_name")
    remote = False

    def execute(self, args: argparse.Namespace) -> bool:
        storage = self.api.storage

        try:
            if storage.exists(args.file):
                try:
                    bin_list = BinList.from_json(storage.read_json(args.file))
                except ValidationError as e:
                    raise LocalFileError(
                        f"{args.file} is not a bin list: {e.error_count()} invalid field(s)", args.file
                    ) from e
            elif not args.file.endswith(".json"):
                raise LocalFileError(f"{args.file} isn't a valid json file", args.file)
            else:
                bin_list = BinList()

            item = new_bin(args.bin_name, args.private)
            bin_list.bins.append(item)
            storage.write(bin_list.to_bytes(), args.file)
        except BinError as e:
            return self.fail("Failed to add bin", e)

        print_success(f"Added {item.name} → {item.id} to {args.file}")
        console.print(create_bins_table(bin_list, args.file))
        return True
