"""CLI Commands for bincli."""

from bincli.commands.create import CreateCommand
from bincli.commands.delete import DeleteCommand
from bincli.commands.get import GetCommand
from bincli.commands.help import HelpCommand
from bincli.commands.list import ListCommand
from bincli.commands.new import NewCommand
from bincli.commands.update import UpdateCommand

__all__ = [
    "CreateCommand",
    "GetCommand",
    "UpdateCommand",
    "DeleteCommand",
    "ListCommand",
    "NewCommand",
    "HelpCommand",
]
