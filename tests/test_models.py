"""Tests for the bin model."""

import json
from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from bincli.core.errors import BinError
from bincli.core.models import REMOTE_CONTEXT, Bin, BinList, new_bin


class TestNewBin:
    """Test local bin construction."""

    def test_fields(self):
        """Should get a UUID id and a timezone-aware timestamp."""
        before = datetime.now(timezone.utc)
        item = new_bin("Class 2025", is_private=True)

        assert item.name == "Class 2025"
        assert item.is_private is True
        assert len(item.id) == 36
        assert item.created_at >= before

    def test_unique_ids(self):
        assert new_bin("a").id != new_bin("a").id

    @pytest.mark.parametrize("name", ["", "   "])
    def test_empty_name_rejected(self, name):
        with pytest.raises(BinError) as exc:
            new_bin(name)
        assert exc.value.message == "name can't be empty"


class TestBinList:
    """Test JSON (de)serialization of bin lists."""

    def test_from_json(self, sample_document):
        bin_list = BinList.from_json(json.dumps(sample_document))

        assert len(bin_list) == 1
        item = bin_list.bins[0]
        assert item.id == "test-1"
        assert item.name == "First Bin"
        assert item.is_private is False
        assert item.created_at == datetime(2025, 1, 1, tzinfo=timezone.utc)

    def test_to_bytes_uses_wire_names(self):
        bin_list = BinList(bins=[Bin(id="x", name="X", is_private=True)])
        data = json.loads(bin_list.to_bytes())

        assert data == {"bins": [{"id": "x", "name": "X", "is_private": True, "created_at": None}]}

    def test_keeps_order(self):
        bin_list = BinList.from_json(b'{"bins": [{"name": "b"}, {"name": "a"}, {"name": "c"}]}')
        assert [b.name for b in bin_list.bins] == ["b", "a", "c"]

    def test_missing_bins_is_empty(self):
        assert BinList.from_json(b"{}").bins == []

    def test_reparse_is_equal(self):
        original = BinList(bins=[new_bin("one"), new_bin("two", True)])
        assert BinList.from_json(original.to_bytes()) == original


class TestBinName:
    """Local construction rejects empty names; server records do not."""

    @pytest.mark.parametrize("name", ["", "  "])
    def test_empty_name_rejected(self, name):
        with pytest.raises(ValidationError):
            Bin(id="x", name=name)

    def test_missing_name_rejected(self):
        with pytest.raises(ValidationError):
            Bin(id="x")

    def test_local_file_with_unnamed_bin_rejected(self):
        with pytest.raises(ValidationError):
            BinList.from_json(b'{"bins": [{"id": "a", "name": ""}]}')

    def test_remote_records_keep_empty_names(self):
        bin_list = BinList.from_json(b'{"bins": [{"id": "a", "name": ""}, {"id": "b"}]}', remote=True)
        assert [b.name for b in bin_list.bins] == ["", ""]

    def test_remote_context_on_validate(self):
        bin_list = BinList.model_validate({"bins": [{"id": "a"}]}, context=REMOTE_CONTEXT)
        assert bin_list.bins[0].name == ""
