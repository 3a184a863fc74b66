"""Tests for LiteralDataSource."""

import pytest

from canon.errors import SourceError
from canon.sources.literal import LiteralDataSource


class TestLiteralDataSource:
    """Tests for records declared in code."""

    def test_load_returns_records(self) -> None:
        """The supplied mapping is returned as records."""
        source = LiteralDataSource({"gone": {"status": 410}})

        assert source.load() == {"gone": {"status": 410}}

    def test_load_detaches_from_caller_mapping(self) -> None:
        """Mutating the original mapping after load does not change loaded records."""
        data = {"gone": {"status": 410, "tags": ["http"]}}
        records = LiteralDataSource(data).load()

        data["gone"]["status"] = 999
        data["gone"]["tags"].append("mutated")

        assert records == {"gone": {"status": 410, "tags": ["http"]}}

    def test_empty_mapping_is_valid(self) -> None:
        """Zero records is not an error."""
        assert LiteralDataSource({}).load() == {}

    def test_non_mapping_record_raises(self) -> None:
        """Entries must be mappings of fields."""
        source = LiteralDataSource({"gone": ["status", 410]}, label="errors")  # type: ignore[dict-item]

        with pytest.raises(SourceError, match="errors mapping"):
            source.load()

    def test_describe_uses_label(self) -> None:
        """The label names the source in errors."""
        assert LiteralDataSource({}, label="events").describe() == "events mapping"
