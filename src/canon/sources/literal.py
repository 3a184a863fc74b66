"""In-memory data source for records declared in code."""

from collections.abc import Mapping
from typing import Any

from canon.sources.abc import DataSource, validate_records
from canon.types import Record


class LiteralDataSource(DataSource):
    """Serve records from a mapping supplied at construction.

    The mapping is copied on every load(), so mutating it afterwards does
    not reach into a registry that has already loaded it.
    """

    def __init__(self, records: Mapping[str, Mapping[str, Any]], label: str = "literal") -> None:
        """Create LiteralDataSource.

        Args:
            records: Key -> record mapping
            label: Name used in error messages
        """
        self._records = records
        self._label = label

    def describe(self) -> str:
        return f"{self._label} mapping"

    def load(self) -> dict[str, Record]:
        return validate_records(self._records, self.describe())
