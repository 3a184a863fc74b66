"""Fake DataSource implementation for testing.

FakeDataSource serves a fixed sequence of payloads, one per load() call,
and records how often it was loaded.
"""

from collections.abc import Mapping, Sequence
from typing import Any

from canon.errors import SourceError
from canon.sources.abc import DataSource, validate_records
from canon.types import Record


class FakeDataSource(DataSource):
    """In-memory fake that tracks load() calls.

    This class has NO public setup methods. All state is provided via constructor
    or captured during execution.
    """

    def __init__(
        self,
        payloads: Sequence[Mapping[str, Any]] = (),
        fail_on_load: Sequence[int] = (),
    ) -> None:
        """Create FakeDataSource.

        Args:
            payloads: Documents returned by successive loads; the last one
                      repeats once the sequence is exhausted
            fail_on_load: Zero-based load numbers that raise SourceError
        """
        self._payloads = list(payloads) or [{}]
        self._fail_on_load = frozenset(fail_on_load)
        self._load_count = 0

    @property
    def load_count(self) -> int:
        """Number of load() calls made so far, for test assertions."""
        return self._load_count

    def describe(self) -> str:
        return "fake source"

    def load(self) -> dict[str, Record]:
        index = self._load_count
        self._load_count += 1
        if index in self._fail_on_load:
            raise SourceError(self.describe(), f"load #{index} configured to fail")
        payload = self._payloads[min(index, len(self._payloads) - 1)]
        return validate_records(payload, self.describe())
