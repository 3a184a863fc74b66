"""Abstract base class for registry data sources."""

import copy
from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any

from canon.errors import SourceError
from canon.types import Record


class DataSource(ABC):
    """Abstract interface for producing key -> record mappings.

    Implementations include:
    - FileDataSource: YAML or JSON document on disk
    - LiteralDataSource: Mapping supplied in code
    - CallbackDataSource: Zero-argument callable evaluated on every load

    The registry only ever calls load(), so new backends are added by
    subclassing, not by teaching the registry about another format.
    """

    @abstractmethod
    def load(self) -> dict[str, Record]:
        """Load every declared record.

        Returns:
            Mapping of key to record, in declaration order

        Raises:
            SourceError: If the source is unreadable or malformed
        """
        ...

    @abstractmethod
    def describe(self) -> str:
        """Short human-readable origin used in errors and logs."""
        ...


def validate_records(raw: Any, origin: str) -> dict[str, Record]:
    """Check the shape of a loaded document and detach it from the caller.

    Args:
        raw: Parsed document or mapping returned by a backend
        origin: Description of the source for error messages

    Returns:
        Deep copy of the records as plain dicts, preserving declaration order

    Raises:
        SourceError: If the top level is not a mapping, a key is not a string,
                     or an entry is not itself a mapping
    """
    if not isinstance(raw, Mapping):
        raise SourceError(origin, f"expected a mapping at the top level, got {type(raw).__name__}")

    records: dict[str, Record] = {}
    for key, entry in raw.items():
        if not isinstance(key, str):
            raise SourceError(origin, f"key {key!r} must be a string, got {type(key).__name__}")
        if not isinstance(entry, Mapping):
            raise SourceError(
                origin, f"record {key!r} must be a mapping of fields, got {type(entry).__name__}"
            )
        records[key] = copy.deepcopy(dict(entry))
    return records
