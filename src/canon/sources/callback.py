"""Data source that computes its records lazily through a callable."""

import logging
from collections.abc import Callable, Mapping
from typing import Any

from canon.errors import SourceError
from canon.sources.abc import DataSource, validate_records
from canon.types import Record

logger = logging.getLogger(__name__)


class CallbackDataSource(DataSource):
    """Call a zero-argument function on every load() and use its result."""

    def __init__(self, callback: Callable[[], Mapping[str, Any]]) -> None:
        """Create CallbackDataSource.

        Args:
            callback: Function returning a key -> record mapping

        Raises:
            SourceError: If callback is not callable
        """
        if not callable(callback):
            raise SourceError("callback", f"expected a callable, got {type(callback).__name__}")
        self._callback = callback

    def describe(self) -> str:
        name = getattr(self._callback, "__qualname__", type(self._callback).__name__)
        return f"callback {name}"

    def load(self) -> dict[str, Record]:
        origin = self.describe()
        try:
            raw = self._callback()
        except Exception as err:
            raise SourceError(origin, f"callback raised {type(err).__name__}: {err}") from err
        records = validate_records(raw, origin)
        logger.debug("Loaded %d records from %s", len(records), origin)
        return records
