"""File-backed data source for YAML and JSON documents."""

import json
import logging
from collections.abc import Hashable
from pathlib import Path
from typing import Any

import yaml

from canon.errors import SourceError
from canon.sources.abc import DataSource, validate_records
from canon.types import Record

logger = logging.getLogger(__name__)

SUPPORTED_FORMATS = ("yaml", "json")

_SUFFIX_FORMATS = {
    ".yaml": "yaml",
    ".yml": "yaml",
    ".json": "json",
}


class _DuplicateKeyError(ValueError):
    """Raised by the parsers below when a mapping repeats a key."""


class _UniqueKeyLoader(yaml.SafeLoader):
    """SafeLoader that refuses mappings with repeated keys.

    Plain SafeLoader keeps the last value silently, which would let a
    copy-pasted record shadow an earlier one.
    """

    def construct_mapping(self, node: yaml.MappingNode, deep: bool = False) -> dict[Any, Any]:
        seen: set[Any] = set()
        for key_node, _ in node.value:
            # Merge keys may legitimately be overridden by explicit ones
            if key_node.tag == "tag:yaml.org,2002:merge":
                continue
            key = self.construct_object(key_node, deep=deep)
            if not isinstance(key, Hashable):
                continue
            if key in seen:
                raise _DuplicateKeyError(
                    f"duplicate key {key!r} at line {key_node.start_mark.line + 1}"
                )
            seen.add(key)
        return super().construct_mapping(node, deep=deep)


def _json_pairs(pairs: list[tuple[str, Any]]) -> dict[str, Any]:
    result: dict[str, Any] = {}
    for key, value in pairs:
        if key in result:
            raise _DuplicateKeyError(f"duplicate key {key!r}")
        result[key] = value
    return result


def infer_format(path: Path) -> str | None:
    """Guess the format tag from a file suffix, or None if unknown."""
    return _SUFFIX_FORMATS.get(path.suffix.lower())


class FileDataSource(DataSource):
    """Load records from a YAML or JSON file.

    The file is read on every load(), so a registry reload picks up edits.
    """

    def __init__(self, path: Path | str, format: str | None = None) -> None:
        """Create FileDataSource.

        Args:
            path: Location of the document
            format: "yaml" or "json"; inferred from the suffix when omitted

        Raises:
            SourceError: If the format tag is unknown or cannot be inferred
        """
        self._path = Path(path)
        resolved_format = format if format is not None else infer_format(self._path)
        if resolved_format is None:
            raise SourceError(
                str(self._path),
                f"cannot infer format from suffix {self._path.suffix!r}; "
                f"pass one of {', '.join(SUPPORTED_FORMATS)}",
            )
        normalized = resolved_format.strip().lower()
        if normalized not in SUPPORTED_FORMATS:
            raise SourceError(
                str(self._path),
                f"unsupported format {resolved_format!r}; expected one of "
                f"{', '.join(SUPPORTED_FORMATS)}",
            )
        self._format = normalized

    @property
    def path(self) -> Path:
        return self._path

    @property
    def format(self) -> str:
        return self._format

    def describe(self) -> str:
        return f"{self._format} file {self._path}"

    def load(self) -> dict[str, Record]:
        """Read and parse the file."""
        origin = self.describe()
        try:
            text = self._path.read_text(encoding="utf-8")
        except OSError as err:
            raise SourceError(origin, f"unreadable ({err.strerror or err})") from err
        except UnicodeDecodeError as err:
            raise SourceError(origin, f"not valid UTF-8 ({err.reason})") from err

        raw = self._parse(text, origin)
        records = validate_records(raw, origin)
        logger.debug("Loaded %d records from %s", len(records), origin)
        return records

    def _parse(self, text: str, origin: str) -> Any:
        if self._format == "json":
            try:
                return json.loads(text, object_pairs_hook=_json_pairs)
            except _DuplicateKeyError as err:
                raise SourceError(origin, str(err)) from err
            except json.JSONDecodeError as err:
                raise SourceError(origin, f"invalid JSON: {err}") from err

        try:
            data = yaml.load(text, Loader=_UniqueKeyLoader)  # noqa: S506 - SafeLoader subclass
        except _DuplicateKeyError as err:
            raise SourceError(origin, str(err)) from err
        except yaml.YAMLError as err:
            raise SourceError(origin, f"invalid YAML: {err}") from err

        # An empty YAML document parses to None; treat it as zero records
        if data is None:
            return {}
        return data
