"""Output transforms applied to records on every read.

A transform turns a stored record into the shape callers receive. The
registry hands each transform a private copy, so a transform may reuse and
modify its argument without touching the stored record. Transforms must be
pure: the same record always produces the same output.
"""

from collections.abc import Callable, Mapping
from typing import Any

from canon.types import OutputRecord, Record, Transform


def identity(record: Record) -> OutputRecord:
    """Default transform: return the record unchanged."""
    return record


def drop_fields(*names: str) -> Transform:
    """Build a transform that removes the named fields when present.

    Typical use is stripping values that belong in a response envelope
    rather than its body, such as an HTTP status code.
    """
    dropped = frozenset(names)

    def _drop(record: Record) -> OutputRecord:
        return {field: value for field, value in record.items() if field not in dropped}

    return _drop


def rename_fields(renames: Mapping[str, str]) -> Transform:
    """Build a transform that renames fields, keeping their position.

    Args:
        renames: Old field name -> new field name

    Raises:
        ValueError: If two fields would be renamed to the same name. The
            built transform raises ValueError when a record already holds
            a field, not itself renamed, under a target name.
    """
    targets = list(renames.values())
    if len(set(targets)) != len(targets):
        raise ValueError(f"rename_fields maps several fields onto one name: {dict(renames)}")
    mapping = dict(renames)

    def _rename(record: Record) -> OutputRecord:
        clashes = sorted(
            target
            for source, target in mapping.items()
            if source in record and target in record and target not in mapping
        )
        if clashes:
            raise ValueError(f"rename_fields would overwrite existing fields: {clashes}")
        return {mapping.get(field, field): value for field, value in record.items()}

    return _rename


def add_fields(**computed: Callable[[Record], Any]) -> Transform:
    """Build a transform that appends derived fields.

    Each keyword names an output field; its value is a function of the
    record. Existing fields with the same name are replaced.

    Example:
        >>> add_fields(code=lambda r: r["status"] * 100)
    """

    def _add(record: Record) -> OutputRecord:
        result = dict(record)
        for field, compute in computed.items():
            result[field] = compute(record)
        return result

    return _add


def compose(*transforms: Transform) -> Transform:
    """Chain transforms left to right; compose() with no arguments is identity."""
    if not transforms:
        return identity
    if len(transforms) == 1:
        return transforms[0]

    def _composed(record: Record) -> OutputRecord:
        result = record
        for transform in transforms:
            result = transform(result)
        return result

    return _composed
