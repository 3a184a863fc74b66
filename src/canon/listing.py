"""Introspection: render a registry's full transformed contents.

Rendering is read-only and deterministic. Records appear in declaration
order, so repeated renders are byte-identical until the registry reloads.
"""

import json
import logging
from collections.abc import Mapping
from datetime import date, datetime, time
from typing import Any

import yaml

from canon.registry import Registry

logger = logging.getLogger(__name__)

LISTING_FORMATS = ("json", "yaml")


def to_json_safe(obj: Any) -> Any:
    """Recursively convert values JSON cannot encode.

    YAML sources may contain timestamps and dates; those become ISO strings.
    Tuples and sets become lists.
    """
    if isinstance(obj, (datetime, date, time)):
        return obj.isoformat()
    if isinstance(obj, Mapping):
        return {str(key): to_json_safe(value) for key, value in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [to_json_safe(item) for item in obj]
    if isinstance(obj, (set, frozenset)):
        items = [to_json_safe(item) for item in obj]
        try:
            return sorted(items)
        except TypeError:
            # Mixed element types have no natural order
            return sorted(items, key=repr)
    return obj


def listing(registry: Registry) -> dict[str, Any]:
    """Return the full transformed listing as JSON-safe data.

    Raises:
        Exception: Whatever the registry's transform raises, unchanged
    """
    return to_json_safe(registry.list_all())


def render(registry: Registry, fmt: str = "json") -> str:
    """Serialize the listing as a JSON or YAML document.

    Args:
        registry: Registry to publish
        fmt: "json" or "yaml"

    Returns:
        Document text ending with a newline

    Raises:
        ValueError: If fmt is not a supported format
    """
    if fmt not in LISTING_FORMATS:
        raise ValueError(
            f"Unknown listing format {fmt!r}; expected one of {', '.join(LISTING_FORMATS)}"
        )

    data = listing(registry)
    logger.debug("Rendering %d records of %s as %s", len(data), registry.name, fmt)
    if fmt == "json":
        return json.dumps(data, indent=2, ensure_ascii=False) + "\n"
    return yaml.safe_dump(data, sort_keys=False, allow_unicode=True, default_flow_style=False)
