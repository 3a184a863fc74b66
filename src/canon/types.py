"""Type aliases shared across canon."""

from collections.abc import Callable
from typing import Any

# A record is an opaque field name -> value mapping; values are never type checked.
type Record = dict[str, Any]
type OutputRecord = dict[str, Any]
type Transform = Callable[[Record], OutputRecord]
