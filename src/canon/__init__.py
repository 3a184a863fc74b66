"""Named-data registry: declare records once, look them up by key everywhere."""

from canon.errors import CanonError, ConfigError, SourceError, UnknownKeyError
from canon.registry import Registry

__all__ = ["CanonError", "ConfigError", "Registry", "SourceError", "UnknownKeyError"]
