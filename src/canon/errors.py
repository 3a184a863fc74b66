"""Exception hierarchy for canon."""


class CanonError(Exception):
    """Base class for all canon errors."""


class SourceError(CanonError):
    """Raised when a data source cannot be loaded or parsed."""

    def __init__(self, origin: str, reason: str) -> None:
        self.origin = origin
        self.reason = reason
        super().__init__(f"Cannot load records from {origin}: {reason}")


class UnknownKeyError(CanonError, KeyError):
    """Raised when a lookup names a key that was never declared."""

    def __init__(self, registry_name: str, key: object) -> None:
        self.registry_name = registry_name
        self.key = key
        super().__init__(f"[{registry_name}] unknown key {key!r}")

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message
        return str(self.args[0])


class ConfigError(CanonError):
    """Raised when a registry manifest is missing or malformed."""
