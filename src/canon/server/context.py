"""Server context for dependency injection."""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from canon.registry import Registry
from canon.sources.literal import LiteralDataSource


@dataclass(frozen=True)
class ServerContext:
    """Server context containing all published registries.

    Registries are keyed by the name they are mounted under. Use for_test()
    to build one from literal records.
    """

    registries: Mapping[str, Registry]

    @classmethod
    def for_test(
        cls,
        *,
        records: Mapping[str, Mapping[str, Mapping[str, Any]]] | None = None,
    ) -> "ServerContext":
        """Create a test context backed by literal data sources.

        Args:
            records: Registry name -> key -> record

        Returns:
            ServerContext with one identity-transform registry per name
        """
        registries = {
            name: Registry(LiteralDataSource(data, label=name), name=name)
            for name, data in (records or {}).items()
        }
        return cls(registries=registries)
