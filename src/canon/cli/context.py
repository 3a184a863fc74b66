"""CLI context for dependency injection."""

from dataclasses import dataclass
from pathlib import Path

from canon.config import RegistryConfig, load_manifest
from canon.errors import ConfigError
from canon.registry import Registry


@dataclass(frozen=True)
class CliContext:
    """Settings shared by every command, resolved once by the group."""

    manifest: Path
    debug: bool = False

    def registry_configs(self) -> list[RegistryConfig]:
        """Read the manifest.

        Raises:
            ConfigError: If the manifest is missing or malformed
        """
        return load_manifest(self.manifest)

    def open_registry(self, name: str) -> Registry:
        """Load the registry declared under name.

        Raises:
            ConfigError: If the manifest has no such registry
            SourceError: If the registry's data cannot be loaded
        """
        configs = {config.name: config for config in self.registry_configs()}
        if name not in configs:
            available = ", ".join(configs) or "none"
            raise ConfigError(
                f"No registry named {name!r} in {self.manifest} (available: {available})"
            )
        return Registry.from_config(configs[name])
