"""Registry and server configuration.

RegistryConfig is the explicit, resolved-once description of a registry.
Manifests (canon.toml) describe file-backed registries declaratively for the
CLI and the HTTP server:

    [registries.errors]
    path = "errors.yaml"
    drop_fields = ["status"]

    [registries.events]
    path = "events.json"
    format = "json"
    rename_fields = { desc = "description" }
"""

import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from canon.errors import ConfigError, SourceError
from canon.sources.abc import DataSource
from canon.sources.file import FileDataSource
from canon.transforms import compose, drop_fields, identity, rename_fields
from canon.types import Transform

DEFAULT_MANIFEST = "canon.toml"

_KNOWN_OPTIONS = frozenset({"path", "format", "drop_fields", "rename_fields"})


@dataclass(frozen=True)
class RegistryConfig:
    """Everything needed to build one registry.

    Resolved once at construction; the only later change a registry accepts
    is an explicit reload.
    """

    data_source: DataSource
    transform: Transform = field(default=identity)
    name: str = "registry"


@dataclass(frozen=True)
class ServerConfig:
    """Server configuration loaded from environment variables."""

    host: str
    port: int
    manifest: Path
    prefix: str
    debug: bool

    @staticmethod
    def from_env() -> "ServerConfig":
        """Load configuration from environment variables."""
        return ServerConfig(
            host=os.environ.get("CANON_HOST", "0.0.0.0"),
            port=int(os.environ.get("CANON_PORT", "8000")),
            manifest=Path(os.environ.get("CANON_MANIFEST", DEFAULT_MANIFEST)),
            prefix=os.environ.get("CANON_PREFIX", "/registries"),
            debug=os.environ.get("CANON_DEBUG", "false").lower() == "true",
        )


def load_manifest(manifest_path: Path) -> list[RegistryConfig]:
    """Load registry configs from a TOML manifest.

    Paths inside the manifest are relative to the manifest's directory.
    Registries keep the order in which the manifest declares them.

    Args:
        manifest_path: Location of canon.toml

    Returns:
        One RegistryConfig per [registries.<name>] table

    Raises:
        ConfigError: If the manifest is missing, not valid TOML, or an entry
                     is malformed
    """
    if not manifest_path.exists():
        raise ConfigError(f"Manifest not found at {manifest_path}")

    try:
        data = tomllib.loads(manifest_path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as err:
        raise ConfigError(f"Invalid TOML in {manifest_path}: {err}") from err

    registries = data.get("registries")
    if registries is None:
        raise ConfigError(f"Missing [registries] table in {manifest_path}")
    if not isinstance(registries, dict):
        raise ConfigError(f"[registries] in {manifest_path} must be a table")

    base_dir = manifest_path.parent
    return [
        _registry_config_from_table(name, table, base_dir, manifest_path)
        for name, table in registries.items()
    ]


def _registry_config_from_table(
    name: str, table: Any, base_dir: Path, manifest_path: Path
) -> RegistryConfig:
    where = f"[registries.{name}] in {manifest_path}"
    if not isinstance(table, dict):
        raise ConfigError(f"{where} must be a table")

    unknown = sorted(set(table) - _KNOWN_OPTIONS)
    if unknown:
        raise ConfigError(f"{where} has unknown options: {', '.join(unknown)}")

    path = table.get("path")
    if not isinstance(path, str) or not path:
        raise ConfigError(f"{where} is missing 'path'")

    fmt = table.get("format")
    if fmt is not None and not isinstance(fmt, str):
        raise ConfigError(f"{where} 'format' must be a string")

    try:
        source = FileDataSource(base_dir / path, format=fmt)
    except SourceError as err:
        raise ConfigError(f"{where}: {err}") from err

    return RegistryConfig(
        data_source=source,
        transform=_transform_from_table(table, where),
        name=name,
    )


def _transform_from_table(table: dict[str, Any], where: str) -> Transform:
    steps: list[Transform] = []

    dropped = table.get("drop_fields", [])
    if not isinstance(dropped, list) or not all(isinstance(item, str) for item in dropped):
        raise ConfigError(f"{where} 'drop_fields' must be a list of strings")
    if dropped:
        steps.append(drop_fields(*dropped))

    renames = table.get("rename_fields", {})
    if not isinstance(renames, dict) or not all(
        isinstance(value, str) for value in renames.values()
    ):
        raise ConfigError(f"{where} 'rename_fields' must be a table of strings")
    if renames:
        try:
            steps.append(rename_fields(renames))
        except ValueError as err:
            raise ConfigError(f"{where}: {err}") from err

    return compose(*steps)
