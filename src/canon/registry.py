"""Key-indexed record store with strict lookup."""

import copy
import logging
import threading
from collections.abc import Iterator, Mapping
from types import MappingProxyType

from canon.config import RegistryConfig
from canon.errors import UnknownKeyError
from canon.sources.abc import DataSource
from canon.transforms import identity
from canon.types import OutputRecord, Record, Transform

logger = logging.getLogger(__name__)


class Registry:
    """Declared records, looked up by key.

    The loaded records live in a read-only snapshot. Readers take the current
    snapshot reference once per call, and reload() builds a whole new snapshot
    before swapping the reference, so a reader sees either the old records or
    the new ones, never a mixture. Reloads are serialized by a lock; reads
    never take it.

    Every record leaving the registry goes through the configured transform,
    whether it leaves via lookup() or list_all().
    """

    def __init__(
        self,
        source: DataSource,
        transform: Transform = identity,
        *,
        name: str = "registry",
    ) -> None:
        """Create a registry and load its records.

        Args:
            source: Where the records come from
            transform: Pure function applied to every record on the way out
            name: Namespace used in errors and logs

        Raises:
            SourceError: If the source cannot be loaded
        """
        self._name = name
        self._transform = transform
        self._source = source
        self._reload_lock = threading.Lock()
        self._snapshot: Mapping[str, Record] = self._load(source)

    @classmethod
    def from_config(cls, config: RegistryConfig) -> "Registry":
        """Create a registry from an explicit configuration structure."""
        return cls(config.data_source, config.transform, name=config.name)

    @property
    def name(self) -> str:
        return self._name

    @property
    def source(self) -> DataSource:
        """The source the next argument-less reload() will read."""
        return self._source

    def exists(self, key: object) -> bool:
        """Check whether key was declared. Never raises."""
        if not isinstance(key, str):
            return False
        return key in self._snapshot

    def lookup(self, key: str) -> OutputRecord:
        """Return the transformed record declared under key.

        Args:
            key: Declared key

        Returns:
            Output of the transform for a private copy of the stored record

        Raises:
            UnknownKeyError: If key was not declared
        """
        snapshot = self._snapshot
        if not isinstance(key, str) or key not in snapshot:
            raise UnknownKeyError(self._name, key)
        return self._transform(copy.deepcopy(snapshot[key]))

    def list_all(self) -> dict[str, OutputRecord]:
        """Return every record transformed, in declaration order.

        A transform failure aborts the whole listing.
        """
        snapshot = self._snapshot
        return {key: self._transform(copy.deepcopy(record)) for key, record in snapshot.items()}

    def keys(self) -> tuple[str, ...]:
        """Declared keys in declaration order."""
        return tuple(self._snapshot)

    def reload(self, source: DataSource | None = None) -> None:
        """Replace every record with a fresh load.

        Args:
            source: New source to read; defaults to the current one. On
                    success it becomes the default for later reloads.

        Raises:
            SourceError: If loading fails; the previous records stay in place
        """
        with self._reload_lock:
            target = source if source is not None else self._source
            snapshot = self._load(target)
            self._snapshot = snapshot
            self._source = target
        logger.info("Reloaded registry %s: %d records", self._name, len(snapshot))

    def _load(self, source: DataSource) -> Mapping[str, Record]:
        logger.debug("Loading registry %s from %s", self._name, source.describe())
        records = source.load()
        return MappingProxyType(records)

    def __getitem__(self, key: str) -> OutputRecord:
        return self.lookup(key)

    def __contains__(self, key: object) -> bool:
        return self.exists(key)

    def __iter__(self) -> Iterator[str]:
        return iter(self.keys())

    def __len__(self) -> int:
        return len(self._snapshot)

    def __repr__(self) -> str:
        return f"Registry(name={self._name!r}, records={len(self._snapshot)})"
