"""File-backed registry catalog.

The catalog is a JSON object mapping registry name to ``{home, registry,
ping}``. It is loaded once per invocation, mutated in memory and written
back in full after every change.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator
from pathlib import Path

from regswitch.config import PROTECTED_NAMES
from regswitch.errors import CatalogParseError, DuplicateNameError, PersistenceError
from regswitch.registry.models import RegistryEntry

logger = logging.getLogger(__name__)


class Catalog:
    """Ordered mapping of registry name to entry."""

    def __init__(
        self,
        entries: dict[str, RegistryEntry] | None = None,
        protected: tuple[str, ...] = PROTECTED_NAMES,
    ):
        self._entries: dict[str, RegistryEntry] = dict(entries or {})
        self.protected = protected

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def names(self) -> list[str]:
        return list(self._entries)

    def items(self):
        return self._entries.items()

    def get(self, name: str) -> RegistryEntry | None:
        return self._entries.get(name)

    def add(self, name: str, entry: RegistryEntry) -> None:
        if name in self._entries:
            raise DuplicateNameError(name)
        self._entries[name] = entry

    def update(self, name: str, entry: RegistryEntry) -> None:
        """Replace an entry's value, keeping its position."""
        if name not in self._entries:
            raise KeyError(name)
        self._entries[name] = entry

    def remove(self, name: str) -> RegistryEntry:
        return self._entries.pop(name)

    def rename(self, old: str, new: str) -> None:
        """Move ``old``'s entry under ``new``. The renamed entry goes last."""
        if new in self._entries:
            raise DuplicateNameError(new)
        entry = self._entries[old]
        self._entries[new] = entry
        del self._entries[old]

    def find_by_registry(self, url: str) -> str:
        """Return the first name whose ``registry`` equals ``url``, or ``""``."""
        for name, entry in self._entries.items():
            if entry.registry == url:
                return name
        return ""

    def custom_names(self) -> list[str]:
        """Names that are not built-in mirrors."""
        return [name for name in self._entries if name not in self.protected]

    def has_custom_entries(self) -> bool:
        """Coarse guard: compares sizes only, not membership."""
        return len(self._entries) > len(self.protected)

    def to_dict(self) -> dict[str, dict[str, str]]:
        return {name: entry.to_dict() for name, entry in self._entries.items()}

    @classmethod
    def from_dict(cls, data: dict, protected: tuple[str, ...] = PROTECTED_NAMES) -> Catalog:
        return cls(
            {name: RegistryEntry.from_dict(value) for name, value in data.items()},
            protected=protected,
        )


class CatalogStore:
    """Reads and writes a :class:`Catalog` at a fixed path."""

    def __init__(self, path: str | Path):
        self.path = Path(path)

    def load(self) -> Catalog:
        """Load the catalog. There is no fallback when the file is unusable."""
        try:
            text = self.path.read_text(encoding="utf-8")
        except OSError as e:
            raise CatalogParseError(f"Cannot read catalog {self.path}: {e}") from e

        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise CatalogParseError(f"Invalid JSON in catalog {self.path}: {e}") from e

        if not isinstance(data, dict):
            raise CatalogParseError(f"Catalog {self.path} must be a JSON object")

        try:
            catalog = Catalog.from_dict(data)
        except (KeyError, TypeError, AttributeError) as e:
            raise CatalogParseError(f"Malformed entry in catalog {self.path}: {e}") from e

        logger.debug("Loaded %d registries from %s", len(catalog), self.path)
        return catalog

    def save(self, catalog: Catalog) -> None:
        """Overwrite the catalog file with 2-space indented JSON."""
        text = json.dumps(catalog.to_dict(), indent=2, ensure_ascii=False)
        try:
            self.path.write_text(text, encoding="utf-8")
        except OSError as e:
            raise PersistenceError(f"Cannot write catalog {self.path}: {e}") from e
        logger.debug("Saved %d registries to %s", len(catalog), self.path)
