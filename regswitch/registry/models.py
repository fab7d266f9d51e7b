"""Registry data models — catalog entries and the active-registry snapshot."""

from __future__ import annotations

from dataclasses import dataclass


def strip_trailing_slash(url: str) -> str:
    """Drop exactly one trailing ``/`` if present."""
    return url[:-1] if url.endswith("/") else url


@dataclass
class RegistryEntry:
    """A single mirror in the catalog. The name is the catalog key."""

    home: str  # Informational homepage
    registry: str  # Value written into npm's config
    ping: str  # URL hit by the latency probe

    @classmethod
    def from_url(cls, url: str) -> RegistryEntry:
        """Build an entry from a user-supplied registry URL."""
        registry = url.strip()
        return cls(home=registry, registry=registry, ping=strip_trailing_slash(registry))

    def to_dict(self) -> dict[str, str]:
        return {"home": self.home, "registry": self.registry, "ping": self.ping}

    @classmethod
    def from_dict(cls, data: dict) -> RegistryEntry:
        registry = data["registry"]
        return cls(
            home=data.get("home", registry),
            registry=registry,
            ping=data.get("ping", strip_trailing_slash(registry)),
        )


@dataclass
class ActiveRegistry:
    """What npm is configured to use right now, matched against the catalog.

    ``name`` is empty when the configured URL is not in the catalog.
    """

    name: str
    registry: str

    @property
    def in_catalog(self) -> bool:
        return bool(self.name)
