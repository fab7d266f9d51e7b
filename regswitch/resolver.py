"""Work out which catalog entry npm is currently using."""

from __future__ import annotations

import logging

from regswitch.registry.catalog import Catalog
from regswitch.registry.models import ActiveRegistry

logger = logging.getLogger(__name__)


def resolve(catalog: Catalog, npm) -> ActiveRegistry:
    """Match npm's configured registry against the catalog by value.

    Raises:
        NpmConfigError: If npm cannot be queried.
    """
    registry = npm.get_registry().strip()
    name = catalog.find_by_registry(registry)
    logger.debug("npm registry %s resolved to %r", registry, name)
    return ActiveRegistry(name=name, registry=registry)
