"""Switch npm to another registry and confirm it took effect."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from regswitch.config import DEFAULT_REGISTRY_NAME
from regswitch.errors import NpmConfigError, SwitchFailure
from regswitch.registry.catalog import Catalog
from regswitch.registry.models import ActiveRegistry
from regswitch.resolver import resolve

logger = logging.getLogger(__name__)


@dataclass
class SwitchResult:
    """Outcome of a switch attempt."""

    success: bool
    target: str
    current: ActiveRegistry | None = None  # Snapshot read back after setting
    error: str = ""


def switch_registry(
    catalog: Catalog,
    npm,
    current: ActiveRegistry,
    selection: str = "",
    url: str = "",
) -> SwitchResult:
    """Point npm at ``selection``'s registry, or at ``url`` when no entry is named.

    Success is judged from the registry npm reports afterwards: switching to
    the default registry must land on it by name, anything else must land
    on a name different from the one we started on.
    """
    entry = catalog.get(selection) if selection else None
    target = entry.registry if entry else url
    logger.debug("Switching from %r to %s", current.name, target)

    try:
        new = _apply(catalog, npm, current, selection, target)
    except SwitchFailure as e:
        return SwitchResult(success=False, target=target, current=e.current, error=str(e))
    except NpmConfigError as e:
        return SwitchResult(success=False, target=target, error=str(e))

    return SwitchResult(success=True, target=target, current=new)


def _apply(
    catalog: Catalog, npm, current: ActiveRegistry, selection: str, target: str
) -> ActiveRegistry:
    npm.set_registry(target)
    new = resolve(catalog, npm)
    if not is_switch_successful(current, new, selection):
        raise SwitchFailure(f"npm registry is still {new.registry}", current=new)
    return new


def is_switch_successful(before: ActiveRegistry, after: ActiveRegistry, selection: str) -> bool:
    if after.name == DEFAULT_REGISTRY_NAME:
        return selection == DEFAULT_REGISTRY_NAME
    return after.name != before.name
