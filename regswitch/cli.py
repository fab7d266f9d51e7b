"""regswitch CLI — list, switch and manage npm registry mirrors."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field

import click
from rich.console import Console
from rich.markup import escape

from regswitch import __version__
from regswitch.config import CATALOG_PATH
from regswitch.errors import CatalogParseError, NpmConfigError, PersistenceError, ProbeError
from regswitch.log import setup_logging
from regswitch.npm_config import NpmConfig
from regswitch.prompts import ask_text, select, validate_new_name, validate_url
from regswitch.registry.catalog import Catalog, CatalogStore
from regswitch.registry.models import ActiveRegistry, RegistryEntry
from regswitch.resolver import resolve
from regswitch.switch import switch_registry
from regswitch.utils.probe import ping as http_ping

console = Console()


@dataclass
class AppContext:
    """Collaborators shared by every command."""

    store: CatalogStore = field(default_factory=lambda: CatalogStore(CATALOG_PATH))
    npm: NpmConfig = field(default_factory=NpmConfig)
    probe: Callable[[str], int] = http_ping


@click.group()
@click.version_option(version=__version__)
@click.pass_context
def main(ctx: click.Context):
    """regswitch — switch npm between registry mirrors.

    Every command is interactive: choices and new values are asked for
    at the prompt.
    """
    setup_logging()
    ctx.ensure_object(AppContext)


# ── Helpers ──────────────────────────────────────────────────────────


def _load(app: AppContext) -> Catalog:
    try:
        return app.store.load()
    except CatalogParseError as e:
        console.print(f"[red]{escape(str(e))}[/]", highlight=False)
        raise SystemExit(1)


def _current(app: AppContext, catalog: Catalog) -> ActiveRegistry:
    try:
        return resolve(catalog, app.npm)
    except NpmConfigError as e:
        console.print(f"[red]Cannot read npm registry: {escape(str(e))}[/]", highlight=False)
        raise SystemExit(1)


def _save(app: AppContext, catalog: Catalog, doing: str, done: str) -> bool:
    console.print(doing)
    try:
        app.store.save(catalog)
    except PersistenceError as e:
        console.print(f"[red]{escape(str(e))}[/]", highlight=False)
        return False
    console.print(f"[green]{done}[/]")
    return True


def print_current(current: ActiveRegistry) -> None:
    if current.in_catalog:
        console.print(
            f"[blue]Current registry:[/] {escape(current.name)} [green]({escape(current.registry)})[/]",
            highlight=False,
        )
    else:
        console.print(f"[blue]Current registry:[/] [green]{escape(current.registry)}[/]", highlight=False)


def _switch(catalog: Catalog, app: AppContext, current: ActiveRegistry, **target) -> bool:
    console.print("Switching...")
    result = switch_registry(catalog, app.npm, current, **target)
    if result.success:
        console.print("[green]Switched successfully[/]")
        return True

    console.print("[red]Switch failed[/]")
    if result.error:
        console.print(f"  [red]{escape(result.error)}[/]", highlight=False)
    if result.current is not None:
        print_current(result.current)
    return False


# ── Listing ──────────────────────────────────────────────────────────


@main.command(name="ls")
@click.pass_obj
def list_registries(app: AppContext):
    """List all registries, marking the active one."""
    catalog = _load(app)
    current = _current(app, catalog)

    console.print(f"[blue]Current registry:[/] [green]{escape(current.registry)}[/]", highlight=False)
    for name, entry in catalog.items():
        if entry.registry == current.registry:
            console.print(f"[blue]*{escape(name)}[/] ([green]{escape(entry.registry)}[/])\n", highlight=False)
        else:
            console.print(f"{escape(name)} ([green]{escape(entry.registry)}[/])\n", highlight=False)


@main.command()
@click.pass_obj
def curr(app: AppContext):
    """Show the active registry."""
    catalog = _load(app)
    print_current(_current(app, catalog))


# ── Switching ────────────────────────────────────────────────────────


@main.command()
@click.pass_obj
def use(app: AppContext):
    """Switch npm to another registry."""
    catalog = _load(app)
    current = _current(app, catalog)
    print_current(current)

    choices = [name for name in catalog if name != current.name]
    if not choices:
        console.print("[yellow]No other registry to switch to.[/]")
        return

    selection = select("Select a registry", choices)
    _switch(catalog, app, current, selection=selection)


# ── Catalog management ───────────────────────────────────────────────


@main.command()
@click.pass_obj
def add(app: AppContext):
    """Add a custom registry."""
    catalog = _load(app)

    name = ask_text("Registry name", validate_new_name(catalog))
    url = ask_text("Registry URL", validate_url)

    catalog.add(name, RegistryEntry.from_url(url))
    _save(app, catalog, "Adding...", "Added")


@main.command(name="del")
@click.pass_obj
def delete(app: AppContext):
    """Delete a custom registry."""
    catalog = _load(app)
    choices = catalog.custom_names()
    if not catalog.has_custom_entries() or not choices:
        console.print("[red]No custom registries to delete[/]")
        return

    name = select("Select the registry to delete", choices)
    current = _current(app, catalog)
    if name == current.name:
        console.print("[red]Registry is in use and cannot be deleted[/]")
        return

    catalog.remove(name)
    _save(app, catalog, "Deleting...", "Deleted")


@main.command()
@click.pass_obj
def edit(app: AppContext):
    """Change the URL of a custom registry.

    If the registry is active, npm is switched to the new URL first and
    the edit is only kept when the switch succeeds.
    """
    catalog = _load(app)
    choices = catalog.custom_names()
    if not catalog.has_custom_entries() or not choices:
        console.print("[red]No custom registries to edit[/]")
        return

    name = select("Select the registry to edit", choices)
    url = ask_text("New registry URL", validate_url)

    current = _current(app, catalog)
    if name == current.name:
        console.print("Registry is in use, switching to the new URL...")
        if not _switch(catalog, app, current, url=url):
            console.print("[red]Edit failed[/]")
            return

    catalog.update(name, RegistryEntry.from_url(url))
    _save(app, catalog, "Editing...", "Edited")


@main.command()
@click.pass_obj
def rename(app: AppContext):
    """Rename a custom registry."""
    catalog = _load(app)
    choices = catalog.custom_names()
    if not choices:
        console.print("[red]No custom registries to rename[/]")
        return

    old = select("Select the registry to rename", choices)
    new = ask_text("New registry name", validate_new_name(catalog))

    catalog.rename(old, new)
    _save(app, catalog, "Renaming...", "Renamed")


# ── Latency ──────────────────────────────────────────────────────────


@main.command(name="ping")
@click.pass_obj
def ping_registry(app: AppContext):
    """Measure the response time of a registry."""
    catalog = _load(app)
    if not catalog.names():
        console.print("[yellow]Catalog is empty.[/]")
        return

    name = select("Select a registry", catalog.names())

    console.print("Testing registry...")
    try:
        elapsed = app.probe(catalog.get(name).ping)
    except ProbeError as e:
        console.print(f"[red]{escape(str(e))}[/]", highlight=False)
        return
    console.print(f"[blue]Response time: {elapsed}ms[/]")


if __name__ == "__main__":
    main()
