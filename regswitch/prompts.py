"""Interactive prompts: numbered selection lists and validated text input."""

from __future__ import annotations

from collections.abc import Callable, Sequence

import click
from rich.console import Console
from rich.markup import escape

from regswitch.errors import DuplicateNameError, ValidationError
from regswitch.registry.catalog import Catalog

console = Console()


def select(message: str, choices: Sequence[str]) -> str:
    """Show ``choices`` as a numbered list and return the one picked.

    Out-of-range numbers are rejected by click and asked again.
    """
    if not choices:
        raise ValueError("select() needs at least one choice")

    console.print(f"\n[bold]{escape(message)}[/]")
    for i, choice in enumerate(choices, 1):
        console.print(f"  {i}. {escape(choice)}", highlight=False)

    index = click.prompt("Select (number)", type=click.IntRange(1, len(choices)))
    return choices[index - 1]


def ask_text(message: str, validate: Callable[[str], str]) -> str:
    """Prompt until ``validate`` accepts the input; returns its cleaned value."""

    def value_proc(value: str) -> str:
        try:
            return validate(value)
        except ValidationError as e:
            raise click.BadParameter(str(e)) from e

    # An empty default lets a blank answer reach the validator instead of
    # click silently re-prompting.
    return click.prompt(message, default="", show_default=False, value_proc=value_proc)


# ── Validators ───────────────────────────────────────────────────────


def validate_new_name(catalog: Catalog) -> Callable[[str], str]:
    """Names must be non-empty after trimming and not already in the catalog."""

    def validate(value: str) -> str:
        name = value.strip()
        if not name:
            raise ValidationError("Registry name cannot be empty")
        if name in catalog:
            raise DuplicateNameError(name)
        return name

    return validate


def validate_url(value: str) -> str:
    url = value.strip()
    if not url:
        raise ValidationError("Registry URL cannot be empty")
    return url
