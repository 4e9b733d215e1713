"""Shared Rich console and rendering helpers for the CLI."""

from collections.abc import Sequence

import questionary
import questionary.constants as questionary_constants
import questionary.styles as questionary_styles
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.text import Text

console = Console()

QUESTIONARY_STYLE = questionary.Style(
    [
        ("qmark", "fg:#5f819d"),
        ("question", "fg:#e0e0e0 bold"),
        ("answer", "fg:#FF9D00 bold"),
        ("instruction", "fg:#e0e0e0"),
        ("text", "fg:#e0e0e0"),
        ("validation-toolbar", "fg:#ff5f5f bold"),
    ]
)


def apply_questionary_style() -> None:
    """Use the CLI palette as the default Questionary style for all prompts."""
    questionary_constants.DEFAULT_STYLE = QUESTIONARY_STYLE
    setattr(questionary_styles, "DEFAULT_STYLE", QUESTIONARY_STYLE)


def clear_screen() -> None:
    """Clear the terminal when attached to one."""
    console.clear()


def print_breadcrumb(items: Sequence[tuple[str, str]]) -> None:
    """Print the selections confirmed so far.

    Args:
        items: Ordered (label, value) pairs.
    """
    if not items:
        return
    text = Text()
    for index, (label, value) in enumerate(items):
        if index:
            text.append("\n")
        text.append("✓ ", style="green")
        text.append(f"{label}: ", style="bright_white")
        text.append(value, style="orange1")
    console.print(Panel(text, title="ecs-session", border_style="cyan", expand=False))


def print_menu(title: str, options: Sequence[str], back_label: str | None = None) -> None:
    """Print a numbered menu.

    Args:
        title: Heading shown above the options.
        options: Options numbered from 1.
        back_label: Label for option 0, omitted when None.
    """
    console.print(f"[cyan]{title}[/cyan]")
    if back_label is not None:
        console.print(f"[yellow]\\[0][/yellow] {back_label}")
    for number, option in enumerate(options, start=1):
        console.print(f"[yellow]\\[{number}][/yellow] {escape(option)}", highlight=False)
    if not options:
        console.print("[dim]Nothing found.[/dim]")
