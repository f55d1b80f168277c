"""Rich terminal output — load diagnostics and the effective settings table."""

from pathlib import Path

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

console = Console()


def report_load_error(exc: Exception) -> None:
    """Print a single 'load config error <cause>' line."""
    console.print(
        "load config error",
        str(exc),
        markup=False,
        emoji=False,
        highlight=False,
        soft_wrap=True,
    )


def _format_value(value) -> Text:
    if isinstance(value, bool):
        return Text(str(value).lower(), style="bold green" if value else "dim")
    return Text(repr(value))


def display_config(settings: dict, path: Path | None) -> None:
    """Show the effective settings as a Rich panel titled with the config path."""
    table = Table(
        show_header=True,
        header_style="bold",
        box=None,
        padding=(0, 1),
        expand=True,
    )
    table.add_column("Setting", style="cyan")
    table.add_column("Value", justify="right")

    for name, value in settings.items():
        table.add_row(name, _format_value(value))

    title = str(path) if path is not None else "no home directory"
    panel = Panel(
        table,
        title=Text(title, style="bold"),
        border_style="bright_blue",
        padding=(0, 1),
    )
    console.print(panel)
