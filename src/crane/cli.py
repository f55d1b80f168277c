"""CLI entry point — inspect the effective crane configuration."""

from pathlib import Path

import click

from crane import config as cfg
from crane.display import console, display_config


@click.command()
@click.option(
    "--home",
    default=None,
    type=click.Path(file_okay=False, path_type=Path),
    help="Use this directory instead of the user's home.",
)
@click.option("--path", "show_path", is_flag=True, help="Print the config file path and exit.")
def main(home: Path | None, show_path: bool) -> None:
    """Show the settings crane loads from ~/.crane/config.toml."""
    if home is None:
        home = cfg.resolve_home()

    path = cfg.config_path(home) if home is not None else None

    if show_path:
        if path is None:
            console.print("[red]Cannot determine home directory.[/red]")
            raise SystemExit(1)
        click.echo(str(path))
        return

    settings = cfg.load(home)
    display_config(settings.as_dict(), path)
