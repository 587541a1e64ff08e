# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from kalendar import configuration
from kalendar.configuration import Configuration
from kalendar.repository.configuration import CONFIGURATION_REPO
from kalendar.terminal.custom_typer import AliasedTyperGroup
from kalendar.terminal.parse import parse_color

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def _enabled(value: bool) -> str:
    return "✓ Enabled" if value else "✗ Disabled"


def _configuration_table(config: Configuration, title: Optional[str] = None) -> Table:
    table = Table(title=title)
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="magenta")

    table.add_row("show_header", _enabled(config["show_header"]))
    table.add_row("max_visible_per_cell", str(config["max_visible_per_cell"]))
    table.add_row(
        "random_color_for_events", _enabled(config["random_color_for_events"])
    )
    table.add_row(
        "default_event_color",
        f"[{config['default_event_color']}]■[/{config['default_event_color']}] "
        f"{config['default_event_color']}",
    )
    table.add_row("clear_ids_on_view", _enabled(config["clear_ids_on_view"]))
    table.add_row("log_level", config.get("log_level", "WARNING"))
    table.add_row("data_path", str(configuration.DATA_PATH))
    return table


@app.command("view, v")
def view() -> None:
    """Display current configuration settings."""
    config = CONFIGURATION_REPO.get_config()

    console = Console()
    console.print(_configuration_table(config))

    yaml_library_type = "untested"
    try:
        from yaml import CDumper as Dumper  # noqa: F401
        from yaml import CLoader as Loader  # noqa: F401

        yaml_library_type = "C"
    except ImportError:
        yaml_library_type = "Python"

    console.print()
    console.print(f"YAML Library Type: {yaml_library_type}")


@app.command("set, s")
def set(
    show_header: Annotated[
        Optional[bool],
        typer.Option(
            "--show-header/--no-show-header",
            help="Show the report header above views",
        ),
    ] = None,
    max_visible_per_cell: Annotated[
        Optional[int],
        typer.Option(
            "--max-visible-per-cell",
            min=1,
            help="Events listed per month cell before '+N more'",
        ),
    ] = None,
    random_color_for_events: Annotated[
        Optional[bool],
        typer.Option(
            "--random-color-for-events/--no-random-color-for-events",
            help="Enable/disable random colors for new events",
        ),
    ] = None,
    default_event_color: Annotated[
        Optional[str],
        typer.Option(
            "--default-event-color",
            parser=parse_color,
            help="Hex color used for events without a valid color",
        ),
    ] = None,
    data_path: Annotated[
        Optional[str],
        typer.Option(
            "--data-path",
            help="Directory path for storing data files",
        ),
    ] = None,
    remove_data_path: Annotated[
        bool,
        typer.Option(
            "--remove-data-path",
            help="Reset data path to the platform default",
        ),
    ] = False,
    clear_ids_on_view: Annotated[
        Optional[bool],
        typer.Option(
            "--clear-ids-on-view/--no-clear-ids-on-view",
            help="Enable/disable automatic clearing of ID map before listing events",
        ),
    ] = None,
    log_level: Annotated[
        Optional[str],
        typer.Option("--log-level", help="One of " + ", ".join(LOG_LEVELS)),
    ] = None,
) -> None:
    """
    Update configuration settings.
    """
    if log_level is not None and log_level.upper() not in LOG_LEVELS:
        raise typer.BadParameter(
            f"Log level must be one of {', '.join(LOG_LEVELS)}, got '{log_level}'"
        )

    CONFIGURATION_REPO.update_config(
        show_header=show_header,
        max_visible_per_cell=max_visible_per_cell,
        random_color_for_events=random_color_for_events,
        default_event_color=default_event_color,
        data_path=data_path,
        remove_data_path=remove_data_path,
        clear_ids_on_view=clear_ids_on_view,
        log_level=log_level.upper() if log_level is not None else None,
    )

    config = CONFIGURATION_REPO.get_config()

    console = Console()
    console.print("[green]Configuration updated successfully![/green]\n")
    console.print(_configuration_table(config, "Updated Configuration"))

    if data_path is not None or remove_data_path:
        console.print(
            "\n[yellow]Note: data path changes take effect on the next run[/yellow]"
        )
