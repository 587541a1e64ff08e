# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer

from kalendar import state as app_state
from kalendar.terminal import configuration, event, view
from kalendar.terminal.custom_typer import OrderedTyperGroup
from kalendar.view import state as view_state

app = typer.Typer(
    cls=OrderedTyperGroup,
    help="Kalendar - Calendar events in the CLI",
    no_args_is_help=True,
)
app.add_typer(event.app, name="event, e")
app.add_typer(view.app, name="view, v")
app.add_typer(configuration.app, name="config, c")


@app.callback()
def main_callback(
    no_header: Annotated[
        bool,
        typer.Option(
            "--no-header",
            "-nh",
            help="Suppress header output in reports",
        ),
    ] = False,
    clear_ids: Annotated[
        Optional[bool],
        typer.Option(
            "--clear-ids/--no-clear-ids",
            help="Clear ID map before listing events (defaults to config)",
        ),
    ] = None,
) -> None:
    """
    Kalendar - Calendar events in the CLI

    Global options that apply to all commands.
    """
    if no_header:
        view_state.set_show_header(False)
    if clear_ids is not None:
        app_state.set_clear_ids(clear_ids)


def run() -> None:
    app()
