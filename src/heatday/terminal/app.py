# SPDX-License-Identifier: MIT

import logging
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler

from heatday import state as app_state
from heatday.terminal import configuration, event, project, task, view
from heatday.terminal.custom_typer import OrderedTyperGroup
from heatday.view import state as view_state

app = typer.Typer(
    cls=OrderedTyperGroup,
    help="heatday - calendar heatmap of project work in the CLI",
    no_args_is_help=True,
)
app.add_typer(project.app, name="project, p", help="Manage projects")
app.add_typer(task.app, name="task, t", help="Manage tasks")
app.add_typer(event.app, name="event, e", help="Manage milestones and deadlines")
app.add_typer(view.app, name="view, v", help="Show the heatmap")
app.add_typer(configuration.app, name="config, c", help="Show or change settings")


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=True)],
        force=True,
    )


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
        bool,
        typer.Option(
            "--clear-ids/--no-clear-ids",
            help="Clear ID map",
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-V", help="Log debug output to stderr"),
    ] = False,
) -> None:
    """
    heatday - calendar heatmap of project work in the CLI

    Global options that apply to all commands.
    """
    configure_logging(verbose)
    if no_header:
        view_state.set_show_header(False)
    if clear_ids:
        app_state.set_clear_ids(True)


def run() -> None:
    app()
