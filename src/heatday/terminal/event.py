# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import click
import pendulum
import typer

from heatday.id_map import clear_id_map_if_required
from heatday.model.event import EVENT_TYPES
from heatday.repository.event import EVENT_REPO
from heatday.repository.project import PROJECT_REPO
from heatday.service import event as event_service
from heatday.service.error import EntityNotFoundError, EntityValidationError
from heatday.service.project import get_project
from heatday.terminal.custom_typer import AliasedTyperGroup
from heatday.terminal.parse import DATETIME_HELP, parse_datetime, resolve_id
from heatday.view.view.views import event as event_report

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


@app.command("add, a", no_args_is_help=True)
def add(
    name: Annotated[str, typer.Argument(help="event name")],
    project: Annotated[int, typer.Option("--project", "-p", help="project id")],
    date: Annotated[
        pendulum.DateTime,
        typer.Option("--date", "-d", parser=parse_datetime, help=DATETIME_HELP),
    ],
    type: Annotated[
        str,
        typer.Option(
            "--type",
            "-t",
            click_type=click.Choice(EVENT_TYPES),
            help="milestone or deadline",
        ),
    ] = "milestone",
) -> None:
    """Add a milestone, or the single deadline of a project."""
    project_id = resolve_id("projects", project)
    try:
        event = event_service.create_event(project_id, name, date, type)
    except (EntityValidationError, EntityNotFoundError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    event_report.single_event_view(event, get_project(project_id))


@app.command("list, ls")
def list_events(
    project: Annotated[
        Optional[int], typer.Option("--project", "-p", help="only this project")
    ] = None,
) -> None:
    project_id = resolve_id("projects", project) if project is not None else None

    clear_id_map_if_required("events")
    event_report.events_view(
        "events",
        EVENT_REPO.get_all_events(project_id),
        PROJECT_REPO.get_all_projects(),
    )


@app.command("modify, m", no_args_is_help=True)
def modify(
    id: int,
    name: Annotated[Optional[str], typer.Option("--name", "-n")] = None,
    date: Annotated[
        Optional[pendulum.DateTime],
        typer.Option("--date", "-d", parser=parse_datetime, help=DATETIME_HELP),
    ] = None,
    type: Annotated[
        Optional[str],
        typer.Option("--type", "-t", click_type=click.Choice(EVENT_TYPES)),
    ] = None,
) -> None:
    real_id = resolve_id("events", id)
    try:
        event = event_service.update_event(real_id, name=name, date=date, type=type)
    except (EntityValidationError, EntityNotFoundError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    event_report.single_event_view(event, get_project(event["project_id"]))


@app.command("delete, del", no_args_is_help=True)
def delete(id: int) -> None:
    """Delete an event; tasks linked to it are kept and unlinked."""
    real_id = resolve_id("events", id)
    try:
        event = event_service.get_event(real_id)
        event_service.delete_event(real_id)
    except EntityNotFoundError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(f"Deleted {event['type']} {event['name']}")
