# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer

from heatday.id_map import clear_id_map_if_required
from heatday.model.project import MoveDirection
from heatday.repository.event import EVENT_REPO
from heatday.repository.project import PROJECT_REPO
from heatday.repository.task import TASK_REPO
from heatday.service import project as project_service
from heatday.service.error import EntityNotFoundError, EntityValidationError
from heatday.terminal.custom_typer import AliasedTyperGroup
from heatday.terminal.parse import resolve_id
from heatday.terminal.validate import validate_color, validate_non_negative
from heatday.view.view.views import project as project_report

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


@app.command("add, a", no_args_is_help=True)
def add(
    name: Annotated[str, typer.Argument(help="project name")],
    color: Annotated[
        Optional[str],
        typer.Option(
            "--color",
            "-col",
            callback=validate_color,
            help="hex color, random when omitted",
        ),
    ] = None,
) -> None:
    try:
        project = project_service.create_project(name, color)
    except EntityValidationError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    project_report.single_project_view(project)


@app.command("list, ls")
def list_projects() -> None:
    clear_id_map_if_required("projects")
    project_report.projects_view(
        "projects",
        PROJECT_REPO.get_all_projects(),
        TASK_REPO.get_all_tasks(),
        EVENT_REPO.get_all_events(),
    )


@app.command("modify, m", no_args_is_help=True)
def modify(
    id: int,
    name: Annotated[Optional[str], typer.Option("--name", "-n")] = None,
    color: Annotated[
        Optional[str],
        typer.Option("--color", "-col", callback=validate_color),
    ] = None,
    hidden: Annotated[Optional[bool], typer.Option("--hidden/--visible")] = None,
    collapsed: Annotated[
        Optional[bool], typer.Option("--collapsed/--expanded")
    ] = None,
    order: Annotated[
        Optional[int],
        typer.Option("--order", "-o", callback=validate_non_negative),
    ] = None,
) -> None:
    real_id = resolve_id("projects", id)
    try:
        project = project_service.update_project(
            real_id,
            name=name,
            color=color,
            hidden=hidden,
            collapsed=collapsed,
            order=order,
        )
    except (EntityValidationError, EntityNotFoundError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    project_report.single_project_view(project)


@app.command("delete, del", no_args_is_help=True)
def delete(id: int) -> None:
    """Delete a project together with its tasks and events."""
    real_id = resolve_id("projects", id)
    try:
        project = project_service.get_project(real_id)
        project_service.delete_project(real_id)
    except EntityNotFoundError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(f"Deleted project {project['name']}")


def _move(id: int, direction: MoveDirection) -> None:
    real_id = resolve_id("projects", id)
    try:
        moved = project_service.move_project(real_id, direction)
    except EntityNotFoundError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    if not moved:
        typer.echo(f"Project is already at the {'top' if direction == 'up' else 'bottom'}")
    list_projects()


@app.command("up, u", no_args_is_help=True)
def up(id: int) -> None:
    """Swap a project with the one above it."""
    _move(id, "up")


@app.command("down, d", no_args_is_help=True)
def down(id: int) -> None:
    """Swap a project with the one below it."""
    _move(id, "down")


def _set_flags(
    id: int, hidden: Optional[bool] = None, collapsed: Optional[bool] = None
) -> None:
    real_id = resolve_id("projects", id)
    try:
        project = project_service.update_project(
            real_id, hidden=hidden, collapsed=collapsed
        )
    except EntityNotFoundError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    project_report.single_project_view(project)


@app.command("hide", no_args_is_help=True)
def hide(id: int) -> None:
    _set_flags(id, hidden=True)


@app.command("show", no_args_is_help=True)
def show(id: int) -> None:
    _set_flags(id, hidden=False)


@app.command("collapse", no_args_is_help=True)
def collapse(id: int) -> None:
    _set_flags(id, collapsed=True)


@app.command("expand", no_args_is_help=True)
def expand(id: int) -> None:
    _set_flags(id, collapsed=False)
