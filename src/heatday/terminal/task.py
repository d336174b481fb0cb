# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer

from heatday.id_map import clear_id_map_if_required
from heatday.repository.event import EVENT_REPO
from heatday.repository.project import PROJECT_REPO
from heatday.repository.task import TASK_REPO
from heatday.service import task as task_service
from heatday.service.error import EntityNotFoundError, EntityValidationError
from heatday.service.project import get_project
from heatday.terminal.custom_typer import AliasedTyperGroup
from heatday.terminal.parse import parse_id_list, resolve_id
from heatday.view.view.views import task as task_report

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


@app.command("add, a", no_args_is_help=True)
def add(
    name: Annotated[str, typer.Argument(help="task name")],
    project: Annotated[int, typer.Option("--project", "-p", help="project id")],
    event: Annotated[
        Optional[int],
        typer.Option("--event", "-e", help="id of an event in the same project"),
    ] = None,
) -> None:
    project_id = resolve_id("projects", project)
    event_id = resolve_id("events", event) if event is not None else None
    try:
        task = task_service.create_task(project_id, name, event_id)
    except (EntityValidationError, EntityNotFoundError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    task_report.single_task_view(task, get_project(project_id))


@app.command("list, ls")
def list_tasks(
    project: Annotated[
        Optional[int], typer.Option("--project", "-p", help="only this project")
    ] = None,
) -> None:
    project_id = resolve_id("projects", project) if project is not None else None
    projects = PROJECT_REPO.get_all_projects()
    if project_id is not None:
        projects = [p for p in projects if p["id"] == project_id]

    clear_id_map_if_required("tasks")
    task_report.tasks_view(
        "tasks",
        TASK_REPO.get_all_tasks(project_id),
        projects,
        EVENT_REPO.get_all_events(project_id),
    )


@app.command("modify, m", no_args_is_help=True)
def modify(
    id: int,
    name: Annotated[Optional[str], typer.Option("--name", "-n")] = None,
    event: Annotated[Optional[int], typer.Option("--event", "-e")] = None,
    remove_event: Annotated[bool, typer.Option("--remove-event", "-re")] = False,
) -> None:
    real_id = resolve_id("tasks", id)
    event_id = resolve_id("events", event) if event is not None else None
    try:
        task = task_service.update_task(
            real_id, name=name, event_id=event_id, remove_event_id=remove_event
        )
    except (EntityValidationError, EntityNotFoundError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    task_report.single_task_view(task, get_project(task["project_id"]))


def _set_completed(id: str, completed: bool) -> None:
    for task_id in parse_id_list(id):
        real_id = resolve_id("tasks", task_id)
        try:
            task = task_service.update_task(real_id, completed=completed)
        except EntityNotFoundError as e:
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(1)
        task_report.single_task_view(task, get_project(task["project_id"]))


@app.command("complete, c", no_args_is_help=True)
def complete(
    id: Annotated[str, typer.Argument(help="id, list (1,2) or range (1-3)")],
) -> None:
    """Mark tasks completed; completion feeds the heatmap cell of their event."""
    _set_completed(id, True)


@app.command("uncomplete, uc", no_args_is_help=True)
def uncomplete(
    id: Annotated[str, typer.Argument(help="id, list (1,2) or range (1-3)")],
) -> None:
    _set_completed(id, False)


@app.command("delete, del", no_args_is_help=True)
def delete(
    id: Annotated[str, typer.Argument(help="id, list (1,2) or range (1-3)")],
) -> None:
    for task_id in parse_id_list(id):
        real_id = resolve_id("tasks", task_id)
        try:
            task = task_service.get_task(real_id)
            task_service.delete_task(real_id)
        except EntityNotFoundError as e:
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(1)
        typer.echo(f"Deleted task {task['name']}")
