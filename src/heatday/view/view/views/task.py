# SPDX-License-Identifier: MIT

from rich import box
from rich.console import Console
from rich.table import Table

from heatday.color import COMPLETED_TASK_COLOR
from heatday.model.event import Event
from heatday.model.project import Project
from heatday.model.task import Task
from heatday.repository.id_map import ID_MAP_REPO
from heatday.time import datetime_to_display_local_datetime_str
from heatday.view.view.views.header import header


def task_state(task: Task) -> str:
    return "X" if task["completed"] else " "


def tasks_view(
    report_name: str,
    tasks: list[Task],
    projects: list[Project],
    events: list[Event],
) -> None:
    """
    Print tasks grouped by project in display order.

    Open tasks are listed before completed ones within each project.
    """
    header(report_name)

    events_by_id = {event["id"]: event for event in events}

    tasks_table = Table(box=box.SIMPLE)
    for column in ["id", "state", "project", "name", "event", "created"]:
        tasks_table.add_column(column)

    for project in projects:
        project_tasks = [task for task in tasks if task["project_id"] == project["id"]]
        project_tasks.sort(key=lambda task: task["completed"])
        for task in project_tasks:
            # A dangling event reference reads as no event
            event = events_by_id.get(task["event_id"]) if task["event_id"] else None
            style = COMPLETED_TASK_COLOR if task["completed"] else project["color"]
            tasks_table.add_row(
                str(ID_MAP_REPO.associate_id("tasks", task["id"])),
                task_state(task),
                f"[{project['color']}]{project['name']}[/{project['color']}]",
                f"[{style}]{task['name']}[/{style}]",
                event["name"] if event is not None else "",
                datetime_to_display_local_datetime_str(task["created"]),
            )

    console = Console()
    console.print(tasks_table)


def single_task_view(task: Task, project: Project) -> None:
    header("task")

    task_table = Table(box=box.SIMPLE)
    task_table.add_column("property")
    task_table.add_column("value")

    task_table.add_row("id", str(ID_MAP_REPO.associate_id("tasks", task["id"])))
    task_table.add_row("name", task["name"])
    task_table.add_row(
        "project", f"[{project['color']}]{project['name']}[/{project['color']}]"
    )
    task_table.add_row(
        "event",
        str(ID_MAP_REPO.associate_id("events", task["event_id"]))
        if task["event_id"] is not None
        else "",
    )
    task_table.add_row("completed", str(task["completed"]))
    task_table.add_row("created", datetime_to_display_local_datetime_str(task["created"]))
    task_table.add_row("updated", datetime_to_display_local_datetime_str(task["updated"]))

    console = Console()
    console.print(task_table)
