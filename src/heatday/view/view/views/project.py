# SPDX-License-Identifier: MIT

from rich import box
from rich.console import Console
from rich.table import Table

from heatday.model.event import Event
from heatday.model.project import Project
from heatday.model.task import Task
from heatday.repository.id_map import ID_MAP_REPO
from heatday.time import datetime_to_display_local_datetime_str
from heatday.view.view.views.header import header


def projects_view(
    report_name: str,
    projects: list[Project],
    tasks: list[Task],
    events: list[Event],
) -> None:
    header(report_name)

    projects_table = Table(box=box.SIMPLE)
    for column in ["id", "order", "name", "color", "tasks", "events", "hidden", "collapsed"]:
        projects_table.add_column(column)

    for project in projects:
        project_tasks = [task for task in tasks if task["project_id"] == project["id"]]
        completed = len([task for task in project_tasks if task["completed"]])
        project_events = [
            event for event in events if event["project_id"] == project["id"]
        ]
        name_style = "dim" if project["hidden"] else project["color"]
        projects_table.add_row(
            str(ID_MAP_REPO.associate_id("projects", project["id"])),
            str(project["order"]),
            f"[{name_style}]{project['name']}[/{name_style}]",
            project["color"],
            f"{completed}/{len(project_tasks)}",
            str(len(project_events)),
            "yes" if project["hidden"] else "",
            "yes" if project["collapsed"] else "",
        )

    console = Console()
    console.print(projects_table)


def single_project_view(project: Project) -> None:
    header("project")

    project_table = Table(box=box.SIMPLE)
    project_table.add_column("property")
    project_table.add_column("value")

    project_table.add_row(
        "id", str(ID_MAP_REPO.associate_id("projects", project["id"]))
    )
    project_table.add_row(
        "name", f"[{project['color']}]{project['name']}[/{project['color']}]"
    )
    project_table.add_row("color", project["color"])
    project_table.add_row("order", str(project["order"]))
    project_table.add_row("hidden", str(project["hidden"]))
    project_table.add_row("collapsed", str(project["collapsed"]))
    project_table.add_row(
        "created", datetime_to_display_local_datetime_str(project["created"])
    )
    project_table.add_row(
        "updated", datetime_to_display_local_datetime_str(project["updated"])
    )

    console = Console()
    console.print(project_table)
