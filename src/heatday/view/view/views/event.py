# SPDX-License-Identifier: MIT

from rich import box
from rich.console import Console
from rich.table import Table

from heatday.color import DEADLINE_COLOR, MILESTONE_COLOR
from heatday.model.event import Event
from heatday.model.project import Project
from heatday.repository.id_map import ID_MAP_REPO
from heatday.time import (
    datetime_to_display_local_date_str,
    datetime_to_display_local_datetime_str,
)
from heatday.view.view.views.header import header


def event_type_style(event: Event) -> str:
    return DEADLINE_COLOR if event["type"] == "deadline" else MILESTONE_COLOR


def events_view(
    report_name: str,
    events: list[Event],
    projects: list[Project],
) -> None:
    header(report_name)

    projects_by_id = {project["id"]: project for project in projects}

    events_table = Table(box=box.SIMPLE)
    for column in ["id", "type", "project", "name", "date"]:
        events_table.add_column(column)

    for event in sorted(events, key=lambda event: event["date"]):
        project = projects_by_id.get(event["project_id"])
        if project is None:
            continue
        type_style = event_type_style(event)
        events_table.add_row(
            str(ID_MAP_REPO.associate_id("events", event["id"])),
            f"[{type_style}]{event['type']}[/{type_style}]",
            f"[{project['color']}]{project['name']}[/{project['color']}]",
            event["name"],
            datetime_to_display_local_date_str(event["date"]),
        )

    console = Console()
    console.print(events_table)


def single_event_view(event: Event, project: Project) -> None:
    header("event")

    event_table = Table(box=box.SIMPLE)
    event_table.add_column("property")
    event_table.add_column("value")

    type_style = event_type_style(event)
    event_table.add_row("id", str(ID_MAP_REPO.associate_id("events", event["id"])))
    event_table.add_row("name", event["name"])
    event_table.add_row("type", f"[{type_style}]{event['type']}[/{type_style}]")
    event_table.add_row(
        "project", f"[{project['color']}]{project['name']}[/{project['color']}]"
    )
    event_table.add_row("date", datetime_to_display_local_datetime_str(event["date"]))
    event_table.add_row(
        "created", datetime_to_display_local_datetime_str(event["created"])
    )
    event_table.add_row(
        "updated", datetime_to_display_local_datetime_str(event["updated"])
    )

    console = Console()
    console.print(event_table)
