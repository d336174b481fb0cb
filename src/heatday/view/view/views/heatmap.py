# SPDX-License-Identifier: MIT

import pendulum
from rich.color import Color
from rich.console import Console, Group
from rich.style import Style
from rich.text import Text

from heatday.color import DEADLINE_COLOR, MILESTONE_COLOR, RGB, hex_to_rgb
from heatday.configuration import CellStyle
from heatday.heatmap.bucket import bucket_end
from heatday.heatmap.intensity import blend
from heatday.model.event import Event
from heatday.model.heatmap import HeatmapCell, HeatmapGrid
from heatday.model.project import Project
from heatday.time import calendar_date, datetime_to_iso_str
from heatday.view.view.views.header import header


def heatmap_view(
    report_name: str,
    grid: HeatmapGrid,
    today: pendulum.Date,
    cell_style: CellStyle,
    label_column_width: int,
) -> None:
    header(report_name)

    console = Console()
    console.print(build_heatmap_renderable(grid, today, cell_style, label_column_width))


def build_heatmap_renderable(
    grid: HeatmapGrid,
    today: pendulum.Date,
    cell_style: CellStyle,
    label_column_width: int,
) -> Group:
    """
    Render a heatmap grid as a group of rich Text rows.

    Layout from top to bottom: date range, month band row, day header row,
    separator, one row per visible project (followed by its event lines when
    the project is expanded), and finally the list of hidden projects.

    Args:
        grid: Grid computed by build_heatmap_grid
        today: Today's calendar date, used to mark the current bucket
        cell_style: "alpha" tints by intensity, "square" fades by opacity
        label_column_width: Width of the project name column

    Returns:
        A rich Group that can be printed or handed to a Live display
    """
    buckets = grid["buckets"]
    cell_extent = grid["cell_extent"]
    width = grid["bucket_width_days"]

    elements: list[Text] = []

    first = buckets[0].date()
    last = bucket_end(buckets[-1], width).subtract(days=1).date()
    per_cell = "1 day" if width == 1 else f"{width} days"
    elements.append(
        Text.from_markup(
            f"\n[bold]{first.to_date_string()} to {last.to_date_string()}[/bold]"
            f" ({per_cell} per cell)\n"
        )
    )

    elements.append(_build_month_row(grid, label_column_width))
    elements.append(_build_day_row(grid, today, label_column_width))
    elements.append(
        Text("─" * (label_column_width + cell_extent * len(buckets)), style="dim")
    )

    if not grid["rows"]:
        elements.append(Text("No visible projects", style="dim"))

    for project in grid["rows"]:
        project_cells = grid["cells"][project["id"]]
        elements.append(
            _build_project_row(
                project, project_cells, buckets, cell_extent, cell_style, label_column_width
            )
        )
        if not project["collapsed"]:
            elements.extend(_build_event_lines(project_cells, buckets))

    if grid["hidden_projects"]:
        names = ", ".join(project["name"] for project in grid["hidden_projects"])
        elements.append(Text(f"\nHidden: {names}", style="dim"))

    return Group(*elements)


def _format_left_column(text: str, left_column_width: int) -> str:
    if len(text) > left_column_width - 1:
        return text[: left_column_width - 4] + "... "
    return text.ljust(left_column_width)


def _build_month_row(grid: HeatmapGrid, left_column_width: int) -> Text:
    cell_extent = grid["cell_extent"]
    total_width = cell_extent * len(grid["buckets"])
    bands = grid["month_bands"]

    month_row = Text()
    month_row.append(" " * left_column_width)

    position = 0
    for index, band in enumerate(bands):
        start = band["bucket_index"] * cell_extent
        # A label may run until the next one begins
        if index + 1 < len(bands):
            limit = bands[index + 1]["bucket_index"] * cell_extent - 1
        else:
            limit = total_width
        label = band["label"] if band["is_january"] else band["short_label"]
        label = label[: max(limit - start, 0)]

        if start > position:
            month_row.append(" " * (start - position))
            position = start
        style = "bold yellow" if band["is_january"] else "bold magenta"
        month_row.append(label, style=style)
        position += len(label)

    if position < total_width:
        month_row.append(" " * (total_width - position))
    return month_row


def _build_day_row(
    grid: HeatmapGrid, today: pendulum.Date, left_column_width: int
) -> Text:
    cell_extent = grid["cell_extent"]
    width = grid["bucket_width_days"]

    day_row = Text()
    day_row.append(" " * left_column_width)
    for bucket in grid["buckets"]:
        start = calendar_date(bucket)
        end = calendar_date(bucket_end(bucket, width))
        label = bucket.format("DD")[:cell_extent].ljust(cell_extent)
        if start <= today < end:
            day_row.append(label, style="bold black on bright_cyan")
        elif start < today:
            day_row.append(label, style="dim")
        else:
            day_row.append(label, style="bold cyan")
    return day_row


def _cell_background(cell: HeatmapCell, project: Project, cell_style: CellStyle) -> RGB:
    if cell_style == "square":
        r, g, b = hex_to_rgb(project["color"])
        return blend((r, g, b, cell["opacity"]))
    return blend(cell["color"])


def _cell_symbol(cell: HeatmapCell, project: Project) -> tuple[str, str]:
    if project["collapsed"]:
        return (" ", "")
    if cell["has_deadline"]:
        return ("D", DEADLINE_COLOR)
    if cell["has_milestone"]:
        return ("M", MILESTONE_COLOR)
    return (" ", "")


def _build_project_row(
    project: Project,
    project_cells: dict[str, HeatmapCell],
    buckets: list[pendulum.DateTime],
    cell_extent: int,
    cell_style: CellStyle,
    left_column_width: int,
) -> Text:
    row = Text()
    name_style = project["color"] if project["collapsed"] else "bold " + project["color"]
    row.append(_format_left_column(project["name"], left_column_width), style=name_style)

    for bucket in buckets:
        cell = project_cells[datetime_to_iso_str(bucket)]
        background = Color.from_rgb(*_cell_background(cell, project, cell_style))
        symbol, symbol_style = _cell_symbol(cell, project)
        style = Style(bgcolor=background)
        if symbol_style:
            style = Style.parse(symbol_style) + style
        row.append(symbol, style=style)
        if cell_extent > 1:
            row.append(" " * (cell_extent - 1), style=Style(bgcolor=background))
    return row


def _event_line(event: Event, bucket: pendulum.DateTime) -> Text:
    if event["type"] == "deadline":
        marker, style = ("D", DEADLINE_COLOR)
    else:
        marker, style = ("M", MILESTONE_COLOR)
    line = Text(" " * 2)
    line.append(marker, style=style)
    event_date = calendar_date(event["date"], bucket.timezone)
    line.append(f" {event_date.to_date_string()} ", style="dim")
    line.append(event["name"])
    return line


def _build_event_lines(
    project_cells: dict[str, HeatmapCell],
    buckets: list[pendulum.DateTime],
) -> list[Text]:
    lines: list[Text] = []
    for bucket in buckets:
        for event in project_cells[datetime_to_iso_str(bucket)]["events"]:
            lines.append(_event_line(event, bucket))
    return lines
