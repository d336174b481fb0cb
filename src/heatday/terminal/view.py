# SPDX-License-Identifier: MIT

import logging
import time
from typing import Annotated, Optional

import click
import pendulum
import typer
from rich.console import Console
from rich.live import Live

from heatday.configuration import CellStyle, Configuration
from heatday.heatmap.bucket import shift_pivot
from heatday.heatmap.capacity import ResizeDebouncer
from heatday.heatmap.error import InvalidConfig
from heatday.heatmap.grid import build_heatmap_grid
from heatday.model.heatmap import HeatmapConfig, HeatmapGrid
from heatday.repository.configuration import CONFIGURATION_REPO
from heatday.repository.event import EVENT_REPO
from heatday.repository.project import PROJECT_REPO
from heatday.repository.task import TASK_REPO
from heatday.terminal.custom_typer import AliasedTyperGroup
from heatday.terminal.parse import DATETIME_HELP, parse_datetime
from heatday.terminal.validate import validate_bucket_width, validate_reload_interval
from heatday.view.view.views import heatmap as heatmap_report

logger = logging.getLogger(__name__)

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)

CELL_STYLES = ("alpha", "square")

# How often follow mode samples the console width
FOLLOW_POLL_SECONDS = 0.05


def _heatmap_config(
    pivot: pendulum.DateTime,
    bucket_width_days: int,
    available_extent: float,
    config: Configuration,
) -> HeatmapConfig:
    return {
        "pivot": pivot,
        "today": pendulum.today("local").date(),
        "bucket_width_days": bucket_width_days,
        "available_extent": available_extent,
        "reserved_label_extent": config["label_column_width"],
        "min_cell_extent": config["min_cell_width"],
        "max_cell_extent": config["max_cell_width"],
        "intensity_cap": config["intensity_cap"],
        "bucket_match": config["bucket_match"],
    }


def _build_grid(
    pivot: pendulum.DateTime,
    bucket_width_days: int,
    available_extent: float,
    config: Configuration,
) -> tuple[HeatmapGrid, pendulum.Date]:
    heatmap_config = _heatmap_config(pivot, bucket_width_days, available_extent, config)
    grid = build_heatmap_grid(
        PROJECT_REPO.get_all_projects(),
        TASK_REPO.get_all_tasks(),
        EVENT_REPO.get_all_events(),
        heatmap_config,
    )
    return grid, heatmap_config["today"]


def _reload_entities() -> None:
    # Pick up edits made by other heatday processes
    PROJECT_REPO.reset()
    TASK_REPO.reset()
    EVENT_REPO.reset()


def _follow(
    console: Console,
    pivot: pendulum.DateTime,
    bucket_width_days: int,
    cell_style: CellStyle,
    config: Configuration,
    reload_seconds: float,
) -> None:
    debouncer = ResizeDebouncer(config["resize_debounce_ms"])
    last_reload = time.monotonic()
    extent: Optional[float] = None

    with Live(console=console, auto_refresh=False) as live:
        try:
            while True:
                now_seconds = time.monotonic()
                settled = debouncer.observe(console.width, now_seconds)
                reload = now_seconds - last_reload >= reload_seconds
                if reload:
                    _reload_entities()
                    last_reload = now_seconds
                if settled is not None:
                    logger.debug("Console width settled at %s", settled)
                    extent = settled

                if extent is not None and (settled is not None or reload):
                    grid, today = _build_grid(pivot, bucket_width_days, extent, config)
                    live.update(
                        heatmap_report.build_heatmap_renderable(
                            grid, today, cell_style, config["label_column_width"]
                        ),
                        refresh=True,
                    )
                time.sleep(FOLLOW_POLL_SECONDS)
        except KeyboardInterrupt:
            pass


@app.command("heatmap, h")
def heatmap(
    pivot: Annotated[
        Optional[pendulum.DateTime],
        typer.Option(
            "--pivot",
            "-p",
            parser=parse_datetime,
            help="anchor date, the view starts a week before it; " + DATETIME_HELP,
        ),
    ] = None,
    page: Annotated[
        int,
        typer.Option(
            "--page",
            "-pg",
            help="move the pivot by whole pages of seven buckets, negative goes back",
        ),
    ] = 0,
    width: Annotated[
        Optional[int],
        typer.Option(
            "--width",
            "-w",
            callback=validate_bucket_width,
            help="days per cell",
        ),
    ] = None,
    style: Annotated[
        Optional[str],
        typer.Option("--style", "-s", click_type=click.Choice(CELL_STYLES)),
    ] = None,
    follow: Annotated[
        bool,
        typer.Option(
            "--follow",
            "-f",
            help="keep redrawing as the terminal is resized or data changes",
        ),
    ] = False,
    reload_seconds: Annotated[
        float,
        typer.Option(
            "--reload",
            callback=validate_reload_interval,
            help="seconds between data reloads in follow mode",
        ),
    ] = 5.0,
) -> None:
    """Show completed tasks per project as a calendar heatmap."""
    config = CONFIGURATION_REPO.get_config()
    bucket_width_days = width if width is not None else config["bucket_width_days"]
    cell_style: CellStyle = style if style is not None else config["cell_style"]  # type: ignore[assignment]

    pivot_local = (pivot if pivot is not None else pendulum.now("local")).in_tz("local")
    if page != 0:
        pivot_local = shift_pivot(pivot_local, bucket_width_days, page)

    console = Console()
    try:
        if follow:
            _follow(
                console, pivot_local, bucket_width_days, cell_style, config, reload_seconds
            )
            return

        grid, today = _build_grid(
            pivot_local, bucket_width_days, console.width, config
        )
    except InvalidConfig as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    heatmap_report.heatmap_view(
        "heatmap", grid, today, cell_style, config["label_column_width"]
    )
