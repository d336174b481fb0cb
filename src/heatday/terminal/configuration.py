# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import click
import typer
from rich.console import Console
from rich.table import Table

from heatday import configuration
from heatday.configuration import Configuration
from heatday.repository.configuration import CONFIGURATION_REPO
from heatday.terminal.custom_typer import AliasedTyperGroup
from heatday.terminal.validate import (
    validate_bucket_width,
    validate_non_negative,
    validate_positive,
)

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


def _enabled(value: bool) -> str:
    return "✓ Enabled" if value else "✗ Disabled"


def _configuration_table(config: Configuration, title: Optional[str] = None) -> Table:
    table = Table(title=title)
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="magenta")

    table.add_row("show_header", _enabled(config["show_header"]))
    table.add_row("clear_ids_on_view", _enabled(config["clear_ids_on_view"]))
    table.add_row("bucket_width_days", str(config["bucket_width_days"]))
    table.add_row("min_cell_width", str(config["min_cell_width"]))
    table.add_row("max_cell_width", str(config["max_cell_width"]))
    table.add_row("label_column_width", str(config["label_column_width"]))
    table.add_row("intensity_cap", str(config["intensity_cap"]))
    table.add_row("cell_style", config["cell_style"])
    table.add_row("bucket_match", config["bucket_match"])
    table.add_row("resize_debounce_ms", str(config["resize_debounce_ms"]))
    table.add_row("data_path", str(configuration.DATA_PATH))
    return table


@app.command("show, s")
def show() -> None:
    """Display current configuration settings."""
    config = CONFIGURATION_REPO.get_config()

    console = Console()
    console.print(_configuration_table(config))

    try:
        from yaml import CDumper as Dumper  # noqa: F401
        from yaml import CLoader as Loader  # noqa: F401

        yaml_library_type = "C"
    except ImportError:
        yaml_library_type = "Python"

    console.print()
    console.print(f"YAML Library Type: {yaml_library_type}")


@app.command("modify, m", no_args_is_help=True)
def modify(
    show_header: Annotated[
        Optional[bool],
        typer.Option("--show-header/--no-show-header", help="Print the app header"),
    ] = None,
    clear_ids_on_view: Annotated[
        Optional[bool],
        typer.Option(
            "--clear-ids-on-view/--no-clear-ids-on-view",
            help="Re-issue short ids every time a list is shown",
        ),
    ] = None,
    bucket_width_days: Annotated[
        Optional[int],
        typer.Option(
            "--bucket-width-days", callback=validate_bucket_width, help="Days per cell"
        ),
    ] = None,
    min_cell_width: Annotated[
        Optional[int],
        typer.Option("--min-cell-width", callback=validate_positive),
    ] = None,
    max_cell_width: Annotated[
        Optional[int],
        typer.Option("--max-cell-width", callback=validate_positive),
    ] = None,
    label_column_width: Annotated[
        Optional[int],
        typer.Option("--label-column-width", callback=validate_positive),
    ] = None,
    intensity_cap: Annotated[
        Optional[int],
        typer.Option(
            "--intensity-cap",
            callback=validate_positive,
            help="Completed tasks at which a cell is fully saturated",
        ),
    ] = None,
    cell_style: Annotated[
        Optional[str],
        typer.Option("--cell-style", click_type=click.Choice(["alpha", "square"])),
    ] = None,
    bucket_match: Annotated[
        Optional[str],
        typer.Option(
            "--bucket-match",
            click_type=click.Choice(["start_day", "range"]),
            help="start_day counts only the first day of a bucket, range counts all",
        ),
    ] = None,
    resize_debounce_ms: Annotated[
        Optional[int],
        typer.Option("--resize-debounce-ms", callback=validate_non_negative),
    ] = None,
    data_path: Annotated[
        Optional[str],
        typer.Option("--data-path", help="Path to the data directory"),
    ] = None,
    remove_data_path: Annotated[
        bool,
        typer.Option("--remove-data-path", help="Use the default data directory"),
    ] = False,
) -> None:
    """
    Update configuration settings.
    """
    config = CONFIGURATION_REPO.get_config()
    new_min = min_cell_width if min_cell_width is not None else config["min_cell_width"]
    new_max = max_cell_width if max_cell_width is not None else config["max_cell_width"]
    if new_max < new_min:
        raise typer.BadParameter(
            f"max_cell_width ({new_max}) is smaller than min_cell_width ({new_min})"
        )

    CONFIGURATION_REPO.update_config(
        show_header=show_header,
        clear_ids_on_view=clear_ids_on_view,
        bucket_width_days=bucket_width_days,
        min_cell_width=min_cell_width,
        max_cell_width=max_cell_width,
        label_column_width=label_column_width,
        intensity_cap=intensity_cap,
        cell_style=cell_style,  # type: ignore[arg-type]
        bucket_match=bucket_match,  # type: ignore[arg-type]
        resize_debounce_ms=resize_debounce_ms,
        data_path=data_path,
        remove_data_path=remove_data_path,
    )

    console = Console()
    console.print("[green]Configuration updated successfully![/green]\n")
    console.print(
        _configuration_table(CONFIGURATION_REPO.get_config(), "Updated Configuration")
    )
