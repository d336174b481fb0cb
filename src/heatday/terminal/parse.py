# SPDX-License-Identifier: MIT

import re
from typing import Optional

import pendulum
import typer

from heatday.model.entity_id import EntityId
from heatday.model.id_map import EntityType
from heatday.repository.id_map import ID_MAP_REPO
from heatday.time import datetime_from_str_utc

DATETIME_HELP = (
    "valid inputs: YYYY-MM-DD HH:mm, YYYY-MM-DD, (H)H:mm, today, yesterday, "
    "tomorrow, or day offset like 1, -1"
)


def parse_datetime(datetime_param: Optional[str | int]) -> Optional[pendulum.DateTime]:
    if datetime_param is None:
        return None

    datetime = str(datetime_param)

    # Match YYYY-MM-DD format (with optional time component)
    if re.match(r"\d{4}-\d{2}-\d{2}", datetime):
        try:
            return datetime_from_str_utc(datetime)
        except ValueError as e:
            raise typer.BadParameter(f"Invalid date: {e}")

    # Match (H)H:mm format (time only, use today's date)
    time_match = re.match(r"^(\d{1,2}):(\d{2})$", datetime)
    if time_match:
        hour = int(time_match.group(1))
        minute = int(time_match.group(2))

        if hour < 0 or hour > 23:
            raise typer.BadParameter(f"Hour must be between 0 and 23, got {hour}")
        if minute < 0 or minute > 59:
            raise typer.BadParameter(f"Minute must be between 0 and 59, got {minute}")

        pendulum_date_time = pendulum.today("local").set(
            hour=hour, minute=minute, second=0, microsecond=0
        )
        return pendulum_date_time.in_tz("UTC")

    # Relative days (e.g., "1", "-1", "365")
    if re.match(r"^-?\d+$", datetime):
        days_offset = int(datetime)
        pendulum_date_time = pendulum.today("local").add(days=days_offset)
        return pendulum_date_time.in_tz("UTC")

    if datetime == "now" or datetime == "n":
        return pendulum.now("UTC")
    if datetime == "today" or datetime == "t":
        return pendulum.today("local").in_tz("UTC")
    if datetime == "yesterday" or datetime == "y":
        return pendulum.yesterday("local").in_tz("UTC")
    if datetime == "tomorrow" or datetime == "o":
        return pendulum.tomorrow("local").in_tz("UTC")
    raise typer.BadParameter("Incorrect datetime format")


def _parse_id(value: str, id_param: str) -> int:
    try:
        return int(value.strip())
    except ValueError:
        raise typer.BadParameter(f"Invalid ID '{value}' in '{id_param}'")


def parse_id_list(id_param: str) -> list[int]:
    """
    Parse short ids given as "3", "1,4", "2-5" or any mix like "1,3-5,8".

    Returns:
        Sorted, deduplicated ids

    Raises:
        typer.BadParameter: If a part is not an id or a valid start-end range
    """
    ids: set[int] = set()
    for part in filter(None, (p.strip() for p in id_param.split(","))):
        if "-" not in part:
            ids.add(_parse_id(part, id_param))
            continue

        bounds = part.split("-")
        if len(bounds) != 2:
            raise typer.BadParameter(f"Invalid range '{part}', expected start-end")
        start, end = (_parse_id(bound, id_param) for bound in bounds)
        if start > end:
            raise typer.BadParameter(f"Invalid range '{part}', start must be <= end")
        ids.update(range(start, end + 1))

    if not ids:
        raise typer.BadParameter("No valid IDs provided")
    return sorted(ids)


def resolve_id(entity_type: EntityType, synthetic_id: int) -> EntityId:
    """Map a short id shown in a list view back to the stored entity id."""
    try:
        return ID_MAP_REPO.get_real_id(entity_type, synthetic_id)
    except KeyError:
        raise typer.BadParameter(
            f"No {entity_type[:-1]} with id {synthetic_id}, list {entity_type} first"
        )
