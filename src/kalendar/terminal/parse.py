# SPDX-License-Identifier: MIT

import re
from typing import Optional

import pendulum
import typer

from kalendar.color import is_hex_color, palette_color_by_name
from kalendar.time import date_from_str_optional, to_24h


def parse_date(date_param: Optional[str | int]) -> Optional[pendulum.Date]:
    if date_param is None:
        return None

    date = str(date_param).strip()

    # Match YYYY-MM-DD format
    if re.match(r"^\d{4}-\d{2}-\d{2}$", date):
        parsed = date_from_str_optional(date)
        if parsed is None:
            raise typer.BadParameter(f"Invalid date: '{date}'")
        return parsed

    # Match numeric input for relative days (e.g., "1", "-1", "365")
    if re.match(r"^-?\d+$", date):
        return pendulum.today("local").add(days=int(date)).date()

    if date == "today" or date == "t":
        return pendulum.today("local").date()
    if date == "yesterday" or date == "y":
        return pendulum.yesterday("local").date()
    if date == "tomorrow" or date == "o":
        return pendulum.tomorrow("local").date()
    raise typer.BadParameter("Incorrect date format")


def parse_time(time_str: Optional[str]) -> Optional[str]:
    """
    Parse a time of day into a 24-hour "HH:MM" string.

    Args:
        time_str: Either 24-hour "(H)H:mm" (e.g., "8:00", "17:30") or
                  12-hour "h:mm AM/PM" (e.g., "5:30 PM")

    Returns:
        Zero-padded "HH:MM" or None if time_str is None

    Raises:
        typer.BadParameter: If the time format is invalid or values are out of range
    """
    if time_str is None:
        return None

    if re.search(r"[AaPp][Mm]\s*$", time_str):
        wire = to_24h(time_str)
        if wire == "" or int(wire[:2]) > 23 or int(wire[3:]) > 59:
            raise typer.BadParameter(
                f"Time must be in h:mm AM/PM format (e.g., 5:30 PM), got '{time_str}'"
            )
        return wire

    time_match = re.match(r"^(\d{1,2}):(\d{2})$", time_str.strip())
    if not time_match:
        raise typer.BadParameter(
            f"Time must be in HH:mm format (e.g., 8:00 or 17:30), got '{time_str}'"
        )

    hour = int(time_match.group(1))
    minute = int(time_match.group(2))

    if hour < 0 or hour > 23:
        raise typer.BadParameter(f"Hour must be between 0 and 23, got {hour}")
    if minute < 0 or minute > 59:
        raise typer.BadParameter(f"Minute must be between 0 and 59, got {minute}")

    return f"{hour:02d}:{minute:02d}"


def parse_hour(hour_str: Optional[str]) -> Optional[int]:
    """Hour of day from a time string, used to bound the day and week grids."""
    wire = parse_time(hour_str)
    if wire is None:
        return None
    return int(wire[:2])


def parse_color(color_str: Optional[str]) -> Optional[str]:
    """Hex color from "#RRGGBB" or a palette name such as "Blue"."""
    if color_str is None:
        return None

    color = color_str.strip()
    if is_hex_color(color):
        return color

    matching = palette_color_by_name(color)
    if matching is None:
        raise typer.BadParameter(
            "Color must be a hex color like #BCD8EC or a palette name, "
            f"got '{color_str}'"
        )
    return matching


def parse_id_list(id_param: str) -> list[int]:
    """
    Parse a single ID, comma-separated list of IDs, or ranges of IDs.

    Args:
        id_param: A single ID (e.g., "1"), comma-separated list (e.g., "1,2,3"),
                  range (e.g., "1-5"), or mixed (e.g., "1,3-5,8")

    Returns:
        List of integer IDs (sorted and deduplicated)

    Raises:
        typer.BadParameter: If any ID is not a valid integer or range format is invalid
    """
    id_strings = [s.strip() for s in id_param.split(",")]

    ids: list[int] = []
    for id_str in id_strings:
        if not id_str:
            continue

        if "-" in id_str:
            range_parts = id_str.split("-")
            if len(range_parts) != 2:
                raise typer.BadParameter(
                    f"Invalid range format: '{id_str}' (expected format: 'start-end')"
                )

            try:
                start = int(range_parts[0].strip())
                end = int(range_parts[1].strip())
            except ValueError:
                raise typer.BadParameter(
                    f"Invalid range: '{id_str}' contains non-integer values"
                )

            if start > end:
                raise typer.BadParameter(
                    f"Invalid range: '{id_str}' (start must be <= end)"
                )

            ids.extend(range(start, end + 1))
        else:
            try:
                ids.append(int(id_str))
            except ValueError:
                raise typer.BadParameter(
                    f"Invalid ID: '{id_str}' is not a valid integer"
                )

    if len(ids) == 0:
        raise typer.BadParameter("No valid IDs provided")

    return sorted(set(ids))
