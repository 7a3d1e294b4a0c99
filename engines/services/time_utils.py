"""
Time Utilities

Wall-clock arithmetic for Exhibit G times. All times are "HH:MM" strings
local to the shoot day; spans that end at or before their start wrap to
the next day.
"""

import re
from decimal import ROUND_CEILING, ROUND_HALF_UP, Decimal
from typing import Iterable

from engines.exceptions import InvalidTimeFormat
from engines.services.rate_constants import TIME_INCREMENT_MINUTES

MINUTES_PER_DAY = 24 * 60

TIME_PATTERN = re.compile(r"^([01]?\d|2[0-3]):([0-5]\d)$")


def is_valid_time(time: str) -> bool:
    """Validate "HH:MM" (24-hour) format."""
    return isinstance(time, str) and TIME_PATTERN.match(time) is not None


def parse_time_to_minutes(time: str) -> int:
    """
    Parse "HH:MM" to minutes since midnight.

    Raises:
        InvalidTimeFormat: if the value is not a 24-hour "HH:MM" time.
    """
    if not isinstance(time, str):
        raise InvalidTimeFormat(time)
    match = TIME_PATTERN.match(time.strip())
    if match is None:
        raise InvalidTimeFormat(time)
    return int(match.group(1)) * 60 + int(match.group(2))


def wrap_after(minutes: int, reference: int) -> int:
    """Move a time-of-day earlier than the reference onto the next day."""
    if minutes < reference:
        return minutes + MINUTES_PER_DAY
    return minutes


def round_up_to_tenth_hour(minutes: Decimal | int) -> Decimal:
    """Round minutes UP to the nearest 6-minute (1/10th hour) increment."""
    increments = (Decimal(minutes) / TIME_INCREMENT_MINUTES).to_integral_value(
        rounding=ROUND_CEILING
    )
    return increments * TIME_INCREMENT_MINUTES


def minutes_to_decimal_hours(minutes: Decimal | int) -> Decimal:
    """Convert minutes to decimal hours, rounded to 1 decimal place."""
    return (Decimal(minutes) / 60).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP)


def calculate_duration(start_time: str, end_time: str) -> int:
    """
    Duration between two "HH:MM" times in minutes.

    Handles overnight wrap (call at 18:00, dismiss at 02:00 = 480 min).
    An end equal to the start is a full 24 hours.
    """
    start_min = parse_time_to_minutes(start_time)
    end_min = parse_time_to_minutes(end_time)

    if end_min <= start_min:
        end_min += MINUTES_PER_DAY

    return end_min - start_min


def calculate_meal_minutes(meals: Iterable[tuple[str | None, str | None]]) -> int:
    """Total minutes of (start, finish) meal periods; half-recorded meals count as zero."""
    total = 0
    for start, finish in meals:
        if start and finish:
            total += calculate_duration(start, finish)
    return total


def get_latest_time(reference_start: str, *times: str | None) -> str:
    """
    Latest of the given "HH:MM" times, compared relative to a reference start.

    Times earlier than the reference are treated as the next day.
    """
    valid_times = [t for t in times if t]
    if not valid_times:
        raise ValueError("No valid times provided")

    ref_min = parse_time_to_minutes(reference_start)
    return max(
        valid_times,
        key=lambda t: wrap_after(parse_time_to_minutes(t), ref_min),
    )


def snap_to_six_minutes(time: str) -> str:
    """Snap a time to the nearest 6-minute increment."""
    total = parse_time_to_minutes(time)
    hours, minutes = divmod(total, 60)
    snapped = int(
        (Decimal(minutes) / TIME_INCREMENT_MINUTES).quantize(
            Decimal("1"), rounding=ROUND_HALF_UP
        )
    ) * TIME_INCREMENT_MINUTES
    if snapped == 60:
        hours, snapped = (hours + 1) % 24, 0
    return f"{hours:02d}:{snapped:02d}"


def format_duration(total_minutes: Decimal | int) -> str:
    """Format minutes as "Xh Ym"."""
    hours, minutes = divmod(int(total_minutes), 60)
    if hours == 0:
        return f"{minutes}m"
    if minutes == 0:
        return f"{hours}h"
    return f"{hours}h {minutes}m"


def format_currency(amount: Decimal) -> str:
    """Format a dollar amount as "$X,XXX.XX"."""
    quantized = Decimal(amount).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    if quantized < 0:
        return f"-${-quantized:,.2f}"
    return f"${quantized:,.2f}"
