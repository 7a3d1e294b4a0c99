"""
Exhibit G Rate Engine

Pure calculation of SAG-AFTRA stunt performer pay for one work day.
Identical input always yields identical output; no I/O, no hidden state.
"""

import logging
import math
from decimal import ROUND_HALF_UP, Decimal

from engines.exceptions import InvalidTimeRelationship
from engines.schemas.exhibit_g import (
    CalculationBreakdown,
    CalculationOptions,
    DayMultiplierInfo,
    DayType,
    ExhibitGInput,
    PenaltySummary,
    TimeSegment,
)
from engines.services.meal_penalties import calculate_meal_penalties
from engines.services.rate_constants import (
    FORCED_CALL_MAX_PENALTY,
    MULTIPLIERS,
    ND_MEAL_WINDOW_MINUTES,
    OVERTIME,
    get_rate_schedule,
)
from engines.services.time_utils import (
    calculate_duration,
    calculate_meal_minutes,
    format_duration,
    get_latest_time,
    minutes_to_decimal_hours,
    parse_time_to_minutes,
    round_up_to_tenth_hour,
    wrap_after,
)

logger = logging.getLogger(__name__)

ND_MEAL_WINDOW_MESSAGE = "ND meal must end within 2 hours of call time."

DAY_TYPE_MULTIPLIERS: dict[DayType, Decimal] = {
    DayType.NONE: MULTIPLIERS.straight,
    DayType.SIXTH_DAY: MULTIPLIERS.sixth_day,
    DayType.SEVENTH_DAY: MULTIPLIERS.seventh_day,
    DayType.HOLIDAY: MULTIPLIERS.holiday,
}


def round1(value: Decimal) -> Decimal:
    """Round to 1 decimal place (nearest tenth of an hour)."""
    return value.quantize(Decimal("0.1"), rounding=ROUND_HALF_UP)


def round2(value: Decimal) -> Decimal:
    """Round to 2 decimal places (cents)."""
    return value.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)


def calculate_rate(
    input_data: ExhibitGInput,
    options: CalculationOptions | None = None,
) -> CalculationBreakdown:
    """
    Calculate the itemized pay breakdown for one Exhibit G work day.

    Algorithm:
    1. Look up the base daily/hourly rate for the agreement type
    2. Add the stunt adjustment to the daily rate, derive the hourly rate (/8)
    3. Validate the ND meal window (must end within 2 hours of call)
    4. Work span = call to the later of on-set and makeup/wardrobe dismissal
    5. Subtract deductible meals (ND meals count as work time)
    6. Round net time UP to the next 6 minutes (unless skip_rounding)
    7. Resolve the day multiplier (holiday > 7th day > 6th day)
    8. Segment hours into straight / time-and-a-half / double time
    9. Meal penalties and forced call penalty
    10. Grand total = max(segments, daily minimum) + penalties

    Raises:
        UnknownAgreementType: work_status has no rate table entry.
        InvalidTimeRelationship: ND meal ends more than 2 hours after call.
        InvalidTimeFormat: a time is not "HH:MM".
    """
    options = options or CalculationOptions()

    # Step 1-2: Rates, with the stunt adjustment applied BEFORE OT
    rates = get_rate_schedule(input_data.work_status)
    base_rate = rates.daily
    hourly_rate = rates.hourly
    adjusted_base_rate = base_rate + input_data.stunt_adjustment
    adjusted_hourly_rate = adjusted_base_rate / rates.straight_time_hours

    # Step 3: ND meal window
    validate_nd_meal(input_data)

    # Step 4: Work span
    work_end = get_latest_time(
        input_data.call_time,
        input_data.dismiss_on_set,
        input_data.dismiss_makeup_wardrobe,
    )
    total_elapsed_minutes = Decimal(calculate_duration(input_data.call_time, work_end))
    if options.additional_seconds:
        total_elapsed_minutes += options.additional_seconds / 60

    # Step 5: Deductible meals only
    meal_minutes = calculate_meal_minutes(
        [
            (input_data.first_meal_start, input_data.first_meal_finish),
            (input_data.second_meal_start, input_data.second_meal_finish),
        ]
    )
    net_work_minutes = max(Decimal(0), total_elapsed_minutes - meal_minutes)

    # Step 6: 1/10th hour increments
    if not options.skip_rounding:
        net_work_minutes = round_up_to_tenth_hour(net_work_minutes)
    net_work_hours = minutes_to_decimal_hours(net_work_minutes)

    logger.debug(
        f"Work span {input_data.call_time}-{work_end}: "
        f"elapsed {format_duration(total_elapsed_minutes)}, "
        f"meals {format_duration(meal_minutes)}, net {net_work_hours}h"
    )

    # Step 7: Day multiplier
    day_multiplier = get_day_multiplier(input_data)

    # Step 8: OT segments. A stunt adjustment above the daily rate pushes
    # double time out to hour 13 and pays hours 9-12 at straight time.
    extended = input_data.stunt_adjustment > base_rate
    time_and_half_end = (
        OVERTIME.extended_time_and_half_end if extended else OVERTIME.time_and_half_end
    )
    segments = build_time_segments(
        net_work_hours,
        adjusted_hourly_rate,
        day_multiplier.multiplier,
        time_and_half_end,
        extended=extended,
    )

    # Step 9: Penalties
    meal_penalties = calculate_meal_penalties(input_data)
    forced_call_penalty = (
        round2(min(adjusted_base_rate, FORCED_CALL_MAX_PENALTY))
        if input_data.forced_call
        else Decimal("0.00")
    )
    penalty_total = round2(
        sum((p.amount for p in meal_penalties), Decimal("0")) + forced_call_penalty
    )

    # Step 10: Daily minimum guarantee
    segment_total = sum((s.subtotal for s in segments), Decimal("0"))
    daily_minimum = round2(adjusted_base_rate * day_multiplier.multiplier)
    guaranteed_total = max(segment_total, daily_minimum)
    grand_total = round2(guaranteed_total + penalty_total)

    return CalculationBreakdown(
        base_rate=base_rate,
        hourly_rate=hourly_rate,
        adjusted_base_rate=adjusted_base_rate,
        adjusted_hourly_rate=adjusted_hourly_rate,
        total_work_hours=minutes_to_decimal_hours(total_elapsed_minutes),
        total_meal_time=minutes_to_decimal_hours(meal_minutes),
        net_work_hours=net_work_hours,
        segments=segments,
        penalties=PenaltySummary(
            meal_penalties=meal_penalties,
            forced_call_penalty=forced_call_penalty,
            total_penalties=penalty_total,
        ),
        day_multiplier=day_multiplier,
        daily_minimum=daily_minimum,
        grand_total=grand_total,
    )


def validate_nd_meal(input_data: ExhibitGInput) -> None:
    """
    An ND meal must end within 2 hours of call.

    Raises:
        InvalidTimeRelationship: if ND meal out is more than 2 hours after call.
    """
    if not (input_data.nd_meal_in and input_data.nd_meal_out):
        return

    call_minutes = parse_time_to_minutes(input_data.call_time)
    nd_out_minutes = wrap_after(parse_time_to_minutes(input_data.nd_meal_out), call_minutes)
    if nd_out_minutes - call_minutes > ND_MEAL_WINDOW_MINUTES:
        raise InvalidTimeRelationship(ND_MEAL_WINDOW_MESSAGE)


def resolve_day_type(input_data: ExhibitGInput) -> DayType:
    """
    Resolve the special-day flags to a single day type.

    Precedence is Holiday > 7th day > 6th day, whatever combination of
    flags is set.
    """
    if input_data.is_holiday:
        return DayType.HOLIDAY
    if input_data.is_seventh_day:
        return DayType.SEVENTH_DAY
    if input_data.is_sixth_day:
        return DayType.SIXTH_DAY
    return DayType.NONE


def get_day_multiplier(input_data: ExhibitGInput) -> DayMultiplierInfo:
    day_type = resolve_day_type(input_data)
    if day_type is DayType.NONE:
        return DayMultiplierInfo(applied=False, type=None, multiplier=MULTIPLIERS.straight)
    return DayMultiplierInfo(
        applied=True,
        type=day_type,
        multiplier=DAY_TYPE_MULTIPLIERS[day_type],
    )


def _hours_label(hours: Decimal) -> str:
    # 8.0 -> "8", 7.5 -> "7.5"
    text = f"{round1(hours)}"
    return text[:-2] if text.endswith(".0") else text


def build_time_segments(
    net_work_hours: Decimal,
    adjusted_hourly_rate: Decimal,
    day_multiplier: Decimal,
    time_and_half_end: int,
    extended: bool = False,
) -> list[TimeSegment]:
    """
    Split worked hours into overtime bands.

    Normal day: hours 1-8 at 1.0x, 9-10 at 1.5x, 11+ at 2.0x.
    Stunt adjustment above the daily rate: 1-8 and 9-12 at 1.0x, 13+ at 2.0x.
    6th day floors every band at 1.5x; 7th day and holiday at 2.0x.

    Zero-hour bands are omitted.
    """
    segments: list[TimeSegment] = []
    straight_end = OVERTIME.straight_time_end
    remaining = net_work_hours

    def add_segment(label: str, hours: Decimal, tier_multiplier: Decimal) -> None:
        multiplier = max(tier_multiplier, day_multiplier)
        segments.append(
            TimeSegment(
                label=label,
                hours=hours,
                rate=adjusted_hourly_rate,
                multiplier=multiplier,
                subtotal=round2(hours * adjusted_hourly_rate * multiplier),
            )
        )

    # Special days pay every band at or above the day multiplier
    prefix = "Base Time" if day_multiplier > 1 else "Straight Time"

    # Band 1: straight time (hours 1-8)
    straight_hours = round1(min(remaining, Decimal(straight_end)))
    if straight_hours > 0:
        add_segment(
            f"{prefix} (Hrs 1-{_hours_label(min(net_work_hours, Decimal(straight_end)))})",
            straight_hours,
            MULTIPLIERS.straight,
        )
        remaining -= straight_hours

    # Band 2: hours 9-10 (or 9-12 when extended)
    second_capacity = Decimal(time_and_half_end - straight_end)
    second_hours = round1(min(remaining, second_capacity))
    if second_hours > 0:
        last_hour = straight_end + math.ceil(second_hours)
        if extended:
            label = f"Extended {prefix} (Hrs {straight_end + 1}-{last_hour})"
            tier = MULTIPLIERS.straight
        else:
            label = f"Time-and-a-Half (Hrs {straight_end + 1}-{last_hour})"
            tier = MULTIPLIERS.time_and_half
        add_segment(label, second_hours, tier)
        remaining -= second_hours

    # Band 3: double time (hours 11+, or 13+ when extended)
    if remaining > 0:
        add_segment(
            f"Double Time (Hrs {time_and_half_end + 1}+)",
            round1(remaining),
            MULTIPLIERS.double_time,
        )

    return segments
