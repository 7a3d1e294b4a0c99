"""
Meal Penalty Calculator

Computes meal penalties directly from the raw Exhibit G times,
independently of overtime segmentation.

Deadlines:
- 1st meal: 6 hours from call, or from ND meal out when an ND meal was taken
- 2nd meal: 6 hours after the 1st meal finishes
- 3rd meal: 6 hours after the 2nd meal finishes

Lateness for missed 2nd/3rd meals runs until dismissal on set. The
makeup/wardrobe dismissal extends the paid day but not the penalty clock.
"""

from collections import defaultdict
from decimal import Decimal

from engines.schemas.exhibit_g import ExhibitGInput, MealPenalty
from engines.services.rate_constants import MEAL_PENALTIES
from engines.services.time_utils import (
    MINUTES_PER_DAY,
    calculate_duration,
    get_latest_time,
    parse_time_to_minutes,
    wrap_after,
)

FIRST_MEAL = "1st Meal"
SECOND_MEAL = "2nd Meal"
THIRD_MEAL = "3rd Meal"


def calculate_penalty_amounts(meal_label: str, minutes_late: int) -> list[MealPenalty]:
    """
    Split lateness into escalating 30-minute penalty periods.

    1st period = $25, 2nd = $35, each additional = $50. A partial final
    period is charged in full.

    Example:
        65 minutes late -> [$25 (30m), $35 (30m), $50 (5m)] = $110
    """
    penalties: list[MealPenalty] = []
    remaining = minutes_late
    period = 0

    while remaining > 0:
        period += 1
        if period == 1:
            amount = MEAL_PENALTIES.first_half_hour
        elif period == 2:
            amount = MEAL_PENALTIES.second_half_hour
        else:
            amount = MEAL_PENALTIES.each_additional_half_hour

        penalties.append(
            MealPenalty(
                meal=meal_label,
                minutes_late=min(remaining, MEAL_PENALTIES.period_minutes),
                amount=amount,
            )
        )
        remaining -= MEAL_PENALTIES.period_minutes

    return penalties


def _penalty_end(dismiss_on_set: str, call_minutes: int, meal_finish: int) -> int:
    # Dismissal before the meal finish (after wrapping against call) is the next day
    end = wrap_after(parse_time_to_minutes(dismiss_on_set), call_minutes)
    if end < meal_finish:
        end += MINUTES_PER_DAY
    return end


def calculate_meal_penalties(input_data: ExhibitGInput) -> list[MealPenalty]:
    """Itemized meal penalties for a work day, in meal order."""
    penalties: list[MealPenalty] = []
    call_minutes = parse_time_to_minutes(input_data.call_time)
    first_deadline_minutes = MEAL_PENALTIES.max_hours_before_first_meal * 60
    next_deadline_minutes = MEAL_PENALTIES.max_hours_before_next_meal * 60

    # ND meal resets the meal clock from ND meal out
    meal_clock_start = call_minutes
    if input_data.nd_meal_in and input_data.nd_meal_out:
        meal_clock_start = wrap_after(
            parse_time_to_minutes(input_data.nd_meal_out), call_minutes
        )

    # 1st meal
    first_meal_deadline = meal_clock_start + first_deadline_minutes
    if input_data.first_meal_start:
        first_start = wrap_after(
            parse_time_to_minutes(input_data.first_meal_start), call_minutes
        )
        if first_start > first_meal_deadline:
            penalties.extend(
                calculate_penalty_amounts(FIRST_MEAL, first_start - first_meal_deadline)
            )
    else:
        # No first meal: everything worked past 6 hours from call is late
        work_end = get_latest_time(
            input_data.call_time,
            input_data.dismiss_on_set,
            input_data.dismiss_makeup_wardrobe,
        )
        total_minutes = calculate_duration(input_data.call_time, work_end)
        if total_minutes > first_deadline_minutes:
            penalties.extend(
                calculate_penalty_amounts(FIRST_MEAL, total_minutes - first_deadline_minutes)
            )

    # 2nd meal
    if input_data.first_meal_finish:
        first_finish = wrap_after(
            parse_time_to_minutes(input_data.first_meal_finish), call_minutes
        )
        second_meal_deadline = first_finish + next_deadline_minutes

        if input_data.second_meal_start:
            second_start = wrap_after(
                parse_time_to_minutes(input_data.second_meal_start), call_minutes
            )
            if second_start > second_meal_deadline:
                penalties.extend(
                    calculate_penalty_amounts(
                        SECOND_MEAL, second_start - second_meal_deadline
                    )
                )
        else:
            penalty_end = _penalty_end(
                input_data.dismiss_on_set, call_minutes, first_finish
            )
            if penalty_end > second_meal_deadline:
                penalties.extend(
                    calculate_penalty_amounts(
                        SECOND_MEAL, penalty_end - second_meal_deadline
                    )
                )

    # 3rd meal
    if input_data.second_meal_finish:
        second_finish = wrap_after(
            parse_time_to_minutes(input_data.second_meal_finish), call_minutes
        )
        third_meal_deadline = second_finish + next_deadline_minutes
        penalty_end = _penalty_end(input_data.dismiss_on_set, call_minutes, second_finish)
        if penalty_end > third_meal_deadline:
            penalties.extend(
                calculate_penalty_amounts(THIRD_MEAL, penalty_end - third_meal_deadline)
            )

    return penalties


def summarize_meal_penalties(penalties: list[MealPenalty]) -> dict[str, Decimal]:
    """Total penalty amount per meal tag, in first-seen order."""
    totals: dict[str, Decimal] = defaultdict(lambda: Decimal("0.00"))
    for penalty in penalties:
        totals[penalty.meal] += penalty.amount
    return dict(totals)
