"""
Rate Constants

SAG-AFTRA Theatrical Basic Agreement 2025-2026 (effective 07/01/2025).
Rate schedule, overtime thresholds, and penalty amounts.
"""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from types import MappingProxyType

from engines.exceptions import UnknownAgreementType


class WorkStatus(str, Enum):
    """Agreement types with a row in the rate table."""

    THEATRICAL_BASIC = "theatrical_basic"
    TELEVISION = "television"
    STUNT_COORDINATOR = "stunt_coordinator"


@dataclass(frozen=True)
class RateSchedule:
    daily: Decimal
    weekly: Decimal
    hourly: Decimal
    straight_time_hours: int = 8


RATES: MappingProxyType[str, RateSchedule] = MappingProxyType(
    {
        WorkStatus.THEATRICAL_BASIC.value: RateSchedule(
            daily=Decimal("1246.00"),
            weekly=Decimal("4646.00"),
            hourly=Decimal("155.75"),  # 1246 / 8
        ),
        # Same scale as theatrical
        WorkStatus.TELEVISION.value: RateSchedule(
            daily=Decimal("1246.00"),
            weekly=Decimal("4646.00"),
            hourly=Decimal("155.75"),
        ),
        # Flat deal; the surrounding system bypasses the time-based engine
        WorkStatus.STUNT_COORDINATOR.value: RateSchedule(
            daily=Decimal("1938.00"),
            weekly=Decimal("7222.00"),
            hourly=Decimal("242.25"),  # 1938 / 8
        ),
    }
)


@dataclass(frozen=True)
class OvertimeThresholds:
    straight_time_end: int = 8  # hours 1-8 at 1.0x
    time_and_half_end: int = 10  # hours 9-10 at 1.5x
    extended_time_and_half_end: int = 12  # stunt adjustment above the daily rate
    # Hours past the time-and-a-half band are double time (no golden time cap)


@dataclass(frozen=True)
class Multipliers:
    straight: Decimal = Decimal("1.0")
    time_and_half: Decimal = Decimal("1.5")
    double_time: Decimal = Decimal("2.0")
    sixth_day: Decimal = Decimal("1.5")
    seventh_day: Decimal = Decimal("2.0")
    holiday: Decimal = Decimal("2.0")


@dataclass(frozen=True)
class MealPenaltySchedule:
    first_half_hour: Decimal = Decimal("25.00")
    second_half_hour: Decimal = Decimal("35.00")
    each_additional_half_hour: Decimal = Decimal("50.00")
    period_minutes: int = 30
    max_hours_before_first_meal: int = 6  # measured from call (or ND meal out)
    max_hours_before_next_meal: int = 6  # measured from the previous meal finish


OVERTIME = OvertimeThresholds()
MULTIPLIERS = Multipliers()
MEAL_PENALTIES = MealPenaltySchedule()

# Lesser of one day's pay or $900
FORCED_CALL_MAX_PENALTY = Decimal("900.00")

# ND meal must end within this many minutes of call
ND_MEAL_WINDOW_MINUTES = 120

# OT is paid in 1/10th hour (6-minute) increments
TIME_INCREMENT_MINUTES = 6


def get_rate_schedule(work_status: str) -> RateSchedule:
    """
    Look up the rate table row for an agreement type.

    Raises:
        UnknownAgreementType: if the work status has no entry.
    """
    key = work_status.value if isinstance(work_status, WorkStatus) else work_status
    try:
        return RATES[key]
    except KeyError:
        raise UnknownAgreementType(str(key)) from None


def calculate_flat_rate(work_status: str) -> Decimal:
    """Flat daily amount for an agreement type (used for stunt coordinators)."""
    return get_rate_schedule(work_status).daily
