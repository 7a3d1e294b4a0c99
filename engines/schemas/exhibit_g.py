"""
Exhibit G Schemas

Input/output models for the SAG-AFTRA stunt performer rate calculation.
Field names are snake_case with camelCase aliases, so the Exhibit G JSON
shape (callTime, grandTotal, ...) is accepted and emitted unchanged.
"""

from decimal import Decimal
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from engines.services.time_utils import parse_time_to_minutes

EXHIBIT_G_MODEL_CONFIG = ConfigDict(
    alias_generator=to_camel,
    populate_by_name=True,
    frozen=True,
)

REQUIRED_TIME_FIELDS = ("call_time", "dismiss_on_set")
OPTIONAL_TIME_FIELDS = (
    "dismiss_makeup_wardrobe",
    "nd_meal_in",
    "nd_meal_out",
    "first_meal_start",
    "first_meal_finish",
    "second_meal_start",
    "second_meal_finish",
)


class DayType(str, Enum):
    """Special-day classification; exactly one applies to a work day."""

    NONE = "none"
    SIXTH_DAY = "6th_day"
    SEVENTH_DAY = "7th_day"
    HOLIDAY = "holiday"


class ExhibitGInput(BaseModel):
    """
    One reported work day from an Exhibit G.

    Optional times are None when absent. Blank strings from form input are
    normalized to None, so "meal not taken" never reads as a midnight meal.
    """

    model_config = EXHIBIT_G_MODEL_CONFIG

    work_status: str = Field(
        default="theatrical_basic",
        description="Agreement type selecting the rate table row",
    )

    call_time: str = Field(..., description="Call time (HH:MM, 24-hour)")
    dismiss_on_set: str = Field(..., description="Dismissal on set (HH:MM)")
    dismiss_makeup_wardrobe: str | None = Field(
        default=None,
        description="Dismissal from makeup/wardrobe; may extend the paid day",
    )

    # Non-deductible meal (counts as work time, resets the meal clock)
    nd_meal_in: str | None = None
    nd_meal_out: str | None = None

    # Deductible meals, in chronological order
    first_meal_start: str | None = None
    first_meal_finish: str | None = None
    second_meal_start: str | None = None
    second_meal_finish: str | None = None

    stunt_adjustment: Decimal = Field(
        default=Decimal("0"),
        ge=0,
        description="Flat per-day adjustment added to the base daily rate",
    )

    forced_call: bool = False
    is_sixth_day: bool = False
    is_seventh_day: bool = False
    is_holiday: bool = False

    @field_validator(*OPTIONAL_TIME_FIELDS, mode="before")
    @classmethod
    def blank_time_is_absent(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator(*REQUIRED_TIME_FIELDS, *OPTIONAL_TIME_FIELDS)
    @classmethod
    def validate_time(cls, value: str | None) -> str | None:
        if value is None:
            return None
        value = value.strip()
        parse_time_to_minutes(value)
        return value


class CalculationOptions(BaseModel):
    """Engine options for the live (real-time counter) preview."""

    model_config = EXHIBIT_G_MODEL_CONFIG

    skip_rounding: bool = Field(
        default=False,
        description="Skip the 6-minute round-up of net work time",
    )
    additional_seconds: Decimal = Field(
        default=Decimal("0"),
        ge=0,
        description="Extra elapsed seconds beyond the last whole minute",
    )


class TimeSegment(BaseModel):
    """One charged overtime band."""

    model_config = EXHIBIT_G_MODEL_CONFIG

    label: str
    hours: Decimal
    rate: Decimal
    multiplier: Decimal
    subtotal: Decimal


class MealPenalty(BaseModel):
    """One 30-minute meal penalty period."""

    model_config = EXHIBIT_G_MODEL_CONFIG

    meal: str = Field(..., description='"1st Meal", "2nd Meal" or "3rd Meal"')
    minutes_late: int = Field(..., description="Minutes of this period (at most 30)")
    amount: Decimal


class PenaltySummary(BaseModel):
    model_config = EXHIBIT_G_MODEL_CONFIG

    meal_penalties: list[MealPenalty] = Field(default_factory=list)
    forced_call_penalty: Decimal = Decimal("0.00")
    total_penalties: Decimal = Decimal("0.00")


class DayMultiplierInfo(BaseModel):
    model_config = EXHIBIT_G_MODEL_CONFIG

    applied: bool
    type: DayType | None = Field(
        default=None,
        description="Special-day rule that applied, or None",
    )
    multiplier: Decimal


class CalculationBreakdown(BaseModel):
    """
    Itemized pay for one work day.

    Segments show the literal computed bands; only grand_total reflects
    the daily minimum guarantee.
    """

    model_config = EXHIBIT_G_MODEL_CONFIG

    # Rates
    base_rate: Decimal
    hourly_rate: Decimal
    adjusted_base_rate: Decimal
    adjusted_hourly_rate: Decimal

    # Durations (decimal hours, 1 place)
    total_work_hours: Decimal
    total_meal_time: Decimal
    net_work_hours: Decimal

    segments: list[TimeSegment]
    penalties: PenaltySummary
    day_multiplier: DayMultiplierInfo

    daily_minimum: Decimal = Field(
        ...,
        description="Multiplier-adjusted daily minimum guarantee",
    )
    grand_total: Decimal
