"""
Calculation Pydantic Schemas

API request/response models for the Exhibit G calculate endpoints.
"""

from datetime import date
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, Field, field_validator

from engines.schemas.exhibit_g import (
    EXHIBIT_G_MODEL_CONFIG,
    OPTIONAL_TIME_FIELDS,
    REQUIRED_TIME_FIELDS,
    CalculationBreakdown,
    ExhibitGInput,
)

REQUIRED_FIELDS = ("show_name", "call_time", "dismiss_on_set")


class CalculateRequest(BaseModel):
    """
    Exhibit G form submission.

    Presence of required fields is checked by the endpoint so a missing
    field is reported as a 400 with every missing name, the way the form
    expects it. Time formats are checked when the engine input is built.
    """

    model_config = EXHIBIT_G_MODEL_CONFIG

    show_name: str | None = None
    work_date: date | None = None
    character_name: str = ""
    notes: str = ""

    work_status: str = "theatrical_basic"
    call_time: str | None = None
    dismiss_on_set: str | None = None
    dismiss_makeup_wardrobe: str | None = None
    nd_meal_in: str | None = None
    nd_meal_out: str | None = None
    first_meal_start: str | None = None
    first_meal_finish: str | None = None
    second_meal_start: str | None = None
    second_meal_finish: str | None = None

    stunt_adjustment: Decimal = Field(default=Decimal("0"), ge=0)
    forced_call: bool = False
    is_sixth_day: bool = False
    is_seventh_day: bool = False
    is_holiday: bool = False

    @field_validator("show_name", *REQUIRED_TIME_FIELDS, *OPTIONAL_TIME_FIELDS, mode="before")
    @classmethod
    def blank_is_absent(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value

    def missing_fields(self) -> list[str]:
        """Required fields absent from the submission."""
        return [name for name in REQUIRED_FIELDS if getattr(self, name) is None]

    def to_engine_input(self) -> ExhibitGInput:
        """Engine input built from the form fields (validates time formats)."""
        return ExhibitGInput(
            **self.model_dump(
                include=set(ExhibitGInput.model_fields),
            )
        )


class CalculateResponse(BaseModel):
    """Schema for a calculation result, stored verbatim by the caller."""

    model_config = EXHIBIT_G_MODEL_CONFIG

    calculation_id: UUID
    input: CalculateRequest
    breakdown: CalculationBreakdown | None = Field(
        default=None,
        description="Itemized breakdown; None for flat-rate agreements",
    )
    flat_rate: bool = False
    expected_amount: Decimal
    payment_due_date: date | None = None


class RateScheduleResponse(BaseModel):
    model_config = EXHIBIT_G_MODEL_CONFIG

    work_status: str
    daily: Decimal
    weekly: Decimal
    hourly: Decimal
    straight_time_hours: int
