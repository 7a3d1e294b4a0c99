"""
Payment Pydantic Schemas

API request/response models for payment tracking endpoints.
"""

from datetime import date
from decimal import Decimal

from pydantic import BaseModel, Field

from engines.schemas.exhibit_g import EXHIBIT_G_MODEL_CONFIG
from engines.schemas.payment import PaymentRecord, PaymentStatus


class PaymentStatusRequest(BaseModel):
    """Schema for recording a payment against a calculated amount."""

    model_config = EXHIBIT_G_MODEL_CONFIG

    paid_amount: Decimal = Field(..., description="Amount actually paid")
    expected_amount: Decimal | None = Field(
        default=None,
        description="Calculated grand total (or flat rate) for the work day",
    )
    payment_due_date: date | None = None
    as_of: date | None = Field(
        default=None,
        description="Date to evaluate lateness against (defaults to today)",
    )


class PaymentStatusResponse(BaseModel):
    model_config = EXHIBIT_G_MODEL_CONFIG

    payment_status: PaymentStatus
    paid_amount: Decimal
    expected_amount: Decimal | None
    difference: Decimal | None = Field(
        default=None,
        description="Paid minus expected; negative when underpaid",
    )


class PaymentDueDateResponse(BaseModel):
    model_config = EXHIBIT_G_MODEL_CONFIG

    work_date: date
    payment_due_date: date


class PaymentRemindersRequest(BaseModel):
    model_config = EXHIBIT_G_MODEL_CONFIG

    records: list[PaymentRecord]
    as_of: date | None = None
