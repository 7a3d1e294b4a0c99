"""
Payment Tracking Schemas

Models for following a calculated work day through to payment.
"""

from datetime import date
from decimal import Decimal
from enum import Enum

from pydantic import BaseModel, Field

from engines.schemas.exhibit_g import EXHIBIT_G_MODEL_CONFIG


class PaymentStatus(str, Enum):
    UNPAID = "unpaid"
    PAID_CORRECTLY = "paid_correctly"
    UNDERPAID = "underpaid"
    OVERPAID = "overpaid"
    LATE = "late"


class PaymentRecord(BaseModel):
    """A work record's payment state, as stored by the tracker."""

    model_config = EXHIBIT_G_MODEL_CONFIG

    record_id: str
    show_name: str = ""
    payment_status: PaymentStatus = PaymentStatus.UNPAID
    payment_due_date: date | None = None
    expected_amount: Decimal | None = Field(default=None, ge=0)


class PaymentReminders(BaseModel):
    """Unpaid records grouped for reminder banners."""

    model_config = EXHIBIT_G_MODEL_CONFIG

    overdue: list[PaymentRecord] = Field(default_factory=list)
    upcoming: list[PaymentRecord] = Field(default_factory=list)
