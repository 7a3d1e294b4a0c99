"""Pydantic API Schemas for Stunt Ledger."""

from backend.schemas.calculation import (
    CalculateRequest,
    CalculateResponse,
    RateScheduleResponse,
)
from backend.schemas.payment import (
    PaymentDueDateResponse,
    PaymentRemindersRequest,
    PaymentStatusRequest,
    PaymentStatusResponse,
)

__all__ = [
    "CalculateRequest",
    "CalculateResponse",
    "RateScheduleResponse",
    "PaymentDueDateResponse",
    "PaymentRemindersRequest",
    "PaymentStatusRequest",
    "PaymentStatusResponse",
]
