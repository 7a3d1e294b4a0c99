"""
Payment API Routes

Payment due dates, payment status, and reminder grouping for work days.
"""

from datetime import date

from fastapi import APIRouter, Depends, Query

from backend.config import Settings, get_settings
from backend.schemas.payment import (
    PaymentDueDateResponse,
    PaymentRemindersRequest,
    PaymentStatusRequest,
    PaymentStatusResponse,
)
from engines.schemas.payment import PaymentReminders
from engines.services.payment_tracker import (
    calculate_payment_due_date,
    classify_payment_reminders,
    derive_payment_status,
    mark_late,
)

router = APIRouter()


@router.get(
    "/due-date",
    response_model=PaymentDueDateResponse,
    summary="Payment due date",
    description="Wednesday after the 2nd Saturday following the work date.",
)
async def get_payment_due_date(
    work_date: date = Query(..., alias="workDate"),
) -> PaymentDueDateResponse:
    """Get the payment due date for a work date."""
    return PaymentDueDateResponse(
        work_date=work_date,
        payment_due_date=calculate_payment_due_date(work_date),
    )


@router.post(
    "/status",
    response_model=PaymentStatusResponse,
    summary="Derive payment status",
    description="Compare a payment with the calculated amount.",
)
async def get_payment_status(request: PaymentStatusRequest) -> PaymentStatusResponse:
    """Derive the payment status for a work day."""
    payment_status = derive_payment_status(request.paid_amount, request.expected_amount)
    payment_status = mark_late(
        payment_status,
        request.payment_due_date,
        request.as_of or date.today(),
    )

    difference = None
    if request.expected_amount is not None:
        difference = request.paid_amount - request.expected_amount

    return PaymentStatusResponse(
        payment_status=payment_status,
        paid_amount=request.paid_amount,
        expected_amount=request.expected_amount,
        difference=difference,
    )


@router.post(
    "/reminders",
    response_model=PaymentReminders,
    summary="Payment reminders",
    description="Group unpaid work days into overdue and upcoming.",
)
async def get_payment_reminders(
    request: PaymentRemindersRequest,
    settings: Settings = Depends(get_settings),
) -> PaymentReminders:
    """Get overdue and upcoming payment reminders."""
    return classify_payment_reminders(
        request.records,
        request.as_of or date.today(),
        reminder_days=settings.payment_reminder_days,
    )
