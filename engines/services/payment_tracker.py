"""
Payment Tracker Service

Payment due dates and payment status for calculated work days.

SAG-AFTRA payment is due the Wednesday after the 2nd Saturday following
the work date.
"""

from datetime import date, timedelta
from decimal import Decimal

from engines.schemas.payment import PaymentRecord, PaymentReminders, PaymentStatus

SATURDAY = 5

# Records due within this many days show as upcoming
DEFAULT_REMINDER_DAYS = 3


def calculate_payment_due_date(work_date: date) -> date:
    """
    Payment due date for a work date.

    Example:
        Work date Monday Jan 6 -> 1st Sat Jan 11 -> 2nd Sat Jan 18 -> Wed Jan 22

    A work date that is itself a Saturday counts the following Saturday
    as the first.
    """
    days_to_saturday = (SATURDAY - work_date.weekday()) % 7 or 7
    first_saturday = work_date + timedelta(days=days_to_saturday)
    second_saturday = first_saturday + timedelta(days=7)
    return second_saturday + timedelta(days=4)


def derive_payment_status(
    paid_amount: Decimal,
    expected_amount: Decimal | None,
) -> PaymentStatus:
    """
    Status of a payment against the calculated amount.

    With no expected amount on file, any payment counts as correct.
    """
    if paid_amount <= 0:
        return PaymentStatus.UNPAID
    if not expected_amount or expected_amount <= 0:
        return PaymentStatus.PAID_CORRECTLY
    if paid_amount > expected_amount:
        return PaymentStatus.OVERPAID
    if paid_amount == expected_amount:
        return PaymentStatus.PAID_CORRECTLY
    return PaymentStatus.UNDERPAID


def mark_late(
    status: PaymentStatus,
    due_date: date | None,
    today: date,
) -> PaymentStatus:
    """Unpaid records past their due date become late."""
    if status is PaymentStatus.UNPAID and due_date is not None and due_date < today:
        return PaymentStatus.LATE
    return status


def classify_payment_reminders(
    records: list[PaymentRecord],
    today: date,
    reminder_days: int = DEFAULT_REMINDER_DAYS,
) -> PaymentReminders:
    """Group unpaid records into overdue and upcoming (due within reminder_days)."""
    overdue: list[PaymentRecord] = []
    upcoming: list[PaymentRecord] = []
    for record in records:
        if record.payment_status is not PaymentStatus.UNPAID or not record.payment_due_date:
            continue

        days_until_due = (record.payment_due_date - today).days
        if days_until_due < 0:
            overdue.append(record)
        elif days_until_due <= reminder_days:
            upcoming.append(record)

    return PaymentReminders(overdue=overdue, upcoming=upcoming)
