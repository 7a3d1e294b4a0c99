"""
Calculation API Routes

Endpoints for calculating Exhibit G work day pay.
"""

import logging
from decimal import Decimal
from uuid import uuid4

from fastapi import APIRouter, Depends, HTTPException, Query, status
from pydantic import ValidationError

from backend.config import Settings, get_settings
from backend.schemas.calculation import (
    CalculateRequest,
    CalculateResponse,
    RateScheduleResponse,
)
from engines.exceptions import RateEngineError
from engines.schemas.exhibit_g import OPTIONAL_TIME_FIELDS, REQUIRED_TIME_FIELDS, CalculationOptions
from engines.services.payment_tracker import calculate_payment_due_date
from engines.services.rate_constants import RATES, WorkStatus, calculate_flat_rate
from engines.services.rate_engine import calculate_rate
from engines.services.time_utils import snap_to_six_minutes

logger = logging.getLogger(__name__)

router = APIRouter()


def _snap_times(request: CalculateRequest) -> CalculateRequest:
    """Snap every reported time to the nearest 6-minute increment."""
    updates = {}
    for name in (*REQUIRED_TIME_FIELDS, *OPTIONAL_TIME_FIELDS):
        value = getattr(request, name)
        if value is not None:
            updates[name] = snap_to_six_minutes(value)
    return request.model_copy(update=updates)


def _calculate(
    request: CalculateRequest,
    options: CalculationOptions,
    settings: Settings,
) -> CalculateResponse:
    missing = request.missing_fields()
    if missing:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Missing required fields: {', '.join(missing)}",
        )

    payment_due_date = (
        calculate_payment_due_date(request.work_date) if request.work_date else None
    )

    # Stunt coordinators are paid a flat daily rate; no time-based calculation
    if request.work_status == WorkStatus.STUNT_COORDINATOR.value:
        return CalculateResponse(
            calculation_id=uuid4(),
            input=request,
            breakdown=None,
            flat_rate=True,
            expected_amount=calculate_flat_rate(request.work_status),
            payment_due_date=payment_due_date,
        )

    try:
        if settings.snap_time_inputs:
            request = _snap_times(request)
        breakdown = calculate_rate(request.to_engine_input(), options)
    except ValidationError as e:
        logger.warning(f"Invalid Exhibit G input for {request.show_name}: {e.error_count()} errors")
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_CONTENT,
            detail="; ".join(err["msg"] for err in e.errors()),
        )
    except RateEngineError as e:
        logger.warning(f"Calculation rejected for {request.show_name}: {e}")
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_CONTENT,
            detail=str(e),
        )

    return CalculateResponse(
        calculation_id=uuid4(),
        input=request,
        breakdown=breakdown,
        expected_amount=breakdown.grand_total,
        payment_due_date=payment_due_date,
    )


@router.post(
    "/calculate",
    response_model=CalculateResponse,
    summary="Calculate work day pay",
    description="Calculate the itemized SAG-AFTRA pay breakdown for one Exhibit G.",
)
async def calculate_exhibit_g(
    request: CalculateRequest,
    settings: Settings = Depends(get_settings),
) -> CalculateResponse:
    """Calculate pay for an Exhibit G."""
    return _calculate(request, CalculationOptions(), settings)


@router.post(
    "/calculate/live",
    response_model=CalculateResponse,
    summary="Live calculation preview",
    description="Unrounded calculation for the real-time counter while a day is in progress.",
)
async def calculate_exhibit_g_live(
    request: CalculateRequest,
    additional_seconds: Decimal = Query(Decimal("0"), ge=0),
    skip_rounding: bool = Query(True),
    settings: Settings = Depends(get_settings),
) -> CalculateResponse:
    """Calculate pay without the 6-minute round-up."""
    options = CalculationOptions(
        skip_rounding=skip_rounding,
        additional_seconds=additional_seconds,
    )
    return _calculate(request, options, settings)


@router.get(
    "/rates",
    response_model=list[RateScheduleResponse],
    summary="Rate schedule",
    description="Daily, weekly and hourly scale rates per agreement type.",
)
async def list_rates() -> list[RateScheduleResponse]:
    """List the rate schedule."""
    return [
        RateScheduleResponse(
            work_status=work_status,
            daily=schedule.daily,
            weekly=schedule.weekly,
            hourly=schedule.hourly,
            straight_time_hours=schedule.straight_time_hours,
        )
        for work_status, schedule in RATES.items()
    ]
