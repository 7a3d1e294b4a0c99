"""
Rate Engine MCP Tool

Exhibit G rate calculation and payment tracking exposed as MCP tools.
"""

from datetime import date
from decimal import Decimal

from fastmcp import FastMCP

from engines.schemas.exhibit_g import CalculationOptions, ExhibitGInput
from engines.services.payment_tracker import calculate_payment_due_date
from engines.services.rate_constants import WorkStatus, calculate_flat_rate
from engines.services.rate_engine import calculate_rate
from engines.services.scenario_bench import run_scenarios

# Initialize MCP server (will be started from server.py)
mcp = FastMCP("Stunt Ledger Rate Engine")


@mcp.tool()
async def calculate_exhibit_g_rate(
    call_time: str,
    dismiss_on_set: str,
    work_status: str = "theatrical_basic",
    dismiss_makeup_wardrobe: str | None = None,
    nd_meal_in: str | None = None,
    nd_meal_out: str | None = None,
    first_meal_start: str | None = None,
    first_meal_finish: str | None = None,
    second_meal_start: str | None = None,
    second_meal_finish: str | None = None,
    stunt_adjustment: float = 0.0,
    forced_call: bool = False,
    is_sixth_day: bool = False,
    is_seventh_day: bool = False,
    is_holiday: bool = False,
    skip_rounding: bool = False,
) -> dict:
    """
    Calculate SAG-AFTRA stunt performer pay for one Exhibit G work day.

    Applies the 8-hour daily minimum, overtime tiers (1.5x hours 9-10,
    2x from hour 11), the stunt adjustment, 6th/7th day and holiday
    multipliers, escalating meal penalties and the forced call penalty.

    Args:
        call_time: Call time (HH:MM, 24-hour)
        dismiss_on_set: Dismissal on set (HH:MM)
        work_status: theatrical_basic, television or stunt_coordinator
        dismiss_makeup_wardrobe: Dismissal from makeup/wardrobe (HH:MM)
        nd_meal_in: Non-deductible meal start (HH:MM)
        nd_meal_out: Non-deductible meal end; within 2 hours of call
        first_meal_start: 1st meal start (HH:MM)
        first_meal_finish: 1st meal finish (HH:MM)
        second_meal_start: 2nd meal start (HH:MM)
        second_meal_finish: 2nd meal finish (HH:MM)
        stunt_adjustment: Flat dollar adjustment added to the daily rate
        forced_call: Rest period violated
        is_sixth_day: 6th consecutive day (1.5x)
        is_seventh_day: 7th consecutive day (2x)
        is_holiday: Holiday (2x)
        skip_rounding: Skip the 6-minute round-up (live preview)

    Returns:
        Dictionary with rates, segments, penalties and grand total.
        Stunt coordinators are paid a flat daily rate, so only
        flatRate and expectedAmount are returned for them.

    Example:
        Call 07:00, dismiss 17:30, lunch 13:00-13:30:
        - 10h net = 8h @ $155.75 + 2h @ $233.63
        - Grand total: $1,713.25
    """
    if work_status == WorkStatus.STUNT_COORDINATOR.value:
        return {
            "workStatus": work_status,
            "flatRate": True,
            "expectedAmount": str(calculate_flat_rate(work_status)),
        }

    input_data = ExhibitGInput(
        work_status=work_status,
        call_time=call_time,
        dismiss_on_set=dismiss_on_set,
        dismiss_makeup_wardrobe=dismiss_makeup_wardrobe,
        nd_meal_in=nd_meal_in,
        nd_meal_out=nd_meal_out,
        first_meal_start=first_meal_start,
        first_meal_finish=first_meal_finish,
        second_meal_start=second_meal_start,
        second_meal_finish=second_meal_finish,
        stunt_adjustment=Decimal(str(stunt_adjustment)),
        forced_call=forced_call,
        is_sixth_day=is_sixth_day,
        is_seventh_day=is_seventh_day,
        is_holiday=is_holiday,
    )

    result = calculate_rate(input_data, CalculationOptions(skip_rounding=skip_rounding))

    # Decimal amounts serialize as strings to keep cents exact
    return result.model_dump(mode="json", by_alias=True)


@mcp.tool()
async def calculate_payment_due(work_date: str) -> dict:
    """
    Payment due date for a SAG-AFTRA work date.

    Payment is due the Wednesday after the 2nd Saturday following the
    work date.

    Args:
        work_date: Work date (YYYY-MM-DD)

    Returns:
        Dictionary with the work date and payment due date
    """
    parsed = date.fromisoformat(work_date)
    return {
        "work_date": parsed.isoformat(),
        "payment_due_date": calculate_payment_due_date(parsed).isoformat(),
    }


@mcp.tool()
async def run_test_bench() -> dict:
    """
    Run the seeded Exhibit G scenarios against the rate engine.

    Returns:
        Dictionary with pass/fail counts and per-scenario totals
    """
    report = run_scenarios()
    return {
        "passed": report.passed,
        "failed": report.failed,
        "results": [
            {
                "id": r.scenario.id,
                "name": r.scenario.name,
                "expected_total": float(r.expected_total),
                "actual_total": float(r.actual_total) if r.actual_total is not None else None,
                "passed": r.passed,
                "error": r.error,
            }
            for r in report.results
        ],
    }
