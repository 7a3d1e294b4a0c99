"""
Test Bench API Routes

Run the seeded Exhibit G scenarios against the rate engine.
"""

from fastapi import APIRouter

from engines.services.scenario_bench import (
    BenchReport,
    BenchScenario,
    get_default_scenarios,
    run_scenarios,
)

router = APIRouter()


@router.get(
    "/scenarios",
    response_model=list[BenchScenario],
    summary="List bench scenarios",
)
async def list_scenarios() -> list[BenchScenario]:
    """List the seeded scenarios with their expected totals."""
    return get_default_scenarios()


@router.post(
    "/run",
    response_model=BenchReport,
    summary="Run bench scenarios",
    description=(
        "Run the posted scenarios. With no body the seeded set runs; "
        "an empty list returns an empty report."
    ),
)
async def run_bench(scenarios: list[BenchScenario] | None = None) -> BenchReport:
    """Run scenarios and report pass/fail per scenario."""
    return run_scenarios(scenarios)
