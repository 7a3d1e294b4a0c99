"""
Scenario Bench

Seeded Exhibit G scenarios with known-good totals, and a runner that
checks the rate engine against them. Used by the test bench endpoint
and the engine's golden-output tests.
"""

import logging
from decimal import Decimal

from pydantic import BaseModel, Field, computed_field

from engines.exceptions import RateEngineError
from engines.schemas.exhibit_g import (
    EXHIBIT_G_MODEL_CONFIG,
    CalculationBreakdown,
    ExhibitGInput,
)
from engines.services.rate_engine import calculate_rate
from engines.services.time_utils import format_currency

logger = logging.getLogger(__name__)

DEFAULT_INPUT: dict = {
    "work_status": "theatrical_basic",
    "call_time": "07:00",
    "dismiss_on_set": "15:30",
    "dismiss_makeup_wardrobe": None,
    "first_meal_start": "13:00",
    "first_meal_finish": "13:30",
    "stunt_adjustment": Decimal("0"),
}


class BenchScenario(BaseModel):
    model_config = EXHIBIT_G_MODEL_CONFIG

    id: str
    name: str
    description: str = ""
    input: ExhibitGInput
    expected_total: Decimal


class ScenarioResult(BaseModel):
    model_config = EXHIBIT_G_MODEL_CONFIG

    scenario: BenchScenario
    actual_total: Decimal | None = None
    breakdown: CalculationBreakdown | None = None
    error: str | None = None

    @computed_field
    @property
    def passed(self) -> bool:
        return self.error is None and self.actual_total == self.expected_total

    @property
    def expected_total(self) -> Decimal:
        return self.scenario.expected_total


class BenchReport(BaseModel):
    model_config = EXHIBIT_G_MODEL_CONFIG

    results: list[ScenarioResult] = Field(default_factory=list)
    passed: int = 0
    failed: int = 0


def default_input(**overrides) -> ExhibitGInput:
    """
    Build an Exhibit G input from bench defaults.

    Wrapped (makeup/wardrobe dismissal) defaults to the on-set dismissal
    when not given.
    """
    values = {**DEFAULT_INPUT, **overrides}
    if values.get("dismiss_makeup_wardrobe") is None:
        values["dismiss_makeup_wardrobe"] = values["dismiss_on_set"]
    return ExhibitGInput(**values)


NO_MEALS = {"first_meal_start": None, "first_meal_finish": None}
LUNCH_AT_NOON = {"first_meal_start": "12:00", "first_meal_finish": "12:30"}
ND_BREAKFAST = {"nd_meal_in": "08:00", "nd_meal_out": "08:30"}

# (id, name, description, overrides, expected total)
_SEED: list[tuple[str, str, str, dict, str]] = [
    (
        "1",
        "Short day (4h) - 8hr guarantee",
        "Call 7:00, dismiss 11:00, no meals. Pays the full daily rate.",
        {"dismiss_on_set": "11:00", **NO_MEALS},
        "1246.00",
    ),
    (
        "2",
        "Standard 8h day",
        "Call 7:00, dismiss 15:30, 30min lunch at 13:00. Exactly 8h worked.",
        {},
        "1246.00",
    ),
    (
        "3",
        "10h day with OT",
        "Call 7:00, dismiss 17:30, 30min lunch. 8h@1x + 2h@1.5x.",
        {"dismiss_on_set": "17:30"},
        "1713.25",
    ),
    (
        "4",
        "No lunch penalty (7.5h, no meal)",
        "Call 7:00, dismiss 14:30, no meal. 6h deadline exceeded by 1.5h = $25+$35+$50.",
        {"dismiss_on_set": "14:30", **NO_MEALS},
        "1356.00",
    ),
    (
        "5",
        "ND (non-deductible) meal day",
        "Call 7:00, NDB 8:00-8:30, lunch 12:00-12:30, dismiss 15:30. 8h net worked.",
        {**ND_BREAKFAST, **LUNCH_AT_NOON},
        "1246.00",
    ),
    (
        "6",
        "Stunt adjustment > base rate",
        "8h day with $2,000 stunt adjustment. Adjusted daily = $3,246.",
        {"stunt_adjustment": Decimal("2000")},
        "3246.00",
    ),
    (
        "7",
        "16h day",
        "Call 6:00, dismiss 22:30, 30min lunch. 8@1x + 2@1.5x + 6@2x + $360 2nd meal penalties.",
        {"call_time": "06:00", "dismiss_on_set": "22:30", **LUNCH_AT_NOON},
        "3942.25",
    ),
    (
        "8",
        "24h day (overnight)",
        "Call 6:00, dismiss 06:00 next day, two 30min meals. 23h net + $460 3rd meal penalties.",
        {
            "call_time": "06:00",
            "dismiss_on_set": "06:00",
            **LUNCH_AT_NOON,
            "second_meal_start": "18:30",
            "second_meal_finish": "19:00",
        },
        "6222.75",
    ),
    (
        "9",
        "Short day (4h) +$100 adj - 8hr guarantee",
        "Call 7:00, dismiss 11:00, no meals. Minimum = $1,346.",
        {"dismiss_on_set": "11:00", **NO_MEALS, "stunt_adjustment": Decimal("100")},
        "1346.00",
    ),
    (
        "10",
        "Standard 8h day +$100 adj",
        "Call 7:00, dismiss 15:30, 30min lunch. 8h x $168.25 = $1,346.",
        {"stunt_adjustment": Decimal("100")},
        "1346.00",
    ),
    (
        "11",
        "10h day with OT +$100 adj",
        "Call 7:00, dismiss 17:30, 30min lunch. 8h@1x + 2h@1.5x at $168.25/hr.",
        {"dismiss_on_set": "17:30", "stunt_adjustment": Decimal("100")},
        "1850.75",
    ),
    (
        "12",
        "No lunch penalty +$100 adj",
        "Call 7:00, dismiss 14:30, no meal. $1,346 minimum + meal penalties.",
        {"dismiss_on_set": "14:30", **NO_MEALS, "stunt_adjustment": Decimal("100")},
        "1456.00",
    ),
    (
        "13",
        "ND meal day +$100 adj",
        "Call 7:00, NDB 8:00-8:30, lunch 12:00-12:30, dismiss 15:30. 8h = $1,346.",
        {**ND_BREAKFAST, **LUNCH_AT_NOON, "stunt_adjustment": Decimal("100")},
        "1346.00",
    ),
    (
        "14",
        "8h day +$100 adj",
        "8h day with $100 stunt adj. Adjusted daily = $1,346.",
        {"stunt_adjustment": Decimal("100")},
        "1346.00",
    ),
    (
        "15",
        "16h day +$100 adj",
        "Call 6:00, dismiss 22:30, 30min lunch. 8@1x + 2@1.5x + 6@2x at $168.25/hr + $360.",
        {
            "call_time": "06:00",
            "dismiss_on_set": "22:30",
            **LUNCH_AT_NOON,
            "stunt_adjustment": Decimal("100"),
        },
        "4229.75",
    ),
    (
        "16",
        "24h day (overnight) +$100 adj",
        "Call 6:00, dismiss 06:00 next day, two 30min meals. 23h net + $460.",
        {
            "call_time": "06:00",
            "dismiss_on_set": "06:00",
            **LUNCH_AT_NOON,
            "second_meal_start": "18:30",
            "second_meal_finish": "19:00",
            "stunt_adjustment": Decimal("100"),
        },
        "6685.25",
    ),
    (
        "17",
        "12h day +$1,300 adj (adj > base, extended straight)",
        "Call 7:00, dismiss 20:00, two 30min meals. Straight time to hr 12 at $318.25/hr.",
        {
            "dismiss_on_set": "20:00",
            **LUNCH_AT_NOON,
            "second_meal_start": "18:00",
            "second_meal_finish": "18:30",
            "stunt_adjustment": Decimal("1300"),
        },
        "3819.00",
    ),
    (
        "18",
        "14h day +$1,300 adj (adj > base, into double time)",
        "Call 7:00, dismiss 22:00, two 30min meals. 12@1x + 2@2x at $318.25/hr.",
        {
            "dismiss_on_set": "22:00",
            **LUNCH_AT_NOON,
            "second_meal_start": "18:00",
            "second_meal_finish": "18:30",
            "stunt_adjustment": Decimal("1300"),
        },
        "5092.00",
    ),
]


def get_default_scenarios() -> list[BenchScenario]:
    """The seeded bench scenarios."""
    return [
        BenchScenario(
            id=scenario_id,
            name=name,
            description=description,
            input=default_input(**overrides),
            expected_total=Decimal(expected),
        )
        for scenario_id, name, description, overrides, expected in _SEED
    ]


def run_scenario(scenario: BenchScenario) -> ScenarioResult:
    """Run one scenario; engine errors are reported on the result."""
    try:
        breakdown = calculate_rate(scenario.input)
    except RateEngineError as e:
        logger.warning(f"Scenario {scenario.id} ({scenario.name}) failed: {e}")
        return ScenarioResult(scenario=scenario, error=str(e))

    return ScenarioResult(
        scenario=scenario,
        actual_total=breakdown.grand_total,
        breakdown=breakdown,
    )


def run_scenarios(scenarios: list[BenchScenario] | None = None) -> BenchReport:
    """Run every scenario (the seeded set by default)."""
    if scenarios is None:
        scenarios = get_default_scenarios()

    results = [run_scenario(s) for s in scenarios]
    passed = sum(1 for r in results if r.passed)

    for result in results:
        if not result.passed and result.error is None:
            logger.info(
                f"Scenario {result.scenario.id} mismatch: expected "
                f"{format_currency(result.expected_total)}, got "
                f"{format_currency(result.actual_total)}"
            )

    logger.info(f"Scenario bench: {passed}/{len(results)} passed")
    return BenchReport(results=results, passed=passed, failed=len(results) - passed)
