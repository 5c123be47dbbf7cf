from datetime import datetime, timedelta

import pytest

from delivery_pricing.data.telemetry import DEFAULT_DEMAND, DEFAULT_WEATHER, DEFAULT_ZONE_MULTIPLIERS
from delivery_pricing.models.domain import DemandSnapshot, WeatherSnapshot
from delivery_pricing.services.surge import (
    FixedClock,
    SurgePriceCalculator,
    get_surge_level,
    round_half_up,
)

QUIET_MOMENT = datetime(2026, 10, 14, 9, 0)  # Wednesday morning, no holiday
CLEAR = WeatherSnapshot(condition="clear", severity="light", temperature=20, visibility=10)


def _demand(zone_id: int, orders: int, drivers: int, completion: float = 0.95) -> DemandSnapshot:
    return DemandSnapshot(
        zone_id=zone_id,
        current_orders=orders,
        available_drivers=drivers,
        average_delivery_time=60,
        completion_rate=completion,
    )


def _calculator(moment: datetime = QUIET_MOMENT, **kwargs) -> SurgePriceCalculator:
    return SurgePriceCalculator(
        demand_table=kwargs.pop("demand_table", DEFAULT_DEMAND),
        default_weather=kwargs.pop("default_weather", DEFAULT_WEATHER),
        zone_multipliers=kwargs.pop("zone_multipliers", DEFAULT_ZONE_MULTIPLIERS),
        clock=FixedClock(moment),
        **kwargs,
    )


def test_all_neutral_factors_leave_price_unchanged():
    calculator = _calculator()

    result = calculator.calculate_surge_price(100, 1, _demand(1, 1, 10), CLEAR)

    assert result.surge_price == 100.00
    assert result.surge_multiplier == 1.0
    assert not result.is_surge_active
    assert result.surge_reason == []
    assert result.estimated_duration == "15-30 minutes"
    assert result.original_price == 100
    assert len(result.factors.values()) == 7
    assert result.factors.base_multiplier == 1.0
    assert result.factors.capacity_multiplier == 1.0


def test_extended_area_driven_by_zone_factor():
    calculator = _calculator()

    result = calculator.calculate_surge_price(50, 4, weather=CLEAR)

    assert result.factors.demand_multiplier == 1.0
    assert result.surge_multiplier == pytest.approx(1.4)
    assert result.surge_price == pytest.approx(70.0)
    assert result.is_surge_active
    assert result.surge_reason == ["Extended delivery area"]


def test_high_demand_ratio_raises_multiplier_above_threshold():
    calculator = _calculator()

    result = calculator.calculate_surge_price(20, 1, _demand(1, 60, 10))

    assert result.factors.demand_multiplier >= 1.8
    assert result.surge_multiplier > 1.8
    assert "High demand" in result.surge_reason


def test_factors_multiply_rather_than_add():
    calculator = _calculator(datetime(2026, 10, 14, 12, 0))

    result = calculator.calculate_surge_price(10, 2)

    # lunch 1.3 * demand 1.3 * moderate rain 1.25 * metropolitan 1.1
    assert result.factors.time_multiplier == pytest.approx(1.3)
    assert result.factors.demand_multiplier == pytest.approx(1.3)
    assert result.factors.weather_multiplier == pytest.approx(1.25)
    assert result.factors.zone_multiplier == pytest.approx(1.1)
    assert result.surge_multiplier == pytest.approx(2.32)
    assert result.surge_price == pytest.approx(23.24)
    assert result.surge_reason == ["Peak hours", "High demand", "Weather conditions"]
    assert result.estimated_duration == "15-30 minutes"
    assert get_surge_level(result.surge_multiplier) == "high"


def test_missing_snapshots_fall_back_to_default_samples():
    calculator = _calculator()

    result = calculator.calculate_surge_price(10, 1)

    # zone 1 sample: 45 orders / 8 drivers, completion 0.85
    assert result.factors.demand_multiplier == pytest.approx(1.9)
    assert result.factors.weather_multiplier == pytest.approx(1.25)


def test_unknown_zone_uses_neutral_demand_and_zone_factor():
    calculator = _calculator()

    result = calculator.calculate_surge_price(10, 42, weather=CLEAR)

    assert result.factors.demand_multiplier == 1.0
    assert result.factors.zone_multiplier == 1.0
    assert result.surge_price == 10.0


def test_premium_express_discount_below_one():
    calculator = _calculator()

    result = calculator.calculate_surge_price(10, 5, _demand(5, 1, 10), CLEAR)

    assert result.surge_multiplier == pytest.approx(0.9)
    assert result.surge_price == pytest.approx(9.0)
    assert not result.is_surge_active


def test_activation_threshold_is_strict():
    calculator = _calculator(zone_multipliers={1: 1.15})

    result = calculator.calculate_surge_price(10, 1, _demand(1, 1, 10), CLEAR)

    assert result.surge_multiplier == pytest.approx(1.15)
    assert not result.is_surge_active


def test_duration_prefers_weather_then_holiday():
    snow = WeatherSnapshot(condition="snow", severity="moderate", temperature=-2, visibility=3)
    christmas = _calculator(datetime(2026, 12, 25, 9, 0))

    stormy = christmas.calculate_surge_price(10, 1, _demand(1, 1, 10), snow)
    assert stormy.estimated_duration == "2-4 hours"

    calm = christmas.calculate_surge_price(10, 1, _demand(1, 1, 10), CLEAR)
    assert calm.estimated_duration == "4-8 hours"
    assert calm.surge_reason == ["Holiday/Special event"]
    assert calm.surge_price == pytest.approx(15.0)


def test_next_price_check_five_minutes_after_clock():
    calculator = _calculator()

    result = calculator.calculate_surge_price(10, 1)

    assert result.next_price_check == QUIET_MOMENT + timedelta(minutes=5)


def test_each_factor_capped_before_multiplying():
    storm = WeatherSnapshot(condition="storm", severity="heavy", temperature=-20, visibility=0.1)
    calculator = _calculator(datetime(2026, 11, 27, 18, 0), zone_multipliers={3: 1.25})

    result = calculator.calculate_surge_price(10, 3, _demand(3, 100, 1, completion=0.1), storm)

    assert result.factors.weather_multiplier == pytest.approx(2.0)
    assert result.factors.demand_multiplier == pytest.approx(2.0)
    # Friday dinner 1.5 * demand 2.0 * weather 2.0 * Black Friday 1.8 * zone 1.25
    assert result.surge_multiplier == pytest.approx(13.5)
    assert result.estimated_duration == "2-4 hours"
    assert get_surge_level(result.surge_multiplier) == "extreme"


@pytest.mark.parametrize(
    "multiplier, level",
    [(1.0, "low"), (1.49, "low"), (1.5, "medium"), (2.0, "high"), (2.49, "high"), (2.5, "extreme")],
)
def test_surge_level(multiplier, level):
    assert get_surge_level(multiplier) == level


def test_round_half_up():
    assert round_half_up(0.125) == 0.13
    assert round_half_up(2.5, 0) == 3.0
    assert round_half_up(12.3449) == 12.34


def test_track_demand_history_uses_clock():
    calculator = _calculator()

    entry = calculator.track_demand_history(3, 0.7, 1.25, "rain", 18)

    assert entry.timestamp == QUIET_MOMENT
    assert entry.zone_id == 3
    assert entry.weather_condition == "rain"
    assert entry.orders_completed == 18
