import threading
import time
from datetime import datetime

from delivery_pricing.data.telemetry import DEFAULT_DEMAND, DEFAULT_WEATHER, DEFAULT_ZONE_MULTIPLIERS
from delivery_pricing.services.surge import FixedClock, SurgePriceCalculator, SurgePriceMonitor


class BlockingCalculator(SurgePriceCalculator):
    """Calculator that parks inside the calculation until released."""

    def __init__(self, clock: FixedClock) -> None:
        super().__init__(
            demand_table=DEFAULT_DEMAND,
            default_weather=DEFAULT_WEATHER,
            zone_multipliers=DEFAULT_ZONE_MULTIPLIERS,
            clock=clock,
        )
        self.entered = threading.Event()
        self.release = threading.Event()
        self.calls = 0

    def calculate_surge_price(self, base_price, zone_id, demand=None, weather=None):
        self.calls += 1
        self.entered.set()
        self.release.wait(timeout=5)
        return super().calculate_surge_price(base_price, zone_id, demand, weather)


def _monitor() -> tuple[SurgePriceMonitor, FixedClock]:
    clock = FixedClock(datetime(2026, 10, 14, 9, 0))
    calculator = SurgePriceCalculator(
        demand_table=DEFAULT_DEMAND,
        default_weather=DEFAULT_WEATHER,
        zone_multipliers=DEFAULT_ZONE_MULTIPLIERS,
        clock=clock,
    )
    return SurgePriceMonitor(calculator, base_price=9.99, zone_id=2), clock


def test_refresh_reuses_result_until_next_check():
    monitor, clock = _monitor()

    first = monitor.refresh()
    second = monitor.refresh()

    assert second is first
    assert monitor.recalculations == 1
    assert not monitor.is_due()

    clock.advance(minutes=4, seconds=59)
    assert monitor.refresh() is first

    clock.advance(seconds=1)
    assert monitor.is_due()
    third = monitor.refresh()
    assert third is not first
    assert monitor.recalculations == 2
    assert monitor.latest is third


def test_forced_refresh_bypasses_interval():
    monitor, _ = _monitor()

    first = monitor.refresh()
    forced = monitor.refresh(force=True)

    assert forced is not first
    assert monitor.recalculations == 2


def _wait_until(condition, timeout: float = 5.0) -> bool:
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        if condition():
            return True
        time.sleep(0.005)
    return False


def test_forced_refresh_during_running_recalculation_reuses_it():
    clock = FixedClock(datetime(2026, 10, 14, 9, 0))
    calculator = BlockingCalculator(clock)
    monitor = SurgePriceMonitor(calculator, base_price=5.99, zone_id=1)
    results = []

    first = threading.Thread(target=lambda: results.append(monitor.refresh()))
    first.start()
    assert calculator.entered.wait(timeout=5)

    second = threading.Thread(target=lambda: results.append(monitor.refresh(force=True)))
    second.start()
    assert _wait_until(lambda: monitor.waiting == 1)
    calculator.release.set()

    first.join(timeout=5)
    second.join(timeout=5)

    assert calculator.calls == 1
    assert monitor.recalculations == 1
    assert len(results) == 2
    assert results[0] is results[1]
    assert monitor.waiting == 0


def test_failed_recalculation_lets_waiter_compute():
    clock = FixedClock(datetime(2026, 10, 14, 9, 0))
    calculator = BlockingCalculator(clock)
    monitor = SurgePriceMonitor(calculator, base_price=5.99, zone_id=1)
    original = calculator.calculate_surge_price
    failures = []

    def fail_once(base_price, zone_id, demand=None, weather=None):
        if calculator.calls == 0:
            calculator.calls += 1
            calculator.entered.set()
            calculator.release.wait(timeout=5)
            raise RuntimeError("telemetry unavailable")
        return original(base_price, zone_id, demand, weather)

    calculator.calculate_surge_price = fail_once

    def first_call():
        try:
            monitor.refresh()
        except RuntimeError as exc:
            failures.append(exc)

    first = threading.Thread(target=first_call)
    first.start()
    assert calculator.entered.wait(timeout=5)

    results = []
    second = threading.Thread(target=lambda: results.append(monitor.refresh(force=True)))
    second.start()
    assert _wait_until(lambda: monitor.waiting == 1)
    calculator.release.set()

    first.join(timeout=5)
    second.join(timeout=5)

    assert len(failures) == 1
    assert len(results) == 1
    assert monitor.latest is results[0]
    assert monitor.recalculations == 1
