"""Debounced surge recalculation for periodic polling."""

from __future__ import annotations

import logging
import threading
from typing import Optional

from ...models.domain import SurgePricingResult
from .calculator import SurgePriceCalculator

logger = logging.getLogger(__name__)


class SurgePriceMonitor:
    """Keep the latest surge result for one (base price, zone) pair.

    Pollers call ``refresh()`` on their own schedule. A refresh that arrives
    before the cached result's ``next_price_check`` returns the cached result.
    A refresh that arrives while a recalculation is running, forced or not,
    waits for it and returns its result instead of computing again.
    """

    def __init__(self, calculator: SurgePriceCalculator, base_price: float, zone_id: int) -> None:
        self.calculator = calculator
        self.base_price = base_price
        self.zone_id = zone_id
        self._state = threading.Condition()
        self._running = False
        self._waiting = 0
        self._latest: Optional[SurgePricingResult] = None
        self._generation = 0

    @property
    def latest(self) -> Optional[SurgePricingResult]:
        return self._latest

    @property
    def recalculations(self) -> int:
        return self._generation

    @property
    def waiting(self) -> int:
        """Callers currently parked on a running recalculation."""
        return self._waiting

    def is_due(self) -> bool:
        latest = self._latest
        return latest is None or self.calculator.clock.now() >= latest.next_price_check

    def refresh(self, *, force: bool = False) -> SurgePricingResult:
        with self._state:
            while self._running:
                generation = self._generation
                self._waiting += 1
                try:
                    self._state.wait_for(lambda: not self._running)
                finally:
                    self._waiting -= 1
                if self._generation != generation and self._latest is not None:
                    return self._latest
            if self._latest is not None and not force and not self.is_due():
                return self._latest
            self._running = True

        result: Optional[SurgePricingResult] = None
        try:
            result = self.calculator.calculate_surge_price(self.base_price, self.zone_id)
        finally:
            with self._state:
                if result is not None:
                    self._latest = result
                    self._generation += 1
                self._running = False
                self._state.notify_all()

        logger.debug(
            f"Recalculated surge for zone {self.zone_id}: {result.surge_multiplier}x "
            f"(next check {result.next_price_check.isoformat()})"
        )
        return result
