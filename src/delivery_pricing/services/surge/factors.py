"""Individual surge pricing factors.

Each factor is capped on its own before the calculator multiplies them.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Mapping

from ...models.domain import DemandSnapshot, WeatherSnapshot

TIME_MULTIPLIER_CAP = 2.5
DEMAND_MULTIPLIER_CAP = 3.0
WEATHER_MULTIPLIER_CAP = 2.0

# (month, day) pairs matched with a one day tolerance
HOLIDAYS: tuple[tuple[int, int], ...] = (
    (12, 25),  # Christmas
    (1, 1),  # New Year
    (7, 4),  # Independence Day
    (11, 22),  # Thanksgiving (approximate)
)

HOLIDAY_MULTIPLIER = 1.5
BLACK_FRIDAY_MULTIPLIER = 1.8
SPECIAL_DAY_MULTIPLIER = 1.3

# (threshold, surcharge), highest bracket first
DEMAND_RATIO_BRACKETS: tuple[tuple[float, float], ...] = (
    (5.0, 0.8),
    (3.0, 0.5),
    (2.0, 0.3),
    (1.5, 0.15),
)

SEVERITY_SURCHARGES: dict[str, dict[str, float]] = {
    "rain": {"heavy": 0.4, "moderate": 0.25, "light": 0.15},
    "snow": {"heavy": 0.6, "moderate": 0.4, "light": 0.25},
}

SATURDAY = 5
SUNDAY = 6
FRIDAY = 4


def calculate_time_multiplier(now: datetime) -> float:
    hour = now.hour
    multiplier = 1.0

    if 11 <= hour <= 14:  # lunch rush
        multiplier += 0.3
    if 17 <= hour <= 21:  # dinner rush
        multiplier += 0.5
    if hour >= 22 or hour <= 6:  # late night
        multiplier += 0.2
    if now.weekday() in (SATURDAY, SUNDAY):
        multiplier += 0.15

    return min(multiplier, TIME_MULTIPLIER_CAP)


def calculate_demand_multiplier(demand: DemandSnapshot) -> float:
    demand_ratio = demand.current_orders / max(demand.available_drivers, 1)
    multiplier = 1.0

    for threshold, surcharge in DEMAND_RATIO_BRACKETS:
        if demand_ratio > threshold:
            multiplier += surcharge
            break

    if demand.completion_rate < 0.8:
        multiplier += 0.2
    elif demand.completion_rate < 0.9:
        multiplier += 0.1

    return min(multiplier, DEMAND_MULTIPLIER_CAP)


def calculate_weather_multiplier(weather: WeatherSnapshot) -> float:
    multiplier = 1.0

    match weather.condition:
        case "rain" | "snow":
            surcharges = SEVERITY_SURCHARGES[weather.condition]
            multiplier += surcharges.get(weather.severity, surcharges["light"])
        case "storm":
            multiplier += 0.8
        case "fog":
            multiplier += 0.3 if weather.visibility < 2 else 0.15

    if weather.temperature < 0:
        multiplier += 0.2
    elif weather.temperature > 35:
        multiplier += 0.15

    return min(multiplier, WEATHER_MULTIPLIER_CAP)


def _is_fixed_holiday(today: date) -> bool:
    return any(month == today.month and abs(day - today.day) <= 1 for month, day in HOLIDAYS)


def calculate_holiday_multiplier(today: date) -> float:
    weekday = today.weekday()

    if _is_fixed_holiday(today):
        return HOLIDAY_MULTIPLIER
    if today.month == 11 and 23 <= today.day <= 29 and weekday == FRIDAY:
        return BLACK_FRIDAY_MULTIPLIER
    is_valentines = today.month == 2 and today.day == 14
    is_mothers_day = today.month == 5 and weekday == SUNDAY and 8 <= today.day <= 14
    if is_valentines or is_mothers_day:
        return SPECIAL_DAY_MULTIPLIER
    return 1.0


def calculate_zone_multiplier(zone_id: int, multipliers: Mapping[int, float]) -> float:
    return multipliers.get(zone_id, 1.0)
