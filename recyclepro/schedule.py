"""Collection calendar for a zone.

Day numbers follow the zone data: 0=Sunday ... 6=Saturday. Recycling
alternates between two streams on even and odd weeks of the year.
"""

from __future__ import annotations

import math
from collections import namedtuple
from datetime import date, timedelta

from recyclepro.models import SeasonalSchedule, Zone

CollectionDay = namedtuple("CollectionDay", ["date", "collection"])

GARBAGE = "Garbage"
YARD_WASTE = "Yard Waste"


def sunday_based_weekday(d: date) -> int:
    return (d.weekday() + 1) % 7


def week_number(d: date) -> int:
    """Week of the year, counting the partial first week as week 1."""
    jan1 = date(d.year, 1, 1)
    days_since = (d - jan1).days
    return math.ceil((days_since + sunday_based_weekday(jan1) + 1) / 7)


def _mmdd(value: str) -> int:
    month, day = (int(part) for part in value.split("-"))
    return month * 100 + day


def in_season(d: date, season: SeasonalSchedule) -> bool:
    return _mmdd(season.season_start) <= d.month * 100 + d.day <= _mmdd(season.season_end)


def collection_for_date(zone: Zone, d: date) -> str | None:
    """What is picked up in ``zone`` on ``d``, or None.

    Garbage takes the day when it shares a weekday with another stream.
    """
    schedule = zone.schedule
    if schedule is None:
        return None

    day = sunday_based_weekday(d)
    if day in schedule.garbage.days:
        return GARBAGE

    recycling = schedule.recycling
    if recycling.day == day:
        label = recycling.even_week if week_number(d) % 2 == 0 else recycling.odd_week
        return f"Recycling ({label})"

    yard = schedule.yard_waste
    if yard and day in yard.days and in_season(d, yard):
        return YARD_WASTE
    return None


def week_schedule(zone: Zone, start: date) -> list[CollectionDay]:
    """Monday-to-Sunday collection calendar for the week containing ``start``."""
    monday = start - timedelta(days=start.weekday())
    days = [monday + timedelta(days=i) for i in range(7)]
    return [CollectionDay(d, collection_for_date(zone, d)) for d in days]
