"""Tests for the zone collection calendar."""
from datetime import date

from recyclepro.data.towns import COMMINGLED, ORADELL, PAPER
from recyclepro.models import (
    AlternatingSchedule,
    GarbageSchedule,
    SeasonalSchedule,
    Zone,
    ZoneSchedule,
)
from recyclepro.schedule import collection_for_date, in_season, week_number, week_schedule

ZONE_1 = ORADELL.zones[0]

YARD_ZONE = Zone(
    id="yard",
    name="yard",
    schedule=ZoneSchedule(
        garbage=GarbageSchedule(days=(2,)),
        recycling=AlternatingSchedule(day=3, even_week="A", odd_week="B"),
        yard_waste=SeasonalSchedule(days=(1,), season_start="04-01", season_end="10-31"),
    ),
)


class TestWeekNumber:
    def test_first_day_of_year(self):
        assert week_number(date(2026, 1, 1)) == 1

    def test_rolls_over_on_sunday(self):
        # 2026-01-01 is a Thursday; Sunday 2026-01-04 starts week 2
        assert week_number(date(2026, 1, 3)) == 1
        assert week_number(date(2026, 1, 4)) == 2


class TestCollectionForDate:
    def test_garbage_day(self):
        assert collection_for_date(ZONE_1, date(2026, 1, 5)) == "Garbage"  # Monday

    def test_recycling_alternates_by_week(self):
        assert collection_for_date(ZONE_1, date(2026, 1, 7)) == f"Recycling ({COMMINGLED})"
        assert collection_for_date(ZONE_1, date(2026, 1, 14)) == f"Recycling ({PAPER})"

    def test_nothing_on_off_day(self):
        assert collection_for_date(ZONE_1, date(2026, 1, 6)) is None  # Tuesday

    def test_yard_waste_only_in_season(self):
        assert collection_for_date(YARD_ZONE, date(2026, 5, 4)) == "Yard Waste"
        assert collection_for_date(YARD_ZONE, date(2026, 1, 5)) is None

    def test_zone_without_schedule(self):
        assert collection_for_date(Zone(id="z", name="z"), date(2026, 1, 5)) is None


def test_season_bounds_inclusive():
    season = YARD_ZONE.schedule.yard_waste
    assert in_season(date(2026, 4, 1), season)
    assert in_season(date(2026, 10, 31), season)
    assert not in_season(date(2026, 11, 1), season)


def test_week_schedule_starts_on_monday():
    days = week_schedule(ZONE_1, date(2026, 1, 7))
    assert [d.date for d in days][0] == date(2026, 1, 5)
    assert len(days) == 7
    assert [d.collection for d in days] == [
        "Garbage", None, f"Recycling ({COMMINGLED})", "Garbage", None, None, None,
    ]
