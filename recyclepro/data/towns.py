"""Town and collection-zone reference data.

Zone order inside each town is the matching precedence order.
"""

from recyclepro.models import (
    AddressRange,
    AlternatingSchedule,
    Coordinates,
    GarbageSchedule,
    Parity,
    PolygonBoundary,
    RecyclingCenter,
    SeasonalSchedule,
    Street,
    Town,
    Zone,
    ZoneSchedule,
)

COMMINGLED = "Commingled (Glass, Plastic, Metal)"
PAPER = "Paper & Cardboard"

# Day numbers: 0=Sunday, 1=Monday, ... 6=Saturday

_ORADELL_SCHEDULE = ZoneSchedule(
    garbage=GarbageSchedule(days=(1, 4), time="6:00 AM"),
    recycling=AlternatingSchedule(day=3, even_week=COMMINGLED, odd_week=PAPER),
    yard_waste=SeasonalSchedule(days=(1,), season_start="04-01", season_end="10-31"),
)

ORADELL = Town(
    id="oradell-nj",
    name="Oradell",
    state="NJ",
    county="Bergen",
    zones=(
        Zone(
            id="oradell-zone-1",
            name="Oradell Ave (Kinderkamack Rd - Grant Ave)",
            description="Collection Zone 1",
            streets=(
                Street(
                    name="Oradell Ave",
                    range_start=1,
                    range_end=700,
                    cross_streets=("Kinderkamack Rd", "Grant Ave"),
                ),
            ),
            schedule=_ORADELL_SCHEDULE,
        ),
        Zone(
            id="oradell-zone-2",
            name="Oradell Ave (Prospect St - Kinderkamack Ave)",
            description="Collection Zone 2",
            streets=(
                Street(
                    name="Oradell Ave",
                    range_start=701,
                    range_end=1200,
                    cross_streets=("Prospect St", "Kinderkamack Ave"),
                ),
            ),
            schedule=_ORADELL_SCHEDULE,
        ),
        Zone(
            id="oradell-zone-3",
            name="Other Streets - Zone A",
            description="General collection zone for remaining areas",
            streets=(
                Street(name="Demarest Ave"),
                Street(name="Forest Ave"),
                Street(name="Kinderkamack Ave"),
            ),
            schedule=_ORADELL_SCHEDULE,
        ),
    ),
    recycling_center=RecyclingCenter(
        name="Oradell Recycling Center",
        address="2 Marginal Road, Oradell, NJ 07649",
        coordinates=Coordinates(lat=40.9545, lng=-74.0354),
        hours={
            "weekday": "Monday-Friday 8:00 AM - 3:00 PM",
            "saturday": "1st & 3rd Saturday 9:00 AM - 12:00 PM",
            "sunday": "Closed",
        },
        phone="(201) 261-8610",
    ),
    special_instructions=(
        "Place containers at curb after 5 PM the day before collection",
        "Remove containers before 7 PM on collection day",
        "Maximum 5 containers per collection day",
        "Maximum 60 lbs per container",
        "No plastic bags for recycling - use bins or bundles",
    ),
)

_PARAMUS_DEFAULT_SCHEDULE = ZoneSchedule(
    garbage=GarbageSchedule(days=(2, 5), time="7:00 AM"),
    recycling=AlternatingSchedule(day=3, even_week=COMMINGLED, odd_week=PAPER),
    yard_waste=SeasonalSchedule(days=(2,), season_start="04-01", season_end="11-30"),
)

# Paramus shows every mechanism: parity ranges, plain street lists and a
# town-wide polygon used as the catch-all.
PARAMUS = Town(
    id="paramus-nj",
    name="Paramus",
    state="NJ",
    county="Bergen",
    zones=(
        Zone(
            id="paramus-zone-1",
            name="Zone 1 - North Side",
            description="North section - Monday/Thursday pickup",
            address_ranges=(
                AddressRange(street="Main Street", from_number=1, to_number=500, parity=Parity.odd),
                AddressRange(street="Oak Avenue", from_number=100, to_number=300, parity=Parity.all),
            ),
            schedule=ZoneSchedule(
                garbage=GarbageSchedule(days=(1, 4), time="7:00 AM"),
                recycling=AlternatingSchedule(day=2, even_week=COMMINGLED, odd_week=PAPER),
                yard_waste=SeasonalSchedule(days=(1,), season_start="04-01", season_end="11-30"),
            ),
        ),
        Zone(
            id="paramus-zone-2",
            name="Zone 2 - South Side",
            description="South section - Tuesday/Friday pickup",
            address_ranges=(
                AddressRange(street="Main Street", from_number=2, to_number=500, parity=Parity.even),
                AddressRange(street="Maple Drive", from_number=1, to_number=999, parity=Parity.all),
            ),
            schedule=_PARAMUS_DEFAULT_SCHEDULE,
        ),
        Zone(
            id="paramus-zone-3",
            name="Zone 3 - Downtown",
            description="Commercial district with different schedule",
            streets=(
                Street(name="Route 17"),
                Street(name="Bergen Boulevard"),
                Street(name="Paramus Road"),
            ),
            schedule=ZoneSchedule(
                garbage=GarbageSchedule(days=(1, 3, 5), time="6:00 AM"),
                recycling=AlternatingSchedule(day=4, even_week=COMMINGLED, odd_week=PAPER),
            ),
        ),
        Zone(
            id="paramus-zone-default",
            name="Default Zone",
            description="Catch-all for addresses not matching specific zones",
            boundary=PolygonBoundary(
                vertices=(
                    Coordinates(lat=40.9550, lng=-74.0850),
                    Coordinates(lat=40.9550, lng=-74.0500),
                    Coordinates(lat=40.9350, lng=-74.0500),
                    Coordinates(lat=40.9350, lng=-74.0850),
                ),
            ),
            schedule=_PARAMUS_DEFAULT_SCHEDULE,
        ),
    ),
    recycling_center=RecyclingCenter(
        name="Paramus Recycling Center",
        address="375 Farview Avenue, Paramus, NJ 07652",
        coordinates=Coordinates(lat=40.9447, lng=-74.0755),
        hours={
            "weekday": "Monday-Friday 7:30 AM - 3:30 PM",
            "saturday": "Saturday 7:30 AM - 2:00 PM",
            "sunday": "Closed",
        },
        phone="(201) 265-2100",
    ),
    special_instructions=(
        "Place containers at curb by 6:00 AM on collection day",
        "Remove containers same day by 9:00 PM",
        "Recycling must be in approved containers or tied bundles",
        "No plastic bags - use bins only",
        "Bulk items require separate pickup - call DPW",
    ),
)

ALL_TOWNS = (ORADELL, PARAMUS)
