"""Location-specific disposal overrides.

Grouped by scope; ``ALL_RULES`` is the flat table the resolver searches.
"""

from recyclepro.models import DisposalMethod as D
from recyclepro.models import RecyclingRule, RuleScope

NATIONAL_RULES = (
    RecyclingRule(
        id="rule-us-batteries",
        item_id="item-batteries",
        scope=RuleScope.national,
        disposal=D.hazardous_waste,
        special_notes="Lithium batteries can start fires in trucks. Never put them in curbside bins.",
        source="EPA Used Household Batteries guidance",
    ),
)

NEW_JERSEY_RULES = (
    RecyclingRule(
        id="rule-nj-electronics",
        item_id="item-electronics",
        scope=RuleScope.state,
        state_code="NJ",
        disposal=D.e_waste,
        instructions="Bring TVs, computers and monitors to a county or municipal e-waste drop-off.",
        special_notes="NJ bans disposal of covered electronics in household trash.",
        source="NJ Electronic Waste Management Act",
    ),
)

BERGEN_COUNTY_RULES = (
    RecyclingRule(
        id="rule-bergen-paint",
        item_id="item-paint",
        scope=RuleScope.county,
        county_name="Bergen",
        state_code="NJ",
        disposal=D.hazardous_waste,
        instructions="Bring to a Bergen County household hazardous waste collection day.",
        special_notes="Dried-out latex paint may go in the trash.",
        source="Bergen County Utilities Authority",
    ),
)

ORADELL_RULES = (
    RecyclingRule(
        id="rule-oradell-styrofoam",
        item_id="item-styrofoam",
        scope=RuleScope.municipal,
        town_id="oradell-nj",
        disposal=D.curbside_trash,
        special_notes="Oradell does not accept styrofoam.",
        source="Oradell DPW",
    ),
)

ALL_RULES = NATIONAL_RULES + NEW_JERSEY_RULES + BERGEN_COUNTY_RULES + ORADELL_RULES
