"""Recyclable item catalog. Defaults here are the national baseline."""

from recyclepro.models import DisposalMethod as D
from recyclepro.models import MaterialCategory as C
from recyclepro.models import RecyclableItem

ALL_ITEMS = (
    RecyclableItem(
        id="item-plastic-bottle",
        name="Plastic Bottle",
        category=C.plastic,
        subcategory="beverage containers",
        default_disposal=D.curbside_recycling,
        default_instructions="Empty and rinse. Caps on.",
        aliases=("water bottle", "soda bottle", "pet bottle"),
        search_terms=("bottle", "plastic", "#1", "#2"),
    ),
    RecyclableItem(
        id="item-cardboard-box",
        name="Cardboard Box",
        category=C.paper_cardboard,
        subcategory="packaging",
        default_disposal=D.curbside_recycling,
        default_instructions="Flatten boxes and remove packing material.",
        aliases=("shipping box", "moving box", "corrugated cardboard"),
        search_terms=("box", "cardboard", "carton"),
        common_misspellings=("cardbord",),
    ),
    RecyclableItem(
        id="item-aluminum-can",
        name="Aluminum Can",
        category=C.metal,
        subcategory="beverage containers",
        default_disposal=D.curbside_recycling,
        default_instructions="Empty and rinse.",
        aliases=("soda can", "beverage can", "beer can"),
        search_terms=("can", "aluminum", "tin"),
        common_misspellings=("aluminium", "aluminim"),
    ),
    RecyclableItem(
        id="item-glass-jar",
        name="Glass Jar",
        category=C.glass,
        subcategory="food containers",
        default_disposal=D.curbside_recycling,
        default_instructions="Empty and rinse. Remove lids.",
        aliases=("jam jar", "pickle jar", "mason jar"),
        search_terms=("jar", "glass"),
    ),
    RecyclableItem(
        id="item-newspaper",
        name="Newspaper",
        category=C.paper_cardboard,
        default_disposal=D.curbside_recycling,
        default_instructions="Keep dry. Bundle or place loose in bin.",
        aliases=("newsprint", "paper"),
        search_terms=("news", "paper", "flyer"),
    ),
    RecyclableItem(
        id="item-plastic-bag",
        name="Plastic Bag",
        category=C.plastic,
        subcategory="film",
        default_disposal=D.return_to_store,
        default_instructions="Return clean, dry bags to a store drop-off bin.",
        aliases=("grocery bag", "shopping bag", "plastic film"),
        search_terms=("bag", "film", "wrap"),
    ),
    RecyclableItem(
        id="item-pizza-box",
        name="Pizza Box",
        category=C.paper_cardboard,
        default_disposal=D.curbside_trash,
        default_instructions="Greasy boxes go in the trash. Clean lids may be recycled.",
        aliases=("pizza carton",),
        search_terms=("pizza", "box", "greasy"),
    ),
    RecyclableItem(
        id="item-milk-carton",
        name="Milk Carton",
        category=C.paper_cardboard,
        subcategory="cartons",
        default_disposal=D.curbside_recycling,
        default_instructions="Empty and rinse.",
        aliases=("juice carton", "aseptic carton"),
        search_terms=("carton", "milk", "juice"),
    ),
    RecyclableItem(
        id="item-batteries",
        name="Household Batteries",
        category=C.batteries,
        default_disposal=D.hazardous_waste,
        default_instructions="Tape terminals on lithium and 9V batteries.",
        aliases=("aa battery", "aaa battery", "lithium battery"),
        search_terms=("battery", "batteries", "cell"),
        common_misspellings=("baterry", "batteris"),
    ),
    RecyclableItem(
        id="item-electronics",
        name="Electronics",
        category=C.electronics,
        default_disposal=D.e_waste,
        default_instructions="Wipe personal data before drop-off.",
        aliases=("computer", "laptop", "tv", "phone"),
        search_terms=("electronic", "device", "e-waste"),
    ),
    RecyclableItem(
        id="item-styrofoam",
        name="Styrofoam",
        category=C.plastic,
        subcategory="foam",
        default_disposal=D.curbside_trash,
        aliases=("polystyrene", "foam cup", "packing foam"),
        search_terms=("foam", "eps", "#6"),
        common_misspellings=("styrafoam",),
    ),
    RecyclableItem(
        id="item-paint",
        name="Paint",
        category=C.hazardous,
        default_disposal=D.hazardous_waste,
        default_instructions="Keep in original container with the lid sealed.",
        aliases=("latex paint", "oil paint"),
        search_terms=("paint", "stain"),
    ),
    RecyclableItem(
        id="item-clothing",
        name="Clothing",
        category=C.textiles,
        default_disposal=D.donation,
        default_instructions="Donate wearable items. Bag worn textiles for textile recycling.",
        aliases=("clothes", "shoes", "textiles"),
        search_terms=("shirt", "pants", "fabric"),
    ),
)
