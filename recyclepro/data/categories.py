from recyclepro.models import ItemCategory, MaterialCategory

MATERIAL_CATEGORIES = (
    ItemCategory(
        id=MaterialCategory.paper_cardboard,
        name="Paper & Cardboard",
        icon="📄",
        description="Newspapers, magazines, cardboard boxes, mail",
    ),
    ItemCategory(
        id=MaterialCategory.plastic,
        name="Plastic",
        icon="🧴",
        description="Bottles, containers, bags, packaging",
    ),
    ItemCategory(
        id=MaterialCategory.glass,
        name="Glass",
        icon="🍾",
        description="Bottles, jars, containers",
    ),
    ItemCategory(
        id=MaterialCategory.metal,
        name="Metal",
        icon="🥫",
        description="Aluminum cans, steel cans, foil, scrap metal",
    ),
    ItemCategory(
        id=MaterialCategory.electronics,
        name="Electronics",
        icon="💻",
        description="Phones, computers, batteries, cables",
    ),
    ItemCategory(
        id=MaterialCategory.hazardous,
        name="Hazardous",
        icon="⚠️",
        description="Paint, chemicals, motor oil, cleaners",
    ),
)
