"""Ingredient names and units offered by the stock form."""

INGREDIENTS = (
    "Aubergine",
    "Avocado",
    "Bacon",
    "Basil",
    "Bread",
    "Broccoli",
    "Butter",
    "Carrots",
    "Cauliflower",
    "Chicken breast",
    "Courgettes",
    "Cream",
    "Cucumber",
    "Eggs",
    "Flour",
    "Garlic",
    "Gnocchi",
    "Grated cheese",
    "Green beans",
    "Ham",
    "Lardons",
    "Lemon",
    "Lentils",
    "Lettuce",
    "Milk",
    "Minced beef",
    "Mozzarella",
    "Mushrooms",
    "Olive oil",
    "Onions",
    "Pasta",
    "Peas",
    "Pepper",
    "Peppers",
    "Pork",
    "Potatoes",
    "Prawns",
    "Rice",
    "Salmon",
    "Salt",
    "Spinach",
    "Sugar",
    "Sweetcorn",
    "Tomatoes",
    "Tuna",
    "Turkey escalope",
    "Yoghurt",
)

NOT_APPLICABLE = "N/A"
DEFAULT_UNIT = "unit(s)"
UNITS = (DEFAULT_UNIT, "g", "kg", "ml", "cl", "L", "tbsp", "tsp", "pinch", NOT_APPLICABLE)

_NO_AMOUNT = ("Salt", "Pepper", "Spices")
_LIQUIDS = ("Milk", "Water", "Cream")
_WEIGHED = ("Rice", "Pasta", "Flour", "Sugar")


def suggest(query: str) -> list[str]:
    query = query.strip().lower()
    if not query:
        return []
    return [name for name in INGREDIENTS if query in name.lower()]


def default_unit(name: str) -> str | None:
    """Unit to preselect for a picked ingredient, `None` keeps the current one."""
    if name in _NO_AMOUNT:
        return NOT_APPLICABLE
    if any(liquid in name for liquid in _LIQUIDS):
        return "ml"
    if name in _WEIGHED:
        return "g"
    return None
