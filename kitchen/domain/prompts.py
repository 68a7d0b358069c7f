from typing import Iterable

from kitchen.domain.models import IngredientEntry


STAPLES = ("salt", "pepper", "oil", "water")
ALLOWED_TAGS = ("h3", "h4", "p", "ul", "li", "strong")


GENERATE_RECIPE_PROMPT = """
You are a starred chef and an expert in creative, zero-waste home cooking.
Here are the ingredients I have in my kitchen:
{ingredients}

Your goal is to create one delicious and achievable recipe with these ingredients.
You may suggest adding a few basic staples ({staples}) if needed,
but try to stick to the main stock.

Write the answer as HTML (without <html> or <body> tags, just the content)
so it can be embedded directly inside a div.
Use only the tags {tags}.
Be warm, precise and complete. Give the recipe a creative title.
""".strip()


def ingredient_line(entry: IngredientEntry) -> str:
    if entry.quantity:
        return f"- {entry.name} ({entry.quantity})"
    return f"- {entry.name}"


def ingredient_list(entries: Iterable[IngredientEntry]) -> str:
    return "\n".join(ingredient_line(e) for e in entries)


class GenerateRecipePrompt:
    def __init__(
        self,
        ingredients: Iterable[IngredientEntry],
        *,
        template: str | None = None,
    ) -> None:
        self.ingredients = tuple(ingredients)
        self.template = GENERATE_RECIPE_PROMPT if template is None else template

    @property
    def content(self) -> str:
        return self.template.format(
            ingredients=ingredient_list(self.ingredients),
            staples=", ".join(STAPLES),
            tags=", ".join(f"<{t}>" for t in ALLOWED_TAGS),
        )

    def __str__(self) -> str:
        return self.content
