"""The kitchen domain. Centres around turning a `Stock` into a recipe.

Only `RecipeService` talks to the outside world, through `LLMService`.
Every way that can fail comes back as a `GenerationError` value rather than
an exception, so callers render results and never need to catch.
"""
