from kitchen.html.recipe_result import RecipeResult

__all__ = ["RecipeResult"]
