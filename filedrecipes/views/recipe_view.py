from typing import Iterable

from ..models.recipe import Recipe


def render(recipe: Recipe) -> str:
    """Display text for a recipe: name header, ingredients, then instructions."""
    lines = [recipe.name, "=" * len(recipe.name), "", "Ingredienser"]
    lines.extend(str(ingredient) for ingredient in recipe.ingredients)
    lines.extend(["", "Instruktioner"])
    lines.extend(recipe.instructions)
    return "\n".join(lines) + "\n"


def render_all(recipes: Iterable[Recipe]) -> str:
    return "\n".join(render(recipe) for recipe in recipes)
