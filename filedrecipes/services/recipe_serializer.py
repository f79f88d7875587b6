from typing import Iterable, List

from ..core.state_machine import (
    INGREDIENT_SEPARATOR,
    SECTION_INGREDIENTS,
    SECTION_INSTRUCTIONS,
    SECTION_RECIPE,
)
from ..models.recipe import Recipe


class RecipeSerializer:
    """Writes recipes in the format read by RecipeParser."""

    @classmethod
    def dump(cls, recipes: Iterable[Recipe]) -> List[str]:
        lines: List[str] = []
        for recipe in recipes:
            lines.append(SECTION_RECIPE)
            lines.append(recipe.name)
            lines.append(SECTION_INGREDIENTS)
            for ingredient in recipe.ingredients:
                lines.append(
                    INGREDIENT_SEPARATOR.join((ingredient.amount, ingredient.measure, ingredient.name))
                )
            lines.append(SECTION_INSTRUCTIONS)
            lines.extend(recipe.instructions)
        return lines

    @classmethod
    def dumps(cls, recipes: Iterable[Recipe]) -> str:
        return "".join(line + "\n" for line in cls.dump(recipes))
