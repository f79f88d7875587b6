from __future__ import annotations

from functools import total_ordering
from typing import List

from pydantic import BaseModel, ConfigDict, constr


class Ingredient(BaseModel):
    model_config = ConfigDict(frozen=True)

    amount: str
    measure: str
    name: str

    def __str__(self) -> str:
        return " ".join(part for part in (self.amount, self.measure, self.name) if part)


@total_ordering
class Recipe(BaseModel):
    """A named recipe. Recipes compare and sort by name only."""

    name: constr(min_length=1)
    ingredients: List[Ingredient] = []
    instructions: List[str] = []

    def add_ingredient(self, ingredient: Ingredient) -> None:
        self.ingredients.append(ingredient)

    def add_instruction(self, instruction: str) -> None:
        self.instructions.append(instruction)

    def clone(self) -> Recipe:
        return self.model_copy(deep=True)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Recipe):
            return NotImplemented
        return self.name == other.name

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Recipe):
            return NotImplemented
        return self.name < other.name

