import logging
from enum import Enum
from typing import Dict, List, Optional

from ..models.recipe import Ingredient, Recipe
from .errors import RecipeFormatError

log = logging.getLogger(__name__)


SECTION_RECIPE = "[Recept]"
SECTION_INGREDIENTS = "[Ingredienser]"
SECTION_INSTRUCTIONS = "[Instruktioner]"

INGREDIENT_SEPARATOR = ";"
INGREDIENT_FIELDS = 3


class ReadStatus(str, Enum):
    INDEFINITE = "indefinite"
    NEW_RECIPE = "new_recipe"
    INGREDIENT = "ingredient"
    INSTRUCTION = "instruction"


SECTIONS: Dict[str, ReadStatus] = {
    SECTION_RECIPE: ReadStatus.NEW_RECIPE,
    SECTION_INGREDIENTS: ReadStatus.INGREDIENT,
    SECTION_INSTRUCTIONS: ReadStatus.INSTRUCTION,
}


class StateMachine:
    """
    Builds recipes from a recipe file, one line at a time.

    Section tokens switch the read status; every other non-empty line is
    interpreted according to the current status. The recipe most recently
    started by a name line is kept as ``current`` and receives the following
    ingredient and instruction lines.
    """

    def __init__(self):
        self.status = ReadStatus.INDEFINITE
        self.current: Optional[Recipe] = None
        self.recipes: List[Recipe] = []
        self.line_number = 0

    def feed(self, line: str) -> None:
        self.line_number += 1
        line = line.rstrip("\r\n")

        if line == "":
            return

        if line in SECTIONS:
            self.status = SECTIONS[line]
            log.debug("Line %d: entering %s", self.line_number, self.status.value)
            return

        if self.status == ReadStatus.NEW_RECIPE:
            self._start_recipe(line)
        elif self.status == ReadStatus.INGREDIENT:
            self._current_recipe(line).add_ingredient(self._parse_ingredient(line))
        elif self.status == ReadStatus.INSTRUCTION:
            self._current_recipe(line).add_instruction(line)
        else:
            raise self._error("content outside of any section", line)

    def _start_recipe(self, name: str) -> None:
        self.current = Recipe(name=name)
        self.recipes.append(self.current)

    def _current_recipe(self, line: str) -> Recipe:
        if self.current is None:
            raise self._error(f"{self.status.value} line before any recipe name", line)
        return self.current

    def _parse_ingredient(self, line: str) -> Ingredient:
        fields = line.split(INGREDIENT_SEPARATOR)
        if len(fields) % INGREDIENT_FIELDS != 0:
            raise self._error(
                f"ingredient has {len(fields)} fields, expected a multiple of {INGREDIENT_FIELDS}",
                line,
            )
        amount, measure, name = fields[:INGREDIENT_FIELDS]
        return Ingredient(amount=amount, measure=measure, name=name)

    def _error(self, message: str, line: str) -> RecipeFormatError:
        log.warning("Malformed recipe data at line %d: %s", self.line_number, message)
        return RecipeFormatError(message, line_number=self.line_number, line=line)
