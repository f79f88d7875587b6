"""
Section-based recipe file reader.
"""

import io
import logging
from typing import Iterable, List

from ..core.state_machine import StateMachine
from ..models.recipe import Recipe

log = logging.getLogger(__name__)


class RecipeParser:
    @classmethod
    def parse(cls, lines: Iterable[str]) -> List[Recipe]:
        """Parse recipe file lines into recipes sorted by name."""
        machine = StateMachine()
        for line in lines:
            machine.feed(line)

        log.debug("Parsed %d recipes from %d lines", len(machine.recipes), machine.line_number)
        return sorted(machine.recipes)

    @classmethod
    def parse_text(cls, text: str) -> List[Recipe]:
        return cls.parse(io.StringIO(text, newline=None))
