import logging
from pathlib import Path
from typing import Callable, List, Optional, Union

from ..core.config import ENCODING, READ_ENCODING, get_settings
from ..core.errors import RecipeFormatError, RecipeNotFoundError
from ..models.recipe import Recipe
from .recipe_parser import RecipeParser
from .recipe_serializer import RecipeSerializer

log = logging.getLogger(__name__)

Listener = Callable[[], None]


class RecipeRepository:
    """
    Holds the recipes read from a recipe file.

    Recipes handed out are clones, so callers can never change the stored
    collection except through ``delete`` and ``delete_at``. Subscribed
    listeners are called after every load, save and delete.
    """

    def __init__(self, path: Union[str, Path, None] = None):
        path = get_settings().recipes_path if path is None else path
        self.path = Path(path).absolute()
        self.is_modified = False
        self._recipes: List[Recipe] = []
        self._listeners: List[Listener] = []

    def __len__(self) -> int:
        return len(self._recipes)

    def subscribe(self, listener: Listener) -> None:
        self._listeners.append(listener)

    def unsubscribe(self, listener: Listener) -> None:
        self._listeners.remove(listener)

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener()

    def get_all(self) -> List[Recipe]:
        return [recipe.clone() for recipe in self._recipes]

    def get_at(self, index: int) -> Recipe:
        return self._recipes[self._check_index(index)].clone()

    def delete(self, recipe: Recipe) -> None:
        position = self._find(recipe)
        if position is None:
            log.warning("No recipe named %r to delete", recipe.name)
            raise RecipeNotFoundError(recipe.name)

        del self._recipes[position]
        self.is_modified = True
        log.info("Deleted recipe %r", recipe.name)
        self._notify()

    def delete_at(self, index: int) -> None:
        self.delete(self._recipes[self._check_index(index)])

    def load(self) -> None:
        try:
            with open(self.path, encoding=READ_ENCODING) as reader:
                recipes = RecipeParser.parse(reader)
        except UnicodeDecodeError as e:
            log.warning("Recipe file %s is not valid UTF-8: %s", self.path, e)
            raise RecipeFormatError(f"not valid UTF-8 at byte {e.start}") from e

        self._recipes = recipes
        self.is_modified = False
        log.info("Loaded %d recipes from %s", len(recipes), self.path)
        self._notify()

    def save(self) -> None:
        text = RecipeSerializer.dumps(self._recipes)
        with open(self.path, "w", encoding=ENCODING, newline="\n") as writer:
            writer.write(text)

        self.is_modified = False
        log.info("Saved %d recipes to %s", len(self._recipes), self.path)
        self._notify()

    def _find(self, recipe: Recipe) -> Optional[int]:
        # Prefer the stored instance itself, then fall back to a name match.
        for position, stored in enumerate(self._recipes):
            if stored is recipe:
                return position
        for position, stored in enumerate(self._recipes):
            if stored == recipe:
                return position
        return None

    def _check_index(self, index: int) -> int:
        if not 0 <= index < len(self._recipes):
            raise IndexError(f"recipe index {index} out of range (0..{len(self._recipes) - 1})")
        return index
