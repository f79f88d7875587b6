from functools import lru_cache
import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import PlainTextResponse

from ..core.errors import RecipeFormatError
from ..models.recipe import Recipe
from ..services.recipe_repository import RecipeRepository
from ..views.recipe_view import render

log = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1")


@lru_cache()
def get_repository() -> RecipeRepository:
    """Return the shared repository for the configured recipe file."""
    return RecipeRepository()


def _recipe_at(repository: RecipeRepository, index: int) -> Recipe:
    try:
        return repository.get_at(index)
    except IndexError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.get("/recipes", response_model=List[Recipe])
def list_recipes(repository: RecipeRepository = Depends(get_repository)):
    return repository.get_all()


@router.get("/recipes/{index}", response_model=Recipe)
def get_recipe(index: int, repository: RecipeRepository = Depends(get_repository)):
    return _recipe_at(repository, index)


@router.get("/recipes/{index}/text", response_class=PlainTextResponse)
def get_recipe_text(index: int, repository: RecipeRepository = Depends(get_repository)):
    return render(_recipe_at(repository, index))


@router.delete("/recipes/{index}")
def delete_recipe(index: int, repository: RecipeRepository = Depends(get_repository)):
    recipe = _recipe_at(repository, index)
    repository.delete_at(index)
    return {"deleted": recipe.name, "modified": repository.is_modified}


@router.post("/recipes/load")
def load_recipes(repository: RecipeRepository = Depends(get_repository)):
    try:
        repository.load()
    except FileNotFoundError:
        log.warning("Recipe file %s not found", repository.path)
        raise HTTPException(status_code=404, detail=f"Recipe file not found: {repository.path}")
    except RecipeFormatError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return {"loaded": len(repository), "modified": repository.is_modified}


@router.post("/recipes/save")
def save_recipes(repository: RecipeRepository = Depends(get_repository)):
    try:
        repository.save()
    except OSError as e:
        log.error("Could not save recipes to %s: %s", repository.path, e)
        raise HTTPException(status_code=500, detail=f"Could not save recipes: {e}")
    return {"saved": len(repository), "modified": repository.is_modified}
