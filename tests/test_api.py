import pytest
from fastapi.testclient import TestClient

from filedrecipes.api.recipes import get_repository
from filedrecipes.main import app
from filedrecipes.services.recipe_repository import RecipeRepository

RECIPES = (
    "[Recept]\nPancakes\n[Ingredienser]\n2;dl;Flour\n[Instruktioner]\nFry.\n"
    "[Recept]\nApple pie\n[Ingredienser]\n4;st;Apples\n[Instruktioner]\nBake.\n"
)


@pytest.fixture
def recipe_file(tmp_path):
    path = tmp_path / "recipes.txt"
    path.write_text(RECIPES, encoding="utf-8")
    return path


@pytest.fixture
def client(recipe_file):
    repository = RecipeRepository(recipe_file)
    app.dependency_overrides[get_repository] = lambda: repository
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_health(client):
    assert client.get("/api/health").json()["status"] == "ok"


def test_load_and_list(client):
    resp = client.post("/api/v1/recipes/load")
    assert resp.status_code == 200
    assert resp.json() == {"loaded": 2, "modified": False}

    recipes = client.get("/api/v1/recipes").json()
    assert [r["name"] for r in recipes] == ["Apple pie", "Pancakes"]
    assert recipes[1]["ingredients"] == [{"amount": "2", "measure": "dl", "name": "Flour"}]


def test_get_recipe_and_text(client):
    client.post("/api/v1/recipes/load")

    assert client.get("/api/v1/recipes/1").json()["instructions"] == ["Fry."]

    resp = client.get("/api/v1/recipes/0/text")
    assert resp.status_code == 200
    assert resp.text.startswith("Apple pie\n")
    assert "4 st Apples" in resp.text


def test_get_recipe_out_of_range(client):
    client.post("/api/v1/recipes/load")

    assert client.get("/api/v1/recipes/5").status_code == 404
    assert client.get("/api/v1/recipes/-1/text").status_code == 404


def test_delete_then_save(client, recipe_file):
    client.post("/api/v1/recipes/load")

    resp = client.delete("/api/v1/recipes/0")
    assert resp.json() == {"deleted": "Apple pie", "modified": True}
    assert client.delete("/api/v1/recipes/3").status_code == 404

    resp = client.post("/api/v1/recipes/save")
    assert resp.json() == {"saved": 1, "modified": False}
    assert recipe_file.read_text(encoding="utf-8") == (
        "[Recept]\nPancakes\n[Ingredienser]\n2;dl;Flour\n[Instruktioner]\nFry.\n"
    )


def test_load_missing_file(client, recipe_file):
    recipe_file.unlink()

    assert client.post("/api/v1/recipes/load").status_code == 404


def test_load_malformed_file(client, recipe_file):
    recipe_file.write_text("[Instruktioner]\nfoo\n", encoding="utf-8")

    resp = client.post("/api/v1/recipes/load")
    assert resp.status_code == 422
    assert "line 2" in resp.json()["detail"]


def test_load_invalid_utf8_file(client, recipe_file):
    recipe_file.write_bytes(b"[Recept]\nSoup\xff\n")

    resp = client.post("/api/v1/recipes/load")
    assert resp.status_code == 422
    assert "UTF-8" in resp.json()["detail"]
