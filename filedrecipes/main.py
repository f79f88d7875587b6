from fastapi import FastAPI
import logging
import uvicorn

from .api.recipes import router as recipes_router
from .core.config import get_settings

settings = get_settings()

# Configure logging
logging.basicConfig(
    level=settings.log_level.upper(),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

app = FastAPI(title="filedrecipes", version="0.1.0", description="Recipe collection stored in a sectioned text file")

app.include_router(recipes_router)


@app.get("/api/health")
def health_check():
    return {"status": "ok", "recipes_path": str(settings.recipes_path)}


def main():
    uvicorn.run("filedrecipes.main:app", host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
