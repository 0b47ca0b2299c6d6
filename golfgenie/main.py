"""
GolfGenie web service.
Run with ``python -m golfgenie.main`` or ``uvicorn golfgenie.main:app``.
"""
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api import router
from .config import settings
from .models.catalog import CatalogCategory


logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="[%(levelname)s] %(name)s: %(message)s"
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="GolfGenie Trip Planner",
    description="Golf trip itineraries with time-ordered days and exact cost estimates",
    version="1.0.0"
)

# The trip planning web form is served from another origin
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(router)

logger.info(
    f"GolfGenie starting: llm={settings.llm_provider}, "
    f"catalog={'demo' if settings.demo_mode else settings.catalog_api_base_url}"
)


@app.get("/")
async def index():
    return {
        "name": app.title,
        "version": app.version,
        "catalog_categories": [c.value for c in CatalogCategory],
    }


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "engine": "deterministic" if settings.llm_provider == "mock" else settings.llm_provider,
        "catalog": "demo" if settings.demo_mode else "live"
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("golfgenie.main:app", host=settings.host, port=settings.port, reload=settings.debug)
