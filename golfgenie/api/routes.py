"""
API Routes for the Golf Trip Planner.
"""
from typing import Optional

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from ..errors import CatalogError, InputError
from ..models.catalog import Catalog, CatalogCategory
from ..models.itinerary import TripPlan
from ..models.trip import TripConstraints
from ..services.assembler import render_summary
from ..services.catalog import get_catalog_service
from ..services.concierge import get_concierge
from ..services.planner import get_planner, validate_constraints


router = APIRouter(prefix="/api", tags=["golf-trip-planner"])


# Request/Response Models
class PlanRequest(BaseModel):
    constraints: TripConstraints
    catalog: Optional[Catalog] = None


class PlanResponse(BaseModel):
    plan: TripPlan
    summary: str


class ChatRequest(BaseModel):
    message: str
    constraints: Optional[TripConstraints] = None
    history: list[dict] = Field(default_factory=list)


class ChatResponse(BaseModel):
    message: str


def _category(name: str) -> CatalogCategory:
    try:
        return CatalogCategory(name)
    except ValueError:
        raise HTTPException(status_code=404, detail=f"Unknown catalog category: {name}")


# Endpoints

@router.get("/catalog/{category}")
async def list_catalog(category: str):
    """List the catalog for one category."""
    items = await get_catalog_service().search(_category(category))
    return [item.model_dump(mode="json") for item in items]


@router.get("/catalog/{category}/{item_id}")
async def get_catalog_item(category: str, item_id: str):
    """Get a single catalog item."""
    try:
        item = await get_catalog_service().get_item(_category(category), item_id)
    except CatalogError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return item.model_dump(mode="json")


@router.post("/plan", response_model=PlanResponse)
async def create_plan(request: PlanRequest):
    """
    Generate a trip plan.
    When no catalog is supplied, candidates are fetched from the providers.
    """
    constraints = request.constraints
    try:
        validate_constraints(constraints)
        catalog = request.catalog or await get_catalog_service().load_catalog(constraints)
        plan = await get_planner().generate(constraints, catalog)
    except InputError as e:
        raise HTTPException(status_code=422, detail=e.problems)

    return PlanResponse(plan=plan, summary=render_summary(plan, constraints.destination))


@router.post("/chat", response_model=ChatResponse)
async def chat(request: ChatRequest):
    """Send a message to the golf concierge."""
    reply = await get_concierge().reply(request.message, request.constraints, request.history)
    return ChatResponse(message=reply)
