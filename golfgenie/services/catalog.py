"""
Catalog Service.
Searches the golf, hotel, restaurant, experience and rental providers.
Without credentials (demo mode), or when a provider fails, the bundled
sample data in resources/data/ is returned instead.
"""
import asyncio
import json
import logging
import os
from typing import Any, Dict, List, Optional

import httpx
from pydantic import ValidationError

from ..config import Settings, settings as default_settings
from ..errors import CatalogError
from ..models.catalog import CATEGORY_MODELS, Catalog, CatalogCategory
from ..models.trip import TripConstraints

logger = logging.getLogger(__name__)

DATA_DIR = os.path.join(os.path.dirname(os.path.dirname(__file__)), "resources", "data")

# Provider path and the response key holding the results
ENDPOINTS = {
    CatalogCategory.GOLF_COURSES: ("/golf/courses", "courses"),
    CatalogCategory.HOTELS: ("/hotels/search", "hotels"),
    CatalogCategory.RESTAURANTS: ("/restaurants/search", "restaurants"),
    CatalogCategory.EXPERIENCES: ("/experiences/search", "experiences"),
    CatalogCategory.VEHICLES: ("/transportation/rentals", "vehicles"),
}

SAMPLE_FILES = {
    CatalogCategory.GOLF_COURSES: "golf_courses.json",
    CatalogCategory.HOTELS: "hotels.json",
    CatalogCategory.RESTAURANTS: "restaurants.json",
    CatalogCategory.EXPERIENCES: "experiences.json",
    CatalogCategory.VEHICLES: "vehicles.json",
}


def normalize_records(category: CatalogCategory, records: List[Dict[str, Any]]) -> list:
    """Validate provider records into catalog models, dropping malformed ones."""
    model = CATEGORY_MODELS[category]
    items = []
    for record in records:
        try:
            items.append(model.model_validate(record))
        except ValidationError as e:
            logger.warning(f"Skipping malformed {category.value} record: {e.error_count()} errors")
    return items


def load_sample(category: CatalogCategory) -> list:
    """Load the bundled sample records for a category."""
    path = os.path.join(DATA_DIR, SAMPLE_FILES[category])
    with open(path, "r", encoding="utf-8") as f:
        return normalize_records(category, json.load(f))


class CatalogService:
    """Client for the catalog provider API."""

    def __init__(self, config: Optional[Settings] = None, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.config = config or default_settings
        self.transport = transport
        self.headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self.config.catalog_api_key}"
        }

    async def search(self, category: CatalogCategory, params: Optional[Dict[str, Any]] = None) -> list:
        """
        Search one category.

        Falls back to sample data in demo mode or on any provider error.
        """
        if self.config.demo_mode:
            logger.info(f"Catalog demo mode: returning sample {category.value}")
            return load_sample(category)

        path, key = ENDPOINTS[category]
        params = {k: v for k, v in (params or {}).items() if v is not None}

        async with httpx.AsyncClient(
            base_url=self.config.catalog_api_base_url,
            headers=self.headers,
            timeout=self.config.catalog_timeout_seconds,
            transport=self.transport
        ) as client:
            try:
                response = await client.get(path, params=params)
                response.raise_for_status()
                records = response.json().get(key) or []
            except (httpx.HTTPError, ValueError, AttributeError) as e:
                logger.error(f"Error searching {category.value}: {e}")
                return load_sample(category)

        return normalize_records(category, records)

    async def search_golf_courses(self, location: str, start_date: str, end_date: str, players: int) -> list:
        return await self.search(CatalogCategory.GOLF_COURSES, {
            "location": location,
            "start_date": start_date,
            "end_date": end_date,
            "players": players
        })

    async def search_hotels(self, location: str, check_in: str, check_out: str, guests: int, rooms: int = 1) -> list:
        return await self.search(CatalogCategory.HOTELS, {
            "location": location,
            "check_in": check_in,
            "check_out": check_out,
            "guests": guests,
            "rooms": rooms
        })

    async def search_restaurants(self, location: str, date: str = None, cuisine: str = None) -> list:
        return await self.search(CatalogCategory.RESTAURANTS, {
            "location": location,
            "date": date,
            "cuisine": cuisine
        })

    async def search_experiences(self, location: str, date: str = None, categories: str = None) -> list:
        return await self.search(CatalogCategory.EXPERIENCES, {
            "location": location,
            "date": date,
            "categories": categories
        })

    async def search_rental_vehicles(
        self,
        location: str,
        pickup_date: str,
        return_date: str,
        vehicle_type: str = None
    ) -> list:
        return await self.search(CatalogCategory.VEHICLES, {
            "location": location,
            "pickup_date": pickup_date,
            "return_date": return_date,
            "vehicle_type": vehicle_type
        })

    async def load_catalog(self, constraints: TripConstraints) -> Catalog:
        """Fetch all four planning categories concurrently."""
        start = constraints.start_date.isoformat()
        end = constraints.end_date.isoformat()
        categories = ",".join(constraints.desired_activity_categories) or None

        golf_courses, hotels, restaurants, experiences = await asyncio.gather(
            self.search_golf_courses(constraints.destination, start, end, constraints.golfer_count),
            self.search_hotels(constraints.destination, start, end, constraints.golfer_count),
            self.search_restaurants(constraints.destination, start),
            self.search_experiences(constraints.destination, start, categories),
        )
        return Catalog(
            golf_courses=golf_courses,
            hotels=hotels,
            restaurants=restaurants,
            experiences=experiences
        )

    async def get_item(self, category: CatalogCategory, item_id: str):
        """Look up a single catalog item by id."""
        for item in await self.search(category):
            if item.id == item_id:
                return item
        raise CatalogError(f"No {category.value} item with id {item_id!r}")


# Global catalog service instance
catalog_service: Optional[CatalogService] = None


def get_catalog_service() -> CatalogService:
    """Get or create the global catalog service."""
    global catalog_service
    if catalog_service is None:
        catalog_service = CatalogService()
    return catalog_service
