"""
Catalog models - Bookable venues returned by the catalog providers.

Providers disagree on field names (``pricePerNight`` vs ``price_per_night``,
``cuisine`` vs ``cuisine_type``, numeric ids, ...). The aliases below are the
normalization layer: everything past this module only sees the canonical
shape.
"""
from decimal import Decimal
from enum import Enum
from typing import Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator, model_validator


class CatalogCategory(str, Enum):
    """Catalog categories exposed by the providers."""
    GOLF_COURSES = "golf-courses"
    HOTELS = "hotels"
    RESTAURANTS = "restaurants"
    EXPERIENCES = "experiences"
    VEHICLES = "vehicles"


PRICE_KEYS = ("price", "price_usd", "cost")
NIGHTLY_RATE_KEYS = ("price_per_night", "pricePerNight", "nightly_rate")


def _first_present(data: dict, keys: tuple) -> object:
    return next((data[k] for k in keys if data.get(k) is not None), None)


class CatalogItem(BaseModel):
    """Fields shared by every catalog entry."""
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    id: str = Field(..., validation_alias=AliasChoices("id", "_id", "item_id"))
    name: str
    price: Decimal = Field(
        Decimal("0"),
        ge=0,
        validation_alias=AliasChoices(*PRICE_KEYS),
        description="Per round, per night or per person depending on the variant"
    )
    rating: float = 0.0
    description: str = ""
    address: str = ""
    api_source: str = Field("internal", validation_alias=AliasChoices("api_source", "apiSource", "source"))

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, v):
        return str(v) if v is not None else v


class GolfCourse(CatalogItem):
    difficulty: str = ""
    holes: int = 18
    par: Optional[int] = None
    yardage: Optional[int] = None
    available_times: list[str] = Field(
        default_factory=list,
        validation_alias=AliasChoices("available_times", "availableTimes", "tee_times")
    )


class Hotel(CatalogItem):
    price_per_night: Decimal = Field(
        Decimal("0"),
        ge=0,
        validation_alias=AliasChoices(*NIGHTLY_RATE_KEYS)
    )

    @model_validator(mode="before")
    @classmethod
    def mirror_nightly_rate(cls, data):
        """Fill whichever of price / price_per_night the provider left out."""
        if not isinstance(data, dict):
            return data
        data = dict(data)
        nightly = _first_present(data, NIGHTLY_RATE_KEYS)
        price = _first_present(data, PRICE_KEYS)
        if nightly is None and price is not None:
            data["price_per_night"] = price
        elif nightly is not None and price is None:
            data["price"] = nightly
        return data


class Restaurant(CatalogItem):
    cuisine_type: str = Field("", validation_alias=AliasChoices("cuisine_type", "cuisineType", "cuisine"))
    price_range: str = Field("", validation_alias=AliasChoices("price_range", "priceRange"))
    hours: str = ""


class Experience(CatalogItem):
    category: str = ""
    duration: str = ""
    available_times: list[str] = Field(
        default_factory=list,
        validation_alias=AliasChoices("available_times", "availableTimes")
    )


class Vehicle(BaseModel):
    """A rental vehicle listing."""
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    id: str
    type: str
    name: str
    description: str = ""
    capacity: int = 1
    price_per_day: Decimal = Field(
        Decimal("0"),
        ge=0,
        validation_alias=AliasChoices("price_per_day", "pricePerDay", "daily_rate")
    )
    features: list[str] = Field(default_factory=list)
    available: bool = True


class Catalog(BaseModel):
    """Candidate venues for one planning request, in provider order."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    golf_courses: list[GolfCourse] = Field(
        default_factory=list,
        validation_alias=AliasChoices("golf_courses", "golfCourses")
    )
    hotels: list[Hotel] = Field(default_factory=list)
    restaurants: list[Restaurant] = Field(default_factory=list)
    experiences: list[Experience] = Field(default_factory=list)


CATEGORY_MODELS = {
    CatalogCategory.GOLF_COURSES: GolfCourse,
    CatalogCategory.HOTELS: Hotel,
    CatalogCategory.RESTAURANTS: Restaurant,
    CatalogCategory.EXPERIENCES: Experience,
    CatalogCategory.VEHICLES: Vehicle,
}
