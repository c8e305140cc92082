"""Structured travel itinerary returned by the itinerary endpoint."""

from typing import List, Optional

from pydantic import Field

from backend.src.data_classes.base import CamelModel


class TripActivity(CamelModel):
    """A single scheduled activity."""

    time: str
    activity: str
    location: str
    cost: str
    category: str
    description: Optional[str] = None


class TripDay(CamelModel):
    """Activities planned for one day of the trip."""

    day: int
    date: str
    activities: List[TripActivity] = Field(default_factory=list)
    total_cost: str


class TripItinerary(CamelModel):
    """Day-by-day itinerary for a trip."""

    destination: str = Field(..., min_length=1)
    duration: str
    total_budget: str
    overview: str
    days: List[TripDay]
