"""
Organization data models.

Contains DTOs for nonprofit organization records after ingestion.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Tuple, Union


@dataclass(frozen=True)
class ImageRef:
    """Card image reference."""

    url: str
    alt: str = ""


@dataclass(frozen=True)
class Organization:
    """One nonprofit organization as held in memory.

    Numeric fields are None when the datastore has no value; they are
    never coerced to zero.
    """

    id: Union[int, str]
    name: str
    focus_areas: Tuple[str, ...] = ()
    location: str = ""
    budget: Optional[float] = None  # annual, US$
    staff_count: Optional[int] = None
    year_founded: Optional[int] = None
    impact_metric: Optional[str] = None
    image: Optional[ImageRef] = None
    description: Optional[str] = None
    website: Optional[str] = None
    created_at: Optional[datetime] = None
