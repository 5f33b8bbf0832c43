"""Court schemas."""
from datetime import datetime
from typing import List, Optional
from pydantic import Field

from courtbook.schemas.base import CamelModel


class CourtBase(CamelModel):
    """Base court schema."""

    type: str = Field(min_length=1)
    image: str = Field(min_length=1)
    price: float = Field(gt=0)
    slot_times: List[str] = Field(min_length=1)


class CourtCreate(CourtBase):
    """Schema for creating a court."""

    pass


class CourtUpdate(CamelModel):
    """Schema for updating a court."""

    type: Optional[str] = None
    image: Optional[str] = None
    price: Optional[float] = Field(default=None, gt=0)
    slot_times: Optional[List[str]] = None


class CourtInDB(CourtBase):
    """Schema for court from database."""

    id: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
