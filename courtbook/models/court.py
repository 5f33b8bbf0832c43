"""Court model."""
from sqlalchemy import Column, String, Float, DateTime, JSON
from courtbook.core.database import Base
from courtbook.core.ids import new_id, utcnow


class Court(Base):
    """Represents a bookable court."""

    __tablename__ = "courts"

    id = Column(String(32), primary_key=True, default=new_id)
    type = Column(String, nullable=False)  # e.g., "tennis", "badminton"
    image = Column(String, nullable=False)
    price = Column(Float, nullable=False)
    slot_times = Column(JSON, nullable=False, default=list)  # ["08:00", "09:00", ...]
    created_at = Column(DateTime(timezone=True), default=utcnow)
    updated_at = Column(DateTime(timezone=True), onupdate=utcnow)
