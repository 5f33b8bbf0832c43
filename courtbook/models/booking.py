"""Booking model."""
from sqlalchemy import Column, String, Float, DateTime, JSON, Index
from courtbook.core.database import Base
from courtbook.core.ids import new_id, utcnow


class Booking(Base):
    """A reservation of one or more slots on a court for a given date."""

    __tablename__ = "bookings"

    id = Column(String(32), primary_key=True, default=new_id)
    # No foreign key: the court may be deleted after the booking was made
    court_id = Column(String(32), nullable=False, index=True)
    court_name = Column(String, nullable=False)  # Snapshot at creation time
    user_email = Column(String, nullable=False, index=True)
    date = Column(String, nullable=False)
    slots = Column(JSON, nullable=False)
    total_price = Column(Float, nullable=False)
    status = Column(String, nullable=False, default="pending")  # pending, approved, rejected, confirmed, paid
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)

    __table_args__ = (
        Index("ix_bookings_user_status", "user_email", "status"),
    )
