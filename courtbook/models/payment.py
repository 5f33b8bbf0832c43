"""Payment model."""
from sqlalchemy import Column, String, Float, DateTime
from courtbook.core.database import Base
from courtbook.core.ids import new_id, utcnow


class Payment(Base):
    """A completed payment for a booking."""

    __tablename__ = "payments"

    id = Column(String(32), primary_key=True, default=new_id)
    booking_id = Column(String(32), nullable=False, index=True)
    email = Column(String, nullable=True, index=True)
    amount = Column(Float, nullable=True)
    payment_method = Column(String, nullable=True)
    transaction_id = Column(String, nullable=True)
    discount = Column(Float, nullable=False, default=0)
    coupon = Column(String, nullable=True)
    # recorded, or orphaned when the booking update found nothing to mark paid
    status = Column(String, nullable=False, default="recorded")
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False, index=True)
