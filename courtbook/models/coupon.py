"""Coupon model."""
from sqlalchemy import Column, String, Float, DateTime
from courtbook.core.database import Base
from courtbook.core.ids import new_id


class Coupon(Base):
    """A discount code valid until its expiry."""

    __tablename__ = "coupons"

    id = Column(String(32), primary_key=True, default=new_id)
    code = Column(String, unique=True, nullable=False, index=True)
    discount = Column(Float, nullable=False)  # Currency units, not a percentage
    expiry = Column(DateTime(timezone=True), nullable=False)
