"""Booking endpoints."""
from typing import List, Optional
from fastapi import APIRouter, Depends, Query

from courtbook.api.deps import get_booking_service, get_current_identity, require_admin
from courtbook.schemas import (
    BookingCreate,
    BookingInDB,
    BookingStatusUpdate,
    InsertResult,
    MessageResult,
    SuccessResult,
)
from courtbook.services.booking_service import BookingService

router = APIRouter(prefix="/bookings", tags=["bookings"])


@router.post("", response_model=InsertResult)
async def create_booking(
    booking: BookingCreate,
    service: BookingService = Depends(get_booking_service),
):
    """
    Create a booking request.

    The booking always starts as pending, whatever status the client sends.

    Args:
        booking: Booking details
        service: Booking service

    Returns:
        Id of the new booking
    """
    created = await service.create(booking)
    return InsertResult(inserted_id=created.id)


@router.get("", response_model=List[BookingInDB], dependencies=[Depends(require_admin)])
async def list_bookings(
    status: Optional[str] = Query(default=None, description="Exact status filter"),
    search: str = Query(default="", description="Case-insensitive court name filter"),
    service: BookingService = Depends(get_booking_service),
):
    """List all bookings (admin)."""
    return await service.search(status=status, search=search or None)


@router.get(
    "/approved/{email}",
    response_model=List[BookingInDB],
    dependencies=[Depends(get_current_identity)],
)
async def list_approved_bookings(email: str, service: BookingService = Depends(get_booking_service)):
    """Approved bookings for a user."""
    return await service.list_for_user(email, "approved")


@router.get(
    "/paid/{email}",
    response_model=List[BookingInDB],
    dependencies=[Depends(get_current_identity)],
)
async def list_paid_bookings(email: str, service: BookingService = Depends(get_booking_service)):
    """Paid bookings for a user."""
    return await service.list_for_user(email, "paid")


@router.get(
    "/pending/{email}",
    response_model=List[BookingInDB],
    dependencies=[Depends(get_current_identity)],
)
async def list_pending_bookings(email: str, service: BookingService = Depends(get_booking_service)):
    """Pending bookings for a user."""
    return await service.list_for_user(email, "pending")


@router.get("/{booking_id}", response_model=BookingInDB, dependencies=[Depends(get_current_identity)])
async def get_booking(booking_id: str, service: BookingService = Depends(get_booking_service)):
    """Get a specific booking by ID."""
    return await service.get(booking_id)


@router.patch("/{booking_id}", response_model=MessageResult, dependencies=[Depends(require_admin)])
async def update_booking_status(
    booking_id: str,
    update: BookingStatusUpdate,
    service: BookingService = Depends(get_booking_service),
):
    """
    Approve, reject, confirm or mark a booking paid (admin).

    Approving a booking promotes its owner to member.

    Args:
        booking_id: Booking ID
        update: Target status
        service: Booking service
    """
    await service.transition(booking_id, update.status)
    return MessageResult(message=f"Booking {update.status} successfully.")


@router.delete("/{booking_id}", response_model=SuccessResult, dependencies=[Depends(get_current_identity)])
async def delete_booking(booking_id: str, service: BookingService = Depends(get_booking_service)):
    """Delete a booking."""
    await service.delete(booking_id)
    return SuccessResult()
