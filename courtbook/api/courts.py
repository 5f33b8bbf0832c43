"""Court endpoints."""
from typing import List
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from courtbook.api.deps import require_admin
from courtbook.core.database import get_db
from courtbook.core.exceptions import NotFoundException, ValidationException
from courtbook.core.ids import is_valid_id, normalize_id
from courtbook.repositories.court_repository import CourtRepository
from courtbook.schemas import CourtCreate, CourtInDB, CourtUpdate, InsertResult, SuccessResult

router = APIRouter(prefix="/courts", tags=["courts"])


def _court_id(court_id: str) -> str:
    if not is_valid_id(court_id):
        raise ValidationException("Invalid court ID")
    return normalize_id(court_id)


@router.get("", response_model=List[CourtInDB])
async def list_courts(db: AsyncSession = Depends(get_db)):
    """List all courts."""
    return await CourtRepository(db).list_all()


@router.post("", response_model=InsertResult, dependencies=[Depends(require_admin)])
async def create_court(court: CourtCreate, db: AsyncSession = Depends(get_db)):
    """
    Add a court (admin).

    Args:
        court: Court type, image, price and slot times
        db: Database session

    Returns:
        Id of the new court
    """
    created = await CourtRepository(db).create(**court.model_dump())
    return InsertResult(inserted_id=created.id)


@router.put("/{court_id}", response_model=SuccessResult, dependencies=[Depends(require_admin)])
async def update_court(
    court_id: str,
    court_update: CourtUpdate,
    db: AsyncSession = Depends(get_db),
):
    """Update a court's information (admin)."""
    update_data = court_update.model_dump(exclude_unset=True)
    if not update_data:
        raise ValidationException("Nothing to update")
    if not await CourtRepository(db).update_by_id(_court_id(court_id), **update_data):
        raise NotFoundException("Court not found")
    return SuccessResult()


@router.delete("/{court_id}", response_model=SuccessResult, dependencies=[Depends(require_admin)])
async def delete_court(court_id: str, db: AsyncSession = Depends(get_db)):
    """
    Delete a court (admin).

    Existing bookings keep their court id and name snapshot.
    """
    if not await CourtRepository(db).delete_by_id(_court_id(court_id)):
        raise NotFoundException("Court not found")
    return SuccessResult()
