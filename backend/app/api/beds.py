"""
Bed endpoints.
Beds are read-only here; occupancy only changes through admissions.
"""
from fastapi import APIRouter, Depends, HTTPException, Path
from sqlmodel import Session
from typing import List

from app.core.database import get_session
from app.schemas.bed import BedResponse
from app.repositories.bed_repo import BedRepository

router = APIRouter()


@router.get("", response_model=List[BedResponse])
def list_beds(session: Session = Depends(get_session)):
    """Lists every bed with its derived Occupied/Available status."""
    return BedRepository(session).get_all()


@router.get("/available", response_model=List[BedResponse])
def list_available_beds(session: Session = Depends(get_session)):
    """Lists beds with no active admission."""
    return BedRepository(session).get_available()


@router.get("/ward/{ward_type}", response_model=List[BedResponse])
def list_ward_beds(ward_type: str, session: Session = Depends(get_session)):
    """Lists the beds of one ward."""
    return BedRepository(session).get_by_ward(ward_type)


@router.get("/{bed_id}", response_model=BedResponse)
def get_bed(
    bed_id: int = Path(..., gt=0),
    session: Session = Depends(get_session)
):
    """Returns one bed."""
    bed = BedRepository(session).get_by_id(bed_id)

    if not bed:
        raise HTTPException(status_code=404, detail="Bed not found")

    return bed
