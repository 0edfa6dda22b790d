"""
Admission endpoints.
"""
from fastapi import APIRouter, Depends, HTTPException, Path, status
from sqlmodel import Session
from typing import List

from app.core.database import get_session
from app.core.exceptions import (
    BaseAppException,
    ValidationError,
    InvalidStateError,
    NotFoundError,
    BedOccupiedError,
    AuthenticationError,
    InactiveUserError,
)
from app.schemas.admission import (
    AdmissionCreate,
    AdmissionUpdate,
    AdmissionResponse,
    AdmissionListItem,
)
from app.schemas.responses import MessageResponse
from app.services.admission_service import AdmissionService

router = APIRouter()


def to_http_exception(error: BaseAppException) -> HTTPException:
    """Maps a domain error to its HTTP status."""
    if isinstance(error, (ValidationError, InvalidStateError)):
        return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=error.message)
    if isinstance(error, NotFoundError):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=error.message)
    if isinstance(error, BedOccupiedError):
        return HTTPException(status_code=status.HTTP_409_CONFLICT, detail=error.message)
    if isinstance(error, InactiveUserError):
        return HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=error.message)
    if isinstance(error, AuthenticationError):
        return HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=error.message)
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="Admission process failed"
    )


@router.get("", response_model=List[AdmissionListItem])
def list_admissions(session: Session = Depends(get_session)):
    """Lists all admissions, newest first."""
    return AdmissionService(session).list_all()


@router.post("", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
def admit_patient(
    request: AdmissionCreate,
    session: Session = Depends(get_session)
):
    """Admits a patient and marks the bed as occupied."""
    service = AdmissionService(session)

    try:
        admission = service.admit(request)
    except BaseAppException as e:
        raise to_http_exception(e)

    return MessageResponse(
        success=True,
        message="Patient admitted and bed marked as occupied",
        data={"admission_id": admission.id, "bed_id": admission.bed_id}
    )


@router.api_route(
    "/discharge/{admission_id}",
    methods=["POST", "PUT"],
    response_model=MessageResponse
)
def discharge_patient(
    admission_id: int = Path(..., gt=0),
    session: Session = Depends(get_session)
):
    """Discharges a patient and frees the bed."""
    service = AdmissionService(session)

    try:
        admission = service.discharge(admission_id)
    except BaseAppException as e:
        raise to_http_exception(e)

    return MessageResponse(
        success=True,
        message="Patient discharged successfully",
        data={"admission_id": admission.id, "bed_id": admission.bed_id}
    )


@router.put("/update/{admission_id}", response_model=MessageResponse)
def update_admission(
    request: AdmissionUpdate,
    admission_id: int = Path(..., gt=0),
    session: Session = Depends(get_session)
):
    """Updates an admission; status "Discharged" runs the discharge."""
    service = AdmissionService(session)

    try:
        admission = service.update(admission_id, request)
    except BaseAppException as e:
        raise to_http_exception(e)

    if request.status is not None:
        message = "Patient discharged successfully"
    else:
        message = "Admission updated"

    return MessageResponse(
        success=True,
        message=message,
        data={"admission_id": admission.id, "status": admission.status.value}
    )


@router.get("/patient/{patient_id}", response_model=List[AdmissionResponse])
def list_patient_admissions(
    patient_id: int = Path(..., gt=0),
    session: Session = Depends(get_session)
):
    """Lists a patient's admissions, newest first."""
    return AdmissionService(session).list_by_patient(patient_id)


@router.get("/{admission_id}", response_model=AdmissionResponse)
def get_admission(
    admission_id: int = Path(..., gt=0),
    session: Session = Depends(get_session)
):
    """Returns one admission."""
    admission = AdmissionService(session).get_by_id(admission_id)

    if not admission:
        raise HTTPException(status_code=404, detail="Admission not found")

    return admission
