"""
Admission service.
Owns the admission <-> bed lifecycle: admitting occupies a bed, discharging
frees it, and both happen in a single transaction.
"""
from typing import Optional, List
from sqlmodel import Session
from sqlalchemy.exc import SQLAlchemyError
import logging

from app.models.admission import Admission
from app.models.enums import AdmissionStatusEnum, BedStatusEnum
from app.utils.helpers import utc_now
from app.repositories.admission_repo import AdmissionRepository
from app.repositories.bed_repo import BedRepository
from app.repositories.patient_repo import PatientRepository
from app.repositories.employee_repo import EmployeeRepository
from app.schemas.admission import AdmissionCreate, AdmissionUpdate, AdmissionListItem
from app.core.exceptions import (
    BaseAppException,
    ValidationError,
    InvalidStateError,
    InvalidTransitionError,
    AlreadyDischargedError,
    PatientNotFoundError,
    BedNotFoundError,
    AdmissionNotFoundError,
    DoctorNotFoundError,
    BedOccupiedError,
    InconsistentStateError,
    DatabaseError,
)

logger = logging.getLogger("hospital_admin.admission")


class AdmissionService:
    """
    Admission lifecycle service.

    Handles:
    - Admitting a patient into a free bed
    - Discharging an active admission and freeing its bed
    - Editing the clinical fields of an active admission
    - Read access for lists and dashboards

    Every precondition is checked before the first write. A failed
    operation rolls the session back, so no partial admission/bed state is
    ever committed.
    """

    def __init__(self, session: Session):
        self.session = session
        self.admission_repo = AdmissionRepository(session)
        self.bed_repo = BedRepository(session)
        self.patient_repo = PatientRepository(session)
        self.employee_repo = EmployeeRepository(session)

    # ============================================
    # WRITES
    # ============================================

    def admit(self, data: AdmissionCreate) -> Admission:
        """
        Admits a patient into a free bed.

        Args:
            data: Validated admission request

        Returns:
            The created Active admission
        """
        try:
            admission = self._admit_in_transaction(data)
            self.session.commit()
        except BaseAppException as e:
            self.session.rollback()
            logger.warning(f"Admission rejected for bed {data.bed_id}: {e.message}")
            raise
        except SQLAlchemyError as e:
            self.session.rollback()
            logger.exception(f"Admission failed for bed {data.bed_id}")
            raise DatabaseError("admit patient") from e

        self.session.refresh(admission)
        logger.info(
            f"Patient {admission.patient_id} admitted to bed {admission.bed_id} "
            f"(admission {admission.id})"
        )
        return admission

    def _admit_in_transaction(self, data: AdmissionCreate) -> Admission:
        if not self.patient_repo.exists(data.patient_id):
            raise PatientNotFoundError(data.patient_id)

        if data.doctor_id is not None and self.employee_repo.get_doctor(data.doctor_id) is None:
            raise DoctorNotFoundError(data.doctor_id)

        bed = self.bed_repo.get_for_update(data.bed_id)
        if bed is None:
            raise BedNotFoundError(data.bed_id)

        if not bed.can_transition_to(BedStatusEnum.OCCUPIED):
            raise BedOccupiedError(data.bed_id)

        admission = Admission(
            patient_id=data.patient_id,
            doctor_id=data.doctor_id,
            bed_id=data.bed_id,
            diagnosis=data.diagnosis,
            admit_date=utc_now(),
            discharge_date=None,
            status=AdmissionStatusEnum.ACTIVE,
        )
        self.admission_repo.add(admission)

        # Another admit may have taken the bed since it was read
        if not self.bed_repo.mark_occupied(data.bed_id, admission.id):
            raise BedOccupiedError(data.bed_id)

        return admission

    def discharge(self, admission_id: int) -> Admission:
        """
        Discharges an active admission and frees its bed.

        Args:
            admission_id: Admission to discharge

        Returns:
            The discharged admission
        """
        try:
            admission = self._discharge_in_transaction(admission_id)
            self.session.commit()
        except BaseAppException as e:
            self.session.rollback()
            logger.warning(f"Discharge rejected for admission {admission_id}: {e.message}")
            raise
        except SQLAlchemyError as e:
            self.session.rollback()
            logger.exception(f"Discharge failed for admission {admission_id}")
            raise DatabaseError("discharge patient") from e

        self.session.refresh(admission)
        logger.info(
            f"Admission {admission.id} discharged, bed {admission.bed_id} released"
        )
        return admission

    def _discharge_in_transaction(self, admission_id: int) -> Admission:
        admission = self.admission_repo.get_for_update(admission_id)
        if admission is None:
            raise AdmissionNotFoundError(admission_id)

        self._ensure_transition(admission, AdmissionStatusEnum.DISCHARGED)

        if not self.admission_repo.mark_discharged(admission.id, utc_now()):
            # A concurrent discharge got there first
            raise AlreadyDischargedError(admission.id)

        if not self.bed_repo.release(admission.bed_id, admission.id):
            raise InconsistentStateError(
                f"Bed {admission.bed_id} is not held by admission {admission.id}"
            )

        return admission

    def update(self, admission_id: int, data: AdmissionUpdate) -> Admission:
        """
        Applies an update request.

        A status of "Discharged" runs the discharge; other fields may only
        be edited while the admission is active. A status change cannot
        carry field edits in the same request.
        """
        changes = data.model_dump(exclude_unset=True, exclude={"status"})

        if data.status is not None:
            if changes:
                raise ValidationError("Status changes cannot be combined with other fields")

            if data.status == AdmissionStatusEnum.DISCHARGED:
                return self.discharge(admission_id)

            admission = self.get_by_id(admission_id)
            if admission is None:
                raise AdmissionNotFoundError(admission_id)
            raise InvalidTransitionError("Admission", admission.status.value, data.status.value)

        if not changes:
            raise ValidationError("Request body is required")

        admission = self.get_by_id(admission_id)
        if admission is None:
            raise AdmissionNotFoundError(admission_id)

        if not admission.is_active:
            raise InvalidStateError("Discharged admissions cannot be edited")

        doctor_id = changes.get("doctor_id")
        if doctor_id is not None and self.employee_repo.get_doctor(doctor_id) is None:
            raise DoctorNotFoundError(doctor_id)

        for key, value in changes.items():
            setattr(admission, key, value)

        try:
            self.admission_repo.save(admission)
        except SQLAlchemyError as e:
            self.session.rollback()
            logger.exception(f"Update failed for admission {admission_id}")
            raise DatabaseError("update admission") from e

        logger.info(f"Admission {admission_id} updated: {', '.join(changes)}")
        return admission

    def _ensure_transition(self, admission: Admission, target: AdmissionStatusEnum) -> None:
        """Single guard for every admission status change."""
        if admission.can_transition_to(target):
            return

        if admission.status == AdmissionStatusEnum.DISCHARGED and target == AdmissionStatusEnum.DISCHARGED:
            raise AlreadyDischargedError(admission.id)

        raise InvalidTransitionError("Admission", admission.status.value, target.value)

    # ============================================
    # READS
    # ============================================

    def get_by_id(self, admission_id: int) -> Optional[Admission]:
        return self.admission_repo.get_by_id(admission_id)

    def list_all(self) -> List[AdmissionListItem]:
        """Lists every admission with display fields, newest first."""
        return [
            self._to_list_item(admission, patient, bed)
            for admission, patient, bed in self.admission_repo.get_all_with_details()
        ]

    def list_active(self, doctor_id: Optional[int] = None) -> List[AdmissionListItem]:
        items = [item for item in self.list_all() if item.status == AdmissionStatusEnum.ACTIVE]
        if doctor_id is not None:
            items = [item for item in items if item.doctor_id == doctor_id]
        return items

    def list_by_patient(self, patient_id: int) -> List[Admission]:
        return self.admission_repo.get_by_patient(patient_id)

    @staticmethod
    def _to_list_item(admission, patient, bed) -> AdmissionListItem:
        return AdmissionListItem(
            id=admission.id,
            patient_id=admission.patient_id,
            doctor_id=admission.doctor_id,
            bed_id=admission.bed_id,
            diagnosis=admission.diagnosis,
            admit_date=admission.admit_date,
            discharge_date=admission.discharge_date,
            status=admission.status,
            patient_id_display=patient.patient_id_display if patient else None,
            patient_name=patient.full_name if patient else None,
            bed_number=bed.bed_number if bed else None,
            ward_type=bed.ward_type if bed else None,
        )
