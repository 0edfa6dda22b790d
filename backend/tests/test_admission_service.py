"""
Tests for the admission service and its bed bookkeeping.
"""
import threading
from datetime import timezone

import pytest
from sqlmodel import SQLModel, Session, select

from app.core.database import build_engine
from app.core.exceptions import (
    AlreadyDischargedError,
    BedOccupiedError,
    InconsistentStateError,
    InvalidTransitionError,
    PatientNotFoundError,
    ValidationError,
)
from app.models.admission import Admission
from app.models.bed import Bed
from app.models.enums import AdmissionStatusEnum, BedStatusEnum, RoleEnum
from app.models.patient import Patient
from app.models.user import User
from app.repositories.bed_repo import BedRepository
from app.schemas.admission import AdmissionCreate, AdmissionUpdate
from app.services.admission_service import AdmissionService


def active_admissions_for(session, bed_id):
    query = select(Admission).where(
        Admission.bed_id == bed_id,
        Admission.status == AdmissionStatusEnum.ACTIVE,
    )
    return session.exec(query).all()


class TestAdmissionService:
    """Tests for AdmissionService."""

    def test_bed_tracks_active_admission(self, session, ward):
        """An occupied bed always points at its one Active admission."""
        service = AdmissionService(session)
        bed = ward["beds"][0]

        admission = service.admit(AdmissionCreate(patient_id=ward["patients"][0].id, bed_id=bed.id))

        session.refresh(bed)
        assert bed.status == BedStatusEnum.OCCUPIED
        assert [a.id for a in active_admissions_for(session, bed.id)] == [admission.id]
        assert bed.current_admission_id == admission.id

        service.discharge(admission.id)

        session.refresh(bed)
        assert bed.status == BedStatusEnum.AVAILABLE
        assert active_admissions_for(session, bed.id) == []

    def test_rejected_admit_writes_nothing(self, session, ward):
        service = AdmissionService(session)
        bed = ward["beds"][0]

        with pytest.raises(PatientNotFoundError):
            service.admit(AdmissionCreate(patient_id=999, bed_id=bed.id))

        assert session.exec(select(Admission)).all() == []
        session.refresh(bed)
        assert bed.is_occupied is False

    def test_discharged_is_terminal(self, session, ward):
        service = AdmissionService(session)
        admission = service.admit(
            AdmissionCreate(patient_id=ward["patients"][0].id, bed_id=ward["beds"][0].id)
        )
        service.discharge(admission.id)

        with pytest.raises(AlreadyDischargedError):
            service.discharge(admission.id)

        with pytest.raises(InvalidTransitionError):
            service.update(admission.id, AdmissionUpdate(status=AdmissionStatusEnum.ACTIVE))

        session.refresh(admission)
        assert admission.status == AdmissionStatusEnum.DISCHARGED

    def test_discharge_with_mismatched_bed_rolls_back(self, session, ward):
        """If the bed does not point back at the admission nothing changes."""
        service = AdmissionService(session)
        bed = ward["beds"][0]
        admission = service.admit(AdmissionCreate(patient_id=ward["patients"][0].id, bed_id=bed.id))

        bed.current_admission_id = admission.id + 100
        session.add(bed)
        session.commit()

        with pytest.raises(InconsistentStateError):
            service.discharge(admission.id)

        session.refresh(admission)
        assert admission.status == AdmissionStatusEnum.ACTIVE
        assert admission.discharge_date is None

    def test_lost_check_and_set_is_a_conflict(self, session, ward, monkeypatch):
        """A bed read as free but taken before the write is reported as occupied."""
        bed = ward["beds"][0]
        first, second = ward["patients"]

        stale_bed = Bed(id=bed.id, bed_number=bed.bed_number, ward_type=bed.ward_type, is_occupied=False)

        AdmissionService(session).admit(AdmissionCreate(patient_id=first.id, bed_id=bed.id))

        service = AdmissionService(session)
        monkeypatch.setattr(service.bed_repo, "get_for_update", lambda bed_id: stale_bed)

        with pytest.raises(BedOccupiedError):
            service.admit(AdmissionCreate(patient_id=second.id, bed_id=bed.id))

        assert len(active_admissions_for(session, bed.id)) == 1

    def test_mark_occupied_only_flips_free_beds(self, session, ward):
        repo = BedRepository(session)
        bed = ward["beds"][0]

        assert repo.mark_occupied(bed.id, 1) is True
        assert repo.mark_occupied(bed.id, 2) is False
        session.commit()

        session.refresh(bed)
        assert bed.current_admission_id == 1

    def test_release_requires_matching_admission(self, session, ward):
        repo = BedRepository(session)
        bed = ward["beds"][0]
        repo.mark_occupied(bed.id, 1)

        assert repo.release(bed.id, 2) is False
        assert repo.release(bed.id, 1) is True

    def test_list_active_for_doctor(self, session, ward, create_employee):
        service = AdmissionService(session)
        doctor = ward["doctor"]
        other = create_employee(first_name="Adrian", last_name="Villanueva")

        mine = service.admit(AdmissionCreate(
            patient_id=ward["patients"][0].id, bed_id=ward["beds"][0].id, doctor_id=doctor.id
        ))
        service.admit(AdmissionCreate(
            patient_id=ward["patients"][1].id, bed_id=ward["beds"][1].id, doctor_id=other.id
        ))

        assert [item.id for item in service.list_active(doctor_id=doctor.id)] == [mine.id]

    def test_get_by_id_returns_created_fields(self, session, ward):
        service = AdmissionService(session)
        data = AdmissionCreate(
            patient_id=ward["patients"][1].id,
            bed_id=ward["beds"][2].id,
            doctor_id=ward["doctor"].id,
            diagnosis="Dengue fever",
        )
        created = service.admit(data)

        stored = service.get_by_id(created.id)
        assert stored.patient_id == data.patient_id
        assert stored.bed_id == data.bed_id
        assert stored.doctor_id == data.doctor_id
        assert stored.diagnosis == data.diagnosis
        assert stored.status == AdmissionStatusEnum.ACTIVE

    def test_stale_discharge_does_not_free_reused_bed(self, session, ward):
        """A repeated discharge of an old admission never touches the next occupant."""
        service = AdmissionService(session)
        bed = ward["beds"][0]
        first, second = ward["patients"]

        old = service.admit(AdmissionCreate(patient_id=first.id, bed_id=bed.id))
        service.discharge(old.id)
        current = service.admit(AdmissionCreate(patient_id=second.id, bed_id=bed.id))

        with pytest.raises(AlreadyDischargedError):
            service.discharge(old.id)

        session.refresh(bed)
        assert bed.is_occupied is True
        assert bed.current_admission_id == current.id
        assert [a.id for a in active_admissions_for(session, bed.id)] == [current.id]

    def test_status_update_cannot_carry_other_fields(self, session, ward):
        service = AdmissionService(session)
        bed = ward["beds"][0]
        admission = service.admit(
            AdmissionCreate(patient_id=ward["patients"][0].id, bed_id=bed.id, diagnosis="Pneumonia")
        )

        with pytest.raises(ValidationError):
            service.update(
                admission.id,
                AdmissionUpdate(status=AdmissionStatusEnum.DISCHARGED, doctor_id=ward["doctor"].id),
            )

        session.refresh(admission)
        assert admission.status == AdmissionStatusEnum.ACTIVE
        assert admission.doctor_id is None
        session.refresh(bed)
        assert bed.is_occupied is True


class TestTimestamps:
    """Timestamps are timezone-aware UTC values."""

    def test_model_defaults_are_utc(self):
        assert Admission(patient_id=1, bed_id=1).admit_date.tzinfo == timezone.utc
        assert Bed(bed_number="G-101", ward_type="General").updated_at.tzinfo == timezone.utc
        assert Patient(first_name="Maria").date_registered.tzinfo == timezone.utc
        user = User(username="desk@hospital.ph", hashed_password="x", access_role=RoleEnum.FRONT_DESK)
        assert user.created_at.tzinfo == timezone.utc

    def test_service_writes_utc_timestamps(self, session, ward, monkeypatch):
        service = AdmissionService(session)
        added = []
        discharged_at = []

        original_add = service.admission_repo.add
        original_mark_discharged = service.admission_repo.mark_discharged

        def record_add(admission):
            added.append(admission.admit_date)
            return original_add(admission)

        def record_mark_discharged(admission_id, when):
            discharged_at.append(when)
            return original_mark_discharged(admission_id, when)

        monkeypatch.setattr(service.admission_repo, "add", record_add)
        monkeypatch.setattr(service.admission_repo, "mark_discharged", record_mark_discharged)

        admission = service.admit(
            AdmissionCreate(patient_id=ward["patients"][0].id, bed_id=ward["beds"][0].id)
        )
        service.discharge(admission.id)

        assert added[0].tzinfo == timezone.utc
        assert discharged_at[0].tzinfo == timezone.utc
        assert discharged_at[0] >= added[0]


class TestConcurrentAdmissions:
    """Two simultaneous admits into one free bed."""

    def test_only_one_admit_wins(self, tmp_path):
        engine = build_engine(f"sqlite:///{tmp_path / 'race.db'}")
        SQLModel.metadata.create_all(engine)

        with Session(engine) as session:
            bed = Bed(bed_number="G-101", ward_type="General")
            patients = [Patient(first_name="Maria"), Patient(first_name="Jose")]
            session.add(bed)
            session.add_all(patients)
            session.commit()
            bed_id = bed.id
            patient_ids = [p.id for p in patients]

        barrier = threading.Barrier(2)
        outcomes = []

        def attempt(patient_id):
            with Session(engine) as session:
                barrier.wait()
                try:
                    admission = AdmissionService(session).admit(
                        AdmissionCreate(patient_id=patient_id, bed_id=bed_id)
                    )
                    outcomes.append(("admitted", admission.id))
                except BedOccupiedError as e:
                    outcomes.append(("rejected", type(e)))

        threads = [threading.Thread(target=attempt, args=(pid,)) for pid in patient_ids]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        winners = [value for outcome, value in outcomes if outcome == "admitted"]
        losers = [value for outcome, value in outcomes if outcome == "rejected"]
        assert len(outcomes) == 2
        assert len(winners) == 1
        assert losers == [BedOccupiedError]

        with Session(engine) as session:
            bed = session.get(Bed, bed_id)
            assert bed.is_occupied is True
            assert bed.current_admission_id == winners[0]
            assert len(active_admissions_for(session, bed_id)) == 1

        engine.dispose()
