"""
System enumerations and status transition tables.
Centralized to avoid circular imports.
"""
from enum import Enum


class AdmissionStatusEnum(str, Enum):
    """Lifecycle status of an admission."""
    ACTIVE = "Active"
    DISCHARGED = "Discharged"


class BedStatusEnum(str, Enum):
    """Derived occupancy status of a bed."""
    AVAILABLE = "Available"
    OCCUPIED = "Occupied"


class RoleEnum(str, Enum):
    """Staff roles; each one has its own dashboard."""
    HR = "HR"
    DOCTOR = "Doctor"
    FRONT_DESK = "FrontDesk"


class WardTypeEnum(str, Enum):
    """Common ward descriptors used by the seed data."""
    GENERAL = "General"
    ICU = "ICU"
    PEDIATRIC = "Pediatric"
    MATERNITY = "Maternity"
    PRIVATE = "Private"


# ============================================
# TRANSITION TABLES
# ============================================

# Active is the only initial state; Discharged is terminal
ADMISSION_TRANSITIONS = {
    AdmissionStatusEnum.ACTIVE: frozenset({AdmissionStatusEnum.DISCHARGED}),
    AdmissionStatusEnum.DISCHARGED: frozenset(),
}

BED_TRANSITIONS = {
    BedStatusEnum.AVAILABLE: frozenset({BedStatusEnum.OCCUPIED}),
    BedStatusEnum.OCCUPIED: frozenset({BedStatusEnum.AVAILABLE}),
}

INITIAL_ADMISSION_STATUS = AdmissionStatusEnum.ACTIVE
