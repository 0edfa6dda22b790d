"""
Custom system exceptions.
Semantic exceptions so endpoints can map failures to HTTP status codes.
"""


class BaseAppException(Exception):
    """
    Base application exception.
    Every custom exception inherits from this one.
    """
    def __init__(self, message: str, code: str = "ERROR"):
        self.message = message
        self.code = code
        super().__init__(self.message)


# ============================================
# VALIDATION ERRORS
# ============================================

class ValidationError(BaseAppException):
    """Missing or malformed input."""
    def __init__(self, message: str):
        super().__init__(message, "VALIDATION_ERROR")


class InvalidStateError(BaseAppException):
    """The entity is not in a state that allows the operation."""
    def __init__(self, message: str, code: str = "INVALID_STATE"):
        super().__init__(message, code)


class InvalidTransitionError(InvalidStateError):
    """Requested status change is not a legal transition."""
    def __init__(self, entity: str, current: str, target: str):
        super().__init__(
            f"{entity} cannot move from '{current}' to '{target}'",
            "INVALID_TRANSITION"
        )
        self.current = current
        self.target = target


class AlreadyDischargedError(InvalidStateError):
    """Discharge requested for an admission that is already discharged."""
    def __init__(self, admission_id: int):
        super().__init__(
            f"Admission {admission_id} is already discharged",
            "ALREADY_DISCHARGED"
        )
        self.admission_id = admission_id


# ============================================
# NOT FOUND ERRORS
# ============================================

class NotFoundError(BaseAppException):
    """Resource not found."""
    def __init__(self, resource: str, identifier):
        super().__init__(
            f"{resource} with id '{identifier}' not found",
            "NOT_FOUND"
        )
        self.resource = resource
        self.identifier = identifier


class PatientNotFoundError(NotFoundError):
    def __init__(self, patient_id):
        super().__init__("Patient", patient_id)


class BedNotFoundError(NotFoundError):
    def __init__(self, bed_id):
        super().__init__("Bed", bed_id)


class AdmissionNotFoundError(NotFoundError):
    def __init__(self, admission_id):
        super().__init__("Admission", admission_id)


class DoctorNotFoundError(NotFoundError):
    def __init__(self, doctor_id):
        super().__init__("Doctor", doctor_id)


# ============================================
# CONFLICT ERRORS
# ============================================

class BedOccupiedError(BaseAppException):
    """The bed already holds an active admission."""
    def __init__(self, bed_id):
        super().__init__(
            f"Bed {bed_id} is already occupied",
            "BED_OCCUPIED"
        )
        self.bed_id = bed_id


# ============================================
# AUTHENTICATION ERRORS
# ============================================

class AuthenticationError(BaseAppException):
    """Invalid credentials or token."""
    def __init__(self, message: str = "Invalid credentials"):
        super().__init__(message, "AUTHENTICATION_ERROR")


class InactiveUserError(AuthenticationError):
    """Credentials are valid but the account is disabled."""
    def __init__(self):
        super().__init__("Account is inactive")
        self.code = "INACTIVE_USER"


# ============================================
# STORAGE ERRORS
# ============================================

class InconsistentStateError(BaseAppException):
    """Stored rows disagree with each other; nothing was written."""
    def __init__(self, message: str):
        super().__init__(message, "INCONSISTENT_STATE")

class DatabaseError(BaseAppException):
    """Storage failure; the transaction has been rolled back."""
    def __init__(self, operation: str):
        super().__init__(
            f"Database operation failed: {operation}",
            "DATABASE_ERROR"
        )
        self.operation = operation
