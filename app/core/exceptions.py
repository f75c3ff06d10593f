# ============================================================================
# Custom Exceptions
# ============================================================================
from typing import Optional


class AlumniNetworkException(Exception):
    """Base exception for the alumni network backend"""
    def __init__(
        self,
        detail: str,
        status_code: int = 400,
        error_code: Optional[str] = None
    ):
        self.detail = detail
        self.status_code = status_code
        self.error_code = error_code or "ALUMNI_NETWORK_ERROR"
        super().__init__(self.detail)


class InvalidArgument(AlumniNetworkException):
    def __init__(self, message: str):
        super().__init__(
            detail=message,
            status_code=400,
            error_code="INVALID_ARGUMENT"
        )


class DataAccessFailure(AlumniNetworkException):
    def __init__(self, operation: str, reason: str):
        super().__init__(
            detail=f"Data access failed during {operation}: {reason}",
            status_code=503,
            error_code="DATA_ACCESS_FAILURE"
        )
        self.operation = operation


class PartialComputationFailure(AlumniNetworkException):
    """One section of a composed analytics payload failed"""
    def __init__(self, section: str, cause: Exception):
        status_code = cause.status_code if isinstance(cause, AlumniNetworkException) else 500
        reason = cause.detail if isinstance(cause, AlumniNetworkException) else str(cause)
        super().__init__(
            detail=f"Failed to compute '{section}' analytics: {reason or type(cause).__name__}",
            status_code=status_code,
            error_code="PARTIAL_COMPUTATION_FAILURE"
        )
        self.section = section
        self.cause = cause
