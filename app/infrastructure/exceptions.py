"""
Custom exceptions for the Infrastructure layer.
"""
from typing import Optional


class InfrastructureError(Exception):
    """Base class for exceptions in the infrastructure layer."""
    pass


class CourseServiceError(InfrastructureError):
    """
    Raised when a call to the course service fails for any reason:
    transport error, timeout, non-200 status or a malformed body.
    """

    def __init__(self, message: str, status: Optional[int] = None):
        super().__init__(message)
        self.status = status
