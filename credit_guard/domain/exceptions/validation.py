"""Applicant validation exceptions."""

from typing import List, Optional

from .base import DomainException


class InvalidInputException(DomainException):
    """Raised when an applicant record violates a required invariant."""

    def __init__(self, message: str, fields: Optional[List[str]] = None):
        super().__init__(
            message=message,
            code="INVALID_INPUT",
        )
        self.fields = fields or []
