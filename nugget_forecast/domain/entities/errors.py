"""
Domain Errors

Prediction services are total over their typed inputs and never raise.
These errors are reserved for contract violations detected at the boundary.
"""

from typing import Any, Dict, Optional


class DomainError(Exception):
    """Base class for domain errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class ActivityValidationError(DomainError):
    """Raised when activity history or preferences fail boundary validation."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details)
