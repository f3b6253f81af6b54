# app/exceptions.py
"""Errors raised by the employee store.

Routes translate these into HTTP responses, so the store never has to know
about status codes.
"""

from typing import Any, Dict, Optional


class EmployeeStoreError(Exception):
    """Base exception for all employee store errors."""

    def __init__(self, message: str = "An error occurred", details: Optional[Dict[str, Any]] = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class InvalidEmployeeError(EmployeeStoreError):
    """Raised when a candidate record is missing or malformed."""

    def __init__(self, reason: Optional[str] = None) -> None:
        details = {"reason": reason} if reason else {}
        super().__init__("Invalid employee data", details)


class EmployeeNotFoundError(EmployeeStoreError):
    """Raised when no employee has the requested id."""

    def __init__(self, employee_id: int) -> None:
        self.employee_id = employee_id
        super().__init__("Employee not found", {"employee_id": employee_id})
