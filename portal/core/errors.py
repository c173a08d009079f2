from typing import Dict, Optional


class StoreError(Exception):
    """A fault raised by the relational store or its connection setup."""

    def __init__(self, operation: str, cause: Optional[BaseException] = None):
        super().__init__(f"{operation} failed: {cause}")
        self.operation = operation
        self.cause = cause


class FieldValidationError(ValueError):
    """Malformed client input on a write path (HTTP 400)."""

    def __init__(self, message: str, details: Optional[Dict[str, str]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class RecordNotFound(LookupError):
    """Update or delete target does not exist (HTTP 404)."""

    def __init__(self, record_id: int):
        super().__init__(f"Record with id {record_id} not found")
        self.record_id = record_id
