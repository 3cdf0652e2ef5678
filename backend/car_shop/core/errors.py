"""Error Hierarchy — typed, categorized exceptions for all car shop failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory) and http_status
    - to_response() produces the {"error": message} envelope, nothing else
    - InternalError always carries the fixed generic message

Design Decisions:
    - Single hierarchy with CarShopError base: one global handler renders all
    - StoreErrorKind is the tagged variant produced by store error
      classification; ERROR_FOR_KIND maps each kind to its error class
"""

from enum import Enum

RECORD_NOT_FOUND_MESSAGE = "Record not found"
INTERNAL_ERROR_MESSAGE = "Internal server error"


class ErrorCategory(str, Enum):
    """High-level error categories for logging and handling."""
    VALIDATION = "validation"
    BUSINESS_RULE = "business_rule"
    RESOURCE_NOT_FOUND = "resource_not_found"
    INTERNAL = "internal"


class StoreErrorKind(str, Enum):
    """Classification of a failure raised by the relational store."""
    CONSTRAINT_VIOLATION = "constraint_violation"
    NOT_FOUND = "not_found"
    OTHER = "other"


class CarShopError(Exception):
    """Base exception for all car shop errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to the REST error envelope."""
        return {"error": self.message}


# ─── Client Errors (400-level) ──────────────────────────────────

class BusinessRuleError(CarShopError):
    """The store rejected the operation; its message is safe to show."""
    def __init__(self, message: str):
        super().__init__(
            message, "BUSINESS_RULE_VIOLATION", ErrorCategory.BUSINESS_RULE, 400,
        )


class RecordNotFoundError(CarShopError):
    """A query expected to return exactly one row returned none."""
    def __init__(self):
        super().__init__(
            RECORD_NOT_FOUND_MESSAGE, "RECORD_NOT_FOUND",
            ErrorCategory.RESOURCE_NOT_FOUND, 404,
        )


class ResourceNotFoundError(CarShopError):
    """Requested resource does not exist."""
    def __init__(self, resource_type: str, resource_id: object):
        super().__init__(
            f"{resource_type} with id {resource_id} not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND, 404,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


# ─── Infrastructure Errors (500-level) ──────────────────────────

class InternalError(CarShopError):
    """Anything the client cannot correct. Detail stays in server logs."""
    def __init__(self):
        super().__init__(
            INTERNAL_ERROR_MESSAGE, "INTERNAL_ERROR", ErrorCategory.INTERNAL, 500,
        )
