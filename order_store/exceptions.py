"""
Order Store exceptions and database error translation
"""
from typing import Optional

from sqlalchemy.exc import DataError, IntegrityError, StatementError


class OrderStoreError(Exception):
    """Base exception for Order Store errors"""
    pass


class ConstraintViolationError(OrderStoreError):
    """A write was rejected by a schema constraint"""
    
    def __init__(self, message: str, constraint: Optional[str] = None):
        super().__init__(message)
        self.constraint = constraint


class UniquenessViolationError(ConstraintViolationError):
    """Duplicate customer email or duplicate order line"""
    pass


class ReferentialIntegrityError(ConstraintViolationError):
    """Missing referenced row, or delete of a still-referenced row"""
    pass


class DomainCheckError(ConstraintViolationError):
    """Negative price, non-positive quantity, invalid status and similar"""
    pass


class InvalidStatusTransitionError(OrderStoreError):
    """Order status change not allowed by the order lifecycle"""
    
    def __init__(self, order_id: int, current, requested):
        super().__init__(
            f"Order {order_id} cannot move from '{current.value}' to '{requested.value}'"
        )
        self.order_id = order_id
        self.current = current
        self.requested = requested


class ArchiveError(OrderStoreError):
    """Archiving transaction failed and was rolled back"""
    pass


# PostgreSQL SQLSTATE codes
_PG_ERROR_CLASSES = {
    "23505": UniquenessViolationError,   # unique_violation
    "23503": ReferentialIntegrityError,  # foreign_key_violation
    "23001": ReferentialIntegrityError,  # restrict_violation
    "23514": DomainCheckError,           # check_violation
    "23502": DomainCheckError,           # not_null_violation
    "22P02": DomainCheckError,           # invalid_text_representation (bad enum value)
}

# SQLite reports constraint failures only through the message text
_SQLITE_ERROR_CLASSES = (
    ("unique constraint failed", UniquenessViolationError),
    ("foreign key constraint failed", ReferentialIntegrityError),
    ("check constraint failed", DomainCheckError),
    ("not null constraint failed", DomainCheckError),
)


def _sqlite_constraint(message: str) -> str:
    # "UNIQUE constraint failed: customers.email" -> "customers.email"
    _, sep, detail = message.partition("constraint failed")
    detail = detail.lstrip(": ").strip()
    return detail if sep and detail else message


def translate_integrity_error(exc: StatementError) -> ConstraintViolationError:
    """
    Map a SQLAlchemy error raised by a write onto the Order Store taxonomy
    
    Args:
        exc: IntegrityError / DataError from the driver, or a StatementError
            wrapping the LookupError SQLAlchemy raises for unknown enum values
    
    Returns:
        ConstraintViolationError subclass naming the violated constraint
    """
    orig = getattr(exc, "orig", None) or exc
    message = str(orig).strip().splitlines()[0] if str(orig).strip() else repr(orig)
    
    if isinstance(orig, LookupError):
        return DomainCheckError(message, constraint="order_status")
    
    pgcode = getattr(orig, "pgcode", None)
    if pgcode:
        diag = getattr(orig, "diag", None)
        constraint = getattr(diag, "constraint_name", None) or getattr(diag, "column_name", None)
        error_class = _PG_ERROR_CLASSES.get(pgcode, ConstraintViolationError)
        return error_class(message, constraint=constraint or pgcode)
    
    lowered = message.lower()
    for marker, error_class in _SQLITE_ERROR_CLASSES:
        if marker in lowered:
            return error_class(message, constraint=_sqlite_constraint(message))
    
    if isinstance(exc, DataError):
        return DomainCheckError(message, constraint=None)
    return ConstraintViolationError(message, constraint=None)


def is_constraint_error(exc: Exception) -> bool:
    """True for errors translate_integrity_error knows how to classify"""
    if isinstance(exc, (IntegrityError, DataError)):
        return True
    return isinstance(exc, StatementError) and isinstance(exc.orig, LookupError)
