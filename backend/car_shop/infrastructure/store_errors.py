"""Store Error Translation — maps SQLAlchemy/DBAPI failures onto the error hierarchy.

Invariants:
    - classify_store_error() is total: every exception gets exactly one kind
    - Only CONSTRAINT_VIOLATION exposes the store's own message
    - NOT_FOUND uses the generic "Record not found" message
    - Everything else becomes InternalError; detail goes to logs only

Design Decisions:
    - SQLSTATE classes decide what is client-correctable: 22 (data exception),
      23 (integrity constraint) and P0 (PL/pgSQL RAISE, NO_DATA_FOUND,
      TOO_MANY_ROWS). Syntax errors, missing objects and connection failures
      fall through to OTHER
    - The primary message is read from the driver exception (asyncpg keeps it
      on the chained cause, psycopg on .diag) so the client never sees
      driver decoration such as the exception class name
"""

from sqlalchemy.exc import DBAPIError, NoResultFound

from car_shop.core.errors import (
    BusinessRuleError, CarShopError, InternalError, RecordNotFoundError,
    StoreErrorKind,
)

CLIENT_SQLSTATE_CLASSES = frozenset({"22", "23", "P0"})


def _sqlstate(orig: BaseException | None) -> str | None:
    """SQLSTATE of a DBAPI exception, whatever driver raised it."""
    if orig is None:
        return None
    for attr in ("sqlstate", "pgcode"):
        code = getattr(orig, attr, None)
        if isinstance(code, str) and code:
            return code
    diag = getattr(orig, "diag", None)
    code = getattr(diag, "sqlstate", None)
    return code if isinstance(code, str) and code else None


def store_message(orig: BaseException) -> str:
    """Primary message the store attached to its error."""
    diag = getattr(orig, "diag", None)
    primary = getattr(diag, "message_primary", None)
    if primary:
        return primary
    for source in (orig, orig.__cause__):
        message = getattr(source, "message", None)
        if isinstance(message, str) and message:
            return message
    return str(orig)


def classify_store_error(exc: BaseException) -> StoreErrorKind:
    """Tag a store failure as constraint violation, not found, or other."""
    if isinstance(exc, NoResultFound):
        return StoreErrorKind.NOT_FOUND
    if isinstance(exc, DBAPIError) and not exc.connection_invalidated:
        sqlstate = _sqlstate(exc.orig)
        if sqlstate and sqlstate[:2].upper() in CLIENT_SQLSTATE_CLASSES:
            return StoreErrorKind.CONSTRAINT_VIOLATION
    return StoreErrorKind.OTHER


def translate_store_error(exc: BaseException) -> CarShopError:
    """Build the client-facing error for a store failure."""
    kind = classify_store_error(exc)
    if kind is StoreErrorKind.CONSTRAINT_VIOLATION:
        return BusinessRuleError(store_message(exc.orig))
    if kind is StoreErrorKind.NOT_FOUND:
        return RecordNotFoundError()
    return InternalError()
