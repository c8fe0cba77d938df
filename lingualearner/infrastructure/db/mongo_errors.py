"""Translation of driver failures into the domain store errors."""
import logging

from pymongo.errors import AutoReconnect, ExecutionTimeout, PyMongoError, WTimeoutError

from ...domain.exceptions import StoreError, StoreUnavailableError

logger = logging.getLogger(__name__)

# NetworkTimeout and ServerSelectionTimeoutError are AutoReconnect subclasses
_UNAVAILABLE_ERRORS = (AutoReconnect, ExecutionTimeout, WTimeoutError)


def translate_store_error(action: str, error: PyMongoError) -> StoreError:
    """
    Build the domain error for a failed store call.

    The returned message is generic; the driver's own message only goes to
    the log.
    """
    logger.error(f"MongoDB error while {action}: {error}")
    if isinstance(error, _UNAVAILABLE_ERRORS) or getattr(error, "timeout", False):
        return StoreUnavailableError("Database unavailable, please retry")
    return StoreError(f"Database error while {action}")
