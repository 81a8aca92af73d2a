"""Uniform result type returned by service operations."""

import functools
import logging
from dataclasses import dataclass
from typing import Any, Optional

from django.db import DatabaseError

from social.services.errors import ServiceError

logger = logging.getLogger(__name__)


@dataclass
class ActionResult:
    """Success/failure envelope with a message clients can display directly."""
    is_success: bool
    message: str
    data: Any = None
    error: Optional[str] = None

    @classmethod
    def success(cls, message, data=None):
        return cls(is_success=True, message=message, data=data)

    @classmethod
    def failure(cls, message, error="internal", data=None):
        return cls(is_success=False, message=message, data=data, error=error)

    @classmethod
    def from_error(cls, exc: ServiceError):
        return cls.failure(exc.message, error=exc.kind)

    def as_dict(self):
        """Return the payload shape used by the API layer."""
        return {"is_success": self.is_success, "message": self.message, "data": self.data}


def service_action(failure_message):
    """
    Wrap a service method so it always returns an ActionResult.

    ServiceError subclasses become failures of their own kind; store errors
    are logged and reported as `internal` with `failure_message`. Apply it
    outside `transaction.atomic` so the transaction has rolled back before
    the error is translated.
    """
    def decorator(method):
        @functools.wraps(method)
        def wrapper(*args, **kwargs):
            try:
                return method(*args, **kwargs)
            except ServiceError as exc:
                logger.info("%s rejected: %s", method.__qualname__, exc.message)
                return ActionResult.from_error(exc)
            except DatabaseError:
                logger.exception("%s failed", method.__qualname__)
                return ActionResult.failure(failure_message)
        return wrapper
    return decorator
