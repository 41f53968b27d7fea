"""Tagged operation results.

Service operations never raise past their boundary. They return an
``ActionResult`` holding either the payload or an error message with a coarse
code. Inside an operation, failures are raised as ``ServiceError`` (or a
pydantic ``ValidationError`` from input parsing) and converted by ``@action``.
"""

import functools
from dataclasses import dataclass
from typing import Any, Callable, Generic, Optional, TypeVar

from loguru import logger
from pydantic import ValidationError

VALIDATION_ERROR = "VALIDATION_ERROR"
NOT_FOUND = "NOT_FOUND"
INTERNAL_ERROR = "INTERNAL_ERROR"

T = TypeVar("T")


@dataclass
class ActionResult(Generic[T]):
    success: bool
    data: Optional[T] = None
    error: Optional[str] = None
    code: Optional[str] = None

    def to_dict(self) -> dict:
        if self.success:
            return {"success": True, "data": _to_plain(self.data)}
        return {"success": False, "error": self.error, "code": self.code}


def _to_plain(value: Any) -> Any:
    if hasattr(value, "to_dict"):
        return value.to_dict()
    if isinstance(value, dict):
        return {k: _to_plain(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_to_plain(v) for v in value]
    return value


def success(data: T) -> ActionResult[T]:
    return ActionResult(success=True, data=data)


def failure(error: str, code: str = INTERNAL_ERROR) -> ActionResult:
    return ActionResult(success=False, error=error, code=code)


class ServiceError(Exception):
    code = INTERNAL_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationFailed(ServiceError):
    code = VALIDATION_ERROR


class NotFound(ServiceError):
    code = NOT_FOUND


def first_validation_message(error: ValidationError) -> str:
    issue = error.errors()[0]
    msg = issue.get("msg", "Invalid input")
    # Custom validators raise ValueError, which pydantic prefixes.
    return msg.removeprefix("Value error, ")


def action(default_message: str) -> Callable:
    """Run a service operation and wrap its return value or failure in an ActionResult."""
    def decorator(fn: Callable) -> Callable:
        @functools.wraps(fn)
        def wrapper(*args, **kwargs) -> ActionResult:
            try:
                return success(fn(*args, **kwargs))
            except ValidationError as e:
                return failure(first_validation_message(e), VALIDATION_ERROR)
            except ServiceError as e:
                return failure(e.message, e.code)
            except Exception:
                logger.exception("{} error", fn.__name__)
                return failure(default_message, INTERNAL_ERROR)
        return wrapper
    return decorator
