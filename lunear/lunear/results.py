"""
(data, error) results for write operations.

Services decorated with `returns_result` never raise data errors; callers
branch on `result.error` before deciding the HTTP response:

    project, error = ProjectService.create_project(user=request.user, name="Web")
    if error:
        return toast_error(error)

Only store failures (django.db.Error) and model validation errors are
converted. PermissionDenied and anything unexpected still propagate.
"""
from __future__ import annotations

import functools
import logging
from typing import Any, NamedTuple, Optional

from django.core.exceptions import ValidationError
from django.db import Error as DatabaseError

logger = logging.getLogger(__name__)

DATA_ERRORS = (DatabaseError, ValidationError)


class Result(NamedTuple):
    data: Any
    error: Optional[Exception]

    @property
    def ok(self) -> bool:
        return self.error is None


def error_message(error: Exception) -> str:
    if isinstance(error, ValidationError):
        return "; ".join(error.messages)
    return str(error) or error.__class__.__name__


def returns_result(func):
    @functools.wraps(func)
    def wrapper(*args, **kwargs) -> Result:
        try:
            return Result(func(*args, **kwargs), None)
        except DATA_ERRORS as ex:
            logger.warning("[data] %s failed: %s", func.__qualname__, error_message(ex))
            return Result(None, ex)
    return wrapper
