"""Result values returned by every client operation.

An operation either returns ``Ok(value)`` or ``Err(ServiceError)``. Operations
with nothing meaningful to return use ``Ok(None)`` as their success marker.
"""
from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar, Union

from .errors import ApiError, AuthError

T = TypeVar("T")


@dataclass(frozen=True)
class ServiceError:
    code: int
    message: Any = None
    body: Any = field(default=None, compare=False, repr=False)

    def describe(self) -> str:
        if self.message is not None:
            return f"{self.code}: {self.message}"
        return f"request failed with status {self.code}"

    def to_exception(self) -> ApiError:
        details = None
        if self.body is not None:
            try:
                details = json.dumps(self.body, ensure_ascii=False)
            except (TypeError, ValueError):
                details = str(self.body)
        message = str(self.message) if self.message is not None else self.describe()
        if self.code in (401, 403):
            return AuthError(self.code, message, details)
        return ApiError(self.code, message, details)


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T = None

    @property
    def ok(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: Any) -> T:
        return self.value


@dataclass(frozen=True)
class Err:
    error: ServiceError

    @property
    def ok(self) -> bool:
        return False

    def unwrap(self):
        raise self.error.to_exception()

    def unwrap_or(self, default: Any) -> Any:
        return default


Result = Union[Ok[T], Err]
