"""Result type shared by every pipeline stage.

Stages never raise for expected failures. They return ``Ok(value)`` or
``Err(ResultError)`` and the caller branches on ``is_err()``.
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Literal

from pydantic import BaseModel


class StatusCode(IntEnum):
    """Status classifications, valued as their HTTP equivalents."""

    OK = 200
    BAD_REQUEST = 400
    INTERNAL_SERVER_ERROR = 500
    SERVICE_UNAVAILABLE = 503


class ResultError(BaseModel):
    """A classified failure. Created where the failure is detected, never mutated."""

    model_config = {"frozen": True}

    status_code: StatusCode
    message: str


@dataclass(frozen=True)
class Ok[T]:
    value: T

    def is_ok(self) -> Literal[True]:
        return True

    def is_err(self) -> Literal[False]:
        return False


@dataclass(frozen=True)
class Err:
    error: ResultError

    def is_ok(self) -> Literal[False]:
        return False

    def is_err(self) -> Literal[True]:
        return True


type Result[T] = Ok[T] | Err


def error(status_code: StatusCode, message: str) -> Err:
    return Err(ResultError(status_code=status_code, message=message))
