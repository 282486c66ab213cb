from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_pascal

from aes_demo.core.result import ResultError, StatusCode


class DataResponse[T: BaseModel](BaseModel):
    """Uniform envelope returned to callers, on success and on failure.

    ``data`` is only ever set on success.
    """

    model_config = ConfigDict(alias_generator=to_pascal, populate_by_name=True)

    success: bool
    status_code: StatusCode
    message: str
    data: T | None = None

    @classmethod
    def ok(cls, status_code: StatusCode, data: T, message: str) -> "DataResponse[T]":
        return cls(success=True, status_code=status_code, message=message, data=data)

    @classmethod
    def error(cls, status_code: StatusCode, message: str) -> "DataResponse[T]":
        return cls(success=False, status_code=status_code, message=message)

    @classmethod
    def from_error(cls, error: ResultError) -> "DataResponse[T]":
        return cls.error(error.status_code, error.message)
