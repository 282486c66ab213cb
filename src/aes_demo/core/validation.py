from typing import final

from pydantic import BaseModel, ValidationError

from aes_demo.core.result import Ok, Result, StatusCode, error
from aes_demo.shared import Logger

logger = Logger(__name__).get_logger()


def first_error_message(exc: ValidationError) -> str:
    """Render the first pydantic error as ``"<field>: <message>"``."""
    first = exc.errors()[0]
    loc = ".".join(str(part) for part in first["loc"])
    return f"{loc}: {first['msg']}" if loc else first["msg"]


@final
class DtoValidator[T: BaseModel]:
    """Checks a decoded DTO against a rules model.

    Validation is first-fail: only the first violation, in the rules
    model's field order, is reported.
    """

    def __init__(self, rules: type[BaseModel]):
        self._rules = rules

    async def validate(self, dto: T | None) -> Result[None]:
        if dto is None:
            return error(StatusCode.BAD_REQUEST, "dto is null")

        try:
            self._rules.model_validate(dto.model_dump(by_alias=True))
        except ValidationError as e:
            message = first_error_message(e)
            logger.warning(
                "%s failed %s: %s", type(dto).__name__, self._rules.__name__, message
            )
            return error(StatusCode.BAD_REQUEST, message)

        logger.debug("%s passed %s", type(dto).__name__, self._rules.__name__)
        return Ok(None)
