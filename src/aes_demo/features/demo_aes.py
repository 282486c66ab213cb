"""Decrypt → validate → map → encrypt pipeline for the demo endpoint."""

from dataclasses import dataclass
from typing import final

from aes_demo.core.aes import AesCryptoService
from aes_demo.core.result import StatusCode
from aes_demo.core.validation import DtoValidator
from aes_demo.models.requests import AesRequest, DemoAesRequest
from aes_demo.models.responses import AesResponse, DataResponse, DemoAesResponse
from aes_demo.shared import Logger

logger = Logger(__name__).get_logger()

type DemoAesCryptoService = AesCryptoService[DemoAesRequest, DemoAesResponse]
type DemoAesValidator = DtoValidator[DemoAesRequest]


@dataclass(frozen=True, slots=True)
class DemoAesCommand:
    request: AesRequest | None


@final
class DemoAesCommandHandler:
    """Runs one command through the pipeline.

    Each stage returns a Result; the first ``Err`` becomes the response and
    no later stage runs. Anything raised by a stage is reported as an
    internal error carrying the exception's message. Holds no per-call
    state, so one instance can serve concurrent requests.
    """

    def __init__(
        self,
        crypto_service: DemoAesCryptoService,
        validator: DemoAesValidator,
        key: str,
    ):
        self._crypto_service = crypto_service
        self._validator = validator
        self._key = key

    async def handle(self, command: DemoAesCommand | None) -> DataResponse[AesResponse]:
        if command is None:
            return DataResponse[AesResponse].error(
                StatusCode.BAD_REQUEST, "Invalid command"
            )
        if command.request is None:
            return DataResponse[AesResponse].error(
                StatusCode.BAD_REQUEST, "Invalid request"
            )
        if not command.request.body:
            return DataResponse[AesResponse].error(
                StatusCode.BAD_REQUEST, "Invalid request body"
            )

        try:
            decrypted_result = await self._crypto_service.decrypt(
                command.request.body, self._key
            )
            if decrypted_result.is_err():
                return DataResponse[AesResponse].from_error(decrypted_result.error)

            decrypted_request: DemoAesRequest = decrypted_result.value

            validation_result = await self._validator.validate(decrypted_request)
            if validation_result.is_err():
                return DataResponse[AesResponse].from_error(validation_result.error)

            demo_aes_response = DemoAesResponse.from_request(decrypted_request)

            encrypted_result = await self._crypto_service.encrypt(
                demo_aes_response, self._key
            )
            if encrypted_result.is_err():
                return DataResponse[AesResponse].from_error(encrypted_result.error)

            logger.info("Demo request processed.")
            return DataResponse[AesResponse].ok(
                StatusCode.OK, encrypted_result.value.aes_response, "Success"
            )
        except Exception as e:
            logger.error("Failed to process demo request: %s", e, exc_info=True)
            return DataResponse[AesResponse].error(
                StatusCode.INTERNAL_SERVER_ERROR, str(e)
            )
