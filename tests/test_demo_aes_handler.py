"""
Unit tests for the demo command handler with stubbed pipeline stages.
"""

import asyncio
from unittest.mock import AsyncMock, MagicMock

import pytest

from aes_demo.core.aes import AesCryptoService, AesEncryptResult
from aes_demo.core.result import Ok, StatusCode, error
from aes_demo.core.validation import DtoValidator
from aes_demo.features import DemoAesCommand, DemoAesCommandHandler
from aes_demo.models.requests import AesRequest, DemoAesRequest, DemoAesRequestRules
from aes_demo.models.responses import AesResponse, DemoAesResponse

KEY = "RWw5ejc0Wzjq0i0T2ZTZhcYu44fQI5M6"
REQUEST_BODY = "a1b2c3d4e5f6a7b8c9d0"


@pytest.fixture
def crypto_service():
    stub = MagicMock(spec=AesCryptoService)
    stub.decrypt = AsyncMock()
    stub.encrypt = AsyncMock()
    return stub


@pytest.fixture
def validator():
    stub = MagicMock(spec=DtoValidator)
    stub.validate = AsyncMock()
    return stub


@pytest.fixture
def handler(crypto_service, validator):
    return DemoAesCommandHandler(
        crypto_service=crypto_service, validator=validator, key=KEY
    )


@pytest.fixture
def decrypted_request():
    return DemoAesRequest(first_name="Ada", last_name="Lovelace")


def make_command(body=REQUEST_BODY):
    return DemoAesCommand(AesRequest(body=body))


@pytest.mark.asyncio
async def test_should_return_false_if_command_is_invalid_or_null(handler, crypto_service):
    result = await handler.handle(None)

    assert result.success is False
    assert result.status_code == StatusCode.BAD_REQUEST
    assert result.message == "Invalid command"
    assert result.data is None
    crypto_service.decrypt.assert_not_called()


@pytest.mark.asyncio
async def test_should_return_false_if_request_is_null(handler, crypto_service):
    result = await handler.handle(DemoAesCommand(None))

    assert result.success is False
    assert result.status_code == StatusCode.BAD_REQUEST
    assert result.message == "Invalid request"
    crypto_service.decrypt.assert_not_called()


@pytest.mark.asyncio
@pytest.mark.parametrize("body", [None, ""])
async def test_should_return_false_if_body_is_null(handler, crypto_service, body):
    result = await handler.handle(make_command(body))

    assert result.success is False
    assert result.status_code == StatusCode.BAD_REQUEST
    assert result.message == "Invalid request body"
    crypto_service.decrypt.assert_not_called()


@pytest.mark.asyncio
async def test_should_return_false_if_decrypt_service_return_error(
    handler, crypto_service, validator
):
    crypto_service.decrypt.return_value = error(StatusCode.BAD_REQUEST, "key is null")

    result = await handler.handle(make_command())

    assert result.success is False
    assert result.status_code == StatusCode.BAD_REQUEST
    assert result.message == "key is null"
    crypto_service.decrypt.assert_awaited_once_with(REQUEST_BODY, KEY)
    validator.validate.assert_not_called()
    crypto_service.encrypt.assert_not_called()


@pytest.mark.asyncio
async def test_should_return_false_if_validation_service_return_error(
    handler, crypto_service, validator, decrypted_request
):
    crypto_service.decrypt.return_value = Ok(decrypted_request)
    validator.validate.return_value = error(StatusCode.BAD_REQUEST, "null")

    result = await handler.handle(make_command())

    assert result.success is False
    assert result.status_code == StatusCode.BAD_REQUEST
    assert result.message == "null"
    crypto_service.decrypt.assert_awaited_once_with(REQUEST_BODY, KEY)
    validator.validate.assert_awaited_once_with(decrypted_request)
    crypto_service.encrypt.assert_not_called()


@pytest.mark.asyncio
async def test_should_return_false_if_response_service_return_error(
    handler, crypto_service, validator, decrypted_request
):
    crypto_service.decrypt.return_value = Ok(decrypted_request)
    validator.validate.return_value = Ok(None)
    crypto_service.encrypt.return_value = error(
        StatusCode.INTERNAL_SERVER_ERROR, "rng unavailable"
    )

    result = await handler.handle(make_command())

    assert result.success is False
    assert result.status_code == StatusCode.INTERNAL_SERVER_ERROR
    assert result.message == "rng unavailable"
    crypto_service.decrypt.assert_awaited_once()
    validator.validate.assert_awaited_once()
    crypto_service.encrypt.assert_awaited_once_with(
        DemoAesResponse(first_name="Ada", last_name="Lovelace"), KEY
    )


@pytest.mark.asyncio
async def test_should_return_true_if_all_service_return_ok(
    handler, crypto_service, validator, decrypted_request
):
    aes_response = AesResponse(body="00ff:11ee")
    crypto_service.decrypt.return_value = Ok(decrypted_request)
    validator.validate.return_value = Ok(None)
    crypto_service.encrypt.return_value = Ok(
        AesEncryptResult(encrypted_text=aes_response.body, aes_response=aes_response)
    )

    result = await handler.handle(make_command())

    assert result.success is True
    assert result.status_code == StatusCode.OK
    assert result.message == "Success"
    assert result.data == aes_response
    crypto_service.decrypt.assert_awaited_once_with(REQUEST_BODY, KEY)
    validator.validate.assert_awaited_once_with(decrypted_request)
    crypto_service.encrypt.assert_awaited_once()


@pytest.mark.asyncio
async def test_unexpected_fault_becomes_internal_error(handler, crypto_service, validator):
    crypto_service.decrypt.side_effect = RuntimeError("boom")

    result = await handler.handle(make_command())

    assert result.success is False
    assert result.status_code == StatusCode.INTERNAL_SERVER_ERROR
    assert result.message == "boom"
    validator.validate.assert_not_called()


@pytest.mark.asyncio
async def test_cancellation_propagates(handler, crypto_service):
    crypto_service.decrypt.side_effect = asyncio.CancelledError()

    with pytest.raises(asyncio.CancelledError):
        await handler.handle(make_command())


@pytest.mark.asyncio
async def test_end_to_end_with_real_services():
    crypto_service = AesCryptoService[DemoAesRequest, DemoAesResponse](DemoAesRequest)
    handler = DemoAesCommandHandler(
        crypto_service=crypto_service,
        validator=DtoValidator[DemoAesRequest](DemoAesRequestRules),
        key=KEY,
    )
    encrypted = await crypto_service.encrypt(
        DemoAesResponse(first_name="Ada", last_name="Lovelace"), KEY
    )

    result = await handler.handle(make_command(encrypted.value.encrypted_text))

    assert result.success is True
    assert result.status_code == StatusCode.OK
    assert result.message == "Success"
    decrypted = await crypto_service.decrypt(result.data.body, KEY)
    assert decrypted.value == DemoAesRequest(first_name="Ada", last_name="Lovelace")


@pytest.mark.asyncio
async def test_concurrent_invocations_do_not_interfere():
    crypto_service = AesCryptoService[DemoAesRequest, DemoAesResponse](DemoAesRequest)
    handler = DemoAesCommandHandler(
        crypto_service=crypto_service,
        validator=DtoValidator[DemoAesRequest](DemoAesRequestRules),
        key=KEY,
    )
    people = [(f"First{i}", f"Last{i}") for i in range(20)]
    envelopes = []
    for first_name, last_name in people:
        encrypted = await crypto_service.encrypt(
            DemoAesResponse(first_name=first_name, last_name=last_name), KEY
        )
        envelopes.append(encrypted.value.encrypted_text)

    results = await asyncio.gather(
        *(handler.handle(make_command(envelope)) for envelope in envelopes)
    )

    for (first_name, last_name), result in zip(people, results):
        assert result.success is True
        decrypted = await crypto_service.decrypt(result.data.body, KEY)
        assert decrypted.value == DemoAesRequest(first_name=first_name, last_name=last_name)
