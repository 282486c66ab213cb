"""AES-GCM envelope encryption for request and response payloads.

Wire format is ``hex(iv):hex(ciphertext || tag)``. Every encryption draws a
fresh IV, and the GCM tag makes tampering fail at decrypt time instead of
yielding corrupted plaintext.
"""

import os
import re
from dataclasses import dataclass
from typing import final

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import AESGCM
from pydantic import BaseModel, ValidationError

from aes_demo.core.result import Ok, Result, StatusCode, error
from aes_demo.core.validation import first_error_message
from aes_demo.models.responses import AesResponse
from aes_demo.shared import Logger

logger = Logger(__name__).get_logger()

ENVELOPE_SEPARATOR = ":"
IV_LENGTH = 12
TAG_LENGTH = 16
KEY_LENGTHS = (16, 24, 32)

_HEX = re.compile(r"[0-9a-fA-F]+")


class EnvelopeFormatError(ValueError):
    pass


def split_envelope(data: str) -> tuple[bytes, bytes]:
    """Split and hex-decode an envelope into ``(iv, ciphertext)``.

    Raises EnvelopeFormatError without touching any cipher.
    """
    parts = data.split(ENVELOPE_SEPARATOR)
    if len(parts) != 2:
        raise EnvelopeFormatError("expected exactly two segments")

    iv_hex, ciphertext_hex = parts
    if not (_HEX.fullmatch(iv_hex) and _HEX.fullmatch(ciphertext_hex)):
        raise EnvelopeFormatError("segments must be hexadecimal")
    if len(iv_hex) != IV_LENGTH * 2:
        raise EnvelopeFormatError(f"iv must be {IV_LENGTH} bytes")
    if len(ciphertext_hex) % 2 or len(ciphertext_hex) < TAG_LENGTH * 2:
        raise EnvelopeFormatError("ciphertext is truncated")

    return bytes.fromhex(iv_hex), bytes.fromhex(ciphertext_hex)


def join_envelope(iv: bytes, ciphertext: bytes) -> str:
    return f"{iv.hex()}{ENVELOPE_SEPARATOR}{ciphertext.hex()}"


def aes_encrypt(key: bytes, plaintext: bytes) -> str:
    iv = os.urandom(IV_LENGTH)
    ciphertext = AESGCM(key).encrypt(iv, plaintext, None)
    return join_envelope(iv, ciphertext)


def aes_decrypt(key: bytes, envelope: str) -> bytes:
    """Raises EnvelopeFormatError or cryptography's InvalidTag."""
    iv, ciphertext = split_envelope(envelope)
    return AESGCM(key).decrypt(iv, ciphertext, None)


def key_bytes(key: str) -> bytes | None:
    if not isinstance(key, str):
        return None
    encoded = key.encode("utf-8")
    return encoded if len(encoded) in KEY_LENGTHS else None


@dataclass(frozen=True, slots=True)
class AesEncryptResult:
    encrypted_text: str
    aes_response: AesResponse


@final
class AesCryptoService[RequestT: BaseModel, ResponseT: BaseModel]:
    """Decrypts envelopes into ``RequestT`` and encrypts ``ResponseT`` payloads.

    Stateless apart from the request model it parses into. Neither method
    raises: every failure comes back as a classified ``Err``.
    """

    def __init__(self, request_type: type[RequestT]):
        self._request_type = request_type

    async def decrypt(self, data: str | None, key: str | None) -> Result[RequestT]:
        if not key:
            return error(StatusCode.BAD_REQUEST, "key is null")
        if not data:
            return error(StatusCode.BAD_REQUEST, "data is null")

        raw_key = key_bytes(key)
        if raw_key is None:
            return error(StatusCode.BAD_REQUEST, "Invalid key length")

        try:
            plaintext = aes_decrypt(raw_key, data)
        except EnvelopeFormatError as e:
            logger.warning("Rejected malformed envelope: %s", e)
            return error(StatusCode.BAD_REQUEST, "Invalid encrypted data format")
        except InvalidTag:
            logger.warning("Envelope failed authentication.")
            return error(StatusCode.BAD_REQUEST, "Unable to decrypt data")
        except Exception as e:
            logger.exception("Unexpected failure while decrypting envelope.")
            return error(StatusCode.INTERNAL_SERVER_ERROR, str(e))

        try:
            payload = self._request_type.model_validate_json(plaintext)
        except ValidationError as e:
            message = first_error_message(e)
            logger.warning(
                "Decrypted payload is not a %s: %s", self._request_type.__name__, message
            )
            return error(
                StatusCode.BAD_REQUEST, f"Invalid decrypted payload: {message}"
            )

        logger.debug("Decrypted envelope into %s.", self._request_type.__name__)
        return Ok(payload)

    async def encrypt(
        self, data: ResponseT | None, key: str | None
    ) -> Result[AesEncryptResult]:
        if not key:
            return error(StatusCode.BAD_REQUEST, "key is null")
        if data is None:
            return error(StatusCode.BAD_REQUEST, "data is null")

        raw_key = key_bytes(key)
        if raw_key is None:
            return error(StatusCode.BAD_REQUEST, "Invalid key length")

        try:
            plaintext = data.model_dump_json(by_alias=True).encode("utf-8")
            encrypted_text = aes_encrypt(raw_key, plaintext)
        except Exception as e:
            logger.exception("Unexpected failure while encrypting %s.", type(data).__name__)
            return error(StatusCode.INTERNAL_SERVER_ERROR, str(e))

        logger.debug("Encrypted %s.", type(data).__name__)
        return Ok(
            AesEncryptResult(
                encrypted_text=encrypted_text,
                aes_response=AesResponse(body=encrypted_text),
            )
        )
