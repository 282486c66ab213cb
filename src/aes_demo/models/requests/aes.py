from .serde_base import SerdeBase


class AesRequest(SerdeBase):
    """Inbound envelope. ``body`` is ``hex(iv):hex(ciphertext)``.

    Optional so an empty body reaches the handler and is rejected there
    with a classified error instead of a framework 422.
    """

    body: str | None = None
