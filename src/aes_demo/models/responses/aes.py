from aes_demo.models.requests.serde_base import SerdeBase


class AesResponse(SerdeBase):
    body: str  # hex(iv):hex(ciphertext)
