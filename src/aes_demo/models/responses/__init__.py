from .aes import AesResponse
from .data import DataResponse
from .demo_aes import DemoAesResponse

__all__ = [
    "AesResponse",
    "DataResponse",
    "DemoAesResponse",
]
