from .aes import AesRequest
from .demo_aes import DemoAesRequest, DemoAesRequestRules
from .serde_base import SerdeBase

__all__ = [
    "AesRequest",
    "DemoAesRequest",
    "DemoAesRequestRules",
    "SerdeBase",
]
