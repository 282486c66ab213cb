from aes_demo.models.requests.demo_aes import DemoAesRequest
from aes_demo.models.requests.serde_base import SerdeBase


class DemoAesResponse(SerdeBase):
    first_name: str
    last_name: str

    @classmethod
    def from_request(cls, request: DemoAesRequest) -> "DemoAesResponse":
        return cls(first_name=request.first_name, last_name=request.last_name)
