from typing import Annotated

from pydantic import StringConstraints

from .serde_base import SerdeBase

PersonName = Annotated[
    str, StringConstraints(strip_whitespace=True, min_length=1, max_length=100)
]


class DemoAesRequest(SerdeBase):
    """Decrypted request payload. Only the shape is enforced here."""

    first_name: str
    last_name: str


class DemoAesRequestRules(SerdeBase):
    """Field rules applied to a decrypted ``DemoAesRequest``, in order."""

    first_name: PersonName
    last_name: PersonName
