# Core pipeline pieces that are not tied to the HTTP layer:
# - Result / ResultError / StatusCode (result.py)
# - AES-GCM envelope encryption service (aes.py)
# - DTO validation against rules models (validation.py)
from .result import Err, Ok, Result, ResultError, StatusCode, error

__all__ = ["Err", "Ok", "Result", "ResultError", "StatusCode", "error"]
