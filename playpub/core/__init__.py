"""Core types shared by the publish pipeline and the CLI."""

from .errors import ErrorCode
from .result import Err, Ok, Result

__all__ = [
    # errors
    "ErrorCode",
    # result
    "Err",
    "Ok",
    "Result",
]
