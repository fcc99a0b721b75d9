import asyncio
from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, TypeVar

import aiohttp
from pydantic import ValidationError

T = TypeVar("T")


class ErrorKind(str, Enum):
    TRANSPORT = "transport"
    MALFORMED_REQUEST = "malformed_request"
    MALFORMED_RESPONSE = "malformed_response"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Err:
    kind: ErrorKind
    error: BaseException | None = None

    @property
    def ok(self) -> bool:
        return False


Result = Ok | Err


def classify_error(exc: BaseException) -> ErrorKind:
    """
    Map an exception raised while fetching or shaping a payload to an ErrorKind.

    InvalidURL is checked first: it subclasses both ClientError and ValueError.
    """
    if isinstance(exc, aiohttp.InvalidURL):
        return ErrorKind.MALFORMED_REQUEST
    if isinstance(exc, (aiohttp.ClientError, asyncio.TimeoutError, OSError)):
        return ErrorKind.TRANSPORT
    if isinstance(exc, (ValidationError, ValueError, KeyError, IndexError, TypeError, AttributeError)):
        return ErrorKind.MALFORMED_RESPONSE
    return ErrorKind.UNKNOWN


def unwrap_or_none(result: Result) -> Any:
    if isinstance(result, Ok):
        return result.value
    return None
