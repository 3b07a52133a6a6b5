"""
Response Envelope
---------------
A what3words reply is one JSON object that is either the payload the
endpoint promises or a ``{code, message}`` error, optionally nested under an
``error`` key. There is no discriminant field, so both shapes are probed.
"""
import logging
from dataclasses import dataclass
from typing import Any, Generic, Optional, Type, TypeVar, Union

from pydantic import BaseModel, ValidationError

from w3w.geocoding.exceptions import ApiError, JsonError
from w3w.models.errors import ErrorResponse

# Get logger
logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)


@dataclass(frozen=True)
class Success(Generic[T]):
    value: T

    def resolve(self) -> T:
        return self.value


@dataclass(frozen=True)
class Failure:
    error: ErrorResponse

    def resolve(self):
        raise ApiError(self.error)


ApiResponse = Union[Success[T], Failure]


def _probe_error(payload: Any) -> Optional[ErrorResponse]:
    if not isinstance(payload, dict):
        return None
    for candidate in (payload.get("error"), payload):
        if not isinstance(candidate, dict):
            continue
        try:
            return ErrorResponse.model_validate(candidate)
        except ValidationError:
            continue
    return None


def decode_response(payload: Any, model: Type[T]) -> ApiResponse:
    """
    Interpret parsed JSON as either ``model`` or an error response.

    A payload that validates as both is treated as a success. A payload that
    validates as neither raises JsonError.
    """
    error = _probe_error(payload)
    try:
        value = model.model_validate(payload)
    except ValidationError as e:
        if error is not None:
            return Failure(error)
        raise JsonError(f"Unexpected {model.__name__} response: {e}") from e

    if error is not None:
        logger.debug(f"Response is both a {model.__name__} and an error, using {model.__name__}")
    return Success(value)
