"""
Error Response Models
-------------------
Structured errors reported by the what3words API.

The set of error codes is open: codes added by the service after this client
was released still decode, as an ``UNKNOWN`` member carrying the raw code.
"""
from enum import Enum
from typing import Annotated, Optional

from pydantic import PlainValidator, field_serializer

from w3w.models.base import W3WModel


class ErrorCode(str, Enum):
    # 400 Bad Request
    BAD_WORDS = "BadWords"
    BAD_COORDINATES = "BadCoordinates"
    BAD_LANGUAGE = "BadLanguage"
    BAD_FORMAT = "BadFormat"
    BAD_CLIP_TO_POLYGON = "BadClipToPolygon"
    MISSING_WORDS = "MissingWords"
    MISSING_INPUT = "MissingInput"
    MISSING_BOUNDING_BOX = "MissingBoundingBox"
    DUPLICATE_PARAMETER = "DuplicateParameter"

    # 401 Unauthorized
    MISSING_KEY = "MissingKey"
    INVALID_KEY = "InvalidKey"

    # 404 Not Found
    NOT_FOUND = "NotFound"

    # 405 Method Not Allowed
    METHOD_NOT_ALLOWED = "MethodNotAllowed"

    # 500 Internal Server Error
    INTERNAL_SERVER_ERROR = "InternalServerError"

    @classmethod
    def _missing_(cls, value):
        if not isinstance(value, str):
            return None
        member = str.__new__(cls, value)
        member._name_ = "UNKNOWN"
        member._value_ = value
        return member

    @property
    def is_unknown(self) -> bool:
        return self._name_ not in type(self).__members__

    @property
    def http_status(self) -> Optional[int]:
        """HTTP status the service pairs with this code, ``None`` if unknown."""
        return _HTTP_STATUS.get(self._name_)

    def __str__(self) -> str:
        return self.value


_HTTP_STATUS = {
    "BAD_WORDS": 400,
    "BAD_COORDINATES": 400,
    "BAD_LANGUAGE": 400,
    "BAD_FORMAT": 400,
    "BAD_CLIP_TO_POLYGON": 400,
    "MISSING_WORDS": 400,
    "MISSING_INPUT": 400,
    "MISSING_BOUNDING_BOX": 400,
    "DUPLICATE_PARAMETER": 400,
    "MISSING_KEY": 401,
    "INVALID_KEY": 401,
    "NOT_FOUND": 404,
    "METHOD_NOT_ALLOWED": 405,
    "INTERNAL_SERVER_ERROR": 500,
}


def _parse_error_code(value) -> ErrorCode:
    return ErrorCode(value)


class ErrorResponse(W3WModel):
    code: Annotated[ErrorCode, PlainValidator(_parse_error_code)]
    message: str

    @field_serializer("code")
    def serialize_code(self, code: ErrorCode) -> str:
        return code.value

    def __str__(self) -> str:
        return f"{self.code}: {self.message}"
