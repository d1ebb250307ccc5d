"""Core operators, models and errors."""

from .errors import (
    DataError,
    ImageMappingError,
    JSONMappingError,
    MappingError,
    MappingErrorKind,
    ResponseSignalConfigError,
    ResponseSignalError,
    StatusCodeError,
    StringMappingError,
)
from .models import (
    SUCCESSFUL_AND_REDIRECT_STATUS_RANGE,
    SUCCESSFUL_STATUS_RANGE,
    Response,
    StatusRange,
)

__all__ = [
    "DataError",
    "ImageMappingError",
    "JSONMappingError",
    "MappingError",
    "MappingErrorKind",
    "ResponseSignalConfigError",
    "ResponseSignalError",
    "StatusCodeError",
    "StringMappingError",
    "SUCCESSFUL_AND_REDIRECT_STATUS_RANGE",
    "SUCCESSFUL_STATUS_RANGE",
    "Response",
    "StatusRange",
]
