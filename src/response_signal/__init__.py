"""Public package exports for response signals."""

from .async_signals import AsyncResponseSignal
from .config import ImageConfig, MapperConfig
from .core.errors import (
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
from .core.models import Response, StatusRange
from .signals import ResponseSignal

__all__ = [
    "ResponseSignal",
    "AsyncResponseSignal",
    "MapperConfig",
    "ImageConfig",
    "Response",
    "StatusRange",
    "MappingError",
    "MappingErrorKind",
    "ResponseSignalError",
    "ResponseSignalConfigError",
    "DataError",
    "ImageMappingError",
    "JSONMappingError",
    "StatusCodeError",
    "StringMappingError",
]
