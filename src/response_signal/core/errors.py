"""Error types for response mapping."""

from __future__ import annotations

from enum import IntEnum

ERROR_DOMAIN = "response_signal"


class MappingErrorKind(IntEnum):
    IMAGE_MAPPING = 0
    JSON_MAPPING = 1
    STRING_MAPPING = 2
    STATUS_CODE = 3
    DATA = 4


class ResponseSignalError(Exception):
    """Base exception for this package."""


class ResponseSignalConfigError(ResponseSignalError):
    """Invalid mapper configuration."""


class MappingError(ResponseSignalError):
    """Terminal failure raised when an operator rejects an upstream value."""

    kind: MappingErrorKind

    def __init__(
        self,
        message: str,
        *,
        kind: MappingErrorKind,
        data: object = None,
        decoder_error: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.kind = kind
        self.data = data
        self.decoder_error = decoder_error

    @property
    def domain(self) -> str:
        return ERROR_DOMAIN

    @property
    def code(self) -> int:
        return int(self.kind)

    @property
    def context(self) -> dict[str, object]:
        if self.data is None:
            return {}
        return {"data": self.data}


class _FixedKindMappingError(MappingError):
    default_kind: MappingErrorKind

    def __init__(
        self,
        message: str,
        *,
        data: object = None,
        decoder_error: BaseException | None = None,
    ) -> None:
        super().__init__(
            message,
            kind=self.default_kind,
            data=data,
            decoder_error=decoder_error,
        )


class ImageMappingError(_FixedKindMappingError):
    """Response body could not be decoded as an image."""

    default_kind = MappingErrorKind.IMAGE_MAPPING


class JSONMappingError(_FixedKindMappingError):
    """Response body could not be parsed as JSON."""

    default_kind = MappingErrorKind.JSON_MAPPING


class StringMappingError(_FixedKindMappingError):
    """Response body is not valid UTF-8 text."""

    default_kind = MappingErrorKind.STRING_MAPPING


class StatusCodeError(_FixedKindMappingError):
    """Response status code outside the accepted range."""

    default_kind = MappingErrorKind.STATUS_CODE


class DataError(_FixedKindMappingError):
    """Upstream value is not a response at all."""

    default_kind = MappingErrorKind.DATA


_ERROR_TYPES: dict[MappingErrorKind, type[_FixedKindMappingError]] = {
    MappingErrorKind.IMAGE_MAPPING: ImageMappingError,
    MappingErrorKind.JSON_MAPPING: JSONMappingError,
    MappingErrorKind.STRING_MAPPING: StringMappingError,
    MappingErrorKind.STATUS_CODE: StatusCodeError,
    MappingErrorKind.DATA: DataError,
}

_DEFAULT_MESSAGES: dict[MappingErrorKind, str] = {
    MappingErrorKind.IMAGE_MAPPING: "failed to map response data to an image",
    MappingErrorKind.JSON_MAPPING: "failed to map response data to JSON",
    MappingErrorKind.STRING_MAPPING: "failed to map response data to a string",
    MappingErrorKind.STATUS_CODE: "status code outside the accepted range",
    MappingErrorKind.DATA: "upstream value is not a response",
}


def build_mapping_error(
    kind: MappingErrorKind,
    *,
    data: object = None,
    message: str | None = None,
    decoder_error: BaseException | None = None,
) -> MappingError:
    """Construct the error subclass matching ``kind``."""

    error_type = _ERROR_TYPES[MappingErrorKind(kind)]
    return error_type(
        message or _DEFAULT_MESSAGES[MappingErrorKind(kind)],
        data=data,
        decoder_error=decoder_error,
    )


__all__ = [
    "ERROR_DOMAIN",
    "MappingErrorKind",
    "ResponseSignalError",
    "ResponseSignalConfigError",
    "MappingError",
    "ImageMappingError",
    "JSONMappingError",
    "StringMappingError",
    "StatusCodeError",
    "DataError",
    "build_mapping_error",
]
