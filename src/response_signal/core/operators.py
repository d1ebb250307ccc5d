"""Per-element mapping operations.

Each function takes a single upstream value and either returns the mapped
value or raises a :class:`~response_signal.core.errors.MappingError`. None of
them keep state between calls.
"""

from __future__ import annotations

import io
import json
import logging
from collections.abc import Sequence

import httpx
from PIL import Image

from .errors import MappingErrorKind, build_mapping_error
from .models import SUCCESSFUL_STATUS_RANGE, Response, StatusRange

logger = logging.getLogger("response_signal")

TEXT_ENCODING = "utf-8"


def as_response(value: object) -> Response | None:
    """Return ``value`` viewed as a :class:`Response`, or ``None``."""

    if isinstance(value, Response):
        return value
    if isinstance(value, httpx.Response):
        try:
            return Response.from_httpx(value)
        except httpx.ResponseNotRead:
            logger.debug("httpx response body not read status=%s", value.status_code)
            return None
    return None


def _status_code_of(value: object) -> int | None:
    if isinstance(value, Response):
        return value.status_code
    if isinstance(value, httpx.Response):
        return value.status_code
    return None


def filter_status_codes(value: object, status_range: StatusRange) -> object:
    """Forward ``value`` unchanged when its status code lies in ``status_range``."""

    status_code = _status_code_of(value)
    if status_code is None:
        raise build_mapping_error(MappingErrorKind.DATA, data=value)
    if status_code not in status_range:
        raise build_mapping_error(
            MappingErrorKind.STATUS_CODE,
            data=value,
            message=(
                f"status code {status_code} outside "
                f"[{status_range.low}, {status_range.high}]"
            ),
        )
    return value


def filter_successful_status_codes(value: object) -> object:
    return filter_status_codes(value, SUCCESSFUL_STATUS_RANGE)


def map_image(value: object, *, formats: Sequence[str] | None = None) -> Image.Image:
    """Decode the response body into a fully loaded Pillow image."""

    response = as_response(value)
    if response is None:
        raise build_mapping_error(MappingErrorKind.IMAGE_MAPPING, data=value)
    try:
        image = Image.open(
            io.BytesIO(response.content),
            formats=list(formats) if formats is not None else None,
        )
        image.load()
    except (OSError, EOFError, ValueError, SyntaxError, Image.DecompressionBombError) as exc:
        raise build_mapping_error(
            MappingErrorKind.IMAGE_MAPPING,
            data=value,
            decoder_error=exc,
        ) from exc
    return image


def _reject_constant(name: str) -> object:
    raise ValueError(f"non-standard JSON constant: {name}")


def map_json(value: object) -> object:
    """Parse the response body as UTF-8 JSON.

    A decoder failure is kept as ``decoder_error`` on the raised error and
    its message is used as-is; a generic message is only used when the
    decoder never ran.
    """

    response = as_response(value)
    if response is None:
        raise build_mapping_error(MappingErrorKind.JSON_MAPPING, data=value)
    try:
        return json.loads(
            response.content.decode(TEXT_ENCODING),
            parse_constant=_reject_constant,
        )
    except (ValueError, RecursionError) as exc:
        raise build_mapping_error(
            MappingErrorKind.JSON_MAPPING,
            data=value,
            message=str(exc),
            decoder_error=exc,
        ) from exc


def map_string(value: object) -> str:
    """Decode the response body as strict UTF-8 text."""

    response = as_response(value)
    if response is None:
        raise build_mapping_error(MappingErrorKind.STRING_MAPPING, data=value)
    try:
        return response.content.decode(TEXT_ENCODING)
    except UnicodeDecodeError as exc:
        raise build_mapping_error(
            MappingErrorKind.STRING_MAPPING,
            data=value,
            decoder_error=exc,
        ) from exc


__all__ = [
    "TEXT_ENCODING",
    "as_response",
    "filter_status_codes",
    "filter_successful_status_codes",
    "map_image",
    "map_json",
    "map_string",
]
