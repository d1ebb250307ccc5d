"""Shared helpers for sync/async response signals."""

from __future__ import annotations

from collections.abc import Callable
from functools import partial

from .config import MapperConfig
from .core.errors import ResponseSignalConfigError
from .core.models import StatusRange
from .core.operators import filter_status_codes, map_image

StatusRangeLike = StatusRange | range | tuple[int, int]


def resolve_config(config: MapperConfig | None) -> MapperConfig:
    resolved = config or MapperConfig()
    try:
        resolved.validate()
    except ValueError as exc:
        raise ResponseSignalConfigError(str(exc)) from exc
    return resolved


def status_filter(status_range: StatusRangeLike) -> Callable[[object], object]:
    try:
        resolved = StatusRange.coerce(status_range)
    except ValueError as exc:
        raise ResponseSignalConfigError(str(exc)) from exc
    return partial(filter_status_codes, status_range=resolved)


def image_decoder(config: MapperConfig) -> Callable[[object], object]:
    return partial(map_image, formats=config.image.formats)


__all__ = [
    "StatusRangeLike",
    "resolve_config",
    "status_filter",
    "image_decoder",
]
