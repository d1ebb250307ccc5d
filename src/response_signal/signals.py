"""Synchronous response signal."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import Any

from .config import MapperConfig
from .core.operators import map_json, map_string
from .core.streams import try_map
from .signal_shared import (
    StatusRangeLike,
    image_decoder,
    resolve_config,
    status_filter,
)


class ResponseSignal:
    """Iterable of upstream values with response mapping operators.

    Every operator returns a new signal; iteration is lazy and stops with the
    first :class:`~response_signal.core.errors.MappingError`.

    Example:
        >>> payloads = ResponseSignal(responses).filter_successful_status_codes().map_json()
        >>> for payload in payloads:
        ...     print(payload)
    """

    def __init__(
        self,
        source: Iterable[Any],
        *,
        config: MapperConfig | None = None,
    ) -> None:
        self._source = source
        self._config = resolve_config(config)

    @property
    def config(self) -> MapperConfig:
        return self._config

    def __iter__(self) -> Iterator[Any]:
        return iter(self._source)

    def _chain(self, operation: Callable[[Any], Any]) -> "ResponseSignal":
        return ResponseSignal(try_map(self._source, operation), config=self._config)

    def try_map(self, operation: Callable[[Any], Any]) -> "ResponseSignal":
        return self._chain(operation)

    def filter_status_codes(self, status_range: StatusRangeLike) -> "ResponseSignal":
        """Fail on responses whose status code lies outside ``status_range``."""
        return self._chain(status_filter(status_range))

    def filter_status_code(self, status_code: int) -> "ResponseSignal":
        return self.filter_status_codes((status_code, status_code))

    def filter_successful_status_codes(self) -> "ResponseSignal":
        return self.filter_status_codes(self._config.successful_status_range)

    def filter_successful_status_and_redirect_codes(self) -> "ResponseSignal":
        return self.filter_status_codes(self._config.successful_and_redirect_status_range)

    def map_image(self) -> "ResponseSignal":
        return self._chain(image_decoder(self._config))

    def map_json(self) -> "ResponseSignal":
        return self._chain(map_json)

    def map_string(self) -> "ResponseSignal":
        return self._chain(map_string)

    def collect(self) -> list[Any]:
        return list(self)


__all__ = [
    "ResponseSignal",
]
