"""Asynchronous response signal."""

from __future__ import annotations

from collections.abc import AsyncIterable, AsyncIterator, Callable
from typing import Any

from .config import MapperConfig
from .core.async_streams import atry_map
from .core.operators import map_json, map_string
from .signal_shared import (
    StatusRangeLike,
    image_decoder,
    resolve_config,
    status_filter,
)


class AsyncResponseSignal:
    """Async counterpart of :class:`~response_signal.signals.ResponseSignal`."""

    def __init__(
        self,
        source: AsyncIterable[Any],
        *,
        config: MapperConfig | None = None,
    ) -> None:
        self._source = source
        self._config = resolve_config(config)

    @property
    def config(self) -> MapperConfig:
        return self._config

    def __aiter__(self) -> AsyncIterator[Any]:
        return aiter(self._source)

    def _chain(self, operation: Callable[[Any], Any]) -> "AsyncResponseSignal":
        return AsyncResponseSignal(atry_map(self._source, operation), config=self._config)

    def try_map(self, operation: Callable[[Any], Any]) -> "AsyncResponseSignal":
        return self._chain(operation)

    def filter_status_codes(self, status_range: StatusRangeLike) -> "AsyncResponseSignal":
        return self._chain(status_filter(status_range))

    def filter_status_code(self, status_code: int) -> "AsyncResponseSignal":
        return self.filter_status_codes((status_code, status_code))

    def filter_successful_status_codes(self) -> "AsyncResponseSignal":
        return self.filter_status_codes(self._config.successful_status_range)

    def filter_successful_status_and_redirect_codes(self) -> "AsyncResponseSignal":
        return self.filter_status_codes(self._config.successful_and_redirect_status_range)

    def map_image(self) -> "AsyncResponseSignal":
        return self._chain(image_decoder(self._config))

    def map_json(self) -> "AsyncResponseSignal":
        return self._chain(map_json)

    def map_string(self) -> "AsyncResponseSignal":
        return self._chain(map_string)

    async def collect(self) -> list[Any]:
        return [item async for item in self]


__all__ = [
    "AsyncResponseSignal",
]
