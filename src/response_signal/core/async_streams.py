"""Element-wise transform over asynchronous iterables."""

from __future__ import annotations

from collections.abc import AsyncIterable, AsyncIterator, Callable
from typing import Any, TypeVar

from .errors import MappingError
from .streams import log_rejection

T = TypeVar("T")


async def atry_map(
    source: AsyncIterable[Any],
    operation: Callable[[Any], T],
) -> AsyncIterator[T]:
    async for element in source:
        try:
            mapped = operation(element)
        except MappingError as exc:
            log_rejection(operation, exc)
            raise
        yield mapped


__all__ = [
    "atry_map",
]
