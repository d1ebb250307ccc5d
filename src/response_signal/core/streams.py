"""Element-wise transform over synchronous iterables."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator
from typing import Any, TypeVar

from .errors import MappingError

logger = logging.getLogger("response_signal")

T = TypeVar("T")


def operation_name(operation: Callable[..., Any]) -> str:
    func = getattr(operation, "func", operation)
    return getattr(func, "__name__", type(func).__name__)


def log_rejection(operation: Callable[..., Any], exc: MappingError) -> None:
    logger.debug(
        "element rejected operator=%s kind=%s",
        operation_name(operation),
        exc.kind.name,
    )


def try_map(source: Iterable[Any], operation: Callable[[Any], T]) -> Iterator[T]:
    """Yield ``operation(element)`` per element; stop at the first failure."""

    for element in source:
        try:
            mapped = operation(element)
        except MappingError as exc:
            log_rejection(operation, exc)
            raise
        yield mapped


__all__ = [
    "operation_name",
    "log_rejection",
    "try_map",
]
