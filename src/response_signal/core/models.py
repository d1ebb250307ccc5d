"""Response and status range models."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

import httpx


@dataclass(slots=True, frozen=True)
class StatusRange:
    """Closed interval of HTTP status codes, ``[low, high]``."""

    low: int
    high: int

    def __post_init__(self) -> None:
        for name in ("low", "high"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"StatusRange.{name} must be int")
        if self.low > self.high:
            raise ValueError("StatusRange.low must be <= StatusRange.high")

    def __contains__(self, status_code: object) -> bool:
        if isinstance(status_code, bool) or not isinstance(status_code, int):
            return False
        return self.low <= status_code <= self.high

    @classmethod
    def single(cls, status_code: int) -> "StatusRange":
        return cls(status_code, status_code)

    @classmethod
    def coerce(cls, value: "StatusRange | range | tuple[int, int]") -> "StatusRange":
        if isinstance(value, StatusRange):
            return value
        if isinstance(value, range):
            if value.step != 1 or len(value) == 0:
                raise ValueError("status range must be a non-empty range with step 1")
            return cls(value.start, value.stop - 1)
        if isinstance(value, tuple) and len(value) == 2:
            return cls(value[0], value[1])
        raise ValueError("status range must be StatusRange, range, or (low, high)")


SUCCESSFUL_STATUS_RANGE = StatusRange(200, 299)
SUCCESSFUL_AND_REDIRECT_STATUS_RANGE = StatusRange(200, 399)


@dataclass(slots=True, frozen=True)
class Response:
    """Completed HTTP exchange as seen by the mapping operators."""

    status_code: int
    content: bytes
    headers: Mapping[str, str] = field(default_factory=dict, compare=False)
    url: str | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.content, (bytes, bytearray, memoryview)):
            raise ValueError("Response.content must be bytes-like")
        if not isinstance(self.content, bytes):
            object.__setattr__(self, "content", bytes(self.content))
        if not isinstance(self.headers, MappingProxyType):
            object.__setattr__(self, "headers", MappingProxyType(dict(self.headers)))

    @classmethod
    def from_httpx(cls, response: httpx.Response) -> "Response":
        """Build from an httpx response whose body has already been read.

        Raises ``httpx.ResponseNotRead`` for unread streaming responses.
        """

        url: str | None
        try:
            url = str(response.url)
        except RuntimeError:
            url = None
        return cls(
            status_code=response.status_code,
            content=response.content,
            headers=dict(response.headers),
            url=url,
        )


__all__ = [
    "StatusRange",
    "SUCCESSFUL_STATUS_RANGE",
    "SUCCESSFUL_AND_REDIRECT_STATUS_RANGE",
    "Response",
]
