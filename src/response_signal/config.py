"""Mapper configuration."""

from __future__ import annotations

from dataclasses import dataclass, field

from PIL import Image

from .core.models import (
    SUCCESSFUL_AND_REDIRECT_STATUS_RANGE,
    SUCCESSFUL_STATUS_RANGE,
    StatusRange,
)


@dataclass(slots=True, frozen=True)
class ImageConfig:
    """Image decoding settings."""

    formats: tuple[str, ...] | None = None

    def __post_init__(self) -> None:
        if self.formats is None or isinstance(self.formats, tuple):
            return
        if isinstance(self.formats, str):
            object.__setattr__(self, "formats", (self.formats,))
            return
        object.__setattr__(self, "formats", tuple(self.formats))

    def validate(self) -> None:
        if self.formats is None:
            return
        if len(self.formats) == 0:
            raise ValueError("image.formats must not be empty")
        for name in self.formats:
            if not isinstance(name, str) or name == "":
                raise ValueError("image.formats entries must be non-empty strings")
            if name != name.upper():
                raise ValueError("image.formats entries must be upper-case format names")
        Image.init()
        unknown = [name for name in self.formats if name not in Image.OPEN]
        if unknown:
            raise ValueError(f"image.formats has unsupported formats: {', '.join(unknown)}")


@dataclass(slots=True, frozen=True)
class MapperConfig:
    """Runtime configuration for response signals."""

    successful_status_range: StatusRange = SUCCESSFUL_STATUS_RANGE
    successful_and_redirect_status_range: StatusRange = SUCCESSFUL_AND_REDIRECT_STATUS_RANGE
    image: ImageConfig = field(default_factory=ImageConfig)

    def validate(self) -> None:
        for field_name in (
            "successful_status_range",
            "successful_and_redirect_status_range",
        ):
            if not isinstance(getattr(self, field_name), StatusRange):
                raise ValueError(f"{field_name} must be StatusRange")
        if not isinstance(self.image, ImageConfig):
            raise ValueError("image must be ImageConfig")
        self.image.validate()


__all__ = [
    "ImageConfig",
    "MapperConfig",
]
