"""Tileset loading and palette extraction.

The engine consumes its tile palette as raw RGBA bytes rather than pygame
surfaces, so this module flattens a decoded image onto an opaque background
and hands back an immutable `PixelBuffer`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

import numpy as np
import pygame

from config import PALETTE_BACKGROUND


@dataclass(frozen=True)
class PixelBuffer:
    """Row-major RGBA pixels, top row first."""

    width: int
    height: int
    data: bytes

    def __post_init__(self) -> None:
        expected = self.width * self.height * 4
        if len(self.data) != expected:
            raise ValueError(
                f"pixel data is {len(self.data)} bytes, expected {expected} "
                f"for {self.width}x{self.height} RGBA"
            )

    @property
    def size(self) -> Tuple[int, int]:
        return self.width, self.height

    def pixel(self, x: int, y: int) -> Tuple[int, int, int, int]:
        """Return the (r, g, b, a) value at column x, row y."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height}")
        i = (y * self.width + x) * 4
        r, g, b, a = self.data[i : i + 4]
        return r, g, b, a

    def as_array(self) -> np.ndarray:
        """Read-only (height, width, 4) uint8 view of the pixels."""
        arr = np.frombuffer(self.data, dtype=np.uint8)
        return arr.reshape(self.height, self.width, 4)

    def to_surface(self) -> pygame.Surface:
        """Build a new pygame surface holding a copy of the pixels."""
        return pygame.image.fromstring(self.data, self.size, "RGBA")


def load_image(filename: str) -> pygame.Surface:
    """Decode an image file.

    Safe to call off the main thread: the surface is not converted to the
    display format. Decoder errors propagate to the caller.
    """
    return pygame.image.load(filename)


def extract_palette(
    image: pygame.Surface,
    background: Tuple[int, int, int] = PALETTE_BACKGROUND,
) -> PixelBuffer:
    """Flatten `image` onto `background` and read back every pixel.

    The scratch surface is filled opaque before the blit so transparent
    regions of the image come out as `background` instead of black, and every
    pixel reads back with alpha 255.
    """
    width, height = image.get_size()
    scratch = pygame.Surface((width, height), pygame.SRCALPHA, 32)
    scratch.fill((*background, 255))
    scratch.blit(image, (0, 0))
    data = pygame.image.tostring(scratch, "RGBA", False)
    return PixelBuffer(width=width, height=height, data=data)


__all__ = ["PixelBuffer", "load_image", "extract_palette"]
