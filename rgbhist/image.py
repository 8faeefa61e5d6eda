from dataclasses import dataclass
from typing import List

from .constants import BLACK, MAX_INTENSITY, Color


def _check_channel(v: int) -> int:
    if v < 0 or v > MAX_INTENSITY:
        raise ValueError(f"Wartość kanału poza zakresem 0..255: {v}")
    return v


@dataclass
class RasterImage:
    """
    Bufor pikseli RGB: w×h, piksele (R,G,B) wierszami od góry.
    Dla w <= 0 lub h <= 0 lista pikseli jest pusta.
    """

    w: int
    h: int
    pixels: List[Color]  # długość = w * h, skanline'ami od góry

    def __post_init__(self):
        expected = max(0, self.w) * max(0, self.h)
        if len(self.pixels) != expected:
            raise ValueError(
                f"Liczba pikseli ({len(self.pixels)}) nie pasuje do {self.w}×{self.h}"
            )

    @classmethod
    def blank(cls, w: int, h: int, color: Color = BLACK) -> "RasterImage":
        return cls(w, h, [tuple(color)] * (max(0, w) * max(0, h)))

    # ---------- PixelBuffer API ----------
    def width(self) -> int:
        return self.w

    def height(self) -> int:
        return self.h

    def _index(self, x: int, y: int) -> int:
        if not (0 <= x < self.w and 0 <= y < self.h):
            raise IndexError(f"Piksel ({x},{y}) poza obrazem {self.w}×{self.h}")
        return y * self.w + x

    def channel_at(self, x: int, y: int) -> Color:
        return self.pixels[self._index(x, y)]

    def set_pixel(self, x: int, y: int, r: int, g: int, b: int):
        self.pixels[self._index(x, y)] = (
            _check_channel(r),
            _check_channel(g),
            _check_channel(b),
        )

    def copy(self) -> "RasterImage":
        return RasterImage(self.w, self.h, self.pixels[:])
