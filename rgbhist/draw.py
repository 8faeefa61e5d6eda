from dataclasses import dataclass

from .constants import Color
from .image import RasterImage


@dataclass(frozen=True)
class Rectangle:
    x: int
    y: int
    width: int
    height: int


def _plot(img: RasterImage, x: int, y: int, color: Color):
    # piksele poza obrazem są pomijane
    if 0 <= x < img.w and 0 <= y < img.h:
        img.set_pixel(x, y, *color)


def draw_rectangle(img: RasterImage, rect: Rectangle, color: Color):
    """Sam obrys prostokąta (1 px)."""
    x2 = rect.x + rect.width - 1
    y2 = rect.y + rect.height - 1
    for x in range(rect.x, x2 + 1):
        _plot(img, x, rect.y, color)
        _plot(img, x, y2, color)
    for y in range(rect.y, y2 + 1):
        _plot(img, rect.x, y, color)
        _plot(img, x2, y, color)


def draw_vline(img: RasterImage, x: int, y1: int, y2: int, color: Color):
    """Pionowa linia od y1 do y2 włącznie."""
    for y in range(y1, y2 + 1):
        _plot(img, x, y, color)
