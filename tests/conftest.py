import pytest

from rgbhist.image import RasterImage


def image_from_rows(rows):
    """Obraz z listy wierszy pikseli (R,G,B)."""
    h = len(rows)
    w = len(rows[0]) if rows else 0
    return RasterImage(w, h, [px for row in rows for px in row])


def grey_image(values, w):
    """Obraz w×(len/w) z R=G=B=v."""
    return RasterImage(w, len(values) // w, [(v, v, v) for v in values])


@pytest.fixture
def gradient_image():
    # 16×16, każdy kanał inny rozkład
    pixels = []
    for y in range(16):
        for x in range(16):
            pixels.append(((x * 16) % 256, (y * 16) % 256, (x * y) % 256))
    return RasterImage(16, 16, pixels)
