# rgbhist/io/bmp_io.py
from PIL import Image

from ..errors import EmptyImageError
from ..image import RasterImage


def read_bmp(path: str) -> RasterImage:
    with Image.open(path) as src:
        img = src.convert("RGB")
    w, h = img.size
    data = img.tobytes()  # RGBRGB... wierszami od góry
    pixels = [(data[i], data[i + 1], data[i + 2]) for i in range(0, len(data), 3)]
    return RasterImage(w, h, pixels)


def write_bmp(path: str, image: RasterImage):
    w, h = image.width(), image.height()
    if w <= 0 or h <= 0:
        raise EmptyImageError("Nie można zapisać pustego obrazu BMP.")
    buf = bytearray()
    for r, g, b in image.pixels:
        buf += bytes((r, g, b))
    img = Image.frombytes("RGB", (w, h), bytes(buf))
    img.save(path, format="BMP")
