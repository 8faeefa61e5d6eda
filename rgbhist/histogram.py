import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from .constants import BINS, CHANNELS, MAX_INTENSITY
from .errors import DegenerateHistogramError, EmptyImageError
from .image import RasterImage

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RGBHistogram:
    """Histogram RGB – trzy krotki po 256 liczników (czerwony, zielony, niebieski)."""

    red: Tuple[int, ...]
    green: Tuple[int, ...]
    blue: Tuple[int, ...]

    def channels(self) -> Tuple[Tuple[int, ...], ...]:
        return (self.red, self.green, self.blue)

    def channel(self, name: str) -> Tuple[int, ...]:
        if name not in CHANNELS:
            raise KeyError(name)
        return getattr(self, name)

    def total(self) -> int:
        """Liczba pikseli obrazu źródłowego (suma dowolnego kanału)."""
        return sum(self.red)


def _empty_histogram() -> RGBHistogram:
    zeros = (0,) * BINS
    return RGBHistogram(zeros, zeros, zeros)


def compute_histogram(image, rows: Optional[range] = None) -> RGBHistogram:
    """
    Zwraca histogram RGB zliczający wystąpienia jasności w każdym kanale osobno.
    image: bufor z width()/height()/channel_at(x, y).
    rows: opcjonalny zakres wierszy (histogram częściowy, do łączenia
    przez merge_histograms).
    Obraz o szerokości/wysokości <= 0 daje histogram zerowy.
    """
    w = image.width()
    h = image.height()
    if w <= 0 or h <= 0:
        logger.debug("Pusty obraz %dx%d – histogram zerowy", w, h)
        return _empty_histogram()

    red = [0] * BINS
    green = [0] * BINS
    blue = [0] * BINS
    ys = range(h) if rows is None else rows
    for y in ys:
        for x in range(w):
            r, g, b = image.channel_at(x, y)
            if max(r, g, b) > MAX_INTENSITY or min(r, g, b) < 0:
                raise ValueError(f"Piksel ({x},{y}) poza zakresem 0..255: {(r, g, b)}")
            red[r] += 1
            green[g] += 1
            blue[b] += 1

    logger.debug("Histogram obrazu %dx%d (wiersze: %s)", w, h, rows or "wszystkie")
    return RGBHistogram(tuple(red), tuple(green), tuple(blue))


def merge_histograms(*parts: RGBHistogram) -> RGBHistogram:
    """Suma histogramów częściowych (kolejność dowolna)."""
    if not parts:
        return _empty_histogram()
    merged = [[0] * BINS for _ in CHANNELS]
    for part in parts:
        for acc, counts in zip(merged, part.channels()):
            for i in range(BINS):
                acc[i] += counts[i]
    return RGBHistogram(*(tuple(acc) for acc in merged))


def cumulative(counts: Sequence[int]) -> List[int]:
    """CDF (dystrybuanta) – sumy prefiksowe kanału."""
    cdf = [0] * len(counts)
    cumsum = 0
    for i, c in enumerate(counts):
        cumsum += c
        cdf[i] = cumsum
    return cdf


def _equalize_mapping(counts: Sequence[int], total: int, channel: str) -> List[int]:
    cdf = cumulative(counts)
    # najmniejsza wartość CDF > 0
    cdf_min = next((c for c in cdf if c > 0), 0)
    denom = total - cdf_min
    if denom == 0:
        raise DegenerateHistogramError(channel)

    mapping = [0] * BINS
    for i in range(BINS):
        # arytmetyka całkowita: obcięcie w dół, bez błędów zmiennoprzecinkowych
        v = (MAX_INTENSITY * (cdf[i] - cdf_min)) // denom
        if v < 0:
            v = 0
        elif v > MAX_INTENSITY:
            v = MAX_INTENSITY
        mapping[i] = v
    return mapping


def equalize(image) -> RasterImage:
    """
    Wyrównanie histogramu (histogram equalization) – każdy kanał osobno.
    Zwraca nowy obraz tego samego rozmiaru; balans kolorów może się zmienić.
    """
    w = image.width()
    h = image.height()
    if w <= 0 or h <= 0:
        raise EmptyImageError()

    hist = compute_histogram(image)
    total = w * h
    map_r, map_g, map_b = (
        _equalize_mapping(counts, total, name)
        for name, counts in zip(CHANNELS, hist.channels())
    )

    out = RasterImage.blank(w, h)
    for y in range(h):
        for x in range(w):
            r, g, b = image.channel_at(x, y)
            out.set_pixel(x, y, map_r[r], map_g[g], map_b[b])
    return out
