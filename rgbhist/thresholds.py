import logging
from enum import Enum
from typing import Optional, Sequence, Tuple

from .constants import FIXED_CUTOUT, MAX_INTENSITY
from .errors import UnknownStrategyError
from .histogram import RGBHistogram, compute_histogram
from .image import RasterImage

logger = logging.getLogger(__name__)

CutPoints = Tuple[int, int, int]


class ThresholdStrategy(Enum):
    FIXED_CUTOUT = "fixed_cutout"
    TWO_PEAKS = "two_peaks"
    MEDIAN_GREY_LEVEL = "median_grey_level"


def parse_strategy(value) -> ThresholdStrategy:
    """Zamienia nazwę (lub element enuma) na strategię; brak wartości domyślnej."""
    if isinstance(value, ThresholdStrategy):
        return value
    try:
        return ThresholdStrategy(value)
    except ValueError:
        raise UnknownStrategyError(value) from None


def _argmax(values: Sequence[int]) -> int:
    # pierwszy indeks z maksymalną wartością
    best = 0
    for i in range(1, len(values)):
        if values[i] > values[best]:
            best = i
    return best


def two_peaks_cut(counts: Sequence[int]) -> int:
    """
    Metoda dwóch szczytów.
    peak1 – jasność o największej liczności,
    peak2 – jasność maksymalizująca (i - peak1)^2 * h[i],
    próg = środek między szczytami.
    Kanał bez pikseli daje próg 0.
    """
    peak1 = _argmax(counts)
    weighted = [(i - peak1) ** 2 * counts[i] for i in range(len(counts))]
    peak2 = _argmax(weighted)
    return (peak1 + peak2) >> 1


def median_grey_level_cut(counts: Sequence[int]) -> int:
    """
    Median Grey Level: min = pierwsza niezerowa jasność, max = jasność szczytu.
    Próg = (max - min) >> 1 – liczony od zera, a nie od min
    (inaczej niż środek w two_peaks_cut).
    Kanał bez pikseli daje próg 0.
    """
    min_intensity = next((i for i, c in enumerate(counts) if c != 0), None)
    if min_intensity is None:
        return 0
    max_intensity = _argmax(counts)
    return (max_intensity - min_intensity) >> 1


def fixed_cutout_cut(cutout: int = FIXED_CUTOUT) -> CutPoints:
    """Stały próg dla wszystkich kanałów (przycięty do 0..255)."""
    T = int(cutout)
    if T < 0:
        T = 0
    elif T > MAX_INTENSITY:
        T = MAX_INTENSITY
    return (T, T, T)


def compute_cut_points(
    histogram: Optional[RGBHistogram], strategy, cutout: int = FIXED_CUTOUT
) -> CutPoints:
    """Progi (R,G,B) wyznaczone wybraną strategią z histogramu."""
    strategy = parse_strategy(strategy)
    if strategy is ThresholdStrategy.FIXED_CUTOUT:
        cuts = fixed_cutout_cut(cutout)
    else:
        if histogram is None:
            raise ValueError(f"Strategia {strategy.value} wymaga histogramu.")
        if strategy is ThresholdStrategy.TWO_PEAKS:
            fn = two_peaks_cut
        else:
            fn = median_grey_level_cut
        r, g, b = (fn(counts) for counts in histogram.channels())
        cuts = (r, g, b)
    logger.debug("Progi %s: %s", strategy.value, cuts)
    return cuts


def binarize(image, cut_points: CutPoints) -> RasterImage:
    """
    Binaryzacja każdego kanału osobno: v < T → 0, v >= T → 255.
    Zwraca nowy obraz; kanały nie są łączone w luminancję.
    """
    tr, tg, tb = cut_points
    w = image.width()
    h = image.height()
    out = RasterImage.blank(w, h)
    for y in range(h):
        for x in range(w):
            r, g, b = image.channel_at(x, y)
            out.set_pixel(
                x,
                y,
                0 if r < tr else 255,
                0 if g < tg else 255,
                0 if b < tb else 255,
            )
    return out


def threshold(image, strategy, cutout: int = FIXED_CUTOUT) -> RasterImage:
    """Binaryzacja obrazu wybraną strategią (histogram liczony tylko gdy potrzebny)."""
    strategy = parse_strategy(strategy)
    hist = None
    if strategy is not ThresholdStrategy.FIXED_CUTOUT:
        hist = compute_histogram(image)
    return binarize(image, compute_cut_points(hist, strategy, cutout))
