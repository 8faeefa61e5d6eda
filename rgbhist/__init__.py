from .chart import DEFAULT_LAYOUT, ChartLayout, render_histogram
from .errors import (
    DegenerateHistogramError,
    EmptyImageError,
    HistogramError,
    UnknownStrategyError,
)
from .histogram import (
    RGBHistogram,
    compute_histogram,
    cumulative,
    equalize,
    merge_histograms,
)
from .image import RasterImage
from .thresholds import (
    ThresholdStrategy,
    binarize,
    compute_cut_points,
    median_grey_level_cut,
    parse_strategy,
    threshold,
    two_peaks_cut,
)

__all__ = [
    "DEFAULT_LAYOUT",
    "ChartLayout",
    "render_histogram",
    "DegenerateHistogramError",
    "EmptyImageError",
    "HistogramError",
    "UnknownStrategyError",
    "RGBHistogram",
    "compute_histogram",
    "cumulative",
    "equalize",
    "merge_histograms",
    "RasterImage",
    "ThresholdStrategy",
    "binarize",
    "compute_cut_points",
    "median_grey_level_cut",
    "parse_strategy",
    "threshold",
    "two_peaks_cut",
]
