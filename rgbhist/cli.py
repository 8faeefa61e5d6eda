"""Wiersz poleceń rgbhist.

Trzy polecenia, każde czyta jeden BMP i zapisuje jeden BMP:

    rgbhist histogram IN.bmp OUT.bmp
    rgbhist equalize IN.bmp OUT.bmp
    rgbhist binarize IN.bmp OUT.bmp --strategy two_peaks
"""

from __future__ import annotations

import argparse
import logging
from typing import Optional, Sequence

from .chart import render_histogram
from .constants import FIXED_CUTOUT
from .errors import HistogramError
from .histogram import compute_histogram, equalize
from .io.bmp_io import read_bmp, write_bmp
from .thresholds import ThresholdStrategy, parse_strategy, threshold

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(verbose: bool = False, quiet: bool = False) -> None:
    if quiet:
        level = logging.WARNING
    elif verbose:
        level = logging.DEBUG
    else:
        level = logging.INFO
    logging.basicConfig(level=level, format=LOG_FORMAT)


def _cmd_histogram(args: argparse.Namespace) -> None:
    image = read_bmp(args.input)
    write_bmp(args.output, render_histogram(compute_histogram(image)))


def _cmd_equalize(args: argparse.Namespace) -> None:
    image = read_bmp(args.input)
    write_bmp(args.output, equalize(image))


def _cmd_binarize(args: argparse.Namespace) -> None:
    strategy = parse_strategy(args.strategy)
    image = read_bmp(args.input)
    write_bmp(args.output, threshold(image, strategy, cutout=args.cutout))


def _build_parser() -> argparse.ArgumentParser:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("input", help="Wejściowy plik BMP")
    common.add_argument("output", help="Wyjściowy plik BMP")

    parser = argparse.ArgumentParser(
        prog="rgbhist",
        description="Histogram RGB, equalizacja i binaryzacja obrazów BMP.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Logi DEBUG")
    parser.add_argument("-q", "--quiet", action="store_true", help="Tylko ostrzeżenia")

    subparsers = parser.add_subparsers(dest="command", required=True)

    hist = subparsers.add_parser(
        "histogram", parents=[common], help="Wykres histogramu R/G/B"
    )
    hist.set_defaults(func=_cmd_histogram)

    eq = subparsers.add_parser(
        "equalize", parents=[common], help="Wyrównanie histogramu (każdy kanał osobno)"
    )
    eq.set_defaults(func=_cmd_equalize)

    binz = subparsers.add_parser(
        "binarize", parents=[common], help="Binaryzacja kanałów wybraną strategią"
    )
    # bez choices – nieznana nazwa ma dać UnknownStrategyError, a nie błąd argparse
    binz.add_argument(
        "-s",
        "--strategy",
        default=ThresholdStrategy.FIXED_CUTOUT.value,
        help="fixed_cutout | two_peaks | median_grey_level (domyślnie: fixed_cutout)",
    )
    binz.add_argument(
        "--cutout",
        type=int,
        default=FIXED_CUTOUT,
        help=f"Próg dla fixed_cutout (domyślnie: {FIXED_CUTOUT})",
    )
    binz.set_defaults(func=_cmd_binarize)

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose, args.quiet)

    logger.info("Using args: %s %s %s", args.input, args.command, args.output)
    try:
        args.func(args)
    except HistogramError as e:
        logger.error("%s", e)
        return 1
    except OSError as e:
        logger.error("Błąd pliku: %s", e)
        return 1

    logger.info("Zapisano: %s", args.output)
    return 0
