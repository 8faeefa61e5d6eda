import logging
from dataclasses import dataclass
from typing import List, Tuple

from .constants import (
    BINS,
    BLACK,
    BLUE,
    CHART_BETWEEN,
    CHART_GRAPH_H,
    CHART_GRAPH_W,
    CHART_LR_BORDER,
    CHART_TB_BORDER,
    CHANNELS,
    GREEN,
    RED,
    WHITE,
)
from .draw import Rectangle, draw_rectangle, draw_vline
from .errors import EmptyImageError
from .histogram import RGBHistogram
from .image import RasterImage

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ChartLayout:
    """Marginesy i rozmiar paneli wykresu (trzy panele jeden pod drugim)."""

    lr_border: int = CHART_LR_BORDER
    tb_border: int = CHART_TB_BORDER
    between: int = CHART_BETWEEN
    graph_width: int = CHART_GRAPH_W
    graph_height: int = CHART_GRAPH_H

    def size(self) -> Tuple[int, int]:
        w = 2 * self.lr_border + self.graph_width
        h = 2 * self.tb_border + 2 * self.between + 3 * self.graph_height
        return w, h

    def panels(self) -> List[Rectangle]:
        """Prostokąty paneli: czerwony, zielony, niebieski (od góry)."""
        step = self.graph_height + self.between
        return [
            Rectangle(
                x=self.lr_border,
                y=self.tb_border + k * step,
                width=self.graph_width,
                height=self.graph_height,
            )
            for k in range(3)
        ]


DEFAULT_LAYOUT = ChartLayout()


def render_histogram(
    histogram: RGBHistogram, layout: ChartLayout = DEFAULT_LAYOUT
) -> RasterImage:
    """
    Rysuje histogram RGB jako trzy wykresy słupkowe (R, G, B od góry),
    każdy w białej ramce. Słupki „wiszą” od górnej krawędzi panelu,
    wysokość = graph_height * count / max_count.
    """
    maxima = [max(counts) for counts in histogram.channels()]
    for name, m in zip(CHANNELS, maxima):
        if m == 0:
            raise EmptyImageError(f"Histogram kanału '{name}' jest pusty – brak pikseli.")

    w, h = layout.size()
    graph = RasterImage.blank(w, h, BLACK)

    panels = layout.panels()
    for rect in panels:
        draw_rectangle(graph, rect, WHITE)

    for rect, counts, max_count, color in zip(
        panels, histogram.channels(), maxima, (RED, GREEN, BLUE)
    ):
        for i, count in enumerate(counts):
            x = rect.x + i * layout.graph_width // BINS
            y_end = rect.y + layout.graph_height * count // max_count
            draw_vline(graph, x, rect.y, y_end, color)

    logger.debug("Wykres histogramu %dx%d", w, h)
    return graph
