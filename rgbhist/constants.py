from typing import Tuple

Color = Tuple[int, int, int]

# liczba kubełków histogramu na kanał (8 bitów)
BINS = 256
MAX_INTENSITY = BINS - 1

# stały próg binaryzacji (Fixed Cutout)
FIXED_CUTOUT = 128

# układ wykresu histogramu (piksele)
CHART_LR_BORDER = 30
CHART_TB_BORDER = 10
CHART_BETWEEN = 30
CHART_GRAPH_W = 256
CHART_GRAPH_H = 256

BLACK: Color = (0, 0, 0)
WHITE: Color = (255, 255, 255)
RED: Color = (255, 0, 0)
GREEN: Color = (0, 255, 0)
BLUE: Color = (0, 0, 255)

CHANNELS = ("red", "green", "blue")
