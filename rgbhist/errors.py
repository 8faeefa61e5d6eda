"""Wyjątki zgłaszane przez operacje na histogramach."""


class HistogramError(ValueError):
    """Wspólna baza – błędne dane wejściowe dla operacji histogramowych."""


class EmptyImageError(HistogramError):
    """Obraz bez pikseli (szerokość lub wysokość <= 0)."""

    def __init__(self, message="Obraz jest pusty (brak pikseli)."):
        super().__init__(message)


class DegenerateHistogramError(HistogramError):
    """Equalizacja niemożliwa – wszystkie piksele kanału mają tę samą jasność."""

    def __init__(self, channel: str):
        self.channel = channel
        super().__init__(
            f"Histogram kanału '{channel}' jest zdegenerowany "
            "(jedna jasność) – equalizacja niemożliwa."
        )


class UnknownStrategyError(HistogramError):
    def __init__(self, strategy):
        self.strategy = strategy
        super().__init__(f"Nieznana strategia binaryzacji: {strategy!r}")
