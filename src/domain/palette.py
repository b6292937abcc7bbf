"""Series colours shared by the line graph and the pie chart.

Colours are hex strings so they can be handed to matplotlib directly.
"""

from __future__ import annotations

from typing import Final, Tuple

POSITIVE: Final = "#00FF00"
NEGATIVE: Final = "#FF0000"

# Position i colours the i-th plot of a multi-plot graph
GRAPH_SERIES: Final[Tuple[str, ...]] = (
    "#00FF00",  # green
    "#0000FF",  # blue
    "#FF0000",  # red
    "#00FFFF",  # cyan
    "#FF00FF",  # magenta
    "#FFFF00",  # yellow
    "#FFA500",  # orange
    "#444444",  # dark gray
    "#888888",  # gray
)

PIE_SERIES: Final[Tuple[str, ...]] = (
    "#00FF00",
    "#0000FF",
    "#FF0000",
    "#00FFFF",
    "#FF00FF",
    "#FFC000",
    "#2196F3",
    "#FFFF00",
    "#FFC0CB",  # pink
    "#00C853",
)


def color_for_series(index: int, palette: Tuple[str, ...] = GRAPH_SERIES) -> str:
    if index < 0:
        index = 0
    return palette[index % len(palette)]


__all__ = ["POSITIVE", "NEGATIVE", "GRAPH_SERIES", "PIE_SERIES", "color_for_series"]
