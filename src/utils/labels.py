"""Human readable magnitude labels for axis guides and tooltips.

``label`` shortens a raw value with the largest matching suffix
(k = 10^3, m = 10^6, b = 10^9, t = 10^12) and one decimal place.
``parse`` strips the suffix again and returns only the numeric part, so
``parse(label(1_500_000)) == 1.5``. The magnitude is intentionally lost:
callers only compare the shortened number (e.g. the divisibility-by-3 test
that picks 2 or 3 guide intervals).
"""

from __future__ import annotations

import re
from typing import List

from config import settings

__all__ = ["label", "parse", "guide_labels", "value_text"]

LABEL_FORMAT = "{value:.1f}{suffix}"

_SUFFIXES = (
    (10.0**12, "t"),
    (10.0**9, "b"),
    (10.0**6, "m"),
    (10.0**3, "k"),
)
_SUFFIX_PATTERN = re.compile(r"[tbmk]")


def label(value: float) -> str:
    suffix = ""
    for magnitude, candidate in _SUFFIXES:
        if value >= magnitude:
            value /= magnitude
            suffix = candidate
            break
    return LABEL_FORMAT.format(value=value, suffix=suffix)


def parse(text: str) -> float:
    return float(_SUFFIX_PATTERN.sub("", text))


def guide_labels(maximum: float) -> List[str]:
    """Labels for the horizontal guides, bottom ("0") to top (``maximum``).

    Three intervals are used when the shortened maximum divides by 3,
    otherwise two.
    """
    labels = ["0"]
    count = 3 if parse(label(maximum)) % 3 == 0 else 2
    for i in range(1, count + 1):
        labels.append(label((i / count) * maximum))
    return labels


def value_text(value: float, *, currency: bool) -> str:
    """Tooltip text for a single sample value."""
    if currency:
        return f"{settings.CURRENCY_SYMBOL}{value:,.2f}"
    return f"{value:.1f}"
