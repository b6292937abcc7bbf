"""Global configuration and constants for the graph widgets."""

from __future__ import annotations

import os
from typing import Final

# Series limits
MAX_PLOTS: Final = 9  # one per line-graph palette entry
MAX_PIE_SLICES: Final = 10

# Plot construction defaults
DEFAULT_SMOOTHING_THRESHOLD: Final = 3
DEFAULT_HAS_CURRENCY: Final = True
MAXY_OCCUPANCY: Final = 0.8  # data must fill at least this share of the y-range

# Presentation
CURRENCY_SYMBOL: Final = os.environ.get("GRAPHVIEW_CURRENCY_SYMBOL", "$")
PIE_SLICE_GAP_DEGREES: Final = 8.0
X_AXIS_LABEL_FRACTIONS: Final = (0.3, 0.7)

HOUR_FORMAT: Final = "%H:%M"
WEEKDAY_FORMAT: Final = "%A"
SHORT_DATE_FORMAT: Final = "%d/%m/%Y"
DAY_MONTH_FORMAT: Final = "%d %b"

# Logging
LOG_LEVEL: Final = os.environ.get("GRAPHVIEW_LOG_LEVEL", "WARNING")
LOG_BUFFER_CAPACITY: Final = int(os.environ.get("GRAPHVIEW_LOG_BUFFER", "500"))
