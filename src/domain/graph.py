"""Aggregate of named plots sharing one Period and one set of axis bounds."""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Mapping

from config import settings
from utils.period import Period

from . import palette
from .coordinate import Coordinate
from .errors import InvalidArgumentError
from .plot import Plot

__all__ = ["Graph", "GraphBuilder"]

log = logging.getLogger(__name__)


class Graph:
    """Immutable after construction; build via ``GraphBuilder``.

    Attributes:
        period: Period the x-values index into.
        plots: label -> Plot.
        max: component-wise maximum of every plot's (maxx, maxy).
        minx: smallest plot minx.
        is_single: True when exactly one plot is held.
    """

    def __init__(self, period: Period, plots: Mapping[str, Plot]) -> None:
        if not plots:
            raise InvalidArgumentError("A graph needs at least one plot")
        self._period = period
        self._plots: Dict[str, Plot] = dict(plots)
        self._is_single = len(self._plots) == 1
        self._minx = min(p.minx for p in self._plots.values())
        self._max = Coordinate(
            max(p.maxx for p in self._plots.values()),
            max(p.maxy for p in self._plots.values()),
        )

    @classmethod
    def builder(cls, period: Period) -> "GraphBuilder":
        return GraphBuilder(period)

    @property
    def period(self) -> Period:
        return self._period

    @property
    def plots(self) -> Mapping[str, Plot]:
        return dict(self._plots)

    @property
    def max(self) -> Coordinate:
        return self._max

    @property
    def minx(self) -> float:
        return self._minx

    @property
    def is_single(self) -> bool:
        return self._is_single

    @property
    def bounds(self) -> tuple[float, Coordinate]:
        return self._minx, self._max

    def keys(self) -> List[str]:
        return list(self._plots.keys())

    def first_plot(self) -> Plot:
        return next(iter(self._plots.values()))

    def __len__(self) -> int:
        return len(self._plots)

    def __contains__(self, label: object) -> bool:
        return label in self._plots

    def __getitem__(self, label: str) -> Plot:
        return self._plots[label]

    def __repr__(self) -> str:
        return f"Graph(period={self._period!r}, plots={list(self._plots)!r}, minx={self._minx}, max={self._max!r})"


class GraphBuilder:
    def __init__(self, period: Period) -> None:
        self._period = period
        self._plots: Dict[str, Plot] = {}

    @classmethod
    def set_period(cls, period: Period) -> "GraphBuilder":
        return cls(period)

    def set(self, plots: Iterable[Plot]) -> "GraphBuilder":
        """Replace the held plots with copies; several plots get palette colours by position.

        The caller's plots are never modified, so one plot can feed any
        number of graphs.
        """
        plots = list(plots)
        if len(plots) > settings.MAX_PLOTS:
            raise InvalidArgumentError(
                f"A graph holds at most {settings.MAX_PLOTS} plots",
                context={"given": len(plots)},
            )
        self._plots.clear()
        recolor = len(plots) > 1
        for i, source in enumerate(plots):
            plot = source.with_color(palette.color_for_series(i) if recolor else source.color)
            if plot.label in self._plots:
                log.debug("plot label %r repeated; later plot replaces earlier", plot.label)
            self._plots[plot.label] = plot
        return self

    def build(self) -> Graph:
        if not self._plots:
            raise InvalidArgumentError("The graph cannot be built without plots")
        return Graph(self._period, self._plots)
