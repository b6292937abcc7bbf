# Shared fixtures for the graph model tests.

import os
from datetime import datetime

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
os.environ.setdefault("MPLBACKEND", "Agg")

from domain.graph import Graph  # noqa: E402
from factories import build_plot  # noqa: E402
from utils.period import Period  # noqa: E402


@pytest.fixture
def month_period():
    return Period.of_month(datetime(2023, 1, 15, 10, 30))


@pytest.fixture
def single_graph(month_period):
    plot = build_plot("Sales", [(1, 10.0), (5, 40.0), (10, 91.0), (20, 60.0), (31, 20.0)])
    return Graph.builder(month_period).set([plot]).build()


@pytest.fixture
def dual_graph(month_period):
    revenue = build_plot("Revenue", [(1, 100.0), (10, 154.0), (20, 120.0), (31, 80.0)])
    visits = build_plot("Visits", [(1, 5.0), (11, 50.0), (21, 30.0), (31, 12.0)], currency=False)
    return Graph.builder(month_period).set([revenue, visits]).build()
