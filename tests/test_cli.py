"""Tests for the `python -m gui` render entry point."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest

from domain.pie import Pie, PieChartData
from domain.serialization import dumps_graph, pie_chart_to_dict
from gui import __main__ as cli
from gui.services.logging_service import PACKAGE_LOGGERS, get_logging_service


@pytest.fixture(autouse=True)
def _restore_logging():
    previous = {name: logging.getLogger(name).level for name in PACKAGE_LOGGERS}
    yield
    get_logging_service().detach_root()
    for name, level in previous.items():
        logging.getLogger(name).setLevel(level)


def _write(p: Path, text: str) -> Path:
    p.write_text(text, encoding="utf-8")
    return p


def test_render_graph_png_and_export_logs(tmp_path, dual_graph):
    payload = _write(tmp_path / "graph.json", dumps_graph(dual_graph))
    image = tmp_path / "graph.png"
    logs = tmp_path / "logs.jsonl"
    code = cli.main(
        [str(payload), "-o", str(image), "--width", "320", "--height", "200", "--log-level", "INFO",
         "--log-export", str(logs)]
    )
    assert code == 0
    assert image.read_bytes().startswith(b"\x89PNG")
    assert logging.getLogger("gui").level == logging.INFO
    messages = [json.loads(line)["message"] for line in logs.read_text(encoding="utf-8").splitlines()]
    assert any("rendered graph.line" in m for m in messages)


def test_render_pie_svg(tmp_path):
    chart = PieChartData()
    chart.add([Pie(30.0, "Rent", "#FF0000"), Pie(10.0, "Food", "#00FF00")])
    payload = _write(tmp_path / "pie.json", json.dumps(pie_chart_to_dict(chart)))
    image = tmp_path / "pie.svg"
    assert cli.main([str(payload), "-o", str(image), "--pie"]) == 0
    assert "<svg" in image.read_text(encoding="utf-8")


def test_bad_payload_and_format_exit_with_2(tmp_path, capsys):
    payload = _write(tmp_path / "broken.json", "{not json")
    assert cli.main([str(payload), "-o", str(tmp_path / "out.png")]) == 2
    assert "Cannot load payload" in capsys.readouterr().err
    assert cli.main([str(tmp_path / "missing.json"), "-o", str(tmp_path / "out.png")]) == 2
    assert cli.main([str(payload), "-o", str(tmp_path / "out.gif")]) == 2
    assert not (tmp_path / "out.png").exists()
