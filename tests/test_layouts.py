from __future__ import annotations

import pytest

from pretty_graphs.data import normalize_data
from pretty_graphs.layouts import LayoutEngine
from pretty_graphs.schemas.bar_chart import BarChartSchema


def test_geometry_for_bars() -> None:
    opts = BarChartSchema()
    geom = LayoutEngine(opts).resolve(normalize_data([("A", 10), ("B", 20), ("C", 5)]))

    assert geom.inner_width == 640 - 120 - 48
    assert geom.total_bars_height == 3 * 28 + 2 * 2
    assert geom.height == 32 + 88 + 24
    assert geom.max_value == 20
    assert geom.scale(20) == pytest.approx(472)
    assert geom.scale(10) == pytest.approx(236)
    assert geom.bar_y(0) == 32
    assert geom.bar_y(2) == 32 + 2 * 30


def test_empty_geometry_reserves_one_bar() -> None:
    geom = LayoutEngine(BarChartSchema()).resolve([])
    assert geom.total_bars_height == 28
    assert geom.height == 32 + 28 + 24
    assert geom.max_value == 0
    assert geom.scale(5) == 0


def test_all_negative_values_scale_to_zero() -> None:
    geom = LayoutEngine(BarChartSchema()).resolve(normalize_data([-3, -1]))
    assert geom.max_value == 0
    assert geom.scale(-3) == 0


def test_negative_value_gives_negative_width_next_to_positive() -> None:
    records = normalize_data([("up", 10), ("down", -5)])
    engine = LayoutEngine(BarChartSchema())
    geom = engine.resolve(records)
    bars = engine.bar_geoms(records, geom)
    assert bars[1].width < 0


def test_zero_inner_width_scales_to_zero() -> None:
    opts = BarChartSchema(width=100, padding={"left": 80, "right": 40})
    geom = LayoutEngine(opts).resolve(normalize_data([1, 2]))
    assert geom.inner_width == 0
    assert geom.scale(2) == 0


def test_partial_padding_keeps_defaults() -> None:
    opts = BarChartSchema(padding={"left": 10})
    assert (opts.padding.left, opts.padding.right, opts.padding.top, opts.padding.bottom) == (10, 48, 32, 24)
