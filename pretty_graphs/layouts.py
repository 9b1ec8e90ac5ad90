"""
layouts.py
- LayoutEngine: レコード列とオプションから描画ジオメトリを決める。
- 丸めは行わない（数値の文字列化は描画側の fmt_num が担当）。
"""
from typing import List, Sequence

from pydantic import BaseModel, ConfigDict

from .schemas.bar_chart import BarChartSchema, BarRecord, Padding


class BarGeom(BaseModel):
    x: float
    y: float
    width: float
    height: float
    rx: float
    ry: float

    model_config = ConfigDict(frozen=True)


class Geometry(BaseModel):
    """1 回の描画だけで使う派生値"""

    width: float
    padding: Padding
    bar_height: float
    bar_gap: float
    inner_width: float
    total_bars_height: float
    height: float
    max_value: float

    model_config = ConfigDict(frozen=True)

    def scale(self, value) -> float:
        """[0, max_value] -> [0, inner_width] の線形写像。負値はそのまま負の幅になる"""
        if self.max_value == 0 or self.inner_width == 0:
            return 0.0
        return value / self.max_value * self.inner_width

    def bar_y(self, index: int) -> float:
        return self.padding.top + index * (self.bar_height + self.bar_gap)

    def row_center(self, index: int) -> float:
        return self.bar_y(index) + self.bar_height / 2


class LayoutEngine:
    def __init__(self, options: BarChartSchema):
        self.options = options

    def resolve(self, records: Sequence[BarRecord]) -> Geometry:
        opts = self.options
        pad = opts.padding
        n = len(records)

        inner_width = max(opts.width - pad.left - pad.right, 0)

        if n > 0:
            total_bars_height = n * opts.bar_height + (n - 1) * opts.bar_gap
        else:
            # 空のときも "No data" 用に 1 本分の高さを確保
            total_bars_height = opts.bar_height

        height = pad.top + total_bars_height + pad.bottom
        max_value = max([0] + [r.value for r in records])

        return Geometry(
            width=opts.width,
            padding=pad,
            bar_height=opts.bar_height,
            bar_gap=opts.bar_gap,
            inner_width=inner_width,
            total_bars_height=total_bars_height,
            height=height,
            max_value=max_value,
        )

    def bar_geoms(self, records: Sequence[BarRecord], geom: Geometry) -> List[BarGeom]:
        """各バーの矩形（幅は未クランプ。描画時に 0 以上へ丸める）"""
        radius = self.options.bar_radius
        return [
            BarGeom(
                x=geom.padding.left,
                y=geom.bar_y(idx),
                width=geom.scale(record.value),
                height=geom.bar_height,
                rx=radius,
                ry=radius,
            )
            for idx, record in enumerate(records)
        ]
