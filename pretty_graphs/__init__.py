"""
pretty_graphs
- 見栄えの良い横棒グラフを自己完結した SVG 文字列として生成する小さなライブラリ。

    >>> svg = render_bar_chart([("Apples", 10), ("Bananas", 25)], title="Fruit Sales")
    >>> svg.startswith("<svg")
    True
"""
from .charts import build_options, render_bar_chart
from .errors import InvalidDataShape, InvalidNumericValue, InvalidOptionValue, PrettyGraphsError
from .formatting import default_value_formatter
from .ids import IdGenerator
from .schemas.bar_chart import BarChartSchema, BarRecord, GradientSpec, Padding

__version__ = "0.1.0"

__all__ = [
    "render_bar_chart",
    "build_options",
    "default_value_formatter",
    "IdGenerator",
    "BarChartSchema",
    "BarRecord",
    "GradientSpec",
    "Padding",
    "PrettyGraphsError",
    "InvalidDataShape",
    "InvalidNumericValue",
    "InvalidOptionValue",
]
