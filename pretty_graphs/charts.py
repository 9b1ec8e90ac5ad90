"""
charts.py
- 公開エントリポイント。オプションを検証し、正規化 → レイアウト → SVG 組み立てへ委譲する。
- 返り値は内部でエスケープ済みの SVG 文字列。埋め込む側で再エスケープしないこと
  （テンプレート側では「生の HTML」として扱う）。
"""
import logging
from typing import Mapping, Optional, Union

from pydantic import ValidationError

from .data import normalize_data
from .errors import InvalidOptionValue
from .ids import default_id_generator
from .renderers import bar_chart as bar_chart_renderer
from .schemas.bar_chart import BarChartSchema

logger = logging.getLogger(__name__)

OptionsLike = Union[BarChartSchema, Mapping, None]


def build_options(options: OptionsLike = None, **overrides) -> BarChartSchema:
    """dict / BarChartSchema / キーワード引数から BarChartSchema を作る（キーワードが優先）"""
    if isinstance(options, BarChartSchema):
        if not overrides:
            return options
        base = options.model_dump(exclude_unset=True, by_alias=True)
    elif options is None:
        base = {}
    elif isinstance(options, Mapping):
        base = dict(options)
    else:
        raise InvalidOptionValue(f"options must be a mapping, got {options!r}")

    merged = {**base, **overrides}
    try:
        return BarChartSchema.model_validate(merged)
    except ValidationError as e:
        raise InvalidOptionValue(f"invalid bar_chart options: {e}") from e


def render_bar_chart(data, options: OptionsLike = None, *, id_generator=None, **overrides) -> str:
    """
    横棒グラフを自己完結した <svg> 文字列として返す。

    data:
      - [(label, value), ...] / [(label, value, item_opts), ...]
      - [10, 20, 30]           （ラベルは "1", "2", ...）
      - {label: value}         （ラベル順に並べる）
    options: BarChartSchema のフィールド（dict / モデル / キーワード引数）
    id_generator: next_ids() -> (gradient_id, clip_id) を持つオブジェクト
    """
    opts = build_options(options, **overrides)
    records = normalize_data(data)
    ids = (id_generator or default_id_generator).next_ids()
    svg = bar_chart_renderer.render(records, opts, ids)
    logger.debug("rendered bar chart with %d bar(s), %d chars", len(records), len(svg))
    return svg
