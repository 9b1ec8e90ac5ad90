import logging
from typing import Sequence, Tuple

from ..attrs import merge_attrs, merge_class, normalize_class
from ..formatting import default_value_formatter, fmt_num
from ..layouts import BarGeom, Geometry, LayoutEngine
from ..schemas.bar_chart import BarChartSchema, BarRecord
from ..utils import attr_value, class_attr, extra_attrs, gradient_coords, rect_el, text_el

logger = logging.getLogger(__name__)

SVG_NS = "http://www.w3.org/2000/svg"
EMPTY_TEXT = "No data"
WIDTH_OVERRIDE_ATTR = "data-pg-width"


def _svg_open(options: BarChartSchema, geom: Geometry) -> str:
    svg_attrs = merge_attrs(options.svg_attrs, None)
    if options.responsive:
        # 親要素の幅に追従させる。viewBox は実ピクセル幅のまま
        svg_attrs = merge_attrs(svg_attrs, {"preserveAspectRatio": "none", WIDTH_OVERRIDE_ATTR: "100%"})

    # data-pg-width は width 属性の差し替え用で、そのままは出力しない
    width_override = svg_attrs.pop(WIDTH_OVERRIDE_ATTR, None)
    width_value = attr_value(geom.width if width_override is None else width_override)

    view_box = f"0 0 {fmt_num(geom.width)} {fmt_num(geom.height)}"
    parts = [
        f'<svg xmlns="{SVG_NS}"',
        f" width={width_value}",
        f" height={attr_value(geom.height)}",
        f" viewBox={attr_value(view_box)}",
        f" role={attr_value('img')}",
        f" aria-label={attr_value('Bar chart')}",
        class_attr(normalize_class(options.svg_class)),
        extra_attrs(svg_attrs),
        ">",
    ]
    if options.background is not None:
        parts.append(rect_el(0, 0, geom.width, geom.height, fill=options.background))
    return "".join(parts)


def _gradient_defs(grad_id: str, options: BarChartSchema, geom: Geometry) -> str:
    gradient = options.gradient
    x1, y1, x2, y2 = gradient_coords(
        gradient.direction,
        geom.padding.left,
        geom.padding.top,
        geom.inner_width,
        geom.total_bars_height,
    )
    return (
        "<defs>"
        f"<linearGradient id={attr_value(grad_id)} gradientUnits={attr_value('userSpaceOnUse')}"
        f" x1={attr_value(x1)} y1={attr_value(y1)} x2={attr_value(x2)} y2={attr_value(y2)}>"
        f'<stop offset="0%" stop-color={attr_value(gradient.from_)} />'
        f'<stop offset="100%" stop-color={attr_value(gradient.to)} />'
        "</linearGradient>"
        "</defs>"
    )


def _clip_defs(clip_id: str, bar_geoms: Sequence[BarGeom]) -> str:
    rects = "".join(
        rect_el(g.x, g.y, g.width, g.height, rx=g.rx, ry=g.ry, fill="transparent")
        for g in bar_geoms
    )
    return (
        "<defs>"
        f"<clipPath id={attr_value(clip_id)} clipPathUnits={attr_value('userSpaceOnUse')}>"
        f"{rects}"
        "</clipPath>"
        "</defs>"
    )


def _gradient_layer(grad_id: str, clip_id: str, geom: Geometry) -> str:
    """バー形状で切り抜いた 1 枚のグラデーション矩形"""
    return (
        f"<g clip-path={attr_value(f'url(#{clip_id})')}>"
        + rect_el(
            geom.padding.left,
            geom.padding.top,
            geom.inner_width,
            geom.total_bars_height,
            fill=f"url(#{grad_id})",
        )
        + "</g>"
    )


def _title(options: BarChartSchema, geom: Geometry) -> str:
    title = options.title
    if title is None or not str(title).strip():
        return ""
    return text_el(
        str(title),
        x=geom.padding.left,
        y=max(0, geom.padding.top / 2 + options.font_size),
        anchor="start",
        font_size=options.font_size + 2,
        font_family=options.font_family,
        fill=options.title_color,
        font_weight="600",
    )


def _bar(idx: int, record: BarRecord, bar: BarGeom, fill: str, options: BarChartSchema, geom: Geometry) -> str:
    center_y = geom.row_center(idx)

    # バー左側のラベル
    label = text_el(
        record.label,
        x=geom.padding.left - 8,
        y=center_y,
        anchor="end",
        font_size=options.font_size,
        font_family=options.font_family,
        fill=options.label_color,
        dominant_baseline="middle",
    )

    shape = rect_el(
        bar.x,
        bar.y,
        bar.width,
        bar.height,
        rx=bar.rx,
        ry=bar.ry,
        fill=fill,
        css_class=merge_class(options.bar_class, record.css_class),
        attrs=merge_attrs(options.bar_attrs, record.attrs),
    )

    if not options.show_values:
        return label + shape

    formatter = options.value_formatter or default_value_formatter
    value = text_el(
        formatter(record.value),
        x=geom.padding.left + bar.width + 6,
        y=center_y,
        anchor="start",
        font_size=options.font_size,
        font_family=options.font_family,
        fill=options.value_color,
        dominant_baseline="middle",
    )
    return label + shape + value


def _empty_state(options: BarChartSchema, geom: Geometry) -> str:
    return text_el(
        EMPTY_TEXT,
        x=geom.padding.left,
        y=geom.row_center(0),
        anchor="start",
        font_size=options.font_size,
        font_family=options.font_family,
        fill=options.label_color,
        dominant_baseline="middle",
    )


def render(records: Sequence[BarRecord], options: BarChartSchema, ids: Tuple[str, str]) -> str:
    """横棒グラフの SVG 文字列を組み立てる"""
    engine = LayoutEngine(options)
    geom = engine.resolve(records)
    bar_geoms = engine.bar_geoms(records, geom)
    grad_id, clip_id = ids

    parts = [_svg_open(options, geom)]

    if options.gradient is not None:
        logger.debug("gradient fill enabled (%s, %s)", grad_id, clip_id)
        parts.append(_gradient_defs(grad_id, options, geom))
        parts.append(_clip_defs(clip_id, bar_geoms))

    parts.append(_title(options, geom))

    if options.gradient is not None:
        # バーは透明にして、共有グラデーションを窓として見せる
        parts.append(_gradient_layer(grad_id, clip_id, geom))
        fill = "transparent"
    else:
        fill = options.bar_color

    for idx, (record, bar) in enumerate(zip(records, bar_geoms)):
        parts.append(_bar(idx, record, bar, fill, options, geom))

    if not records:
        parts.append(_empty_state(options, geom))

    parts.append("</svg>")
    return "".join(parts)
