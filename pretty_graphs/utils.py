"""SVG 要素を組み立てる共通ヘルパー"""
from html import escape
from numbers import Real
from typing import Dict, Optional, Tuple

from .attrs import to_attr_map
from .errors import InvalidOptionValue
from .formatting import fmt_num
from .schemas.bar_chart import DEFAULT_FONT_FAMILY, DEFAULT_TEXT_COLOR


def escape_text(text) -> str:
    """テキストノード用（& < > "）"""
    return escape(str(text), quote=False).replace('"', "&quot;")


def escape_attr(value) -> str:
    """属性値用（& < > " ' すべて）"""
    return escape(str(value), quote=True)


def attr_value(value) -> str:
    """属性値をクォート付きで返す"""
    if isinstance(value, bool):
        return f'"{"true" if value else "false"}"'
    if isinstance(value, Real):
        return f'"{fmt_num(value)}"'
    if isinstance(value, str):
        return f'"{escape_attr(value)}"'
    raise InvalidOptionValue(f"unsupported attribute value: {value!r}")


def extra_attrs(attrs) -> str:
    """追加属性を ` key="value"` の並びにする（None の値は出力しない）"""
    parts = []
    for key, value in to_attr_map(attrs).items():
        if value is None:
            continue
        parts.append(f" {escape_attr(key)}={attr_value(value)}")
    return "".join(parts)


def class_attr(css_class: Optional[str]) -> str:
    if css_class and str(css_class).strip():
        return f" class={attr_value(str(css_class))}"
    return ""


def rect_el(x, y, width, height, rx=0, ry=0, fill="#000", css_class=None, attrs=None) -> str:
    """角丸矩形。幅は 0 未満にしない"""
    return (
        f"<rect x={attr_value(x)} y={attr_value(y)}"
        f" width={attr_value(max(0.0, width))} height={attr_value(height)}"
        f" rx={attr_value(rx)} ry={attr_value(ry)} fill={attr_value(fill)}"
        f"{class_attr(css_class)}{extra_attrs(attrs)} />"
    )


def text_el(
    text,
    x,
    y,
    anchor="start",
    font_size=12,
    font_family=DEFAULT_FONT_FAMILY,
    fill=DEFAULT_TEXT_COLOR,
    dominant_baseline="alphabetic",
    font_weight="400",
) -> str:
    return (
        f"<text x={attr_value(x)} y={attr_value(y)}"
        f" text-anchor={attr_value(anchor)}"
        f" dominant-baseline={attr_value(dominant_baseline)}"
        f" fill={attr_value(fill)}"
        f" font-size={attr_value(font_size)}"
        f" font-family={attr_value(font_family)}"
        f" font-weight={attr_value(font_weight)}>"
        f"{escape_text(text)}</text>"
    )


# 方向 -> (x1, y1, x2, y2) をバウンディングボックス基準で求める
_GRADIENT_VECTORS: Dict[str, Tuple[int, int, int, int]] = {
    "right": (0, 0, 1, 0),
    "down": (0, 0, 0, 1),
    "down_right": (0, 0, 1, 1),
    "down_left": (1, 0, 0, 1),
    "up_right": (0, 1, 1, 0),
    "up_left": (1, 1, 0, 0),
}


def gradient_coords(direction, x, y, w, h):
    """グラデーションの始点・終点。未知の方向は right"""
    fx1, fy1, fx2, fy2 = _GRADIENT_VECTORS.get(direction, _GRADIENT_VECTORS["right"])
    return (x + fx1 * w, y + fy1 * h, x + fx2 * w, y + fy2 * h)
