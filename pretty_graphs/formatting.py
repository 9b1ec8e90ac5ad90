import math
from numbers import Real


def fmt_num(value) -> str:
    """数値を SVG 属性・表示用の文字列に変換する

    - 整数値（10 / 10.0）は小数点なし
    - それ以外は小数 2 桁まで、末尾の 0 と不要な小数点を削る
    """
    if isinstance(value, bool) or not isinstance(value, Real):
        raise TypeError(f"expected a real number, got {value!r}")
    if isinstance(value, int):
        return str(value)
    v = float(value)
    if not math.isfinite(v):
        return str(v)
    if v == math.trunc(v):
        return str(math.trunc(v))
    text = f"{v:.2f}".rstrip("0").rstrip(".")
    # -0.001 -> "-0.00" -> "-0"
    if text == "-0":
        return "0"
    return text


def default_value_formatter(value) -> str:
    """バー末尾に表示する値のデフォルト整形"""
    return fmt_num(value)
