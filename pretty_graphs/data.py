"""
data.py
- 入力データを BarRecord の列に正規化する。
- 受け付ける形（この優先順で判定）:
  1. (label, value) / (label, value, item_opts) のタプル列  -> 入力順
  2. 数値の列                                            -> ラベルは "1", "2", ...
  3. {label: value} / {label: (value, item_opts)} のマッピング -> ラベル昇順
"""
import logging
import math
from numbers import Real
from typing import List, Mapping

from .attrs import normalize_item_opts
from .errors import InvalidDataShape, InvalidNumericValue
from .schemas.bar_chart import BarRecord

logger = logging.getLogger(__name__)


def to_number(value):
    """int / float はそのまま、数値文字列は float に変換する"""
    if isinstance(value, bool):
        raise InvalidNumericValue(f"unsupported numeric value: {value!r}")
    if isinstance(value, Real):
        if not math.isfinite(value):
            raise InvalidNumericValue(f"non-finite numeric value: {value!r}")
        return value
    if isinstance(value, str):
        try:
            number = float(value)
        except ValueError:
            raise InvalidNumericValue(f"cannot parse number from string: {value!r}") from None
        if not math.isfinite(number):
            raise InvalidNumericValue(f"cannot parse number from string: {value!r}")
        return number
    raise InvalidNumericValue(f"unsupported numeric value: {value!r}")


def _to_label(label) -> str:
    text = "" if label is None else str(label)
    if not text:
        raise InvalidDataShape(f"bar labels must be non-empty, got {label!r}")
    return text


def _record(label, value, item_opts=None) -> BarRecord:
    opts = normalize_item_opts(item_opts)
    return BarRecord(
        label=_to_label(label),
        value=to_number(value),
        attrs=opts["attrs"],
        css_class=opts["class"],
    )


def _is_tuple_like(item) -> bool:
    return isinstance(item, tuple)


def _from_tuples(data) -> List[BarRecord]:
    records = []
    for item in data:
        if not _is_tuple_like(item):
            raise InvalidDataShape(
                f"bar_chart data list mixes tuples with other items: {item!r}"
            )
        if len(item) == 2:
            records.append(_record(item[0], item[1]))
        elif len(item) == 3:
            records.append(_record(item[0], item[1], item[2]))
        else:
            raise InvalidDataShape(
                f"bar_chart tuples must be (label, value) or (label, value, item_opts), got {item!r}"
            )
    return records


def _from_numbers(data) -> List[BarRecord]:
    records = []
    for idx, item in enumerate(data, start=1):
        if _is_tuple_like(item):
            raise InvalidDataShape(
                f"bar_chart data list mixes numbers with tuples: {item!r}"
            )
        records.append(_record(str(idx), item))
    return records


def _from_mapping(data: Mapping) -> List[BarRecord]:
    records = []
    for label, entry in data.items():
        if isinstance(entry, (tuple, list)):
            if len(entry) != 2:
                raise InvalidDataShape(
                    f"bar_chart map values must be value or (value, item_opts), got {entry!r}"
                )
            records.append(_record(label, entry[0], entry[1]))
        else:
            records.append(_record(label, entry))
    # マッピングには自然な順序が無いのでラベルで並べる
    return sorted(records, key=lambda r: r.label)


def normalize_data(data) -> List[BarRecord]:
    """data を BarRecord のリストに変換する（形が不正なら InvalidDataShape）"""
    if isinstance(data, Mapping):
        records = _from_mapping(data)
    elif isinstance(data, (list, tuple)):
        if len(data) == 0:
            records = []
        elif _is_tuple_like(data[0]):
            records = _from_tuples(data)
        elif isinstance(data[0], Real) and not isinstance(data[0], bool):
            records = _from_numbers(data)
        else:
            raise InvalidDataShape(
                "bar_chart data list must contain numbers or (label, value) "
                f"or (label, value, item_opts) tuples, got {data[0]!r}"
            )
    else:
        raise InvalidDataShape(f"unsupported data shape for bar_chart: {data!r}")

    logger.debug("normalized %d bar record(s)", len(records))
    return records
