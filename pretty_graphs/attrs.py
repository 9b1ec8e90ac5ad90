"""
attrs.py
- 追加属性（svg_attrs / bar_attrs / 各データ点の attrs）とクラス指定の正規化・マージ。
- 属性ソースとして受け付ける形:
  * マッピング            {"data-role": "bar"}
  * (key, value) のリスト [("data-role", "bar"), ("phx-click", "go")]
  * 上記の混在リスト       [{"a": 1}, ("b", 2), "disabled"]  # 素のトークンは True 扱い
- 属性: アイテム側が同じキーのグローバル値を上書きする
- クラス: グローバル → アイテムの順に連結する（上書きしない）
"""
from enum import Enum
from typing import Any, Dict, Mapping, Optional

from .errors import InvalidOptionValue


def to_attr_key(key) -> str:
    if isinstance(key, str):
        return key
    if isinstance(key, Enum):
        return str(key.value)
    return str(key)


def to_attr_map(source) -> Dict[str, Any]:
    """属性ソースを {str: value} の順序付き dict に正規化する"""
    if source is None:
        return {}

    if isinstance(source, Mapping):
        return {to_attr_key(k): v for k, v in source.items()}

    if isinstance(source, (list, tuple)):
        result: Dict[str, Any] = {}
        for entry in source:
            if isinstance(entry, Mapping):
                for k, v in entry.items():
                    result[to_attr_key(k)] = v
            elif isinstance(entry, tuple) and len(entry) == 2:
                result[to_attr_key(entry[0])] = entry[1]
            elif isinstance(entry, (list, tuple, set, dict)):
                raise InvalidOptionValue(
                    f"attribute entries must be (key, value) pairs, mappings or bare names, got {entry!r}"
                )
            else:
                # 素のトークンはフラグ属性
                result[to_attr_key(entry)] = True
        return result

    raise InvalidOptionValue(
        f"attributes must be a mapping or a list of (key, value) pairs, got {source!r}"
    )


def merge_attrs(global_source, item_source) -> Dict[str, Any]:
    """グローバル属性にアイテム属性を重ねる（同じキーはアイテム側が勝つ）"""
    merged = to_attr_map(global_source)
    merged.update(to_attr_map(item_source))
    return merged


def _flatten(items):
    for item in items:
        if isinstance(item, (list, tuple)):
            yield from _flatten(item)
        else:
            yield item


def join_classes(classes) -> str:
    tokens = []
    for c in _flatten(classes):
        if c is None:
            continue
        if isinstance(c, Enum):
            c = c.value
        token = str(c).strip()
        if token:
            tokens.append(token)
    return " ".join(tokens)


def normalize_class(value) -> Optional[str]:
    """クラス指定（文字列 / リスト / None）を 1 本の文字列へ。空なら None"""
    if value is None:
        return None
    if isinstance(value, str):
        return value.strip() or None
    if isinstance(value, (list, tuple)):
        return join_classes(value) or None
    return str(value).strip() or None


def merge_class(global_classes, item_classes) -> Optional[str]:
    return join_classes([normalize_class(global_classes), normalize_class(item_classes)]) or None


def _is_keyword_list(opts) -> bool:
    return bool(opts) and all(
        isinstance(e, tuple) and len(e) == 2 and isinstance(e[0], str) for e in opts
    )


def normalize_item_opts(opts) -> Dict[str, Any]:
    """
    データ点ごとのオプションを {"attrs": ..., "class": ...} に分解する。
    - "attrs" / "class" キーがあれば明示的に取り出す
    - 無ければ（"class" を除いた）全体を属性ソースとして扱う
    - キーベースでないリストは丸ごと属性ソース
    """
    if opts is None:
        return {"attrs": {}, "class": None}

    if isinstance(opts, Mapping):
        keyed = {to_attr_key(k): v for k, v in opts.items()}
        if keyed.get("attrs") is not None:
            attrs = keyed["attrs"]
        else:
            attrs = {k: v for k, v in keyed.items() if k not in ("attrs", "class")}
        return {"attrs": to_attr_map(attrs), "class": normalize_class(keyed.get("class"))}

    if isinstance(opts, (list, tuple)):
        if not _is_keyword_list(opts):
            return {"attrs": to_attr_map(list(opts)), "class": None}
        keyed = dict(opts)
        if "attrs" in keyed:
            attrs = keyed["attrs"]
        else:
            attrs = [(k, v) for k, v in opts if k not in ("attrs", "class")]
        return {"attrs": to_attr_map(attrs), "class": normalize_class(keyed.get("class"))}

    raise InvalidOptionValue(f"item options must be a mapping or a list, got {opts!r}")
