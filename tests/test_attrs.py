from __future__ import annotations

import pytest

from pretty_graphs.attrs import (
    merge_attrs,
    merge_class,
    normalize_class,
    normalize_item_opts,
    to_attr_map,
)
from pretty_graphs.errors import InvalidOptionValue


def test_to_attr_map_accepts_mapping_pairs_and_mixes() -> None:
    assert to_attr_map(None) == {}
    assert to_attr_map({"data-role": "bar"}) == {"data-role": "bar"}
    assert to_attr_map([("a", 1), ("b", "x")]) == {"a": 1, "b": "x"}
    assert to_attr_map([{"a": 1}, ("b", 2), "disabled"]) == {"a": 1, "b": 2, "disabled": True}


def test_to_attr_map_keeps_insertion_order() -> None:
    assert list(to_attr_map([("z", 1), ("a", 2), ("m", 3)])) == ["z", "a", "m"]


def test_to_attr_map_stringifies_keys() -> None:
    assert to_attr_map({1: "one"}) == {"1": "one"}


def test_to_attr_map_rejects_uncoercible_sources() -> None:
    with pytest.raises(InvalidOptionValue):
        to_attr_map("data-role")
    with pytest.raises(InvalidOptionValue):
        to_attr_map(42)
    with pytest.raises(InvalidOptionValue):
        to_attr_map([("a", 1, 2)])


def test_merge_attrs_item_wins() -> None:
    merged = merge_attrs({"data-role": "bar", "tabindex": 0}, [("data-role", "item")])
    assert merged == {"data-role": "item", "tabindex": 0}


def test_merge_class_concatenates_global_first() -> None:
    assert merge_class("hover:opacity-80", "active") == "hover:opacity-80 active"
    assert merge_class(["a", ["b", None, ""]], "  c  ") == "a b c"
    assert merge_class(None, None) is None
    assert merge_class("  ", []) is None


def test_normalize_class() -> None:
    assert normalize_class(None) is None
    assert normalize_class("  x  ") == "x"
    assert normalize_class("") is None
    assert normalize_class(["a", "b"]) == "a b"


def test_item_opts_with_explicit_attrs_and_class() -> None:
    opts = normalize_item_opts({"attrs": {"phx-click": "bar"}, "class": ["x", "y"]})
    assert opts == {"attrs": {"phx-click": "bar"}, "class": "x y"}


def test_item_opts_mapping_without_attrs_key_is_the_attrs() -> None:
    opts = normalize_item_opts({"data-id": "7", "class": "hot"})
    assert opts == {"attrs": {"data-id": "7"}, "class": "hot"}


def test_item_opts_keyword_list() -> None:
    opts = normalize_item_opts([("attrs", [("data-x", 1)]), ("class", "c")])
    assert opts == {"attrs": {"data-x": 1}, "class": "c"}

    opts = normalize_item_opts([("data-x", 1), ("class", "c")])
    assert opts == {"attrs": {"data-x": 1}, "class": "c"}


def test_item_opts_non_keyword_list_is_whole_attrs_source() -> None:
    opts = normalize_item_opts([{"data-x": 1}, "selected"])
    assert opts == {"attrs": {"data-x": 1, "selected": True}, "class": None}


def test_item_opts_none_and_invalid() -> None:
    assert normalize_item_opts(None) == {"attrs": {}, "class": None}
    with pytest.raises(InvalidOptionValue):
        normalize_item_opts(3)
