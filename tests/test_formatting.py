from __future__ import annotations

import pytest

from pretty_graphs.formatting import default_value_formatter, fmt_num


@pytest.mark.parametrize(
    "value, expected",
    [
        (10, "10"),
        (10.0, "10"),
        (0.5, "0.5"),
        (3.14, "3.14"),
        (3.140, "3.14"),
        (2.999, "3"),
        (-4.25, "-4.25"),
        (-0.001, "0"),
    ],
)
def test_default_value_formatter(value, expected: str) -> None:
    assert default_value_formatter(value) == expected


def test_integral_floats_never_show_trailing_zero() -> None:
    for v in (1.0, 100.0, -7.0, 0.0):
        assert "." not in default_value_formatter(v)


def test_fmt_num_rejects_non_numbers() -> None:
    with pytest.raises(TypeError):
        fmt_num("12")
    with pytest.raises(TypeError):
        fmt_num(True)
