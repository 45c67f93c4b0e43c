from __future__ import annotations

import random
from typing import List

import pytest

from rowfmt.datatypes import OverflowPolicy
from rowfmt.errors import LayoutError
from rowfmt.layout import allocate_widths
from rowfmt.template import Node, Template, parse_template


def test_fixed_literal_and_auto_widths() -> None:
    template = parse_template("Title: @title{15} @desc")

    assert allocate_widths(template, 40) == [7, 15, 1, 17]


@pytest.mark.parametrize(
    ("source", "inner_width", "expected"),
    [
        ("@a@b@c", 10, [3, 4, 3]),
        ("@a@b", 5, [3, 2]),
        ("@a@b@c@d", 11, [3, 3, 3, 2]),
        ("@a@b@c", 9, [3, 3, 3]),
        ("@a | @b", 10, [4, 2, 4]),
    ],
)
def test_auto_columns_divide_and_subtract(source: str, inner_width: int, expected: List[int]) -> None:
    assert allocate_widths(parse_template(source), inner_width) == expected


def test_literal_widths_count_codepoints() -> None:
    assert allocate_widths(parse_template("héllo @a"), 10) == [6, 4]


def test_overflow_clamps_auto_columns_to_zero(caplog: pytest.LogCaptureFixture) -> None:
    template = parse_template("@a{10}@b")

    with caplog.at_level("WARNING", logger="rowfmt.layout.widths"):
        widths = allocate_widths(template, 5)

    assert widths == [10, 0]
    assert "overflows" in caplog.text


def test_overflow_error_policy_raises() -> None:
    template = parse_template("@a{10}@b")

    with pytest.raises(LayoutError, match="exceeding row width 5"):
        allocate_widths(template, 5, overflow=OverflowPolicy.ERROR)


def test_negative_width_is_a_layout_error() -> None:
    with pytest.raises(LayoutError):
        allocate_widths(parse_template("@a"), -1)


def test_fixed_only_template_leaves_slack() -> None:
    assert allocate_widths(parse_template("@a{3}"), 6) == [3]


def test_widths_sum_to_inner_width_with_auto_columns() -> None:
    rng = random.Random(20240611)
    for _ in range(200):
        nodes = []
        for _ in range(rng.randint(1, 8)):
            choice = rng.random()
            if choice < 0.3:
                nodes.append(Node.literal(" " * rng.randint(1, 3)))
            elif choice < 0.6:
                nodes.append(Node.field("fixed", rng.randint(1, 12)))
            else:
                nodes.append(Node.field("auto"))
        nodes.append(Node.field("auto"))
        template = Template(nodes=tuple(nodes))
        fixed = sum(node.fixed_width for node in template)
        inner_width = fixed + rng.randint(0, 60)

        widths = allocate_widths(template, inner_width)

        assert sum(widths) == inner_width
        assert all(width >= 0 for width in widths)
        for node, width in zip(template, widths):
            if not node.is_auto:
                assert width == node.fixed_width
