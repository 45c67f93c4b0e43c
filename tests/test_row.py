from __future__ import annotations

import dataclasses
import random

import pytest

from rowfmt import (
    AppConfig,
    LayoutError,
    OverflowPolicy,
    RenderConfig,
    RenderError,
    TruncationPolicy,
    format_value,
    make_row,
    parse_template,
    render,
)


class _Unprintable:
    def __str__(self) -> str:
        raise RuntimeError("no text form")


def test_single_line_row() -> None:
    row = make_row(parse_template("Title: @title{15}"), 22)

    assert row.widths == (7, 15)
    assert row.render({"title": "Hello"}) == ["Title: Hello          "]


def test_wrapped_column_pads_other_columns() -> None:
    row = make_row(parse_template("@name{6} | @desc.wrap"), 20)

    lines = row.render({"name": "Bob", "desc": "the quick brown fox jumps"})

    assert lines == [
        "Bob    | the quick  ",
        "         brown fox  ",
        "         jumps      ",
    ]
    assert all(len(line) == 20 for line in lines)


def test_justified_wrap_keeps_last_line_ragged() -> None:
    row = make_row(parse_template("@text.wrap.justify"), 10)

    assert row.render({"text": "aa bb cc dd ee"}) == [
        "aa  bb  cc",
        "dd ee     ",
    ]


def test_wrap_preserves_paragraph_breaks() -> None:
    row = make_row(parse_template("@text.wrap{5}"), 5)

    assert row.render({"text": "ab\n\ncd"}) == ["ab   ", "     ", "cd   "]


def test_missing_key_renders_blank() -> None:
    row = make_row(parse_template("[@a{3}]"), 5)

    assert row.render({}) == ["[   ]"]


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (None, ""),
        (True, "true"),
        (False, "false"),
        (42, "42"),
        (1.5, "1.5"),
        ("text", "text"),
    ],
)
def test_format_value(value: object, expected: str) -> None:
    assert format_value(value) == expected


def test_format_value_wraps_conversion_errors() -> None:
    with pytest.raises(RenderError, match="_Unprintable"):
        format_value(_Unprintable())


def test_unprintable_value_renders_blank(caplog: pytest.LogCaptureFixture) -> None:
    row = make_row(parse_template("@a{4}|"), 5)

    with caplog.at_level("WARNING", logger="rowfmt.row"):
        lines = row.render({"a": _Unprintable()})

    assert lines == ["    |"]
    assert "Rendering field 'a' as empty" in caplog.text


def test_strict_values_raise_render_error() -> None:
    config = AppConfig(render=RenderConfig(strict_values=True))
    row = make_row(parse_template("@a{4}"), 4, config=config)

    with pytest.raises(RenderError, match="Field 'a'"):
        row.render({"a": _Unprintable()})


def test_right_aligned_number() -> None:
    row = make_row(parse_template("@n.right{5}"), 5)

    assert row.render({"n": 42}) == ["   42"]


def test_center_alignment_in_auto_column() -> None:
    row = make_row(parse_template("|@t.center |"), 8)

    assert row.render({"t": "ab"}) == ["|  ab  |"]


def test_unwrapped_text_is_clipped() -> None:
    row = make_row(parse_template("@a{5}"), 5)

    assert row.render({"a": "abcdefgh"}) == ["abcde"]


def test_unwrapped_text_with_ellipsis() -> None:
    config = AppConfig(render=RenderConfig(truncation=TruncationPolicy.ELLIPSIS))
    row = make_row(parse_template("@a{5}"), 5, config=config)

    assert row.render({"a": "abcdefgh"}) == ["abcd…"]
    assert row.render({"a": "abc"}) == ["abc  "]


def test_unwrapped_text_flattens_line_breaks() -> None:
    row = make_row(parse_template("@a{6}"), 6)

    assert row.render({"a": "a\nb\r\nc"}) == ["a b c "]


def test_fixed_only_row_fills_slack() -> None:
    row = make_row(parse_template("@a{3}"), 6)

    assert row.slack == 3
    assert row.render({"a": "abc"}) == ["abc   "]


def test_overflow_clamps_auto_columns() -> None:
    row = make_row(parse_template("@a{4}@b"), 2)

    assert row.widths == (4, 0)
    assert row.overflow == 2
    assert row.render({"a": "xy", "b": "zz"}) == ["xy  "]


def test_overflow_error_policy() -> None:
    with pytest.raises(LayoutError):
        make_row(parse_template("@a{4}@b"), 2, overflow=OverflowPolicy.ERROR)


def test_overflow_argument_overrides_config() -> None:
    config = AppConfig()
    row = make_row(parse_template("@a{4}@b"), 8, overflow=OverflowPolicy.ERROR, config=config)

    assert row.config.layout.overflow is OverflowPolicy.ERROR
    assert config.layout.overflow is OverflowPolicy.CLAMP


def test_config_cannot_change_under_existing_row() -> None:
    config = AppConfig()
    row = make_row(parse_template("@a{5}"), 5, config=config)

    with pytest.raises(dataclasses.FrozenInstanceError):
        config.render.truncation = TruncationPolicy.ELLIPSIS  # type: ignore[misc]
    with pytest.raises(dataclasses.FrozenInstanceError):
        config.layout = dataclasses.replace(  # type: ignore[misc]
            config.layout, overflow=OverflowPolicy.ERROR
        )

    ellipsis_config = dataclasses.replace(
        config, render=RenderConfig(truncation=TruncationPolicy.ELLIPSIS)
    )
    assert make_row(row.template, 5, config=ellipsis_config).render({"a": "abcdefgh"}) == ["abcd…"]
    assert row.render({"a": "abcdefgh"}) == ["abcde"]
    assert row.config.layout.overflow is OverflowPolicy.CLAMP


def test_empty_template_renders_blank_line() -> None:
    row = make_row(parse_template(""), 4)

    assert row.render({}) == ["    "]


def test_row_is_immutable_and_reusable() -> None:
    row = make_row(parse_template("@a | @b"), 11)

    with pytest.raises(dataclasses.FrozenInstanceError):
        row.inner_width = 3  # type: ignore[misc]

    first = render(row, {"a": "x", "b": "y"})
    second = render(row, {"a": "longer", "b": "text"})
    assert first == ["x    | y   "]
    assert second == ["longe| text"]


def test_rendered_lines_match_inner_width() -> None:
    rng = random.Random(11)
    sources = [
        "@a @b.wrap @c.right",
        "Name: @name{8} Notes: @notes.wrap.justify",
        "@x.center | @y.wrap{7} | @z",
    ]
    words = ["lorem", "ipsum", "dolor", "sit", "amet", "consectetur"]
    for _ in range(100):
        template = parse_template(rng.choice(sources))
        fixed = sum(node.fixed_width for node in template)
        row = make_row(template, fixed + rng.randint(len(template.fields()), 50))
        data = {
            key: " ".join(rng.choice(words) for _ in range(rng.randint(0, 12)))
            for key in template.keys()
        }

        lines = row.render(data)

        assert lines
        assert all(len(line) == row.inner_width for line in lines)
