from __future__ import annotations

from curly_quotes.rules.base import Fragment, FragmentKind, Mode, Region, is_visited, trim_width
from curly_quotes.rules.quotes import MESSAGE, NoStraightQuotesRule, QuoteOptions


rule = NoStraightQuotesRule()


def test_detect_reports_the_whole_fragment_with_preview():
    fragment = Fragment(FragmentKind.literal, 10, 32, "\"She said 'hi' to him\"")
    assert rule.detect(fragment) == [
        (10, 32, MESSAGE, "\"She said ‘hi’ to him\"")
    ]


def test_detect_ignores_delimiters():
    assert rule.detect(Fragment(FragmentKind.literal, 0, 5, "'abc'")) == []
    assert rule.detect(Fragment(FragmentKind.v_literal, 0, 5, '"abc"')) == []


def test_detect_ignores_quotes_inside_interpolations():
    fragment = Fragment(FragmentKind.template_literal, 0, 8, '`${"a"}`')
    assert rule.detect(fragment) == []


def test_text_fragments_have_no_delimiters():
    fragment = Fragment(FragmentKind.jsx_text, 0, 8, '"quoted"')
    assert rule.fix(fragment) == "“quoted”"
    assert trim_width(FragmentKind.v_text) == 0


def test_fix_converts_both_families():
    fragment = Fragment(FragmentKind.template_literal, 0, 28, "`'a' ${\"b\"} \"c\"`")
    assert rule.fix(fragment) == "`‘a’ ${\"b\"} “c”`"


def test_custom_marks():
    custom = NoStraightQuotesRule(QuoteOptions(double_opening="«", double_closing="»"))
    fragment = Fragment(FragmentKind.jsx_text, 0, 3, '"x"')
    assert custom.fix(fragment) == "«x»"


def test_multi_character_marks_keep_interpolations_aligned():
    custom = NoStraightQuotesRule(
        QuoteOptions(single_opening="&lsquo;", single_closing="&rsquo;")
    )
    fragment = Fragment(FragmentKind.template_literal, 0, 16, "`'a' ${b} \"c\"`")
    assert custom.fix(fragment) == "`&lsquo;a&rsquo; ${b} “c”`"


def test_preview_is_none_when_marks_leave_text_unchanged():
    custom = NoStraightQuotesRule(QuoteOptions(single_opening="'", single_closing="'"))
    fragment = Fragment(FragmentKind.jsx_text, 3, 7, "it's")
    assert custom.detect(fragment) == [(3, 7, MESSAGE, None)]


def test_activate_resolves_mode_from_parser_capability():
    assert rule.activate(True) is Mode.markup
    assert rule.activate(False) is Mode.script


def test_visited_kinds_depend_on_mode_and_region():
    v_text = Fragment(FragmentKind.v_text, 0, 1, "x", Region.template)
    jsx_in_template = Fragment(FragmentKind.jsx_text, 0, 1, "x", Region.template)
    literal = Fragment(FragmentKind.literal, 0, 3, "'x'", Region.script)

    assert is_visited(Mode.markup, v_text)
    assert not is_visited(Mode.script, v_text)
    assert not is_visited(Mode.markup, jsx_in_template)
    assert is_visited(Mode.script, literal)
    assert is_visited(Mode.markup, literal)


def test_parser_spans_survive_multi_character_marks():
    custom = NoStraightQuotesRule(
        QuoteOptions(single_opening="&lsquo;", single_closing="&rsquo;")
    )
    fragment = Fragment(
        FragmentKind.template_literal,
        0,
        16,
        "`'a' ${/'/} \"c\"`",
        interpolations=((5, 11),),
    )
    assert custom.fix(fragment) == "`&lsquo;a&rsquo; ${/'/} “c”`"
