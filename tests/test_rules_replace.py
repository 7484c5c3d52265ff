from __future__ import annotations

from curly_quotes.rules.replace import (
    convert_quotes,
    in_scope_text,
    iter_unexcluded,
    shift_ranges,
)


def single(text: str, trim: int = 1, excluded=()) -> str:
    return convert_quotes(text, trim, "'", "‘", "’", excluded)


def double(text: str, trim: int = 1, excluded=()) -> str:
    return convert_quotes(text, trim, '"', "“", "”", excluded)


def test_text_without_quotes_is_returned_unchanged():
    assert single("'no quotes here'") == "'no quotes here'"
    assert double("plain text", trim=0) == "plain text"


def test_two_quotes_become_opening_and_closing():
    assert double('"quoted"', trim=0) == "“quoted”"


def test_sentence_in_double_quoted_literal():
    text = "\"She said 'hi' to him\""
    assert double(text) == text
    assert single(text) == "\"She said ‘hi’ to him\""


def test_single_delimited_literal_with_doubled_apostrophes():
    text = "'It''s \"fine\"'"
    converted = double(single(text))
    assert converted == "'It‘’s “fine”'"


def test_quotes_around_excluded_interpolation():
    text = '`Say "${name}" now`'
    assert double(text, excluded=((6, 13),)) == "`Say “${name}” now`"


def test_quotes_inside_excluded_range_are_neither_replaced_nor_counted():
    text = '`"${"x"}"`'
    assert double(text, excluded=((2, 8),)) == '`“${"x"}”`'


def test_quotes_only_inside_excluded_range_is_a_no_op():
    text = '`${"x"}`'
    assert double(text, excluded=((1, 7),)) == text


def test_trim_margins_are_copied_verbatim():
    assert double('"a"', trim=1) == '"a"'
    assert double('"a"', trim=0) == "“a”"
    assert double('""a""', trim=1) == '"“a”"'


def test_odd_count_leaves_a_trailing_opening_mark():
    assert single("'a 'b 'c", trim=0) == "‘a ’b ‘c"


def test_families_have_independent_counters():
    text = "'a \"b' c\""
    first = single(text, trim=0)
    assert first == "‘a \"b’ c\""
    assert double(first, trim=0) == "‘a “b’ c”"


def test_conversion_is_idempotent():
    once = double(single("\"She said 'hi', \"twice\"\""), trim=1)
    assert single(once) == once
    assert double(once) == once


def test_multi_character_marks():
    result = convert_quotes('"x"', 0, '"', "&ldquo;", "&rdquo;")
    assert result == "&ldquo;x&rdquo;"


def test_scope_helpers():
    text = "`a${b}c`"
    assert "".join(iter_unexcluded(text, ((2, 6),))) == "`ac`"
    assert in_scope_text(text, 1, ((2, 6),)) == "ac"
    assert in_scope_text(text, 0, ()) == text


def test_shift_ranges_follows_inserted_marks():
    text = "`'a' ${b} 'c' ${d}`"
    excluded = [(5, 9), (14, 18)]
    converted = convert_quotes(text, 1, "'", "<<", ">>", excluded)
    shifted = shift_ranges(text, 1, "'", "<<", ">>", excluded)
    assert shifted == [(7, 11), (18, 22)]
    assert [converted[start:end] for start, end in shifted] == ["${b}", "${d}"]
    assert shift_ranges(text, 1, '"', "<<", ">>", excluded) == excluded
