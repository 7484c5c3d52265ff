from __future__ import annotations

import logging

from curly_quotes.parsers.vue import parse_vue, scan_template
from curly_quotes.rules.base import FragmentKind, Region


SFC = """<template>
  <div title="it's">
    <!-- "comment" -->
    <p>She said "hi" {{ greet('x') }} ok</p>
    <span :title="`a ${b} c`" v-for="item in ['a']" @click="say(&quot;x&quot;)">x</span>
  </div>
</template>

<script>
export default { data() { return { msg: "hello" } } }
</script>
"""


def test_single_file_component_fragments():
    fragments = parse_vue(SFC)
    assert [(f.kind, f.text) for f in fragments] == [
        (FragmentKind.v_literal, "\"it's\""),
        (FragmentKind.v_text, 'She said "hi" '),
        (FragmentKind.literal, "'x'"),
        (FragmentKind.v_text, " ok"),
        (FragmentKind.template_literal, "`a ${b} c`"),
        (FragmentKind.literal, "'a'"),
        (FragmentKind.v_text, "x"),
        (FragmentKind.literal, '"hello"'),
    ]
    for fragment in fragments:
        assert SFC[fragment.start : fragment.end] == fragment.text
    assert {f.region for f in fragments[:-1]} == {Region.template}
    assert fragments[-1].region is Region.script


def test_nested_template_tags_stay_in_the_block():
    source = (
        "<template>\n"
        "  <template v-if=\"ok\"><b>'a'</b></template>\n"
        "  <i>\"b\"</i>\n"
        "</template>\n"
    )
    texts = [f.text for f in parse_vue(source)]
    assert texts == ["'a'", '"b"']


def test_non_javascript_script_is_skipped(caplog):
    source = '<script lang="ts">const a: string = "x";</script>'
    with caplog.at_level(logging.WARNING, logger="curly_quotes.parsers"):
        assert parse_vue(source) == []
    assert "lang='ts'" in caplog.text


def test_scan_template_handles_lone_angle_bracket_and_unquoted_values():
    document = '<p class=big>1 < 2 "ok"</p>'
    fragments = scan_template(document, 0, len(document))
    assert [(f.kind, f.text) for f in fragments] == [
        (FragmentKind.v_text, '1 < 2 "ok"')
    ]


def test_slot_directives_are_not_expressions():
    document = "<c #item=\"{ a = 'x' }\" v-slot:b=\"{ c = 'y' }\"></c>"
    assert scan_template(document, 0, len(document)) == []
