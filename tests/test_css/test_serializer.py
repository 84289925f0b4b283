"""Tests for the CSS serializer."""

import pytest

from gpuaccel.css import (
    AtRuleBlock,
    AtRuleStatement,
    Declaration,
    RuleBlock,
    Stylesheet,
    parse_stylesheet,
    render,
)
from gpuaccel.css.serializer import render_rule


SAMPLE = """
@charset "utf-8";
@import url(base.css) screen;
/* layout */
.box, .card > .title:hover { animation: fade 1s ease-in; color: red !important }
@media (max-width: 600px) {
  .box { transition: opacity .2s; }
  @supports (display: grid) { .grid { display: grid } }
}
@-webkit-keyframes spin { from { -webkit-transform: rotate(0deg) } to { -webkit-transform: rotate(360deg) } }
@font-face { font-family: "Foo Sans"; src: url(data:font/woff2;base64,AAAA) format("woff2"); }
a[href$=".pdf"], li:not(.a, .b) { background: url("x;y.png") no-repeat, linear-gradient(red, blue); }
.empty {}
"""


# ---------------------------------------------------------------------------
# Default format
# ---------------------------------------------------------------------------


class TestDefaultFormat:
    def test_rule(self):
        sheet = parse_stylesheet(".box{animation:fade 1s}")
        assert render(sheet) == ".box { animation: fade 1s; }\n"

    def test_selector_list(self):
        sheet = parse_stylesheet(".a,.b{color:red;margin:0}")
        assert render(sheet) == ".a, .b { color: red; margin: 0; }\n"

    def test_empty_rule(self):
        assert render(parse_stylesheet(".a { }")) == ".a {}\n"

    def test_important(self):
        sheet = parse_stylesheet(".a { color: red!important }")
        assert render(sheet) == ".a { color: red !important; }\n"

    def test_media_block_indented(self):
        sheet = parse_stylesheet("@media (max-width: 600px) { .a { color: red } }")
        assert render(sheet) == (
            "@media (max-width: 600px) {\n"
            "  .a { color: red; }\n"
            "}\n"
        )

    def test_nested_indentation(self):
        sheet = parse_stylesheet("@supports (x: y) { @media print { .a {} } }")
        assert render(sheet) == (
            "@supports (x: y) {\n"
            "  @media print {\n"
            "    .a {}\n"
            "  }\n"
            "}\n"
        )

    def test_font_face(self):
        sheet = parse_stylesheet("@font-face { font-family: Foo; font-display: swap }")
        assert render(sheet) == (
            "@font-face {\n"
            "  font-family: Foo;\n"
            "  font-display: swap;\n"
            "}\n"
        )

    def test_statement(self):
        sheet = parse_stylesheet("@import url(a.css);")
        assert render(sheet) == "@import url(a.css);\n"

    def test_empty_stylesheet(self):
        assert render(Stylesheet()) == ""

    def test_hand_built_tree(self):
        sheet = Stylesheet(
            nodes=[
                AtRuleStatement("charset", '"utf-8"'),
                AtRuleBlock(
                    "keyframes",
                    "fade",
                    children=[RuleBlock(["to"], [Declaration("opacity", "0")])],
                ),
            ]
        )
        assert render(sheet) == (
            '@charset "utf-8";\n'
            "@keyframes fade {\n"
            "  to { opacity: 0; }\n"
            "}\n"
        )

    def test_unknown_node_type(self):
        with pytest.raises(TypeError):
            render(Stylesheet(nodes=["not a node"]))  # type: ignore[list-item]


# ---------------------------------------------------------------------------
# Compact format
# ---------------------------------------------------------------------------


class TestCompactFormat:
    def test_rule(self):
        sheet = parse_stylesheet(".a, .b { color: red; margin: 0 !important; }")
        assert render(sheet, compact=True) == ".a,.b{color:red;margin:0!important;}"

    def test_at_rules(self):
        sheet = parse_stylesheet("@import url(a.css); @media print { .a { color: red } }")
        assert render(sheet, compact=True) == "@import url(a.css);@media print{.a{color:red;}}"

    def test_render_rule(self):
        rule = RuleBlock([".a"], [Declaration("color", "red")])
        assert render_rule(rule) == ".a { color: red; }"
        assert render_rule(rule, compact=True) == ".a{color:red;}"


# ---------------------------------------------------------------------------
# Round trip
# ---------------------------------------------------------------------------


class TestRoundTrip:
    @pytest.mark.parametrize("compact", [False, True])
    def test_reparse_yields_equal_tree(self, compact):
        sheet = parse_stylesheet(SAMPLE)
        assert parse_stylesheet(render(sheet, compact=compact)) == sheet

    def test_render_is_stable(self):
        once = render(parse_stylesheet(SAMPLE))
        assert render(parse_stylesheet(once)) == once

    def test_values_survive_verbatim(self):
        sheet = parse_stylesheet(SAMPLE)
        out = render(sheet)
        assert "url(data:font/woff2;base64,AAAA)" in out
        assert 'url("x;y.png") no-repeat, linear-gradient(red, blue)' in out
        assert 'a[href$=".pdf"], li:not(.a, .b)' in out
