"""Tests for the two-phase line renderer."""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from linefold.config import CLEAN_DELIMITERS, FormatConfig
from linefold.errors import RenderError
from linefold.parts import Part, PartKind
from linefold.renderers.lines import (
    LineEntry,
    LineRenderer,
    assemble,
    clean_line,
    group_lines,
    render_parts,
)

PLAIN = FormatConfig()
MARKUP = FormatConfig(markup=True)


def inline(text: str) -> Part:
    return Part(text, PartKind.INLINE)


def brk(config: FormatConfig = PLAIN) -> Part:
    return Part(config.line_break, PartKind.BREAK)


class TestCleanLine:
    def test_examples(self) -> None:
        assert clean_line("  , A: 5 , ") == "A: 5"
        assert clean_line(", ") == ""
        assert clean_line(", B: 5") == "B: 5"

    def test_stacked_delimiters(self) -> None:
        assert clean_line(" | ; , Name: Asha ; | ") == "Name: Asha"

    def test_dangling_label_separator(self) -> None:
        assert clean_line("Phone: ") == "Phone"

    def test_inner_delimiters_untouched(self) -> None:
        assert clean_line("A - B | C") == "A - B | C"

    def test_leading_minus_is_a_delimiter(self) -> None:
        assert clean_line("-5") == "5"

    def test_only_delimiters(self) -> None:
        assert clean_line(" ,;:|- ") == ""

    def test_custom_delimiters(self) -> None:
        assert clean_line("/ a /", delimiters=("/",)) == "a"
        assert clean_line(", a", delimiters=("/",)) == ", a"

    @given(st.text(alphabet=st.sampled_from(list("ab ,:;-|\t"))))
    def test_idempotent(self, line: str) -> None:
        once = clean_line(line)
        assert clean_line(once) == once

    @given(st.text(alphabet=st.sampled_from(list("ab ,:;-|"))))
    def test_no_delimiter_left_at_edges(self, line: str) -> None:
        cleaned = clean_line(line)
        for delim in CLEAN_DELIMITERS:
            assert not cleaned.startswith(delim)
            assert not cleaned.endswith(delim)


class TestGroupLines:
    def test_inline_concatenates_without_separator(self) -> None:
        assert group_lines([inline("A"), inline("B")]) == [LineEntry("line", "AB")]

    def test_break_on_empty_buffer_adds_nothing(self) -> None:
        assert group_lines([brk(), brk(), inline("A"), brk(), brk()]) == [LineEntry("line", "A")]

    def test_block_is_its_own_line(self) -> None:
        parts = [inline("A"), Part("<div>B</div>", PartKind.BLOCK), inline("C")]
        assert group_lines(parts) == [
            LineEntry("line", "A"),
            LineEntry("line", "<div>B</div>", block=True),
            LineEntry("line", "C"),
        ]

    def test_containers_interrupt_lines(self) -> None:
        parts = [
            inline("A"),
            Part("<div>", PartKind.CONTAINER_OPEN),
            inline("B"),
            Part("</div>", PartKind.CONTAINER_CLOSE),
        ]
        assert group_lines(parts) == [
            LineEntry("line", "A"),
            LineEntry("container", "<div>"),
            LineEntry("line", "B"),
            LineEntry("container", "</div>"),
        ]

    def test_unknown_kind_raises(self) -> None:
        bogus = Part("x", "not-a-kind")  # type: ignore[arg-type]
        with pytest.raises(RenderError):
            group_lines([bogus])


class TestAssemble:
    def test_lines_joined_with_mode_break(self) -> None:
        entries = [LineEntry("line", "A"), LineEntry("line", "B")]
        assert assemble(entries, PLAIN) == "A\nB"
        assert assemble(entries, MARKUP) == "A<br>B"

    def test_blank_lines_dropped(self) -> None:
        entries = [LineEntry("line", "A"), LineEntry("line", " , "), LineEntry("line", "B")]
        assert assemble(entries, PLAIN) == "A\nB"

    def test_containers_not_joined_with_breaks(self) -> None:
        entries = [
            LineEntry("line", "A"),
            LineEntry("container", "<div>"),
            LineEntry("line", "B"),
            LineEntry("line", "C"),
            LineEntry("container", "</div>"),
        ]
        assert assemble(entries, MARKUP) == "A<div>B<br>C</div>"

    def test_containers_never_cleaned(self) -> None:
        entries = [LineEntry("container", "<div>, ")]
        assert assemble(entries, MARKUP) == "<div>, "

    def test_builder_block_markup_not_cleaned(self) -> None:
        entries = [LineEntry("line", "<div>x</div>-", block=True)]
        assert assemble(entries, MARKUP) == "<div>x</div>-"

    def test_block_markup_cleaned_in_plain_mode(self) -> None:
        entries = [LineEntry("line", "<div>x</div>,", block=True)]
        assert assemble(entries, PLAIN) == "<div>x</div>"

    def test_inline_markup_is_cleaned(self) -> None:
        entries = [LineEntry("line", "<div>x</div>-")]
        assert assemble(entries, MARKUP) == "<div>x</div>"

    def test_block_tags_config(self) -> None:
        config = FormatConfig(markup=True, block_tags=("section",))
        entries = [
            LineEntry("line", "<section>x</section>|", block=True),
            LineEntry("line", "<div>y</div>|", block=True),
        ]
        assert assemble(entries, config) == "<section>x</section>|<br><div>y</div>"

    def test_auto_clean_disabled(self) -> None:
        config = FormatConfig(auto_clean=False)
        assert assemble([LineEntry("line", ", A ,")], config) == ", A ,"

    def test_whitespace_line_dropped_even_without_cleaning(self) -> None:
        config = FormatConfig(auto_clean=False)
        assert assemble([LineEntry("line", "   "), LineEntry("line", "A")], config) == "A"


class TestRenderParts:
    def test_plain_line_grouping(self) -> None:
        assert render_parts([inline("A"), brk(), inline("B")], PLAIN) == "A\nB"

    def test_markup_line_grouping_without_clean(self) -> None:
        config = FormatConfig(markup=True, auto_clean=False)
        assert render_parts([inline("A"), brk(config), inline("B")], config) == "A<br>B"

    def test_empty(self) -> None:
        assert render_parts([], PLAIN) == ""

    def test_does_not_mutate_input(self) -> None:
        parts = [inline("A"), brk(), inline(", B")]
        snapshot = list(parts)
        render_parts(parts, PLAIN)
        assert parts == snapshot

    def test_renderer_exposes_config(self) -> None:
        assert LineRenderer(MARKUP).config is MARKUP
        assert LineRenderer().config == FormatConfig()

    @given(
        st.lists(
            st.tuples(
                st.sampled_from([PartKind.INLINE, PartKind.BREAK, PartKind.BLOCK]),
                st.text(alphabet=st.sampled_from(list("ab ,:-"))),
            ),
            max_size=12,
        )
    )
    def test_render_is_idempotent(self, items: list[tuple[PartKind, str]]) -> None:
        parts = [Part(text, kind) for kind, text in items]
        assert render_parts(parts, PLAIN) == render_parts(parts, PLAIN)
