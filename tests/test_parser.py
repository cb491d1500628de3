"""Parser tests: grammar coverage, locations and syntax errors."""

import pytest

from tagdown import parse
from tagdown.config import ParseConfig, parse_config_context
from tagdown.errors import (
    DuplicateAttributeError,
    ExpectedTokenError,
    SourceTooLargeError,
    UnclosedStringLiteralError,
    UnexpectedTokenError,
)
from tagdown.nodes import Attribute, Document, List, Number, Range, String, Tag, Text
from tagdown.parser import Parser
from tagdown.tokens import TokenType

CODE_BLOCK_SOURCE = """\
code-block(highlights: [1, 3..5], lang: "ts") {
    "
    let x = 1;
    "
}
"""


class TestDocuments:
    def test_empty_source(self) -> None:
        assert parse("") == Document()
        assert parse("  \n\t ") == Document()

    def test_single_string(self) -> None:
        assert parse('"abc"') == Document((Text("abc"),))

    def test_nested_tags(self) -> None:
        doc = parse('div { div {"item1"} div {"item2"} }')
        assert doc == Document(
            (
                Tag(
                    "div",
                    children=(
                        Tag("div", children=(Text("item1"),)),
                        Tag("div", children=(Text("item2"),)),
                    ),
                ),
            )
        )

    def test_many_top_level_nodes(self) -> None:
        doc = parse('"a" p {} "b"')
        assert doc.children == (Text("a"), Tag("p"), Text("b"))

    def test_layout_does_not_matter(self) -> None:
        assert parse('p{"a"}') == parse('p {\n    "a"\n}\n')

    def test_parser_returns_top_level_list(self) -> None:
        assert Parser('"a" "b"').parse() == [Text("a"), Text("b")]


class TestAttributes:
    def test_code_block_example(self) -> None:
        tag = parse(CODE_BLOCK_SOURCE).children[0]
        assert isinstance(tag, Tag)
        assert tag.name == "code-block"
        assert tag.attributes == (
            Attribute("highlights", List((Number(1), Range(3, 5)))),
            Attribute("lang", String("ts")),
        )
        assert tag.children == (Text("\n    let x = 1;\n    "),)

    def test_empty_attribute_list(self) -> None:
        assert parse("p() {}") == parse("p {}")

    def test_attribute_order_kept(self) -> None:
        tag = parse('p(z: 1, a: "x", m: []) {}').children[0]
        assert [a.name for a in tag.attributes] == ["z", "a", "m"]

    def test_duplicates_kept_by_default(self) -> None:
        tag = parse("p(a: 1, a: 2) {}").children[0]
        assert tag.attributes == (Attribute("a", Number(1)), Attribute("a", Number(2)))
        assert tag.get("a") == Number(2)

    def test_duplicates_rejected_when_strict(self) -> None:
        with pytest.raises(DuplicateAttributeError) as exc_info:
            parse("p(a: 1, b: 2, a: 3) {}", config=ParseConfig(strict_attributes=True))
        err = exc_info.value
        assert (err.name, err.tag, err.at) == ("a", "p", 14)

    def test_same_name_on_different_tags_is_fine_when_strict(self) -> None:
        doc = parse("p(a: 1) { q(a: 2) {} }", config=ParseConfig(strict_attributes=True))
        assert doc.children[0].children[0].get("a") == Number(2)


class TestLiterals:
    def test_number(self) -> None:
        assert Parser("42").parse_literal() == Number(42)

    def test_string(self) -> None:
        assert Parser('"ts"').parse_literal() == String("ts")

    def test_closed_range(self) -> None:
        assert Parser("3..5").parse_literal() == Range(3, 5)

    def test_open_range(self) -> None:
        assert Parser("3..").parse_literal() == Range(3)

    def test_open_range_inside_list(self) -> None:
        assert Parser("[1.., 2]").parse_literal() == List((Range(1), Number(2)))

    def test_empty_list(self) -> None:
        assert Parser("[]").parse_literal() == List()

    def test_nested_list(self) -> None:
        assert Parser('[[1], ["a", []]]').parse_literal() == List(
            (List((Number(1),)), List((String("a"), List())))
        )

    def test_attribute(self) -> None:
        assert Parser('lang: "ts"').parse_attribute() == Attribute("lang", String("ts"))

    def test_literal_must_fill_source(self) -> None:
        with pytest.raises(ExpectedTokenError) as exc_info:
            Parser("1 2").parse_literal()
        assert exc_info.value.expected.type == TokenType.EOF
        assert "Expected token end of input and got 2 at 2" in str(exc_info.value)


class TestLocations:
    def test_tag_and_text_spans(self) -> None:
        tag = parse('p { "x" }').children[0]
        assert (tag.location.offset, tag.location.end_offset) == (0, 9)
        text = tag.children[0]
        assert (text.location.offset, text.location.end_offset) == (4, 7)

    def test_attribute_span(self) -> None:
        attribute = parse("p(gap: 1..3) {}").children[0].attributes[0]
        assert (attribute.location.offset, attribute.location.end_offset) == (2, 11)
        assert (attribute.value.location.offset, attribute.value.location.end_offset) == (7, 11)

    def test_lines(self) -> None:
        doc = parse('p {\n  q {\n    "x"\n  }\n}', source_file="page.td")
        inner = doc.children[0].children[0]
        assert str(inner.location) == "page.td:2:3"
        assert str(inner.children[0].location) == "page.td:3:5"

    def test_document_spans_source(self) -> None:
        doc = parse('  "a"  ')
        assert (doc.location.offset, doc.location.end_offset) == (0, 7)

    def test_locations_do_not_affect_equality(self) -> None:
        assert parse('"a"').children[0] == Text("a")


class TestSyntaxErrors:
    def test_unclosed_tag(self) -> None:
        with pytest.raises(ExpectedTokenError) as exc_info:
            parse("p {")
        err = exc_info.value
        assert err.expected.type == TokenType.RIGHT_BRACE
        assert err.got.type == TokenType.EOF
        assert err.at == 3
        assert str(err) == "1:4 Expected token `}` and got end of input at 3"

    def test_unclosed_tag_reports_last_line(self) -> None:
        with pytest.raises(ExpectedTokenError) as exc_info:
            parse("p {\n  q {\n")
        assert (exc_info.value.lineno, exc_info.value.col_offset) == (3, 1)

    def test_missing_body(self) -> None:
        with pytest.raises(ExpectedTokenError) as exc_info:
            parse('p "x"')
        assert exc_info.value.expected.type == TokenType.LEFT_BRACE
        assert exc_info.value.got.value == "x"
        assert exc_info.value.at == 2

    def test_stray_closing_brace(self) -> None:
        with pytest.raises(UnexpectedTokenError) as exc_info:
            parse('"a" }')
        err = exc_info.value
        assert err.at == 4
        assert err.token.type == TokenType.RIGHT_BRACE
        assert "Unexpected token `}` at 4" in str(err)

    def test_number_is_not_a_node(self) -> None:
        with pytest.raises(UnexpectedTokenError):
            parse("1")

    def test_trailing_comma(self) -> None:
        with pytest.raises(UnexpectedTokenError) as exc_info:
            parse("p(a: 1,) {}")
        assert exc_info.value.at == 7

    def test_trailing_comma_in_list(self) -> None:
        with pytest.raises(UnexpectedTokenError):
            parse("p(a: [1,]) {}")

    def test_missing_colon(self) -> None:
        with pytest.raises(ExpectedTokenError) as exc_info:
            parse("p(a 1) {}")
        assert exc_info.value.expected.type == TokenType.COLON

    def test_identifier_is_not_a_literal(self) -> None:
        with pytest.raises(UnexpectedTokenError) as exc_info:
            parse("p(a: b) {}")
        assert exc_info.value.token.value == "b"

    def test_range_needs_start(self) -> None:
        with pytest.raises(UnexpectedTokenError):
            parse("p(a: ..3) {}")

    def test_single_dot_after_range(self) -> None:
        with pytest.raises(ExpectedTokenError) as exc_info:
            parse("p(a: 1...) {}")
        assert exc_info.value.got.type == TokenType.DOT

    def test_missing_separator(self) -> None:
        with pytest.raises(ExpectedTokenError) as exc_info:
            parse("p(a: 1 b: 2) {}")
        assert exc_info.value.expected.type == TokenType.RIGHT_PAREN

    def test_unclosed_list(self) -> None:
        with pytest.raises(ExpectedTokenError) as exc_info:
            parse("p(a: [1, 2) {}")
        assert exc_info.value.expected.type == TokenType.RIGHT_BRACKET

    def test_source_file_in_message(self) -> None:
        with pytest.raises(UnexpectedTokenError) as exc_info:
            parse("\n}", source_file="page.td")
        assert str(exc_info.value).startswith("page.td:2:1 ")


class TestSourceLimit:
    def test_rejects_long_source(self) -> None:
        with pytest.raises(SourceTooLargeError) as exc_info:
            parse("p {}", config=ParseConfig(max_source_length=3))
        assert (exc_info.value.length, exc_info.value.limit) == (4, 3)

    def test_accepts_source_at_limit(self) -> None:
        assert parse("p {}", config=ParseConfig(max_source_length=4)) == parse("p {}")

    def test_limit_read_from_context(self) -> None:
        with parse_config_context(ParseConfig(max_source_length=1)):
            with pytest.raises(SourceTooLargeError):
                Parser('"ab"').parse()


class TestBasicScenarios:
    def test_string_node(self) -> None:
        assert Parser('"abc"').parse() == [Text("abc")]

    def test_bare_tag(self) -> None:
        assert Parser("div {}").parse() == [Tag("div", attributes=(), children=())]

    def test_ranges(self) -> None:
        assert Parser("1..10").parse_literal() == Range(1, 10)
        assert Parser("1..").parse_literal() == Range(1, None)

    def test_recursive_list(self) -> None:
        pair = (Number(1), Range(1, 3))
        assert Parser("[1, 1..3, [1, 1..3]]").parse_literal() == List((*pair, List(pair)))

    def test_attribute_with_list(self) -> None:
        assert Parser("name: [1, 1..3]").parse_attribute() == Attribute(
            "name", List((Number(1), Range(1, 3)))
        )

    def test_row_with_children(self) -> None:
        source = 'row(reversed: "true") {\n    p { "first" }\n    "second"\n}\n'
        assert Parser(source).parse() == [
            Tag(
                "row",
                (Attribute("reversed", String("true")),),
                (Tag("p", children=(Text("first"),)), Text("second")),
            )
        ]

    def test_unclosed_string_start(self) -> None:
        with pytest.raises(UnclosedStringLiteralError) as exc_info:
            Parser('"unclosed string').parse()
        assert exc_info.value.start == 0

    def test_missing_closing_brace(self) -> None:
        with pytest.raises(ExpectedTokenError) as exc_info:
            Parser('div { "x" ').parse()
        assert exc_info.value.expected.type == TokenType.RIGHT_BRACE
        assert exc_info.value.got.type == TokenType.EOF


class TestByteInputPositions:
    def test_unexpected_token_at_byte_offset(self) -> None:
        with pytest.raises(UnexpectedTokenError) as exc_info:
            parse('"é" }'.encode())
        assert exc_info.value.at == 5
        assert "at 5" in str(exc_info.value)

    def test_expected_token_at_byte_offset(self) -> None:
        with pytest.raises(ExpectedTokenError) as exc_info:
            parse('p { "日本" '.encode())
        assert exc_info.value.at == 13

    def test_duplicate_attribute_at_byte_offset(self) -> None:
        with pytest.raises(DuplicateAttributeError) as exc_info:
            parse(
                'p(t: "é", t: 1) {}'.encode(),
                config=ParseConfig(strict_attributes=True),
            )
        assert exc_info.value.at == 11

    def test_node_locations_in_bytes(self) -> None:
        doc = parse('"é" p {}'.encode())
        tag = doc.children[1]
        assert (tag.location.offset, tag.location.end_offset) == (5, 9)
        assert (doc.location.offset, doc.location.end_offset) == (0, 9)

    def test_document_span_includes_bom(self) -> None:
        assert parse(b"\xef\xbb\xbfp {}").location.end_offset == 7

    def test_text_input_unchanged(self) -> None:
        assert parse('"é" p {}').location.end_offset == 8
