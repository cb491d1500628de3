"""Tests for the top-level API: parse, render and Tagdown."""

from concurrent.futures import ThreadPoolExecutor

from tagdown import Document, Tagdown, Text, parse, render

CODE_BLOCK_SOURCE = """\
code-block(highlights: [1, 3..5], lang: "ts") {
    "
    let x = 1;
    "
}
"""


class TestParse:
    def test_returns_document(self) -> None:
        assert isinstance(parse('"a"'), Document)

    def test_accepts_bytes(self) -> None:
        assert parse('p { "é" }'.encode()) == parse('p { "é" }')

    def test_source_file(self) -> None:
        doc = parse('"a"', source_file="page.td")
        assert doc.children[0].location.source_file == "page.td"


class TestRender:
    def test_quick_start(self) -> None:
        doc = parse('div { div {"item1"} div {"item2"} }')
        assert render(doc) == "<div><div>item1</div><div>item2</div></div>"

    def test_code_block(self) -> None:
        assert render(parse(CODE_BLOCK_SOURCE)) == (
            '<pre><code class="language-ts">let x = 1;</code></pre>'
        )


class TestTagdown:
    def test_call(self) -> None:
        assert Tagdown()('p { "Hello" }') == "<p>Hello</p>"

    def test_options(self) -> None:
        td = Tagdown(escape=False, emit_attributes=True)
        assert td('a(href: "/") { "<b>" }') == '<a href="/"><b></a>'

    def test_parse_then_render(self) -> None:
        td = Tagdown()
        doc = td.parse('p { "x" }')
        assert td.render(doc) == "<p>x</p>"

    def test_parse_many(self) -> None:
        docs = Tagdown().parse_many(['"a"', "p {}"])
        assert [len(doc.children) for doc in docs] == [1, 1]
        assert docs[0].children[0] == Text("a")

    def test_parse_many_empty(self) -> None:
        assert Tagdown().parse_many([]) == []

    def test_concurrent_use(self) -> None:
        td = Tagdown()
        sources = [f'p {{ "{i}" }}' for i in range(50)]
        with ThreadPoolExecutor(max_workers=4) as pool:
            results = list(pool.map(td, sources))
        assert results == [f"<p>{i}</p>" for i in range(50)]
