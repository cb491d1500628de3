"""Walk the typed AST — list every code block with its language and lines."""

from tagdown import BaseVisitor, String, Tag, parse
from tagdown.renderers.html import highlight_lines
from tagdown.utils.text import dedent_code

SOURCE = """
section {
    code-block(lang: "py", highlights: 2) {
        "
        def f():
            return 1
        "
    }
    code-block(lang: "ts", highlights: [1, 2..]) { "let a = 1;" }
}
"""


class CodeBlocks(BaseVisitor[None]):
    def __init__(self) -> None:
        self.found: list[tuple[str, list[int]]] = []

    def visit_tag(self, node: Tag) -> None:
        if node.name != "code-block":
            return
        lang = node.get("lang")
        code = dedent_code("".join(getattr(c, "content", "") for c in node.children))
        lines = highlight_lines(node.get("highlights"), code.count("\n") + 1)
        self.found.append((lang.value if isinstance(lang, String) else "", lines))


visitor = CodeBlocks()
visitor.visit(parse(SOURCE))
for language, lines in visitor.found:
    print(f"{language}: highlight {lines}")
