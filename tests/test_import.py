"""Tests for the public import surface."""

import tagdown


class TestPublicApi:
    def test_all_names_resolve(self) -> None:
        for name in tagdown.__all__:
            assert hasattr(tagdown, name), name

    def test_version(self) -> None:
        assert tagdown.__version__ == "0.1.0"

    def test_core_names(self) -> None:
        for name in ("parse", "render", "Tagdown", "Parser", "Lexer", "HtmlTransformer"):
            assert name in tagdown.__all__

    def test_errors_exported(self) -> None:
        assert issubclass(tagdown.ParseError, tagdown.TagdownError)
