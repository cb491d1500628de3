"""Tests for ContextVar-based parse configuration.

Validates thread isolation, context manager behavior and the way
``parse()`` and ``Tagdown`` set and restore configuration.
"""

from threading import Thread

import pytest

from tagdown import (
    ParseConfig,
    Parser,
    Tagdown,
    get_parse_config,
    parse,
    parse_config_context,
    reset_parse_config,
    set_parse_config,
)
from tagdown.errors import DuplicateAttributeError


@pytest.fixture(autouse=True)
def default_config():
    reset_parse_config()
    yield
    reset_parse_config()


class TestParseConfigDataclass:
    """Test ParseConfig frozen dataclass behavior."""

    def test_default_values(self) -> None:
        config = ParseConfig()
        assert config.strict_attributes is False
        assert config.max_source_length is None

    def test_immutability(self) -> None:
        config = ParseConfig()
        with pytest.raises(AttributeError):
            config.strict_attributes = True  # type: ignore[misc]

    def test_from_dict(self) -> None:
        config = ParseConfig.from_dict({"strict_attributes": True, "max_source_length": 10})
        assert config == ParseConfig(strict_attributes=True, max_source_length=10)

    def test_from_dict_ignores_unknown_keys(self) -> None:
        assert ParseConfig.from_dict({"unknown_key": "ignored"}) == ParseConfig()


class TestContextVar:
    def test_default(self) -> None:
        assert get_parse_config() == ParseConfig()

    def test_set_and_reset(self) -> None:
        set_parse_config(ParseConfig(strict_attributes=True))
        assert get_parse_config().strict_attributes is True
        reset_parse_config()
        assert get_parse_config().strict_attributes is False

    def test_context_manager_restores(self) -> None:
        outer = ParseConfig(max_source_length=100)
        set_parse_config(outer)
        with parse_config_context(ParseConfig(strict_attributes=True)):
            assert get_parse_config().strict_attributes is True
        assert get_parse_config() is outer

    def test_context_manager_restores_on_error(self) -> None:
        with pytest.raises(DuplicateAttributeError):
            with parse_config_context(ParseConfig(strict_attributes=True)):
                Parser("p(a: 1, a: 2) {}").parse()
        assert get_parse_config() == ParseConfig()

    def test_parser_reads_context(self) -> None:
        with parse_config_context(ParseConfig(strict_attributes=True)):
            with pytest.raises(DuplicateAttributeError):
                Parser("p(a: 1, a: 2) {}").parse()
        assert len(Parser("p(a: 1, a: 2) {}").parse()[0].attributes) == 2

    def test_thread_isolation(self) -> None:
        results: dict[str, bool] = {}

        def worker() -> None:
            results["worker"] = get_parse_config().strict_attributes

        set_parse_config(ParseConfig(strict_attributes=True))
        thread = Thread(target=worker)
        thread.start()
        thread.join()
        assert results["worker"] is False
        assert get_parse_config().strict_attributes is True


class TestApiConfig:
    def test_parse_resets_config(self) -> None:
        parse('"a"', config=ParseConfig(strict_attributes=True))
        assert get_parse_config() == ParseConfig()

    def test_parse_resets_after_error(self) -> None:
        with pytest.raises(DuplicateAttributeError):
            parse("p(a: 1, a: 2) {}", config=ParseConfig(strict_attributes=True))
        assert get_parse_config() == ParseConfig()

    def test_tagdown_restores_previous(self) -> None:
        outer = ParseConfig(max_source_length=1000)
        set_parse_config(outer)
        Tagdown(strict_attributes=True).parse('"a"')
        assert get_parse_config() is outer

    def test_tagdown_instances_independent(self) -> None:
        strict = Tagdown(strict_attributes=True)
        lenient = Tagdown()
        with pytest.raises(DuplicateAttributeError):
            strict.parse("p(a: 1, a: 2) {}")
        assert len(lenient.parse("p(a: 1, a: 2) {}").children[0].attributes) == 2


class TestEnclosingContext:
    def test_parse_without_config_uses_context(self) -> None:
        with parse_config_context(ParseConfig(strict_attributes=True)):
            with pytest.raises(DuplicateAttributeError):
                parse("p(a: 1, a: 2) {}")

    def test_parse_leaves_context_in_place(self) -> None:
        strict = ParseConfig(strict_attributes=True)
        with parse_config_context(strict):
            parse('"x"')
            assert get_parse_config() is strict
            parse('"x"', config=ParseConfig(max_source_length=10))
            assert get_parse_config() is strict

    def test_explicit_config_wins_inside_context(self) -> None:
        with parse_config_context(ParseConfig(strict_attributes=True)):
            doc = parse("p(a: 1, a: 2) {}", config=ParseConfig())
        assert len(doc.children[0].attributes) == 2
