"""Tests for the tagdown command line."""

import io
import json
import sys
from pathlib import Path

import pytest

from tagdown import __version__
from tagdown.cli import main


class FakeStdin:
    def __init__(self, data: bytes) -> None:
        self.buffer = io.BytesIO(data)


@pytest.fixture
def page(tmp_path: Path) -> Path:
    path = tmp_path / "page.td"
    path.write_text('a(href: "/") { "<home>" }', encoding="utf-8")
    return path


class TestOutput:
    def test_html_to_stdout(self, page: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert main([str(page)]) == 0
        assert capsys.readouterr().out == "<a>&lt;home&gt;</a>\n"

    def test_flags(self, page: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert main([str(page), "--attributes", "--no-escape"]) == 0
        assert capsys.readouterr().out == '<a href="/"><home></a>\n'

    def test_text_format(self, page: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert main([str(page), "-f", "text"]) == 0
        assert capsys.readouterr().out == "<home>\n"

    def test_json_format(self, page: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert main([str(page), "--format", "json"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data["_type"] == "Document"
        assert data["children"][0]["name"] == "a"

    def test_output_file(self, page: Path, tmp_path: Path) -> None:
        out = tmp_path / "page.html"
        assert main([str(page), "-o", str(out)]) == 0
        assert out.read_text(encoding="utf-8") == "<a>&lt;home&gt;</a>"

    def test_stdin(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        monkeypatch.setattr(sys, "stdin", FakeStdin(b'p { "x" }'))
        assert main([]) == 0
        assert capsys.readouterr().out == "<p>x</p>\n"

    def test_empty_output(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        monkeypatch.setattr(sys, "stdin", FakeStdin(b""))
        assert main(["-"]) == 0
        assert capsys.readouterr().out == ""


class TestErrors:
    def test_syntax_error(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        path = tmp_path / "bad.td"
        path.write_text("p {", encoding="utf-8")
        assert main([str(path)]) == 1
        err = capsys.readouterr().err
        assert err == f"error: {path}:1:4 Expected token `}}` and got end of input at 3\n"

    def test_strict_attributes(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        path = tmp_path / "dup.td"
        path.write_text("p(a: 1, a: 2) {}", encoding="utf-8")
        assert main([str(path)]) == 0
        assert main([str(path), "--strict-attributes"]) == 1
        assert "Duplicate attribute 'a'" in capsys.readouterr().err

    def test_missing_file(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert main([str(tmp_path / "missing.td")]) == 1
        assert capsys.readouterr().err.startswith("error: ")

    def test_bad_format(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["-f", "pdf"])
        assert exc_info.value.code == 2


class TestVersion:
    def test_version(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])
        assert exc_info.value.code == 0
        assert capsys.readouterr().out == f"tagdown {__version__}\n"
