"""Tests for markupkit.cli: CLI entrypoint and ``render`` command."""

import json
from pathlib import Path

import pytest
from conftest import TEMPLATES_URL, asset_url

from markupkit.cli import main
from markupkit.cli._render import parse_vars


class TestCLIHelp:
    def test_help_exits_zero(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--help"])
        assert exc_info.value.code == 0

    def test_render_help_exits_zero(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["render", "--help"])
        assert exc_info.value.code == 0

    def test_no_command_prints_help(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main([])
        assert exc_info.value.code == 0
        assert "render" in capsys.readouterr().out

    def test_render_missing_name(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["render"])
        assert exc_info.value.code == 2


class TestParseVars:
    def test_pairs(self) -> None:
        assert parse_vars(["a=1", "b=x=y", "c="]) == {"a": "1", "b": "x=y", "c": ""}

    def test_missing_equals(self) -> None:
        with pytest.raises(ValueError, match="KEY=VALUE"):
            parse_vars(["oops"])


class TestRender:
    def test_prints_markup_and_tags(self, templates_dir: Path, capsys: pytest.CaptureFixture[str]) -> None:
        main(["render", "card", "--templates", str(templates_dir), "--url", TEMPLATES_URL, "--var", "title=Lamp"])
        out = capsys.readouterr().out
        assert '<div class="card">Lamp</div>' in out
        assert f'href="{asset_url("components/card.css")}"' in out
        assert f'<script src="{asset_url("components/card.js")}"></script>' in out

    def test_snippet_flag(self, templates_dir: Path, capsys: pytest.CaptureFixture[str]) -> None:
        main(["render", "footer", "--snippet", "--templates", str(templates_dir), "--var", "year=1999"])
        assert "<footer>1999</footer>" in capsys.readouterr().out

    def test_ajax_payload(self, templates_dir: Path, capsys: pytest.CaptureFixture[str]) -> None:
        main(["render", "gallery", "--ajax", "--templates", str(templates_dir), "--url", TEMPLATES_URL])
        payload = json.loads(capsys.readouterr().out)
        assert "gallery" in payload["html"]
        assert payload["scripts"] == [{"src": asset_url("components/gallery/gallery.js"), "attr": {}}]
        assert payload["styles"] == []

    def test_missing_component_exits_one(self, templates_dir: Path, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["render", "nope", "--templates", str(templates_dir)])
        assert exc_info.value.code == 1
        assert "not found" in capsys.readouterr().err

    def test_bad_var_exits_one(self, templates_dir: Path) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["render", "card", "--templates", str(templates_dir), "--var", "broken"])
        assert exc_info.value.code == 1
