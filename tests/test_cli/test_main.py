"""Smoke tests for CLI."""
from __future__ import annotations

import json
import shutil
from pathlib import Path

import pytest

from simpletemplate.cli.main import build_parser, main


def test_parser_builds() -> None:
    parser = build_parser()
    assert parser is not None


def test_no_command_returns_zero() -> None:
    assert main([]) == 0


def test_version_flag() -> None:
    with pytest.raises(SystemExit) as exc_info:
        main(["--version"])
    assert exc_info.value.code == 0


# -- init ---------------------------------------------------------------------


def test_init_creates_config_and_template(tmp_path: Path) -> None:
    config_path = tmp_path / "simpletemplate.yaml"
    result = main(["--config", str(config_path), "init"])
    assert result == 0
    assert config_path.exists()
    assert (tmp_path / "templates" / "index.html").exists()


def test_init_fails_if_exists(tmp_path: Path) -> None:
    config_path = tmp_path / "simpletemplate.yaml"
    config_path.write_text("existing")
    result = main(["--config", str(config_path), "init"])
    assert result == 1
    assert config_path.read_text() == "existing"


def test_init_force_keeps_existing_template(tmp_path: Path) -> None:
    config_path = tmp_path / "simpletemplate.yaml"
    config_path.write_text("existing")
    template = tmp_path / "templates" / "index.html"
    template.parent.mkdir()
    template.write_text("mine")
    assert main(["--config", str(config_path), "init", "--force"]) == 0
    assert config_path.read_text() != "existing"
    assert template.read_text() == "mine"


def test_init_then_render_demo(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["init"]) == 0
    capsys.readouterr()
    assert main(["render", "--demo"]) == 0
    out = capsys.readouterr().out
    assert "Hello, Bob, Belcher!" in out
    assert "First name: Bob" in out
    assert "<li>1: Belcher</li>" in out
    assert "foo is hidden" in out


# -- render -------------------------------------------------------------------


def test_render_with_json_data(
    greeting_template_path: Path,
    sample_json_path: Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    result = main(["render", str(greeting_template_path), "--data", str(sample_json_path)])
    assert result == 0
    assert capsys.readouterr().out == "Hello Bob (12345)\n- Bob\n- Belcher\nno foo\n"


def test_render_no_newline_and_overrides(
    greeting_template_path: Path,
    sample_yaml_path: Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    result = main([
        "render", str(greeting_template_path),
        "--data", str(sample_yaml_path),
        "--json", '{"number": 7}',
        "--set", "show_foo=true",
        "--no-newline",
    ])
    assert result == 0
    assert capsys.readouterr().out == "Hello Bob (7)\n- Bob\n- Belcher\nfoo"


def test_render_to_output_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    template = tmp_path / "t.txt"
    template.write_text("{{ greeting }}, {{ who }}")
    output = tmp_path / "out" / "result.txt"
    result = main([
        "render", str(template),
        "--set", "greeting=Hi", "--set", "who=there",
        "--output", str(output),
    ])
    assert result == 0
    assert output.read_text() == "Hi, there\n"
    assert capsys.readouterr().out == ""


def test_render_uses_config(
    tmp_path: Path,
    greeting_template_path: Path,
    sample_json_path: Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    shutil.copy(sample_json_path, tmp_path / "data.json")
    config_path = tmp_path / "cfg.yaml"
    config_path.write_text(
        f"template:\n  path: {json.dumps(str(greeting_template_path))}\n"
        "data:\n  path: data.json\n"
        "output:\n  trailing_newline: false\n"
    )
    assert main(["--config", str(config_path), "render"]) == 0
    assert capsys.readouterr().out.endswith("no foo")


def test_render_missing_template(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    result = main(["render", str(tmp_path / "missing.html")])
    assert result == 1
    assert "cannot read template" in capsys.readouterr().err


def test_render_bad_data(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    template = tmp_path / "t.txt"
    template.write_text("{{ x }}")
    assert main(["render", str(template), "--json", "[1, 2]"]) == 1
    assert "expected a JSON object" in capsys.readouterr().err


def test_render_missing_config(tmp_path: Path) -> None:
    assert main(["--config", str(tmp_path / "nope.yaml"), "render"]) == 1


# -- inspect ------------------------------------------------------------------


def test_inspect_tree(greeting_template_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["inspect", str(greeting_template_path)]) == 0
    out = capsys.readouterr().out
    assert "Loop part in name" in out
    assert "Conditional show_foo" in out
    assert "warnings=0" in out


def test_inspect_tokens(greeting_template_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["inspect", "--tokens", str(greeting_template_path)]) == 0
    out = capsys.readouterr().out
    assert "index" in out
    assert "'{{ name[0] }}'" in out


def test_inspect_strict_reports_warnings(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    template = tmp_path / "t.txt"
    template.write_text("line one\n{{ for x in xs }}{{ x }}")
    assert main(["inspect", str(template)]) == 0
    assert main(["inspect", "--strict", str(template)]) == 1
    out = capsys.readouterr().out
    assert "[warning]" in out
    assert ":2:1 unclosed" in out
