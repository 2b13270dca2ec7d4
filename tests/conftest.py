"""Shared fixtures for simpletemplate tests."""
from __future__ import annotations

from pathlib import Path

import pytest

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def fixtures_dir() -> Path:
    return FIXTURES_DIR


@pytest.fixture
def sample_config_path(fixtures_dir: Path) -> Path:
    return fixtures_dir / "sample_config.yaml"


@pytest.fixture
def sample_json_path(fixtures_dir: Path) -> Path:
    return fixtures_dir / "sample_data.json"


@pytest.fixture
def sample_yaml_path(fixtures_dir: Path) -> Path:
    return fixtures_dir / "sample_data.yaml"


@pytest.fixture
def greeting_template_path(fixtures_dir: Path) -> Path:
    return fixtures_dir / "templates" / "greeting.txt"


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    # Keep a developer's simpletemplate.yaml and SIMPLETEMPLATE_* vars out of tests.
    for var in (
        "SIMPLETEMPLATE_TEMPLATE_PATH",
        "SIMPLETEMPLATE_TEMPLATE_ENCODING",
        "SIMPLETEMPLATE_DATA_PATH",
        "SIMPLETEMPLATE_DATA_FORMAT",
        "SIMPLETEMPLATE_OUTPUT_PATH",
        "SIMPLETEMPLATE_LOG_LEVEL",
    ):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)
