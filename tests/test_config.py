# tests/test_config.py

from __future__ import annotations

import logging
import os
import subprocess
import sys
from pathlib import Path

import pytest

import config
from main import __version__, main

SRC_DIR = Path(__file__).resolve().parent.parent / "src"


def test_defaults() -> None:
    settings = config.load_settings()
    assert settings == config.Settings()
    assert settings.log_level == logging.WARNING
    assert settings.log_file is None
    assert settings.show_menu_once is False


def test_env_overrides(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("TODO_LOG_LEVEL", "debug")
    monkeypatch.setenv("TODO_LOG_FILE", str(tmp_path / "todo.log"))
    monkeypatch.setenv("TODO_SHOW_MENU_ONCE", "yes")
    settings = config.load_settings()
    assert settings.log_level == logging.DEBUG
    assert settings.log_file == tmp_path / "todo.log"
    assert settings.show_menu_once is True


def test_bad_level_falls_back(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TODO_LOG_LEVEL", "chatty")
    assert config.load_settings().log_level == logging.WARNING


@pytest.mark.parametrize(
    ("raw", "expected"),
    [(None, True), ("0", False), ("off", False), ("", False), ("1", True), ("On", True)],
)
def test_truthy_env(raw, expected) -> None:
    assert config.truthy_env(raw, True) is expected


def test_env_hex(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TODO_DONE", "a7e399")
    assert config.env_hex("DONE", "#000000") == "#a7e399"
    monkeypatch.setenv("TODO_DONE", "#zzzzzz")
    assert config.env_hex("DONE", "#000000") == "#000000"


def test_version_option(runner) -> None:
    result = runner.invoke(main, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_log_file_option_writes_debug_records(runner, tmp_path: Path) -> None:
    log_file = tmp_path / "logs" / "todo.log"
    result = runner.invoke(main, ["--log-file", str(log_file)], input="1\nx\n5\n1\n0\n")
    assert result.exit_code == 0
    text = log_file.read_text(encoding="utf-8")
    assert "starting terminal-todo" in text
    assert "created task id=1" in text
    assert "deleted task id=1" in text


def test_dotenv_is_read_from_working_directory(tmp_path: Path) -> None:
    (tmp_path / ".env").write_text("TODO_LOG_LEVEL=DEBUG\n", encoding="utf-8")
    script = tmp_path / "show_level.py"
    script.write_text("import config\nprint(config.load_settings().log_level)\n", encoding="utf-8")
    env = {k: v for k, v in os.environ.items() if not k.startswith("TODO_")}
    env["PYTHONPATH"] = os.pathsep.join(filter(None, [str(SRC_DIR), env.get("PYTHONPATH")]))

    out = subprocess.run(
        [sys.executable, str(script)],
        cwd=tmp_path, env=env, capture_output=True, text=True, check=True,
    )
    assert out.stdout.strip() == str(logging.DEBUG)
