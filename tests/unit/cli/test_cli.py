"""Tests for the filegate command line."""

import os
import subprocess
import sys
from pathlib import Path
from unittest.mock import patch

import pytest

from filegate.cli import main


@pytest.fixture(autouse=True)
def clean_env():
    env = {k: v for k, v in os.environ.items() if not k.startswith("FILEGATE_")}
    with patch.dict(os.environ, env, clear=True):
        yield


class TestCheck:
    """Tests for the check command."""

    def test_valid_name_prints_path(self, capsys):
        """Valid name prints the path and exits 0."""
        code = main(["check", "test", "--base-path", "/database", "--extension", ".txt"])
        assert code == 0
        assert capsys.readouterr().out.strip() == "/database/test.txt"

    def test_rejected_name_exits_1(self, capsys):
        """Rejected name prints the reason to stderr and exits 1."""
        code = main(["check", "../etc/passwd", "--base-path", "/database"])
        assert code == 1
        assert "path_traversal" in capsys.readouterr().err

    def test_uses_config_file(self, tmp_path: Path, capsys):
        """Settings come from the config file."""
        config_file = tmp_path / "filegate.yaml"
        config_file.write_text("base_path: /from/file\nextension: md\n")
        code = main(["--config", str(config_file), "check", "notes"])
        assert code == 0
        assert capsys.readouterr().out.strip() == "/from/file/notes.md"

    def test_bad_config_exits_2(self, tmp_path: Path, capsys):
        """Invalid config file is reported."""
        config_file = tmp_path / "filegate.yaml"
        config_file.write_text("colour: blue\n")
        code = main(["--config", str(config_file), "check", "notes"])
        assert code == 2
        assert "colour" in capsys.readouterr().err

    def test_bad_extension_exits_2(self, capsys):
        """Extension with a path separator is a config error, not a crash."""
        code = main(["check", "notes", "--base-path", "/database", "--extension", "a/b"])
        assert code == 2
        assert "extension" in capsys.readouterr().err


class TestServe:
    """Tests for the serve command."""

    def test_serve_runs_uvicorn(self):
        """serve hands the app to uvicorn with configured host and port."""
        with patch("uvicorn.run") as run, patch("filegate.cli.configure_logging"):
            code = main(["serve", "--host", "0.0.0.0", "--port", "9001"])
        assert code == 0
        _, kwargs = run.call_args
        assert kwargs["host"] == "0.0.0.0"
        assert kwargs["port"] == 9001


def test_module_entry_point():
    """python -m filegate works."""
    result = subprocess.run(
        [sys.executable, "-m", "filegate", "check", "valid name (1)", "--base-path", "/database"],
        capture_output=True,
        text=True,
    )
    assert result.returncode == 0
    assert result.stdout.strip() == "/database/valid name (1).txt"
