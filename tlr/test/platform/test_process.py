"""Tests for tlr.platform.process module."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

from tlr.core.result import Err, Ok
from tlr.platform.process import ProcessError, run_silent, shell_exit_status

PY = sys.executable


class TestProcessError:
    def test_defaults(self) -> None:
        error = ProcessError(command=("cargo",), returncode=101)
        assert error.stderr == ""

    def test_frozen(self) -> None:
        error = ProcessError(("cmd",), 1)
        with pytest.raises(AttributeError):
            error.returncode = 2  # type: ignore[misc]


class TestShellExitStatus:
    def test_positive_passthrough(self) -> None:
        assert shell_exit_status(101) == 101

    def test_zero(self) -> None:
        assert shell_exit_status(0) == 0

    def test_signal(self) -> None:
        # SIGKILL
        assert shell_exit_status(-9) == 137


class TestRunSilent:
    def test_success_returns_none(self, tmp_path: Path) -> None:
        result = run_silent([PY, "-c", "pass"], cwd=tmp_path)

        assert isinstance(result, Ok)
        assert result.value is None

    def test_failure_propagates_exit_status(self, tmp_path: Path) -> None:
        result = run_silent([PY, "-c", "import sys; sys.exit(101)"], cwd=tmp_path)

        assert isinstance(result, Err)
        assert result.error.returncode == 101
        assert result.error.stderr == ""

    def test_command_not_found(self, tmp_path: Path) -> None:
        result = run_silent(["nonexistent_command_12345"], cwd=tmp_path)

        assert isinstance(result, Err)
        assert result.error.returncode == 127
        assert result.error.stderr == "nonexistent_command_12345: command not found"

    @pytest.mark.skipif(sys.platform == "win32", reason="POSIX permissions")
    def test_not_executable(self, tmp_path: Path) -> None:
        script = tmp_path / "cargo"
        script.write_text("#!/bin/sh\nexit 0\n", encoding="utf-8")
        script.chmod(0o644)

        result = run_silent([str(script)], cwd=tmp_path)

        assert isinstance(result, Err)
        assert result.error.returncode == 126
        assert result.error.stderr != ""

    def test_uses_cwd(self, tmp_path: Path) -> None:
        (tmp_path / "Cargo.toml").write_text("", encoding="utf-8")

        result = run_silent(
            [PY, "-c", "import os, sys; sys.exit(0 if os.path.exists('Cargo.toml') else 1)"],
            cwd=tmp_path,
        )

        assert isinstance(result, Ok)

    def test_uses_env(self, tmp_path: Path) -> None:
        import os

        env = os.environ.copy()
        env["TLR_TEST_VAR"] = "release"

        result = run_silent(
            [PY, "-c", "import os, sys; sys.exit(0 if os.environ['TLR_TEST_VAR'] == 'release' else 1)"],
            cwd=tmp_path,
            env=env,
        )

        assert isinstance(result, Ok)
