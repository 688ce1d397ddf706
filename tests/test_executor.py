"""Tests for eleventy_gates.executor module."""

from pathlib import Path
from unittest.mock import Mock, patch

import pytest

from eleventy_gates.exceptions import ExecutableNotFoundError, ExecutionError
from eleventy_gates.executor import NodeExecutor


@patch("shutil.which")
def test_executor_resolve_executable_found(mock_which: Mock) -> None:
    """Test that resolve_executable returns the path when found."""
    mock_which.return_value = "/usr/bin/npm"
    executor = NodeExecutor()
    assert executor._resolve_executable() == "/usr/bin/npm"


@patch("shutil.which")
def test_executor_resolve_executable_not_found(mock_which: Mock) -> None:
    """Test that resolve_executable raises when executable not found."""
    mock_which.return_value = None
    executor = NodeExecutor()
    with pytest.raises(ExecutableNotFoundError):
        executor._resolve_executable()


def test_executor_resolve_executable_custom_path() -> None:
    """Test that custom executable path is used directly, with npx beside it."""
    executor = NodeExecutor(executable_path="/custom/bin/npm")
    assert executor._resolve_executable() == "/custom/bin/npm"
    assert executor._resolve_runner() == "/custom/bin/npx"


def test_executor_run_prefix() -> None:
    assert NodeExecutor().run_prefix == "npm run"


@patch("subprocess.run")
@patch("shutil.which")
def test_executor_init(mock_which: Mock, mock_run: Mock) -> None:
    """Test init runs npm init -y in the project directory."""
    mock_which.return_value = "/usr/bin/npm"
    mock_run.return_value = Mock(returncode=0)

    NodeExecutor().init(Path("/tmp/site"))

    mock_run.assert_called_once()
    args, kwargs = mock_run.call_args
    assert args[0] == ["/usr/bin/npm", "init", "-y"]
    assert kwargs["cwd"] == Path("/tmp/site")


@patch("subprocess.run")
@patch("shutil.which")
def test_executor_install_dev(mock_which: Mock, mock_run: Mock) -> None:
    """Test dev dependencies are installed with --save-dev."""
    mock_which.return_value = "/usr/bin/npm"
    mock_run.return_value = Mock(returncode=0)

    NodeExecutor().install_dev(["prettier", "eslint@8"], Path("/tmp"))

    args, _ = mock_run.call_args
    assert args[0] == ["/usr/bin/npm", "install", "--save-dev", "prettier", "eslint@8"]


@patch("subprocess.run")
@patch("shutil.which")
def test_executor_exec_bin_uses_npx(mock_which: Mock, mock_run: Mock) -> None:
    """Test package binaries are run through npx."""
    mock_which.side_effect = lambda name: f"/usr/bin/{name}"
    mock_run.return_value = Mock(returncode=0)

    NodeExecutor().exec_bin(["husky", "install"], Path("/tmp"))

    args, _ = mock_run.call_args
    assert args[0] == ["/usr/bin/npx", "husky", "install"]


@patch("subprocess.run")
@patch("shutil.which")
def test_executor_execute_command_failure(mock_which: Mock, mock_run: Mock) -> None:
    """Test executor execute command raises on failure."""
    mock_which.return_value = "/usr/bin/npm"
    mock_run.return_value = Mock(returncode=1, stderr=b"npm ERR! network")
    executor = NodeExecutor()

    with pytest.raises(ExecutionError) as exc_info:
        executor.install_dev(["prettier"], Path("/tmp"))

    assert exc_info.value.return_code == 1
    assert "npm ERR! network" in str(exc_info.value)


@patch("subprocess.run")
@patch("shutil.which")
def test_executor_missing_npx(mock_which: Mock, mock_run: Mock) -> None:
    """Test a missing npx is reported before anything runs."""
    mock_which.return_value = None

    with pytest.raises(ExecutableNotFoundError, match="npx"):
        NodeExecutor().exec_bin(["husky", "install"], Path("/tmp"))

    mock_run.assert_not_called()
