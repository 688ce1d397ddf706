"""JavaScript package manager executors.

This module provides the executor used to drive npm (and its ``npx`` binary
runner) while scaffolding a project.
"""

import platform
import shutil
import subprocess
from abc import ABC, abstractmethod
from pathlib import Path
from typing import ClassVar

from eleventy_gates.exceptions import ExecutableNotFoundError, ExecutionError
from eleventy_gates.utils import logger


class JSExecutor(ABC):
    """Abstract base class for Javascript package manager executors."""

    bin_name: ClassVar[str]
    runner_name: ClassVar[str]

    def __init__(self, executable_path: "Path | str | None" = None) -> None:
        self.executable_path = executable_path

    @abstractmethod
    def init(self, cwd: Path) -> None:
        """Create a default manifest."""

    @abstractmethod
    def install_dev(self, packages: list[str], cwd: Path) -> None:
        """Add packages as development dependencies."""

    @abstractmethod
    def execute(self, args: list[str], cwd: Path) -> None:
        """Execute a package manager command and wait for it to finish."""

    @abstractmethod
    def exec_bin(self, args: list[str], cwd: Path) -> None:
        """Execute a binary provided by an installed package."""

    def _resolve_executable(self) -> str:
        if self.executable_path:
            return str(self.executable_path)
        path = shutil.which(self.bin_name)
        if path is None:
            raise ExecutableNotFoundError(self.bin_name)
        return path

    def _resolve_runner(self) -> str:
        if self.executable_path:
            # keep the runner next to a custom package manager binary
            return str(Path(self.executable_path).with_name(self.runner_name))
        path = shutil.which(self.runner_name)
        if path is None:
            raise ExecutableNotFoundError(self.runner_name)
        return path

    @property
    def run_prefix(self) -> str:
        """Get the prefix used by script aliases to call other aliases (e.g., npm run)."""
        return f"{self.bin_name} run"


class CommandExecutor(JSExecutor):
    """Generic command executor."""

    def init(self, cwd: Path) -> None:
        self.execute(["init", "-y"], cwd)

    def install_dev(self, packages: list[str], cwd: Path) -> None:
        self.execute(["install", "--save-dev", *packages], cwd)

    def execute(self, args: list[str], cwd: Path) -> None:
        executable = self._resolve_executable()
        self._run([executable, *args], cwd)

    def exec_bin(self, args: list[str], cwd: Path) -> None:
        runner = self._resolve_runner()
        self._run([runner, *args], cwd)

    @staticmethod
    def _run(command: list[str], cwd: Path) -> None:
        logger.debug("Running %s in %s", command, cwd)
        process = subprocess.run(
            command,
            cwd=cwd,
            shell=platform.system() == "Windows",
            check=False,
            stdout=None,  # inherit for live output
            stderr=subprocess.PIPE,
        )
        if process.returncode != 0:
            stderr = process.stderr.decode() if process.stderr else ""
            raise ExecutionError(command, process.returncode, stderr)


class NodeExecutor(CommandExecutor):
    """Node.js executor."""

    bin_name = "npm"
    runner_name = "npx"
