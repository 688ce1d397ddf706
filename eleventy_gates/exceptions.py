"""eleventy-gates exception classes."""

__all__ = [
    "EleventyGatesError",
    "ExecutableNotFoundError",
    "ExecutionError",
    "ManifestParseError",
    "ManifestWriteError",
]


class EleventyGatesError(Exception):
    """Base exception for eleventy-gates related errors."""


class ExecutableNotFoundError(EleventyGatesError):
    """Raised when the package manager executable is not found."""

    def __init__(self, executable: str) -> None:
        super().__init__(f"Executable {executable!r} not found. Is Node.js installed and on your PATH?")
        self.executable = executable


class ExecutionError(EleventyGatesError):
    """Raised when an external command exits with a non-zero status."""

    def __init__(self, command: list[str], return_code: int, stderr: str) -> None:
        super().__init__(f"Command {command!r} failed with return code {return_code}.\nStderr: {stderr}")
        self.command = command
        self.return_code = return_code
        self.stderr = stderr


class ManifestParseError(EleventyGatesError):
    """Raised when the existing package.json cannot be decoded."""

    def __init__(self, manifest_path: str, reason: str) -> None:
        super().__init__(f"Could not parse manifest at {manifest_path!r}: {reason}")
        self.manifest_path = manifest_path


class ManifestWriteError(EleventyGatesError):
    """Raised when package.json cannot be written."""

    def __init__(self, manifest_path: str) -> None:
        super().__init__(f"Could not write manifest to {manifest_path!r}.")
        self.manifest_path = manifest_path
