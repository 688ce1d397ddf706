from collections.abc import Callable, Generator
from pathlib import Path

import pytest

from eleventy_gates.config import ScaffoldConfig
from eleventy_gates.executor import JSExecutor
from eleventy_gates.manifest import MANIFEST_NAME, Manifest

here = Path(__file__).parent

# Environment variables that may affect test behavior - clear before each test
_GATES_ENV_VARS = [
    "ELEVENTY_GATES_SITE_TITLE",
    "ELEVENTY_GATES_AUTHOR",
    "ELEVENTY_GATES_NODE_VERSION",
    "ELEVENTY_GATES_NO_INSTALL",
]


@pytest.fixture(autouse=True)
def clean_gates_env(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Clear eleventy-gates environment variables before each test for isolation."""
    for var in _GATES_ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    yield


class RecordingExecutor(JSExecutor):
    """Executor that records calls and mimics npm's effect on package.json."""

    bin_name = "npm"
    runner_name = "npx"

    def __init__(self) -> None:
        super().__init__(None)
        self.calls: list[tuple[str, ...]] = []

    def init(self, cwd: Path) -> None:
        self.calls.append(("init",))
        Manifest.default(cwd / MANIFEST_NAME, cwd.name).save()

    def install_dev(self, packages: list[str], cwd: Path) -> None:
        self.calls.append(("install_dev", *packages))
        manifest = Manifest.load(cwd / MANIFEST_NAME)
        manifest.add_dev_dependencies(packages)
        manifest.save()

    def execute(self, args: list[str], cwd: Path) -> None:
        self.calls.append(("execute", *args))

    def exec_bin(self, args: list[str], cwd: Path) -> None:
        self.calls.append(("exec_bin", *args))


@pytest.fixture
def executor() -> RecordingExecutor:
    return RecordingExecutor()


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    path = tmp_path / "bridget-site"
    path.mkdir()
    return path


@pytest.fixture
def scaffold_config(project_dir: Path, executor: RecordingExecutor) -> ScaffoldConfig:
    return ScaffoldConfig(root_dir=project_dir, executor=executor, site_title="portfolio", author="bridget")


def _snapshot(root: Path) -> dict[str, bytes]:
    return {str(path.relative_to(root)): path.read_bytes() for path in sorted(root.rglob("*")) if path.is_file()}


@pytest.fixture
def snapshot() -> Callable[[Path], dict[str, bytes]]:
    """Map every file below a directory to its bytes."""
    return _snapshot
