from pathlib import Path

import pytest

from eleventy_gates.config import DEFAULT_DEV_DEPENDENCIES, ScaffoldConfig
from eleventy_gates.executor import NodeExecutor


def test_default_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)

    config = ScaffoldConfig()

    assert config.root_path.resolve() == tmp_path.resolve()
    assert config.site_title == "portfolio"
    assert config.author == tmp_path.resolve().name
    assert config.node_version == "20"
    assert config.install is True
    assert config.dev_dependencies == list(DEFAULT_DEV_DEPENDENCIES)
    assert isinstance(config.executor, NodeExecutor)


def test_config_environment_overrides(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ELEVENTY_GATES_SITE_TITLE", "notes")
    monkeypatch.setenv("ELEVENTY_GATES_AUTHOR", "sam")
    monkeypatch.setenv("ELEVENTY_GATES_NODE_VERSION", "22")
    monkeypatch.setenv("ELEVENTY_GATES_NO_INSTALL", "true")

    config = ScaffoldConfig(root_dir=tmp_path)

    assert config.site_title == "notes"
    assert config.author == "sam"
    assert config.node_version == "22"
    assert config.install is False


def test_explicit_values_win_over_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ELEVENTY_GATES_SITE_TITLE", "notes")
    monkeypatch.setenv("ELEVENTY_GATES_NO_INSTALL", "1")

    config = ScaffoldConfig(root_dir=tmp_path, site_title="blog", install=True)

    assert config.site_title == "blog"
    assert config.install is True


def test_template_context(tmp_path: Path) -> None:
    context = ScaffoldConfig(root_dir=tmp_path, author="bridget").template_context()

    assert context["input_dir"] == "src"
    assert context["output_dir"] == "_site"
    assert context["template_formats"] == ["njk", "md", "html"]
    assert context["run_prefix"] == "npm run"
    assert context["author"] == "bridget"
