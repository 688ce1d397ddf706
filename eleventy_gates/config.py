"""Scaffolder configuration."""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from eleventy_gates.executor import JSExecutor, NodeExecutor

__all__ = (
    "DEFAULT_DEV_DEPENDENCIES",
    "PRESERVED_SCRIPTS",
    "TRUE_VALUES",
    "ScaffoldConfig",
    "SiteLayout",
)

TRUE_VALUES = {"True", "true", "1", "yes", "Y", "T"}

DEFAULT_DEV_DEPENDENCIES: tuple[str, ...] = (
    "@11ty/eleventy",
    "prettier",
    "eslint@8",
    "stylelint",
    "stylelint-config-standard",
    "husky",
    "@lhci/cli",
)
PRESERVED_SCRIPTS: tuple[str, ...] = ("dev", "build")
"""Script aliases that are only set when the manifest does not define them yet."""


def _dev_dependencies_factory() -> list[str]:
    return list(DEFAULT_DEV_DEPENDENCIES)


def _template_formats_factory() -> list[str]:
    return ["njk", "md", "html"]


def _node_executor_factory() -> JSExecutor:
    return NodeExecutor()


@dataclass
class SiteLayout:
    """Directory names declared in the Eleventy config.

    Attributes:
        input_dir: Root source folder; its existence gates the default source tree.
        includes_dir: Includes folder, relative to ``input_dir``.
        layouts_dir: Layouts folder, relative to ``input_dir``.
        output_dir: Build output folder, also published by the deploy job.
        template_formats: Template extensions Eleventy processes.
    """

    input_dir: str = "src"
    includes_dir: str = "_includes"
    layouts_dir: str = "_includes/layouts"
    output_dir: str = "_site"
    template_formats: list[str] = field(default_factory=_template_formats_factory)


@dataclass
class ScaffoldConfig:
    """Configuration for a scaffolding run.

    Attributes:
        root_dir: Target project directory. Defaults to the current working directory.
        site_title: Title rendered in the default layout and homepage.
        author: Name shown in the footer and homepage title. Defaults to the directory name.
        node_version: Node.js version used by the CI pipeline.
        deploy_branch: Branch that triggers the pipeline's deploy job.
        dev_dependencies: Package specifiers installed as development dependencies.
        install: Run the package manager (dependency install, hook install).
        use_package_manager_init: Create a missing manifest with ``npm init -y`` instead of writing it directly.
        layout: Eleventy directory layout.
        executor: Package manager executor.
    """

    root_dir: "Path | str | None" = None
    site_title: "str | None" = None
    author: "str | None" = None
    node_version: "str | None" = None
    deploy_branch: str = "main"
    dev_dependencies: list[str] = field(default_factory=_dev_dependencies_factory)
    install: "bool | None" = None
    use_package_manager_init: bool = True
    layout: SiteLayout = field(default_factory=SiteLayout)
    executor: JSExecutor = field(default_factory=_node_executor_factory)

    def __post_init__(self) -> None:
        self.root_dir = Path(self.root_dir or Path.cwd()).absolute()
        if self.site_title is None:
            self.site_title = os.getenv("ELEVENTY_GATES_SITE_TITLE", "portfolio")
        if self.author is None:
            self.author = os.getenv("ELEVENTY_GATES_AUTHOR", self.root_dir.name or "author")
        if self.node_version is None:
            self.node_version = os.getenv("ELEVENTY_GATES_NODE_VERSION", "20")
        if self.install is None:
            self.install = os.getenv("ELEVENTY_GATES_NO_INSTALL", "False") not in TRUE_VALUES

    @property
    def root_path(self) -> Path:
        """The resolved target directory."""
        return Path(self.root_dir or Path.cwd())

    def template_context(self) -> dict[str, Any]:
        """Convert the configuration to a dictionary for Jinja2 rendering.

        Returns:
            Dictionary of template variables.
        """
        return {
            "site_title": self.site_title,
            "author": self.author,
            "node_version": self.node_version,
            "deploy_branch": self.deploy_branch,
            "input_dir": self.layout.input_dir,
            "includes_dir": self.layout.includes_dir,
            "layouts_dir": self.layout.layouts_dir,
            "output_dir": self.layout.output_dir,
            "template_formats": self.layout.template_formats,
            "run_prefix": self.executor.run_prefix,
        }
