"""Eleventy quality-gates scaffolder.

The scaffolder runs a fixed sequence of idempotent steps against a target
directory. Steps run fail-fast: the first error propagates and nothing
already written is rolled back.
"""

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from eleventy_gates.config import PRESERVED_SCRIPTS, ScaffoldConfig
from eleventy_gates.manifest import MANIFEST_NAME, Manifest
from eleventy_gates.scaffolding import (
    ApplyResult,
    TemplateEntry,
    apply_templates,
    get_script_aliases,
    render_template,
    write_file,
)
from eleventy_gates.scaffolding.templates import (
    AUDIT_CONFIG,
    CI_PIPELINE,
    COMMIT_HOOK,
    FORMAT_LINT_CONFIGS,
    SITE_CONFIG,
    SOURCE_TREE,
)
from eleventy_gates.utils import console

__all__ = ("ScaffoldReport", "Scaffolder")


def _str_list_factory() -> list[str]:
    return []


@dataclass
class ScaffoldReport:
    """Outcome of a scaffolding run.

    Attributes:
        files: Written and skipped template files.
        manifest_created: Whether ``package.json`` was created by this run.
        scripts_changed: Script aliases whose value changed.
        dependencies_added: Dev dependencies recorded without running the package manager.
    """

    files: ApplyResult = field(default_factory=ApplyResult)
    manifest_created: bool = False
    scripts_changed: list[str] = field(default_factory=_str_list_factory)
    dependencies_added: list[str] = field(default_factory=_str_list_factory)


class Scaffolder:
    """Scaffold an Eleventy project with formatting, linting, audit and CI gates."""

    def __init__(self, config: "ScaffoldConfig | None" = None) -> None:
        self.config = config or ScaffoldConfig()
        self.report = ScaffoldReport()

    @property
    def root(self) -> Path:
        return self.config.root_path

    @property
    def manifest_path(self) -> Path:
        return self.root / MANIFEST_NAME

    @property
    def context(self) -> dict[str, Any]:
        return self.config.template_context()

    @property
    def steps(self) -> "list[tuple[str, Callable[[], Any]]]":
        """The ordered scaffolding steps with their progress titles."""
        return [
            ("Ensuring package.json exists", self.ensure_manifest),
            ("Installing dev dependencies", lambda: self.install_dependencies(self.config.dev_dependencies)),
            ("Ensuring Eleventy config exists", self.ensure_site_config),
            ("Ensuring source tree exists", self.ensure_source_tree),
            ("Writing Prettier, ESLint and Stylelint configs", self.write_format_lint_configs),
            ("Writing Lighthouse CI config", self.write_audit_config),
            ("Updating package.json scripts", lambda: self.merge_manifest_scripts(self.script_aliases())),
            ("Setting up Husky", self.install_commit_hook),
            ("Writing GitHub Actions workflow", self.write_ci_pipeline),
        ]

    def run(self) -> ScaffoldReport:
        """Run every step in order.

        Returns:
            The report of what changed.
        """
        self.root.mkdir(parents=True, exist_ok=True)
        console.rule(f"[yellow]Scaffolding Eleventy quality gates in {self.root}[/]", align="left")
        for title, step in self.steps:
            console.rule(f"[yellow]{title}[/]", align="left")
            step()
        console.print("[bold green]Eleventy + quality gates configured.[/]")
        return self.report

    def ensure_manifest(self) -> bool:
        """Create ``package.json`` if it is missing.

        Returns:
            True if the manifest was created.
        """
        if self.manifest_path.exists():
            console.print(f"{MANIFEST_NAME} found.")
            return False
        if self.config.install and self.config.use_package_manager_init:
            console.print(f"No {MANIFEST_NAME} found, running the package manager initializer...")
            self.config.executor.init(self.root)
        else:
            console.print(f"No {MANIFEST_NAME} found, writing a default one...")
            Manifest.default(self.manifest_path, self.root.name).save()
        self.report.manifest_created = True
        return True

    def install_dependencies(self, names: Iterable[str]) -> None:
        """Install ``names`` as development dependencies.

        When installation is disabled the specifiers are recorded in the manifest
        instead, so a later ``npm install`` picks them up.
        """
        names = list(names)
        if self.config.install:
            console.print(f"Installing {', '.join(names)}")
            self.config.executor.install_dev(names, self.root)
            return
        manifest = Manifest.load(self.manifest_path)
        added = manifest.add_dev_dependencies(names)
        if added:
            manifest.save()
        self.report.dependencies_added.extend(added)
        console.print(f"[dim]Installation disabled, recorded {len(added)} dev dependencies in {MANIFEST_NAME}[/]")

    def ensure_site_config(self) -> ApplyResult:
        return self._apply(SITE_CONFIG)

    def ensure_source_tree(self) -> ApplyResult:
        """Create the default source tree unless the source root already exists.

        The layout, homepage and stylesheet share the source root as their guard,
        so an existing source root skips all of them, whatever it contains.
        """
        return self._apply(SOURCE_TREE)

    def write_fixed_config(self, path: "str | Path", content: str, *, executable: bool = False) -> Path:
        """Unconditionally overwrite ``path`` (relative to the root) with ``content``.

        Every always-overwrite file of the scaffold is written through here.

        Returns:
            The written path.
        """
        return write_file(self.root / path, content, executable=executable)

    def write_format_lint_configs(self) -> ApplyResult:
        return self._overwrite(FORMAT_LINT_CONFIGS)

    def write_audit_config(self) -> ApplyResult:
        return self._overwrite(AUDIT_CONFIG)

    def script_aliases(self) -> dict[str, str]:
        return get_script_aliases(self.config.executor.run_prefix, self.config.layout.input_dir)

    def merge_manifest_scripts(self, aliases: dict[str, str]) -> list[str]:
        """Merge ``aliases`` into the manifest's scripts.

        ``dev`` and ``build`` are only set when absent; every other alias is
        overwritten with its canonical value.

        Returns:
            Names of the aliases that changed.
        """
        manifest = Manifest.load(self.manifest_path)
        changed = manifest.merge_scripts(aliases, preserve=PRESERVED_SCRIPTS)
        manifest.save()
        self.report.scripts_changed.extend(changed)
        return changed

    def install_commit_hook(self) -> ApplyResult:
        """Run the hook manager installer and write the pre-commit hook."""
        if self.config.install:
            self.config.executor.exec_bin(["husky", "install"], self.root)
        else:
            console.print("[dim]Installation disabled, skipping husky install[/]")
        return self._overwrite(COMMIT_HOOK)

    def write_ci_pipeline(self) -> ApplyResult:
        return self._overwrite(CI_PIPELINE)

    def render(self, entry: TemplateEntry) -> str:
        """Render the canonical content of ``entry``."""
        return render_template(entry.template, self.context)

    def _apply(self, entries: Iterable[TemplateEntry]) -> ApplyResult:
        result = apply_templates(entries, self.root, self.context)
        self.report.files.extend(result)
        return result

    def _overwrite(self, entries: Iterable[TemplateEntry]) -> ApplyResult:
        result = ApplyResult()
        context = self.context
        for entry in entries:
            name = entry.output_path(context)
            result.written.append(self.write_fixed_config(name, self.render(entry), executable=entry.executable))
            console.print(f"[green]Wrote {name}[/]")
        self.report.files.extend(result)
        return result
