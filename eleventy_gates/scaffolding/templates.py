"""Template table for scaffolding.

Every file the scaffolder writes is described here by its output path, its
write policy, and the Jinja2 template that renders it. Output paths and
guards may reference template context keys (``{input_dir}``).
"""

from dataclasses import dataclass
from enum import Enum


class WritePolicy(str, Enum):
    """How an existing file at the output path is treated."""

    CREATE_IF_ABSENT = "create-if-absent"
    ALWAYS_OVERWRITE = "always-overwrite"


@dataclass(frozen=True)
class TemplateEntry:
    """A single templated file.

    Attributes:
        path: Output path relative to the project root.
        template: Template file name relative to the bundled templates directory.
        policy: Write policy.
        guard: Path whose existence skips a create-if-absent entry. Defaults to ``path``.
        executable: Mark the written file executable.
    """

    path: str
    template: str
    policy: WritePolicy = WritePolicy.ALWAYS_OVERWRITE
    guard: "str | None" = None
    executable: bool = False

    def output_path(self, context: dict[str, object]) -> str:
        return self.path.format(**context)

    def guard_path(self, context: dict[str, object]) -> str:
        return (self.guard or self.path).format(**context)


SITE_CONFIG: tuple[TemplateEntry, ...] = (
    TemplateEntry("eleventy.config.js", "eleventy.config.js.j2", WritePolicy.CREATE_IF_ABSENT),
)

SOURCE_TREE: tuple[TemplateEntry, ...] = (
    TemplateEntry(
        "{input_dir}/{layouts_dir}/base.njk",
        "src/base.njk.j2",
        WritePolicy.CREATE_IF_ABSENT,
        guard="{input_dir}",
    ),
    TemplateEntry("{input_dir}/index.njk", "src/index.njk.j2", WritePolicy.CREATE_IF_ABSENT, guard="{input_dir}"),
    TemplateEntry("{input_dir}/style.css", "src/style.css.j2", WritePolicy.CREATE_IF_ABSENT, guard="{input_dir}"),
)

FORMAT_LINT_CONFIGS: tuple[TemplateEntry, ...] = (
    TemplateEntry(".prettierrc", "prettierrc.j2"),
    TemplateEntry(".prettierignore", "prettierignore.j2"),
    TemplateEntry(".eslintrc.cjs", "eslintrc.cjs.j2"),
    TemplateEntry(".eslintignore", "eslintignore.j2"),
    TemplateEntry(".stylelintrc.json", "stylelintrc.json.j2"),
    TemplateEntry(".stylelintignore", "stylelintignore.j2"),
)

AUDIT_CONFIG: tuple[TemplateEntry, ...] = (TemplateEntry("lighthouserc.json", "lighthouserc.json.j2"),)

COMMIT_HOOK: tuple[TemplateEntry, ...] = (TemplateEntry(".husky/pre-commit", "pre-commit.j2", executable=True),)

CI_PIPELINE: tuple[TemplateEntry, ...] = (TemplateEntry(".github/workflows/ci-cd.yml", "ci-cd.yml.j2"),)

TEMPLATE_TABLE: tuple[TemplateEntry, ...] = (
    *SITE_CONFIG,
    *SOURCE_TREE,
    *FORMAT_LINT_CONFIGS,
    *AUDIT_CONFIG,
    *COMMIT_HOOK,
    *CI_PIPELINE,
)


def get_script_aliases(run_prefix: str, input_dir: str = "src") -> dict[str, str]:
    """Canonical script aliases merged into the manifest.

    Args:
        run_prefix: Command used by aliases to invoke other aliases (``npm run``).
        input_dir: Source folder linted for stylesheets.

    Returns:
        Alias name to shell command, in merge order.
    """
    prettier_glob = '"**/*.{js,jsx,ts,tsx,css,scss,md,json,njk,html}"'
    return {
        "dev": "npx eleventy --serve --quiet",
        "build": "ELEVENTY_ENV=production npx eleventy",
        "format": f"prettier --write {prettier_glob}",
        "format:check": f"prettier --check {prettier_glob}",
        "lint:js": "eslint .",
        "lint:css": f'stylelint "{input_dir}/**/*.css"',
        "lint": f"{run_prefix} lint:js && {run_prefix} lint:css",
        "precommit": f"{run_prefix} format:check && {run_prefix} lint",
        "lhci": "lhci autorun",
        "prepare": "husky install",
    }
