"""Project scaffolding generator.

This module handles rendering template entries and applying their write
policies to a project directory.
"""

import stat
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any

from eleventy_gates.scaffolding.templates import WritePolicy
from eleventy_gates.utils import console, get_template_dir, logger

if TYPE_CHECKING:
    from jinja2 import Environment

    from eleventy_gates.scaffolding.templates import TemplateEntry


def _path_list_factory() -> list[Path]:
    return []


@dataclass
class ApplyResult:
    """Paths touched while applying template entries.

    Attributes:
        written: Files that were (re)written.
        skipped: Files left alone because their guard already existed.
    """

    written: list[Path] = field(default_factory=_path_list_factory)
    skipped: list[Path] = field(default_factory=_path_list_factory)

    def extend(self, other: "ApplyResult") -> None:
        self.written.extend(other.written)
        self.skipped.extend(other.skipped)


def quote_string(value: Any) -> str:
    """Render ``value`` as a double-quoted string literal.

    The JSON string form is also a valid YAML double-quoted scalar and a valid
    Nunjucks string literal, so user text can be embedded in front matter and
    template expressions.
    """
    import msgspec

    return msgspec.json.encode(str(value)).decode()


def get_environment(template_dir: "Path | None" = None) -> "Environment":
    """Build the Jinja2 environment for the bundled templates.

    Templates are rendered with autoescaping disabled because the output is code
    and configuration files, not HTML.

    Args:
        template_dir: Directory to load templates from. Defaults to the bundled templates.

    Returns:
        The configured environment.
    """
    from jinja2 import Environment, FileSystemLoader, StrictUndefined

    environment = Environment(
        loader=FileSystemLoader(str(template_dir or get_template_dir())),
        keep_trailing_newline=True,
        autoescape=False,  # noqa: S701
        undefined=StrictUndefined,
    )
    environment.filters["quote"] = quote_string
    return environment


def render_template(name: str, context: dict[str, Any], environment: "Environment | None" = None) -> str:
    """Render a bundled template with the given context.

    Args:
        name: Template name relative to the templates directory.
        context: Dictionary of template variables.
        environment: Optional pre-built environment.

    Returns:
        Rendered template content.
    """
    env = environment or get_environment()
    return env.get_template(name).render(**context)


def write_file(output_path: Path, content: str, *, executable: bool = False) -> Path:
    """Write ``content`` to ``output_path``, replacing any existing file.

    Args:
        output_path: Destination file. Missing parent directories are created.
        content: Text to write.
        executable: Add the executable bits for user, group and others.

    Returns:
        The written path.
    """
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(content, encoding="utf-8")
    if executable:
        mode = output_path.stat().st_mode
        output_path.chmod(mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    logger.debug("Wrote %s", output_path)
    return output_path


def apply_template(
    entry: "TemplateEntry",
    root: Path,
    context: dict[str, Any],
    environment: "Environment | None" = None,
    *,
    check_guard: bool = True,
) -> bool:
    """Apply one template entry to ``root`` according to its write policy.

    Args:
        entry: The template entry.
        root: Project root directory.
        context: Template context dictionary.
        environment: Optional pre-built environment.
        check_guard: Evaluate the create-if-absent guard. Groups evaluate their guards up front.

    Returns:
        True if the file was written, False if it was skipped.
    """
    output_path = root / entry.output_path(context)

    guard_path = root / entry.guard_path(context)
    if check_guard and entry.policy is WritePolicy.CREATE_IF_ABSENT and guard_path.exists():
        logger.debug("Guard %s exists, skipping %s", entry.guard_path(context), output_path)
        return False

    write_file(output_path, render_template(entry.template, context, environment), executable=entry.executable)
    return True


def apply_templates(entries: "Iterable[TemplateEntry]", root: Path, context: dict[str, Any]) -> ApplyResult:
    """Apply a group of template entries.

    Guards are evaluated before anything in the group is written, so a group
    sharing one guard is created all-or-nothing.

    Args:
        entries: Template entries to apply.
        root: Project root directory.
        context: Template context dictionary.

    Returns:
        The written and skipped paths.
    """
    environment = get_environment()
    entries = list(entries)
    blocked = {
        entry
        for entry in entries
        if entry.policy is WritePolicy.CREATE_IF_ABSENT and (root / entry.guard_path(context)).exists()
    }
    result = ApplyResult()
    for entry in entries:
        output_path = root / entry.output_path(context)
        if entry in blocked:
            console.print(f"[yellow]Skipping {entry.output_path(context)} ({entry.guard_path(context)} exists)[/]")
            result.skipped.append(output_path)
            continue
        apply_template(entry, root, context, environment, check_guard=False)
        console.print(f"[green]Created {entry.output_path(context)}[/]")
        result.written.append(output_path)
    return result
