"""Scaffold status checks.

Compares a project directory against the canonical scaffold without writing
anything.
"""

import os
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from rich.markup import escape
from rich.table import Table

from eleventy_gates.config import PRESERVED_SCRIPTS
from eleventy_gates.exceptions import ManifestParseError
from eleventy_gates.manifest import MANIFEST_NAME, Manifest
from eleventy_gates.scaffolding import TEMPLATE_TABLE, WritePolicy
from eleventy_gates.utils import console, read_text_file

if TYPE_CHECKING:
    from eleventy_gates.scaffold import Scaffolder


class CheckState(str, Enum):
    """Result of comparing one item with the canonical scaffold."""

    OK = "ok"
    MISSING = "missing"
    MODIFIED = "modified"
    INVALID = "invalid"


@dataclass
class StatusItem:
    """A single checked file or script alias."""

    name: str
    kind: str
    state: CheckState
    detail: str = ""

    @property
    def healthy(self) -> bool:
        return self.state is CheckState.OK


def check_files(scaffolder: "Scaffolder") -> list[StatusItem]:
    """Check every templated file.

    Create-if-absent files only need their guard to exist; always-overwrite
    files must match the canonical render byte for byte, and executable
    entries must keep their executable bit.
    """
    items: list[StatusItem] = []
    context = scaffolder.context
    for entry in TEMPLATE_TABLE:
        name = entry.output_path(context)
        path = scaffolder.root / name
        if entry.policy is WritePolicy.CREATE_IF_ABSENT:
            guarded = (scaffolder.root / entry.guard_path(context)).exists()
            state = CheckState.OK if guarded else CheckState.MISSING
            detail = "" if path.exists() or not guarded else f"skipped, {entry.guard_path(context)} exists"
            items.append(StatusItem(name, entry.policy.value, state, detail))
            continue
        if not path.exists():
            items.append(StatusItem(name, entry.policy.value, CheckState.MISSING))
            continue
        if read_text_file(path) != scaffolder.render(entry):
            items.append(StatusItem(name, entry.policy.value, CheckState.MODIFIED))
        elif entry.executable and not os.access(path, os.X_OK):
            items.append(StatusItem(name, entry.policy.value, CheckState.MODIFIED, "not executable"))
        else:
            items.append(StatusItem(name, entry.policy.value, CheckState.OK))
    return items


def check_scripts(scaffolder: "Scaffolder") -> list[StatusItem]:
    """Check the manifest's script aliases against the canonical table."""
    if not scaffolder.manifest_path.exists():
        return [StatusItem(MANIFEST_NAME, "manifest", CheckState.MISSING)]
    try:
        manifest = Manifest.load(scaffolder.manifest_path)
    except ManifestParseError as e:
        return [StatusItem(MANIFEST_NAME, "manifest", CheckState.INVALID, str(e))]

    items: list[StatusItem] = []
    scripts = manifest.scripts
    for alias, command in scaffolder.script_aliases().items():
        current = scripts.get(alias)
        if not current:
            state = CheckState.MISSING
        elif alias in PRESERVED_SCRIPTS or current == command:
            state = CheckState.OK
        else:
            state = CheckState.MODIFIED
        items.append(StatusItem(alias, "script", state, current or ""))
    return items


def report_status(scaffolder: "Scaffolder") -> bool:
    """Print the scaffold status table.

    Returns:
        True if every file and script alias is canonical.
    """
    items = [*check_files(scaffolder), *check_scripts(scaffolder)]

    table = Table(title=f"Scaffold status for {scaffolder.root}")
    table.add_column("Item")
    table.add_column("Rule")
    table.add_column("State")
    table.add_column("Detail", overflow="fold")
    colors = {
        CheckState.OK: "green",
        CheckState.MISSING: "red",
        CheckState.MODIFIED: "yellow",
        CheckState.INVALID: "red",
    }
    for item in items:
        table.add_row(item.name, item.kind, f"[{colors[item.state]}]{item.state.value}[/]", escape(item.detail))
    console.print(table)

    healthy = all(item.healthy for item in items)
    if healthy:
        console.print("[green]✓ Project matches the canonical scaffold[/]")
    else:
        console.print("[yellow]! Run `eleventy-gates init` to restore the canonical scaffold[/]")
    return healthy
