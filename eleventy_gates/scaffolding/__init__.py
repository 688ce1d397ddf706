"""Project scaffolding module for eleventy-gates.

Templated files are described by a declarative table of entries, each with a
write policy:

- create-if-absent: written only when the guard path does not exist
- always-overwrite: replaced with the canonical render on every run
"""

from eleventy_gates.scaffolding.generator import (
    ApplyResult,
    apply_template,
    apply_templates,
    render_template,
    write_file,
)
from eleventy_gates.scaffolding.templates import TEMPLATE_TABLE, TemplateEntry, WritePolicy, get_script_aliases

__all__ = [
    "TEMPLATE_TABLE",
    "ApplyResult",
    "TemplateEntry",
    "WritePolicy",
    "apply_template",
    "apply_templates",
    "get_script_aliases",
    "render_template",
    "write_file",
]
