from pathlib import Path
from typing import IO, Any, Optional

from click import ClickException, group, option, version_option
from click import Path as ClickPath

from eleventy_gates.__metadata__ import __project__, __version__


class GatesCLIException(ClickException):
    """Print the error in red and exit with status 1."""

    def show(self, file: "Optional[IO[Any]]" = None) -> None:  # noqa: ARG002
        from rich.markup import escape

        from eleventy_gates.utils import console

        console.print(f"[bold red]{escape(self.format_message())}[/]")


@group(name="eleventy-gates")
@version_option(version=__version__, prog_name=__project__)
def gates_group() -> None:
    """Scaffold Eleventy sites with quality gates."""


@gates_group.command(
    name="init",
    help="Scaffold Eleventy and its quality gates into a project directory.",
)
@option(
    "--root-path",
    type=ClickPath(dir_okay=True, file_okay=False, path_type=Path),
    help="The project directory to scaffold.  Defaults to the current working directory.",
    default=None,
    required=False,
)
@option("--site-title", type=str, help="Title used by the default layout and homepage.", default=None)
@option("--author", type=str, help="Author shown in the footer.  Defaults to the directory name.", default=None)
@option("--node-version", type=str, help="Node.js version used by the CI workflow.", default=None)
@option(
    "--no-install",
    help="Do not run the package manager.  Dev dependencies are recorded in package.json instead.",
    type=bool,
    default=False,
    required=False,
    show_default=True,
    is_flag=True,
)
@option("--verbose", type=bool, help="Enable verbose output.", default=False, is_flag=True)
def gates_init(
    root_path: "Optional[Path]",
    site_title: "Optional[str]",
    author: "Optional[str]",
    node_version: "Optional[str]",
    no_install: "bool",
    verbose: "bool",
) -> None:
    """Run the scaffolder."""
    from eleventy_gates.config import ScaffoldConfig
    from eleventy_gates.exceptions import EleventyGatesError
    from eleventy_gates.scaffold import Scaffolder
    from eleventy_gates.utils import configure_logging, console

    configure_logging(verbose)
    config = ScaffoldConfig(
        root_dir=root_path,
        site_title=site_title,
        author=author,
        node_version=node_version,
        install=False if no_install else None,
    )
    try:
        report = Scaffolder(config).run()
    except EleventyGatesError as e:
        raise GatesCLIException(str(e)) from e

    console.print(f"[dim]  {len(report.files.written)} files written, {len(report.files.skipped)} kept[/]")
    console.print()
    console.print("Try:")
    for alias in ("format:check", "lint", "build", "dev"):
        console.print(f"  {config.executor.run_prefix} {alias}")
    console.print()
    console.print("Then commit and push to trigger CI on GitHub.")


@gates_group.command(
    name="status",
    help="Check whether a project matches the canonical scaffold.",
)
@option(
    "--root-path",
    type=ClickPath(dir_okay=True, file_okay=False, path_type=Path),
    help="The project directory to check.  Defaults to the current working directory.",
    default=None,
    required=False,
)
@option("--verbose", type=bool, help="Enable verbose output.", default=False, is_flag=True)
def gates_status(root_path: "Optional[Path]", verbose: "bool") -> None:
    """Report scaffold status."""
    import sys

    from eleventy_gates.config import ScaffoldConfig
    from eleventy_gates.scaffold import Scaffolder
    from eleventy_gates.status import report_status
    from eleventy_gates.utils import configure_logging

    configure_logging(verbose)
    if not report_status(Scaffolder(ScaffoldConfig(root_dir=root_path))):
        sys.exit(1)
