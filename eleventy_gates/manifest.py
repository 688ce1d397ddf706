"""Project manifest (``package.json``) handling.

Reads and writes are non-destructive: unknown keys and their order survive a
round trip, and mutations only touch the ``scripts`` and ``devDependencies``
tables.
"""

import os
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any

import msgspec

from eleventy_gates.exceptions import ManifestParseError, ManifestWriteError

__all__ = ("MANIFEST_NAME", "Manifest", "split_package_spec")

MANIFEST_NAME = "package.json"


def split_package_spec(spec: str) -> tuple[str, str]:
    """Split an npm package specifier into name and version range.

    Scoped names keep their leading ``@``; a bare name maps to ``*``.

    Args:
        spec: Specifier such as ``eslint@8`` or ``@lhci/cli``.

    Returns:
        The package name and version range.
    """
    name, sep, version = spec.rpartition("@")
    if not sep or not name:
        return spec, "*"
    return name, version or "*"


class Manifest:
    """A decoded ``package.json`` bound to its path on disk."""

    def __init__(self, path: Path, data: "dict[str, Any] | None" = None) -> None:
        self.path = path
        self.data: dict[str, Any] = data if data is not None else {}

    @classmethod
    def load(cls, path: Path) -> "Manifest":
        """Decode the manifest at ``path``.

        Raises:
            ManifestParseError: If the file cannot be read, is not valid JSON, or its
                top level, ``scripts`` or ``devDependencies`` is not an object.

        Returns:
            The loaded manifest.
        """
        try:
            data = msgspec.json.decode(path.read_bytes())
        except OSError as e:
            raise ManifestParseError(str(path), f"could not read file: {e.strerror or e}") from e
        except msgspec.DecodeError as e:
            raise ManifestParseError(str(path), str(e)) from e
        if not isinstance(data, dict):
            raise ManifestParseError(str(path), f"expected a JSON object, found {type(data).__name__}")
        for key in ("scripts", "devDependencies"):
            table = data.get(key, {})
            if not isinstance(table, dict):
                raise ManifestParseError(str(path), f"expected {key!r} to be an object, found {type(table).__name__}")
        return cls(path, data)

    @classmethod
    def default(cls, path: Path, name: str) -> "Manifest":
        """Build the manifest ``npm init -y`` would create for a project named ``name``.

        Returns:
            An unsaved manifest.
        """
        return cls(
            path,
            {
                "name": _package_name(name),
                "version": "1.0.0",
                "description": "",
                "main": "index.js",
                "scripts": {"test": 'echo "Error: no test specified" && exit 1'},
                "keywords": [],
                "author": "",
                "license": "ISC",
            },
        )

    @property
    def scripts(self) -> dict[str, str]:
        return self._table("scripts")

    @property
    def dev_dependencies(self) -> dict[str, str]:
        return self._table("devDependencies")

    def _table(self, key: str) -> dict[str, Any]:
        return self.data.setdefault(key, {})

    def merge_scripts(self, aliases: Mapping[str, str], preserve: Iterable[str] = ()) -> list[str]:
        """Merge script aliases into the manifest.

        Aliases named in ``preserve`` are only set when missing; every other alias
        is overwritten. Unrelated aliases are left alone.

        Args:
            aliases: Canonical alias table.
            preserve: Aliases a project may customize.

        Returns:
            Names of the aliases whose value changed.
        """
        keep = set(preserve)
        scripts = self.scripts
        changed: list[str] = []
        for name, command in aliases.items():
            if name in keep and scripts.get(name):
                continue
            if scripts.get(name) != command:
                scripts[name] = command
                changed.append(name)
        return changed

    def add_dev_dependencies(self, specs: Iterable[str]) -> list[str]:
        """Record development dependencies that are not yet listed.

        Existing version constraints are never modified.

        Returns:
            Names of the dependencies that were added.
        """
        dependencies = self.dev_dependencies
        added: list[str] = []
        for spec in specs:
            name, version = split_package_spec(spec)
            if name not in dependencies:
                dependencies[name] = version
                added.append(name)
        return added

    def encode(self) -> bytes:
        """Encode the manifest as two-space indented JSON with a trailing newline."""
        return msgspec.json.format(msgspec.json.encode(self.data), indent=2) + b"\n"

    def save(self) -> None:
        """Write the manifest through a temporary sibling file.

        Raises:
            ManifestWriteError: If the file cannot be written.
        """
        tmp_path = self.path.with_name(f".{self.path.name}.tmp")
        try:
            tmp_path.write_bytes(self.encode())
            os.replace(tmp_path, self.path)
        except OSError as e:
            tmp_path.unlink(missing_ok=True)
            raise ManifestWriteError(str(self.path)) from e


def _package_name(name: str) -> str:
    normalized = "-".join(name.strip().lower().split())
    return normalized.lstrip("._") or "project"
