"""Relative reference computation between generated files.

Import specifiers always use forward slashes, whatever the host separator,
and never carry the target's source extension.
"""

from __future__ import annotations

import posixpath
import re
from pathlib import Path

# Extensions stripped from the last segment of an import specifier.
SOURCE_EXTENSIONS = (".ts", ".tsx", ".mts", ".cts", ".js", ".jsx", ".mjs", ".cjs")

_BACKSLASH = re.compile(r"\\")


def to_posix(path: str | Path) -> str:
    """Render *path* with forward slashes only."""
    return _BACKSLASH.sub("/", str(path))


def relative_path(from_dir: str | Path, to: str | Path) -> str:
    """Return the forward-slash relative path from *from_dir* to *to*.

    Both arguments must be absolute, or both relative to the same root.
    """
    return posixpath.relpath(to_posix(to), to_posix(from_dir))


def strip_extension(specifier: str) -> str:
    for ext in SOURCE_EXTENSIONS:
        if specifier.endswith(ext):
            return specifier[: -len(ext)]
    return specifier


def import_path(from_file: str | Path, to: str | Path) -> str:
    """Compute an import specifier that reaches *to* from *from_file*.

    Examples::

        import_path("src/adapters/s3/s3.adapter.ts", "src/ports/object-storage")
            -> "../../ports/object-storage"
        import_path("src/ports/a/a.service.ts", "src/ports/a/a.token.ts")
            -> "./a.token"
    """
    from_dir = posixpath.dirname(to_posix(from_file)) or "."
    specifier = strip_extension(relative_path(from_dir, to))
    if specifier == ".." or specifier.startswith("../") or specifier.startswith("./"):
        return specifier
    return f"./{specifier}"
