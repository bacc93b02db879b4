"""Conflict-aware file writing.

A write never clobbers an existing file unless ``force`` is set, and a
dry run never touches the filesystem.  Batch writes keep going after a
failure so the caller sees exactly which files made it to disk.
"""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path

from .models import ArtifactSpec, WriteResult

logger = logging.getLogger(__name__)

CONFLICT_MESSAGE = "File already exists. Use force to overwrite."


async def write_file(
    path: str | Path,
    content: str,
    *,
    force: bool = False,
    dry_run: bool = False,
) -> WriteResult:
    """Write *content* to *path*.

    Args:
        path: Target file.  Missing parent directories are created.
        content: Full file content, written in one go.
        force: Overwrite the file if it already exists.
        dry_run: Report what would happen without writing anything.

    Returns:
        A ``WriteResult``.  Conflicts and ``OSError``s are reported through
        ``success=False`` rather than raised.
    """
    target = Path(path)
    existed = await asyncio.to_thread(target.exists)

    if existed and not force and not dry_run:
        logger.warning("Refusing to overwrite %s", target)
        return WriteResult(
            path=target,
            existed=True,
            written=False,
            success=False,
            conflict=True,
            message=CONFLICT_MESSAGE,
        )

    if dry_run:
        return WriteResult(
            path=target,
            existed=existed,
            written=False,
            success=True,
            message="Dry run - file not written",
        )

    try:
        await asyncio.to_thread(_write_file, target, content)
    except OSError as exc:
        logger.error("Failed to write %s: %s", target, exc)
        return WriteResult(
            path=target,
            existed=existed,
            written=False,
            success=False,
            message=f"Failed to write file: {exc}",
        )

    logger.info("%s %s", "Overwrote" if existed else "Created", target)
    return WriteResult(
        path=target,
        existed=existed,
        written=True,
        success=True,
        message="File overwritten" if existed else "File created",
    )


async def write_files(
    artifacts: list[ArtifactSpec],
    *,
    force: bool = False,
    dry_run: bool = False,
) -> list[WriteResult]:
    """Write every artifact in order and return one result per artifact."""
    results: list[WriteResult] = []
    for artifact in artifacts:
        result = await write_file(
            artifact.path, artifact.content, force=force, dry_run=dry_run
        )
        results.append(result)
    return results


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _write_file(path: Path, content: str) -> None:
    """Synchronous helper: create parent dirs and write content."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
