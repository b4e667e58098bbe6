"""
Artifact Writer
===============

Writes a RenderResult to disk. Every file is staged next to its target and
existing targets are set aside before anything is moved into place. If any
step fails, moved files are removed and the set-aside files are restored, so
the output directory holds either the complete new set or what it held before.
"""

import os
from pathlib import Path
from typing import Dict, List, Union

from dockforge_common import ArtifactWriteError, get_logger

from .templates import RenderResult

logger = get_logger(__name__)

STAGING_SUFFIX = ".dockforge-tmp"
BACKUP_SUFFIX = ".dockforge-bak"


def find_conflicts(result: RenderResult, output_dir: Union[str, Path]) -> List[Path]:
    """Paths in ``output_dir`` that writing ``result`` would overwrite."""
    output_dir = Path(output_dir)
    return [output_dir / artifact.filename for artifact in result if (output_dir / artifact.filename).exists()]


def _sibling(path: Path, suffix: str) -> Path:
    return path.with_name(path.name + suffix)


def _rollback(staged: List[Path], moved: List[Path], backups: Dict[Path, Path]) -> None:
    """Undo a partial write: drop new files, restore set-aside ones, remove staging files."""
    for target in moved:
        if target not in backups:
            try:
                target.unlink()
            except OSError as e:
                logger.warning("Could not remove partially written artifact", path=str(target), error=str(e))
    for target, backup in backups.items():
        try:
            os.replace(backup, target)
        except OSError as e:
            logger.warning("Could not restore original file", path=str(target), backup=str(backup), error=str(e))
    for temp in staged:
        if temp.exists():
            temp.unlink()


def write_artifacts(
    result: RenderResult,
    output_dir: Union[str, Path] = ".",
    force: bool = False,
) -> List[Path]:
    """
    Write every artifact of a render to ``output_dir``.

    Args:
        result: Rendered artifacts
        output_dir: Target directory (created if missing)
        force: Overwrite existing files

    Returns:
        Paths written, in artifact order

    Raises:
        ArtifactWriteError: If files exist and ``force`` is false, a target is
            a directory, or writing fails (the directory is left as it was)
    """
    output_dir = Path(output_dir)
    conflicts = find_conflicts(result, output_dir)
    directories = [str(path) for path in conflicts if path.is_dir()]
    if directories:
        raise ArtifactWriteError(
            f"Cannot overwrite directory: {', '.join(directories)}", conflicts=directories
        )
    if conflicts and not force:
        names = [str(path) for path in conflicts]
        raise ArtifactWriteError(
            f"Refusing to overwrite existing file(s): {', '.join(names)}", conflicts=names
        )

    staged: List[Path] = []
    targets: List[Path] = []
    backups: Dict[Path, Path] = {}
    moved: List[Path] = []
    try:
        output_dir.mkdir(parents=True, exist_ok=True)
        for artifact in result:
            target = output_dir / artifact.filename
            temp = _sibling(target, STAGING_SUFFIX)
            temp.write_text(artifact.content, encoding="utf-8")
            staged.append(temp)
            targets.append(target)

        for target in targets:
            if target.exists():
                backup = _sibling(target, BACKUP_SUFFIX)
                os.replace(target, backup)
                backups[target] = backup

        for temp, target in zip(staged, targets):
            os.replace(temp, target)
            moved.append(target)
    except OSError as e:
        _rollback(staged, moved, backups)
        raise ArtifactWriteError(f"Failed to write artifacts to {output_dir}: {e}") from e

    for backup in backups.values():
        backup.unlink()
    for target in targets:
        logger.info("Wrote artifact", path=str(target), bytes=target.stat().st_size)
    return targets
