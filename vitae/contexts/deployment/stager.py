"""
Build Staging

Copies the built page from dist/ into build/, the directory the deploy command
uploads. The build directory is emptied first so stale files never ship.
"""

import shutil
from pathlib import Path
from typing import List

from vitae.contexts.deployment.exceptions import OutputDirectoryNotFoundError
from vitae.contexts.deployment.logger import _log_debug, _log_info


def stage_build(output_dir: Path, build_dir: Path) -> List[Path]:
    """
    Replace build_dir with a copy of output_dir.

    Args:
        output_dir: Directory holding the built page (dist/)
        build_dir: Deployable directory (build/)

    Returns:
        Staged files, relative to build_dir, sorted

    Raises:
        OutputDirectoryNotFoundError: If output_dir does not exist
    """
    if not output_dir.is_dir():
        raise OutputDirectoryNotFoundError(output_dir)

    if build_dir.exists():
        _log_debug(f"Emptying {build_dir}")
        shutil.rmtree(build_dir)

    shutil.copytree(output_dir, build_dir)

    staged = sorted(path.relative_to(build_dir) for path in build_dir.rglob("*") if path.is_file())
    _log_info(f"Staged {len(staged)} file(s) into {build_dir}")
    return staged
