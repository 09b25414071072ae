"""Verbatim copy of the bundled starter template.

The template tree is copied file for file; nothing is rendered or
substituted.  The copy is awaited by the pipeline, so a failure here stops
the run before the connectivity check or the install step.
"""

from __future__ import annotations

import asyncio
import shutil
from pathlib import Path

from ..config import BUNDLED_TEMPLATE_DIR
from ..errors import TemplateCopyError

DEFAULT_TEMPLATE_DIR = BUNDLED_TEMPLATE_DIR

# Build artefacts that can appear next to the bundled template in a checkout.
_IGNORE = shutil.ignore_patterns("__pycache__", "*.pyc", ".DS_Store")


def _copy_tree(template_dir: Path, project_root: Path) -> list[Path]:
    written: list[Path] = []

    def _copy(src: str, dst: str) -> str:
        result = shutil.copy2(src, dst)
        written.append(Path(result))
        return result

    shutil.copytree(
        template_dir,
        project_root,
        ignore=_IGNORE,
        copy_function=_copy,
        dirs_exist_ok=True,
    )
    return sorted(written)


async def copy_template(
    template_dir: str | Path = DEFAULT_TEMPLATE_DIR,
    project_root: str | Path = ".",
) -> list[Path]:
    """Copy every file and directory under *template_dir* into *project_root*.

    Files with the same relative path are overwritten; other files in
    *project_root* are kept.

    Returns:
        Sorted list of the files written.

    Raises:
        TemplateCopyError: If the template is missing or any copy fails.
    """
    source = Path(template_dir)
    if not source.is_dir():
        raise TemplateCopyError(f"Template directory not found: {source}")

    try:
        return await asyncio.to_thread(_copy_tree, source, Path(project_root))
    except OSError as exc:
        raise TemplateCopyError(f"Could not copy template files: {exc}") from exc
