"""Project directory creation and manifest output.

Resolves where the new project lives, creates the directory and writes the
generated ``package.json`` into it.  Failures are fatal; nothing that was
already created is rolled back.
"""

from __future__ import annotations

import asyncio
import os
from pathlib import Path

from ..config import Config
from ..errors import ManifestWriteError
from ..utils import ensure_dir, save_json
from .manifest import Manifest, default_manifest


def resolve_project_path(name: str | Path) -> Path:
    """Return the absolute form of a user-supplied project path.

    Relative names are resolved against the current working directory and
    ``..`` segments are collapsed.  Symlinks are left as they are and a
    leading ``~`` is kept literally; the shell expands unquoted tildes.
    """
    return Path(os.path.abspath(name))


class ProjectGenerator:
    """Creates the project directory and writes its manifest."""

    def __init__(self, config: Config | None = None, manifest: Manifest | None = None) -> None:
        self.config = config or Config()
        self.manifest = manifest or default_manifest()

    async def scaffold(self, project_root: str | Path) -> Path:
        """Create *project_root* if needed and write the manifest into it.

        An existing manifest is overwritten; any other file already in the
        directory is left untouched.

        Returns:
            Path of the written manifest.

        Raises:
            ManifestWriteError: If the directory or the file cannot be written.
        """
        root = Path(project_root)
        manifest_path = root / self.config.manifest_filename
        try:
            await asyncio.to_thread(ensure_dir, root)
            return await save_json(self.manifest.to_dict(), manifest_path)
        except OSError as exc:
            raise ManifestWriteError(f"Could not write {manifest_path}: {exc}") from exc
