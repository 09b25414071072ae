"""Dependency installation through the host package manager.

The package manager is an opaque subprocess: this module builds its argument
list, runs it inside the new project directory and forwards its output to
the console as it arrives.
"""

from __future__ import annotations

import shutil
from pathlib import Path

from .errors import InstallError
from .utils import stream_command


def build_install_command(package_manager: str = "npm", verbose: bool = False) -> list[str]:
    """Return the argument list for ``<package_manager> install``."""
    args = [package_manager, "install"]
    if verbose:
        args.append("--verbose")
    return args


async def install_dependencies(
    project_root: str | Path,
    package_manager: str = "npm",
    verbose: bool = False,
) -> None:
    """Run ``<package_manager> install`` in *project_root*.

    The executable is looked up on ``PATH`` (``shutil.which`` also finds
    ``npm.cmd`` on Windows).  Returns when the process exits with code 0.

    Raises:
        InstallError: If the executable cannot be found or started, or the
            process exits non-zero.
    """
    command = build_install_command(package_manager, verbose)
    display = " ".join(command)

    executable = shutil.which(package_manager)
    if executable is None:
        raise InstallError(
            f"{display} has failed: '{package_manager}' was not found on PATH.",
            command=command,
        )

    try:
        returncode = await stream_command([executable, *command[1:]], cwd=project_root)
    except OSError as exc:
        raise InstallError(f"{display} has failed: {exc}", command=command) from exc

    if returncode != 0:
        raise InstallError(f"{display} has failed.", command=command, returncode=returncode)
