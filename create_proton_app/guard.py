"""Node.js detection.

Advisory only: ``npm`` needs Node, but the install step reports its own
failure if Node is missing.  The interpreter check lives in
:mod:`create_proton_app.runtime`.
"""

from __future__ import annotations

import re

from .utils import run_command

MIN_NODE = "6.0.0"


def parse_version(text: str) -> tuple[int, int, int]:
    """Parse ``v20.19.4`` / ``20.19.4`` into a tuple; ``(0, 0, 0)`` if unparseable."""
    m = re.match(r"^v?(\d+)\.(\d+)\.(\d+)", text.strip())
    return tuple(map(int, m.groups())) if m else (0, 0, 0)


async def detect_node_version() -> tuple[int, int, int] | None:
    """Return the installed Node.js version, or ``None`` if ``node`` is unavailable."""
    try:
        returncode, stdout, _ = await run_command(["node", "-v"], timeout=10)
    except OSError:
        return None
    if returncode != 0:
        return None
    return parse_version(stdout)


def node_version_ok(version: tuple[int, int, int] | None, minimum: str = MIN_NODE) -> bool:
    """Return ``True`` if a detected Node version satisfies *minimum*."""
    return version is not None and version >= parse_version(minimum)
