"""Shared pytest fixtures for the create-proton-app test suite.

Provides reusable fixtures for:
- A small stand-in template tree
- A fake package manager executable on ``PATH``
- Patched connectivity and Node.js detection for pipeline runs
"""

from __future__ import annotations

import os
import stat
import sys
import textwrap
from pathlib import Path
from unittest.mock import AsyncMock, patch

import pytest

from create_proton_app.config import Config


# ---------------------------------------------------------------------------
# Paths & Directories
# ---------------------------------------------------------------------------

@pytest.fixture
def template_dir(tmp_path: Path) -> Path:
    """A template tree with a nested directory and a dotfile."""
    root = tmp_path / "template"
    (root / "src" / "components").mkdir(parents=True)
    (root / "index.js").write_text("console.log('hi');\n", encoding="utf-8")
    (root / ".babelrc").write_text('{"presets": []}\n', encoding="utf-8")
    (root / "src" / "components" / "Button.js").write_text(
        "export default null;\n", encoding="utf-8"
    )
    return root


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run the test from an empty working directory."""
    cwd = tmp_path / "work"
    cwd.mkdir()
    monkeypatch.chdir(cwd)
    return cwd


@pytest.fixture
def config(template_dir: Path) -> Config:
    """Pipeline configuration that copies the stand-in template."""
    return Config(template_dir=template_dir)


# ---------------------------------------------------------------------------
# Fake package manager
# ---------------------------------------------------------------------------

@pytest.fixture
def fake_npm(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    """Put a fake ``npm`` first on ``PATH``.

    Returns a factory taking the exit code the fake should return.  The fake
    prints its arguments, writes a line to stderr and records its working
    directory in ``npm-invocation.txt`` next to itself.

    Usage:
        def test_install(fake_npm):
            log = fake_npm(exit_code=0)
            ...
            assert "install" in log.read_text()
    """
    if sys.platform == "win32":
        pytest.skip("fake package manager is a POSIX shell script")

    bin_dir = tmp_path / "bin"
    bin_dir.mkdir()
    log = bin_dir / "npm-invocation.txt"

    def factory(exit_code: int = 0) -> Path:
        script = bin_dir / "npm"
        script.write_text(
            textwrap.dedent(
                f"""\
                #!/bin/sh
                echo "fake npm $*"
                echo "fake npm warning" >&2
                printf '%s\\n%s\\n' "$(pwd -P)" "$*" > "{log}"
                exit {exit_code}
                """
            ),
            encoding="utf-8",
        )
        script.chmod(script.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
        monkeypatch.setenv("PATH", f"{bin_dir}{os.pathsep}{os.environ.get('PATH', '')}")
        return log

    return factory


# ---------------------------------------------------------------------------
# Patched network / runtime probes
# ---------------------------------------------------------------------------

@pytest.fixture
def online():
    """Report the host as online and Node.js as present."""
    with patch(
        "create_proton_app.pipeline.is_online", AsyncMock(return_value=True)
    ) as probe, patch(
        "create_proton_app.pipeline.detect_node_version", AsyncMock(return_value=(20, 19, 4))
    ):
        yield probe


@pytest.fixture
def offline():
    """Report the host as offline."""
    with patch(
        "create_proton_app.pipeline.is_online", AsyncMock(return_value=False)
    ) as probe, patch(
        "create_proton_app.pipeline.detect_node_version", AsyncMock(return_value=(20, 19, 4))
    ):
        yield probe
