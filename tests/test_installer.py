"""Unit tests for the dependency installer (create_proton_app.installer)."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import AsyncMock, patch

import pytest

from create_proton_app.errors import InstallError, ScaffoldError
from create_proton_app.installer import build_install_command, install_dependencies


class TestBuildInstallCommand:
    @pytest.mark.unit
    def test_default(self):
        assert build_install_command() == ["npm", "install"]

    @pytest.mark.unit
    def test_verbose(self):
        assert build_install_command("npm", verbose=True) == ["npm", "install", "--verbose"]

    @pytest.mark.unit
    def test_other_package_manager(self):
        assert build_install_command("yarn") == ["yarn", "install"]


class TestInstallDependencies:
    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_success_runs_in_project_root(self, fake_npm, tmp_path: Path, capsys):
        log = fake_npm(exit_code=0)
        project = tmp_path / "myapp"
        project.mkdir()

        await install_dependencies(project)

        cwd, args = log.read_text(encoding="utf-8").splitlines()
        assert Path(cwd).resolve() == project.resolve()
        assert args == "install"
        captured = capsys.readouterr()
        assert "fake npm install" in captured.out
        assert "fake npm warning" in captured.err

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_verbose_flag_forwarded(self, fake_npm, tmp_path: Path):
        log = fake_npm(exit_code=0)

        await install_dependencies(tmp_path, verbose=True)

        assert log.read_text(encoding="utf-8").splitlines()[1] == "install --verbose"

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_nonzero_exit_raises(self, fake_npm, tmp_path: Path):
        fake_npm(exit_code=1)

        with pytest.raises(InstallError) as exc_info:
            await install_dependencies(tmp_path)

        err = exc_info.value
        assert str(err) == "npm install has failed."
        assert err.returncode == 1
        assert err.command == ["npm", "install"]
        assert isinstance(err, ScaffoldError)

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_missing_executable_raises(self, tmp_path: Path, monkeypatch):
        monkeypatch.setenv("PATH", str(tmp_path))

        with pytest.raises(InstallError, match="not found on PATH"):
            await install_dependencies(tmp_path, package_manager="pnpm")

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_spawn_failure_raises(self, tmp_path: Path):
        with patch("create_proton_app.installer.shutil.which", return_value="/usr/bin/npm"), patch(
            "create_proton_app.installer.stream_command",
            AsyncMock(side_effect=PermissionError("denied")),
        ):
            with pytest.raises(InstallError, match="denied"):
                await install_dependencies(tmp_path)

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_resolved_executable_is_spawned(self, tmp_path: Path):
        stream = AsyncMock(return_value=0)
        with patch(
            "create_proton_app.installer.shutil.which", return_value="/opt/node/bin/npm.cmd"
        ), patch("create_proton_app.installer.stream_command", stream):
            await install_dependencies(tmp_path, verbose=True)

        stream.assert_awaited_once_with(
            ["/opt/node/bin/npm.cmd", "install", "--verbose"], cwd=tmp_path
        )
