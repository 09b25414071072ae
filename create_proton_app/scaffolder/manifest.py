"""The generated ``package.json`` manifest.

The manifest is built once at scaffold time and serialised into the new
project.  Its ``name`` and ``version`` are fixed placeholders: the project
name given on the command line is not written into it.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_SCRIPTS: dict[str, str] = {
    "start": "babel-watch index.js",
    "build": "babel index.js -d bin/",
    "pack": "electron-builder --dir",
    "dist": "electron-builder",
}

DEFAULT_DEPENDENCIES: dict[str, str] = {
    "proton-native": "latest",
    "react": "^16.8.6",
}

DEFAULT_DEV_DEPENDENCIES: dict[str, str] = {
    "@babel/cli": "^7.4.4",
    "@babel/core": "^7.4.4",
    "@babel/preset-env": "^7.4.4",
    "@babel/preset-react": "^7.0.0",
    "babel-watch": "^7.0.0",
    "electron-builder": "latest",
}


class MacBuild(BaseModel):
    """macOS packaging options; a ``null`` identity disables code signing."""

    identity: str | None = None


class BuildSettings(BaseModel):
    """``build`` section consumed by electron-builder / Proton Native."""

    model_config = ConfigDict(populate_by_name=True)

    proton_node_version: str = Field(default="current", alias="protonNodeVersion")
    mac: MacBuild = Field(default_factory=MacBuild)


class Manifest(BaseModel):
    """Pydantic model of the project's ``package.json``."""

    model_config = ConfigDict(populate_by_name=True)

    name: str = "app"
    version: str = "0.0.1"
    private: bool = True
    scripts: dict[str, str] = Field(default_factory=lambda: dict(DEFAULT_SCRIPTS))
    dependencies: dict[str, str] = Field(default_factory=lambda: dict(DEFAULT_DEPENDENCIES))
    dev_dependencies: dict[str, str] = Field(
        default_factory=lambda: dict(DEFAULT_DEV_DEPENDENCIES), alias="devDependencies"
    )
    build: BuildSettings = Field(default_factory=BuildSettings)

    def to_dict(self) -> dict[str, Any]:
        """Return the manifest keyed the way ``package.json`` expects."""
        return self.model_dump(by_alias=True)


def default_manifest() -> Manifest:
    """Return the manifest written into every new project."""
    return Manifest()
