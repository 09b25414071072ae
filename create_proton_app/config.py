"""create-proton-app configuration.

Typed configuration for the scaffold pipeline.  Settings use a Pydantic v2
model so they are validated at construction time, whether they come from
defaults, environment variables or CLI flags.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, Field

DEFAULT_PROBE_URL = "https://registry.npmjs.org/"

PACKAGE_MANAGERS: tuple[str, ...] = ("npm", "yarn", "pnpm")

BUNDLED_TEMPLATE_DIR = Path(__file__).parent / "template"


class Config(BaseModel):
    """Global create-proton-app configuration.

    Instances are created once by the CLI entry point and then passed to
    :class:`~create_proton_app.pipeline.ScaffoldPipeline`.
    """

    package_manager: Literal["npm", "yarn", "pnpm"] = Field(
        default="npm", description="Executable used to install dependencies"
    )
    probe_url: str = Field(
        default=DEFAULT_PROBE_URL, description="URL probed to decide whether the host is online"
    )
    probe_timeout: float = Field(default=5.0, gt=0, description="Probe timeout in seconds")
    template_dir: Path | None = Field(
        default=None, description="Template tree to copy (defaults to the bundled one)"
    )
    manifest_filename: str = Field(default="package.json")

    @property
    def template_path(self) -> Path:
        """Effective template directory."""
        return self.template_dir or BUNDLED_TEMPLATE_DIR

    @classmethod
    def from_env(cls, **overrides: Any) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            CPA_PACKAGE_MANAGER, CPA_PROBE_URL, CPA_PROBE_TIMEOUT,
            CPA_TEMPLATE_DIR.

        Keyword *overrides* whose value is not ``None`` take precedence over
        the environment.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("CPA_PACKAGE_MANAGER"):
            kwargs["package_manager"] = os.environ["CPA_PACKAGE_MANAGER"]
        if os.environ.get("CPA_PROBE_URL"):
            kwargs["probe_url"] = os.environ["CPA_PROBE_URL"]
        if os.environ.get("CPA_PROBE_TIMEOUT"):
            kwargs["probe_timeout"] = float(os.environ["CPA_PROBE_TIMEOUT"])
        if os.environ.get("CPA_TEMPLATE_DIR"):
            kwargs["template_dir"] = Path(os.environ["CPA_TEMPLATE_DIR"])

        kwargs.update({key: value for key, value in overrides.items() if value is not None})
        return cls(**kwargs)
