"""Scaffold pipeline orchestrator.

Runs the four steps of creating a project, strictly one after another:

Step 1: SCAFFOLD      -- create the project directory and write ``package.json``.
Step 2: COPY TEMPLATE -- copy the bundled starter files into it.
Step 3: CONNECTIVITY  -- make sure the package registry is reachable.
Step 4: INSTALL       -- run the package manager's ``install``.

Any step failure raises a :class:`~create_proton_app.errors.ScaffoldError`
and stops the run; later steps never start.
"""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from pathlib import Path

from rich.markup import escape

from .config import Config
from .connectivity import is_online
from .errors import OfflineError
from .guard import MIN_NODE, detect_node_version, node_version_ok
from .installer import build_install_command, install_dependencies
from .scaffolder import ProjectGenerator, copy_template, resolve_project_path
from .utils import (
    STEP_NAMES,
    console,
    format_duration,
    print_step_header,
    print_summary_table,
    print_verbose,
    print_warning,
)


@dataclass
class ScaffoldResult:
    """Outcome of a successful run."""

    project_root: Path
    project_name: str
    manifest_path: Path
    files: list[Path] = field(default_factory=list)
    duration: float = 0.0


class ScaffoldPipeline:
    """Creates a new Proton Native project.

    Attributes:
        config: Pipeline configuration.
        verbose: Print step headers and detail lines, and pass ``--verbose``
            to the package manager.
    """

    def __init__(self, config: Config | None = None, verbose: bool = False) -> None:
        self.config = config or Config()
        self.verbose = verbose
        self.generator = ProjectGenerator(self.config)

    def _step(self, number: int) -> None:
        if self.verbose:
            print_step_header(number, STEP_NAMES[number])

    async def run(self, project_dir: str | Path) -> ScaffoldResult:
        """Scaffold *project_dir* and install its dependencies.

        Args:
            project_dir: Project name or path, as typed by the user.

        Returns:
            A :class:`ScaffoldResult` describing what was created.

        Raises:
            ScaffoldError: If any step fails.
        """
        started = time.monotonic()
        project_root = resolve_project_path(project_dir)
        project_name = project_root.name

        console.print(
            f"Creating a new Proton Native app in [bold]{escape(str(project_root))}[/bold]",
            soft_wrap=True,
        )
        console.print()

        self._step(1)
        manifest_path = await self.generator.scaffold(project_root)
        print_verbose(f"Wrote {manifest_path}", self.verbose)

        self._step(2)
        files = await copy_template(self.config.template_path, project_root)
        for path in files:
            print_verbose(f"Copied {path.relative_to(project_root)}", self.verbose)

        console.print("Installing packages... This may take a few minutes.")
        console.print()

        self._step(3)
        if not await is_online(self.config.probe_url, self.config.probe_timeout):
            raise OfflineError()
        print_verbose(f"{self.config.probe_url} is reachable", self.verbose)

        node_version = await detect_node_version()
        if not node_version_ok(node_version):
            print_warning(
                f"Node.js >= {MIN_NODE} was not found; "
                f"{self.config.package_manager} install may fail."
            )

        self._step(4)
        print_verbose(
            "Running " + " ".join(build_install_command(self.config.package_manager, self.verbose)),
            self.verbose,
        )
        await install_dependencies(project_root, self.config.package_manager, self.verbose)

        result = ScaffoldResult(
            project_root=project_root,
            project_name=project_name,
            manifest_path=manifest_path,
            files=files,
            duration=time.monotonic() - started,
        )
        if self.verbose:
            print_summary_table(
                {
                    "Project": result.project_name,
                    "Location": str(result.project_root),
                    "Template files": str(len(result.files)),
                    "Package manager": self.config.package_manager,
                    "Duration": format_duration(result.duration),
                },
                title="Scaffold Summary",
            )
        return result
