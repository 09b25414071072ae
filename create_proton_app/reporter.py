"""Console banners shown at the end of a run.

Pure presentation: nothing here touches the filesystem or spawns processes.
"""

from __future__ import annotations

from pathlib import Path

from rich.markup import escape

from .utils import console, err_console, print_error, print_success


def print_success_message(
    project_root: str | Path,
    project_name: str,
    package_manager: str = "npm",
) -> None:
    """Print the "all set" banner with the commands available in the new project."""
    name = escape(project_name)
    pm = escape(package_manager)

    console.print()
    print_success("Great! You are all set.")
    console.print(f"Created [bold]{name}[/bold] inside {escape(str(project_root))}", soft_wrap=True)
    console.print()
    console.print("Inside that directory, you can run the following commands:")
    console.print()
    console.print(f"  [green]{pm} run start[/green]")
    console.print("    Will run your application.")
    console.print()
    console.print(f"  [green]{pm} run build[/green]")
    console.print("    Bundles and transpiles your source files.")
    console.print()
    console.print("Go to your project folder and run your application typing:")
    console.print()
    console.print(f"  [green]cd[/green] {name}")
    console.print(f"  [green]{pm} run start[/green]")
    console.print()


def print_error_message(message: str) -> None:
    """Print the error banner.  Every failure path ends here."""
    err_console.print()
    print_error("An error occurred:")
    err_console.print(f"  [red]{escape(str(message))}[/red]", soft_wrap=True)
    err_console.print()
