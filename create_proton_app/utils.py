"""Shared utility functions for create-proton-app.

Provides async command execution (captured and pass-through streaming), JSON
output, file-system helpers and Rich-based console reporting.  Every step of
the scaffold pipeline prints through the consoles defined here so that output
stays consistent between the success and failure paths.
"""

from __future__ import annotations

import asyncio
import codecs
import json
import sys
from pathlib import Path
from typing import Any, TextIO

from rich.console import Console
from rich.markup import escape
from rich.rule import Rule
from rich.table import Table

console = Console()
err_console = Console(stderr=True)

# ---------------------------------------------------------------------------
# Async command execution
# ---------------------------------------------------------------------------


async def run_command(
    cmd: list[str],
    cwd: str | Path | None = None,
    timeout: int = 30,
) -> tuple[int, str, str]:
    """Run a command asynchronously and capture its output.

    Args:
        cmd: Executable followed by its arguments.
        cwd: Working directory for the child process.
        timeout: Maximum wall-clock seconds before the process is killed.

    Returns:
        A ``(returncode, stdout, stderr)`` tuple.  A command that times out
        reports ``-1``.

    Raises:
        FileNotFoundError: If the executable does not exist.
    """
    process = await asyncio.create_subprocess_exec(
        *cmd,
        stdout=asyncio.subprocess.PIPE,
        stderr=asyncio.subprocess.PIPE,
        cwd=str(cwd) if cwd else None,
    )

    try:
        stdout_bytes, stderr_bytes = await asyncio.wait_for(
            process.communicate(), timeout=timeout
        )
    except asyncio.TimeoutError:
        process.kill()
        await process.wait()
        return (
            -1,
            "",
            f"Command timed out after {timeout}s: {' '.join(cmd)}",
        )

    stdout_str = (stdout_bytes or b"").decode("utf-8", errors="replace").strip()
    stderr_str = (stderr_bytes or b"").decode("utf-8", errors="replace").strip()
    return (process.returncode or 0, stdout_str, stderr_str)


async def _forward_stream(reader: asyncio.StreamReader, sink: TextIO) -> None:
    """Copy chunks from *reader* to *sink* as soon as they arrive."""
    decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
    while True:
        chunk = await reader.read(4096)
        if not chunk:
            break
        sink.write(decoder.decode(chunk))
        sink.flush()
    tail = decoder.decode(b"", final=True)
    if tail:
        sink.write(tail)
        sink.flush()


async def stream_command(
    cmd: list[str],
    cwd: str | Path | None = None,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
) -> int:
    """Run a command and forward its output live.

    Stdout and stderr are pumped concurrently so neither pipe can fill up and
    stall the child.  There is no timeout: the call returns when the process
    exits.

    Args:
        cmd: Executable followed by its arguments.
        cwd: Working directory for the child process.
        stdout: Text sink for the child's stdout (default ``sys.stdout``).
        stderr: Text sink for the child's stderr (default ``sys.stderr``).

    Returns:
        The child's exit code.
    """
    process = await asyncio.create_subprocess_exec(
        *cmd,
        stdout=asyncio.subprocess.PIPE,
        stderr=asyncio.subprocess.PIPE,
        cwd=str(cwd) if cwd else None,
    )

    assert process.stdout is not None and process.stderr is not None  # guaranteed by PIPE
    try:
        await asyncio.gather(
            _forward_stream(process.stdout, stdout or sys.stdout),
            _forward_stream(process.stderr, stderr or sys.stderr),
        )
    finally:
        if process.returncode is None:
            await process.wait()
    return process.returncode


# ---------------------------------------------------------------------------
# JSON output
# ---------------------------------------------------------------------------


async def save_json(data: dict[str, Any] | list[Any], path: str | Path) -> Path:
    """Save data as 2-space indented JSON followed by a newline.

    Parent directories are created automatically.  The write itself is
    performed in a worker thread to avoid blocking the event loop.  An
    existing file is overwritten.

    Args:
        data: Serialisable data (dict or list).
        path: Destination file path.

    Returns:
        The path that was written.
    """
    file_path = Path(path)
    content = json.dumps(data, indent=2, ensure_ascii=False) + "\n"

    def _write() -> None:
        file_path.parent.mkdir(parents=True, exist_ok=True)
        file_path.write_text(content, encoding="utf-8")

    await asyncio.to_thread(_write)
    return file_path


# ---------------------------------------------------------------------------
# File-system helpers
# ---------------------------------------------------------------------------


def ensure_dir(path: str | Path) -> Path:
    """Create a directory (and parents) if it does not exist.

    Returns:
        The resolved ``Path`` object.
    """
    dir_path = Path(path)
    dir_path.mkdir(parents=True, exist_ok=True)
    return dir_path.resolve()


# ---------------------------------------------------------------------------
# Formatting helpers
# ---------------------------------------------------------------------------


def format_duration(seconds: float) -> str:
    """Format a duration in seconds to a human-readable string.

    Examples::

        format_duration(3.7)    -> "3.7s"
        format_duration(65.2)   -> "1m 5s"
        format_duration(3661.0) -> "1h 1m 1s"
    """
    if seconds < 0:
        return "0.0s"

    hours = int(seconds // 3600)
    minutes = int((seconds % 3600) // 60)
    secs = seconds % 60

    parts: list[str] = []
    if hours > 0:
        parts.append(f"{hours}h")
    if minutes > 0:
        parts.append(f"{minutes}m")

    if hours > 0 or minutes > 0:
        parts.append(f"{int(secs)}s")
    else:
        parts.append(f"{secs:.1f}s")

    return " ".join(parts)


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


STEP_NAMES: dict[int, str] = {
    1: "SCAFFOLD",
    2: "COPY TEMPLATE",
    3: "CONNECTIVITY",
    4: "INSTALL",
}

STEP_COLORS: dict[int, str] = {
    1: "bright_cyan",
    2: "bright_green",
    3: "bright_yellow",
    4: "bright_magenta",
}


def print_step_header(step: int, name: str) -> None:
    """Print a full-width rule announcing a pipeline step."""
    color = STEP_COLORS.get(step, "white")
    console.print(
        Rule(
            f"[bold {color}] Step {step}: {escape(name.upper())} [/bold {color}]",
            style=color,
        )
    )


def print_summary_table(data: dict[str, str], title: str = "Summary") -> None:
    """Print a two-column key/value summary table."""
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Item", style="dim", no_wrap=True)
    table.add_column("Value")

    for key, value in data.items():
        table.add_row(key, escape(str(value)))

    console.print(table)
    console.print()


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{escape(message)}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message to stderr."""
    err_console.print(f"[bold red]{escape(message)}[/bold red]")


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{escape(message)}[/bold yellow]")


def print_verbose(message: str, verbose: bool) -> None:
    """Print dim detail text, only when *verbose* is set."""
    if verbose:
        console.print(f"[dim]{escape(message)}[/dim]", soft_wrap=True)
