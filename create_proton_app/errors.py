"""Exceptions raised by the scaffold pipeline.

Every failure is terminal: the CLI catches :class:`ScaffoldError`, prints the
message through the error banner and exits with code 1.
"""

from __future__ import annotations


class ScaffoldError(Exception):
    """Raised when a pipeline step fails irrecoverably."""

    step: str = "scaffold"

    def __init__(self, message: str, step: str | None = None) -> None:
        if step is not None:
            self.step = step
        self.message = message
        super().__init__(message)


class ManifestWriteError(ScaffoldError):
    """The project directory or its manifest could not be written."""

    step = "scaffold"


class TemplateCopyError(ScaffoldError):
    """The bundled template tree could not be copied."""

    step = "copy"


class OfflineError(ScaffoldError):
    """The connectivity probe reported that the host is offline."""

    step = "connectivity"

    def __init__(self, message: str = "Looks like you are offline.") -> None:
        super().__init__(message)


class InstallError(ScaffoldError):
    """The package manager could not be run or exited non-zero."""

    step = "install"

    def __init__(
        self,
        message: str,
        command: list[str] | None = None,
        returncode: int | None = None,
    ) -> None:
        self.command = command or []
        self.returncode = returncode
        super().__init__(message)
