"""Interpreter check that runs before anything else is imported.

The rest of the package needs pydantic, rich and httpx, and uses syntax
(``X | None`` annotations evaluated by pydantic) that fails at import time on
old interpreters.  This module must therefore stay standard-library only and
free of newer syntax, so the "too old" banner can still be printed there.
"""

import sys

MIN_PYTHON = (3, 10)


def python_version_ok(version_info, minimum=MIN_PYTHON):
    """Return ``True`` if *version_info* is at least *minimum*."""
    return tuple(version_info[: len(minimum)]) >= tuple(minimum)


def print_runtime_too_old(runtime, current, minimum):
    """Tell the user their interpreter is below the supported minimum."""
    sys.stderr.write(
        "\nLooks like your {0} version is too old ({1}).\n"
        "Please, upgrade to v{2}+ and try again.\n\n".format(runtime, current, minimum)
    )
    sys.stderr.flush()


def ensure_supported_python(version_info=None, minimum=MIN_PYTHON):
    """Exit with code 1 if the running interpreter is older than *minimum*."""
    if version_info is None:
        version_info = sys.version_info
    if not python_version_ok(version_info, minimum):
        print_runtime_too_old(
            "Python",
            ".".join(str(part) for part in version_info[:3]),
            ".".join(str(part) for part in minimum),
        )
        sys.exit(1)


def run():
    """Console-script entry point: check the interpreter, then start the CLI."""
    ensure_supported_python()

    from create_proton_app.cli import run as cli_run

    cli_run()
