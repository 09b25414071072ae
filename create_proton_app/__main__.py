"""Allow ``python -m create_proton_app``."""

from create_proton_app.runtime import run

run()
