"""create-proton-app -- scaffold a new Proton Native application.

Creates the project directory, writes a ``package.json`` manifest, copies the
bundled starter template and installs dependencies with the host package
manager.

Quick usage::

    $ create-proton-app my-app
    $ python -m create_proton_app my-app --verbose
"""

__version__ = "0.1.0"

PACKAGE_NAME = "create-proton-app"
