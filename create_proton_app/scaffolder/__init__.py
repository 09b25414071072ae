"""Project scaffolding -- directory, manifest and starter template.

Quick usage::

    from create_proton_app.scaffolder import ProjectGenerator, copy_template

    generator = ProjectGenerator()
    manifest_path = await generator.scaffold(project_root)
    files = await copy_template(DEFAULT_TEMPLATE_DIR, project_root)
"""

from create_proton_app.scaffolder.copier import DEFAULT_TEMPLATE_DIR, copy_template
from create_proton_app.scaffolder.generator import ProjectGenerator, resolve_project_path
from create_proton_app.scaffolder.manifest import Manifest, default_manifest

__all__ = [
    "DEFAULT_TEMPLATE_DIR",
    "Manifest",
    "ProjectGenerator",
    "copy_template",
    "default_manifest",
    "resolve_project_path",
]
