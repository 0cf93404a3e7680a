"""Aexis Zero scaffolder -- turns wizard answers into a project directory.

Quick usage::

    from zero.models import ProjectConfig
    from zero.scaffolder import ScaffoldOrchestrator

    config = ProjectConfig(app_name="demo", framework="nextjs", modules=["stripe"])
    result = await ScaffoldOrchestrator(config).run()
"""

from zero.scaffolder.generator import ScaffoldOrchestrator, ScaffoldResult
from zero.scaffolder.templates import TemplateData, TemplateFile, TemplateRenderer

__all__ = [
    "ScaffoldOrchestrator",
    "ScaffoldResult",
    "TemplateData",
    "TemplateFile",
    "TemplateRenderer",
]
