"""Main scaffolding orchestrator.

Takes a :class:`ProjectConfig` and turns it into a project directory: the
upstream generator is run first, then templates, manifest upserts, brand
assets, dependency installation and ``.env.example`` are applied on top.

Steps run strictly one after another.  The first failure aborts the run;
files written by earlier steps are left in place.
"""

from __future__ import annotations

import asyncio
from pathlib import Path

from pydantic import BaseModel

from zero.config import Settings
from zero.models import FrameworkId, ModuleId, ProjectConfig
from zero.registry import (
    get_base_env_help,
    get_framework_definition,
    get_module_connections,
    get_module_definition,
    get_module_env_help,
    get_package_manager_definition,
    merge_env_help,
)
from zero.utils import (
    CommandContext,
    print_next_steps,
    print_step,
    print_success,
    print_summary_table,
    quote_path,
    write_text,
)

from .assets import (
    AssetTargets,
    assert_asset_sources,
    generate_expo_assets,
    generate_next_assets,
    resolve_asset_sources,
)
from .env_file import write_env_example
from .installers import install_base_dependencies, install_module_packages
from .manifests import (
    AppManifest,
    EasManifest,
    PackageManifest,
    apply_eas_defaults,
    apply_expo_app_config,
    ensure_dev_flag,
    set_expo_entry,
    set_package_name,
    update_manifest,
)
from .runner import run_scaffold_command
from .target import normalize_directory, prepare_target_directory, resolve_target
from .templates import TemplateData, TemplateFile, build_template_files, components_json

TAILWIND_CONFIGS = (
    "tailwind.config.ts",
    "tailwind.config.js",
    "tailwind.config.cjs",
    "tailwind.config.mjs",
)


class ScaffoldResult(BaseModel):
    """What the CLI reports once the project is ready."""

    target_dir: Path
    scaffold_command: list[str]
    files: list[str]
    next_steps: list[str]


class ScaffoldOrchestrator:
    """Drives the end-to-end generation of one project.

    Args:
        config: The wizard answers.
        settings: Runtime settings (asset location, CI mode).
        cwd: Directory ``config.directory`` is resolved against.
        context: Subprocess context; defaults to ``settings.command_context()``.
    """

    def __init__(
        self,
        config: ProjectConfig,
        settings: Settings | None = None,
        *,
        cwd: str | Path | None = None,
        context: CommandContext | None = None,
    ) -> None:
        self.config = config
        self.settings = settings or Settings()
        self.cwd = Path(cwd) if cwd is not None else Path.cwd()
        self.context = context or self.settings.command_context()
        self.framework = get_framework_definition(config.framework)
        self.manager = get_package_manager_definition(config.package_manager)
        self.directory = normalize_directory(config.directory)
        self.target_dir = resolve_target(self.directory, self.cwd)

    # -- Public API --------------------------------------------------------

    async def run(self) -> ScaffoldResult:
        """Generate the project and return the completion report."""
        config = self.config

        # 1. Validate (or create) the target directory
        await asyncio.to_thread(
            prepare_target_directory, self.target_dir, self.settings.allowed_entries
        )
        sources = resolve_asset_sources(self.settings.assets_dir)
        assert_asset_sources(sources)
        print_summary_table(self.summary(), title="Project")

        # 2. Run the upstream generator
        print_step(f"Scaffolding {self.framework.label}...")
        scaffold_command = await run_scaffold_command(
            self.framework, self.manager, self.directory, self.context, cwd=self.cwd
        )

        # 3. Templates
        print_step("Applying framework templates...")
        files = await asyncio.to_thread(self.apply_templates)

        # 4. Manifests
        await asyncio.to_thread(self.apply_manifests)

        # 5. Brand assets
        print_step("Generating brand assets...")
        targets = self.asset_targets()
        if config.framework == FrameworkId.NEXTJS:
            await asyncio.to_thread(generate_next_assets, sources, targets)
        else:
            await asyncio.to_thread(generate_expo_assets, sources, targets)

        # 6. Dependencies
        print_step(f"Installing base dependencies with {self.manager.label}...")
        await install_base_dependencies(
            self.target_dir, self.manager, self.framework.packages, self.context
        )
        print_step("Installing module packages...")
        await install_module_packages(
            config.framework, config.modules, self.target_dir, self.manager, self.context
        )

        # 7. .env.example
        print_step("Generating .env.example...")
        await asyncio.to_thread(
            write_env_example, config.modules, config.framework, self.target_dir
        )

        # 8. Report
        result = ScaffoldResult(
            target_dir=self.target_dir,
            scaffold_command=scaffold_command,
            files=[item.path for item in files],
            next_steps=self.next_steps(),
        )
        print_success("Scaffold complete.")
        print_next_steps(result.next_steps)
        return result

    # -- Templates ---------------------------------------------------------

    def uses_src_dir(self) -> bool:
        return (
            self.config.framework == FrameworkId.NEXTJS
            and (self.target_dir / "src" / "app").is_dir()
        )

    def template_data(self) -> TemplateData:
        config = self.config
        env_help = merge_env_help(
            get_base_env_help(config.framework),
            get_module_env_help(config.modules, config.framework),
        )
        return TemplateData(
            app_name=config.app_name,
            domain=config.domain,
            env_vars=tuple(env_help),
            connections=tuple(get_module_connections(config.modules)),
            base_path="src" if self.uses_src_dir() else "",
            include_contact=ModuleId.EMAIL in config.modules,
        )

    def apply_templates(self) -> list[TemplateFile]:
        """Write every template file, replacing whatever the generator produced."""
        files = build_template_files(self.config.framework, self.template_data())
        for item in files:
            write_text(self.target_dir.joinpath(*item.path.split("/")), item.content)

        if self.config.framework == FrameworkId.NEXTJS:
            globals_path = "src/app/globals.css" if self.uses_src_dir() else "app/globals.css"
            write_text(
                self.target_dir / "components.json",
                components_json(globals_path, self.detect_tailwind_config()),
            )
        return files

    def detect_tailwind_config(self) -> str:
        for filename in TAILWIND_CONFIGS:
            if (self.target_dir / filename).is_file():
                return filename
        return TAILWIND_CONFIGS[0]

    # -- Manifests ---------------------------------------------------------

    def apply_manifests(self) -> None:
        app_name = self.config.app_name
        package_json = self.target_dir / "package.json"
        if self.config.framework == FrameworkId.NEXTJS:
            update_manifest(package_json, PackageManifest, ensure_dev_flag(), set_package_name(app_name))
            return

        update_manifest(self.target_dir / "app.json", AppManifest, apply_expo_app_config(app_name))
        update_manifest(package_json, PackageManifest, set_expo_entry, set_package_name(app_name))
        update_manifest(self.target_dir / "eas.json", EasManifest, apply_eas_defaults)

    # -- Assets ------------------------------------------------------------

    def asset_targets(self) -> AssetTargets:
        app_dir = self.target_dir / "app"
        if self.uses_src_dir():
            app_dir = self.target_dir / "src" / "app"
        return AssetTargets(
            app_dir=app_dir,
            public_dir=self.target_dir / "public",
            assets_dir=self.target_dir / "assets",
        )

    # -- Report ------------------------------------------------------------

    def summary(self) -> dict[str, str]:
        modules = ", ".join(get_module_definition(item).label for item in self.config.modules)
        return {
            "Target": str(self.target_dir),
            "App name": self.config.app_name,
            "Framework": self.framework.label,
            "Modules": modules or "None",
            "Package manager": self.manager.label,
        }

    def next_steps(self) -> list[str]:
        return [f"cd {quote_path(self.directory)}", " ".join(self.manager.dev)]
