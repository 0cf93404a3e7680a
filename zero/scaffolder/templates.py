"""Jinja2 template rendering for generated project files.

Template files live under ``zero/scaffolder/templates/<framework>/``.  The
``build_*_template_files`` functions are pure: they render a fixed, ordered
list of templates against a :class:`TemplateData` record and return
``TemplateFile`` pairs without touching the target directory.

User-supplied strings (app name, domain) only ever reach generated sources
through the ``js_string`` filter, which emits a JSON string literal that is
also safe inside JSX and ``<script>`` contexts.
"""

from __future__ import annotations

import json
import re
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape
from pydantic import BaseModel, ConfigDict, Field

from zero.models import FrameworkId
from zero.registry import EnvVarHelp, ModuleConnection

# ---------------------------------------------------------------------------
# Template directory discovery
# ---------------------------------------------------------------------------

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"


class TemplateData(BaseModel):
    """Everything the templates are allowed to see."""

    model_config = ConfigDict(frozen=True)

    app_name: str
    domain: str = ""
    env_vars: tuple[EnvVarHelp, ...] = ()
    connections: tuple[ModuleConnection, ...] = ()
    base_path: str = ""
    include_contact: bool = False


class TemplateFile(BaseModel):
    """A rendered file, ``path`` being relative to the project root with ``/``."""

    model_config = ConfigDict(frozen=True)

    path: str
    content: str = Field(repr=False)


# Template name -> output path (before base_path is applied)
_NEXT_FILES: tuple[tuple[str, str], ...] = (
    ("nextjs/lib/site.ts.j2", "lib/site.ts"),
    ("nextjs/lib/utils.ts.j2", "lib/utils.ts"),
    ("nextjs/app/layout.tsx.j2", "app/layout.tsx"),
    ("nextjs/app/page.tsx.j2", "app/page.tsx"),
    ("nextjs/app/setup/page.tsx.j2", "app/setup/page.tsx"),
    ("nextjs/components/ui/button.tsx.j2", "components/ui/button.tsx"),
    ("nextjs/components/site-header.tsx.j2", "components/site-header.tsx"),
)

_NEXT_CONTACT_FILES: tuple[tuple[str, str], ...] = (
    ("nextjs/components/contact-form.tsx.j2", "components/contact-form.tsx"),
    ("nextjs/app/contact/page.tsx.j2", "app/contact/page.tsx"),
    ("nextjs/app/api/contact/route.ts.j2", "app/api/contact/route.ts"),
)

_EXPO_FILES: tuple[tuple[str, str], ...] = (
    ("expo/lib/site.ts.j2", "lib/site.ts"),
    ("expo/tamagui.config.ts.j2", "tamagui.config.ts"),
    ("expo/metro.config.js.j2", "metro.config.js"),
    ("expo/app/_layout.tsx.j2", "app/_layout.tsx"),
    ("expo/app/index.tsx.j2", "app/index.tsx"),
    ("expo/app/setup.tsx.j2", "app/setup.tsx"),
)

_EXPO_CONTACT_FILES: tuple[tuple[str, str], ...] = (
    ("expo/components/contact-form.tsx.j2", "components/contact-form.tsx"),
    ("expo/app/contact.tsx.j2", "app/contact.tsx"),
)


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders Jinja2 templates for project scaffolding."""

    def __init__(self, template_dir: str | Path | None = None) -> None:
        if template_dir is None:
            template_dir = _DEFAULT_TEMPLATE_DIR
        self.template_dir = Path(template_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=select_autoescape([]),
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
            undefined=StrictUndefined,
        )
        self.env.filters["js_string"] = js_string
        self.env.filters["slugify"] = slugify

    def render(self, template_path: str, context: dict[str, Any]) -> str:
        """Render a single template with the provided context.

        Args:
            template_path: Path relative to the template directory (e.g.
                ``"nextjs/app/layout.tsx.j2"``).
            context: Dictionary of variables available inside the template.
        """
        template = self.env.get_template(template_path)
        return template.render(**context)

    def render_files(
        self,
        entries: tuple[tuple[str, str], ...],
        context: dict[str, Any],
        base_path: str = "",
    ) -> list[TemplateFile]:
        """Render each ``(template, output)`` entry, prefixing *base_path*."""
        return [
            TemplateFile(path=join_path(base_path, output), content=self.render(name, context))
            for name, output in entries
        ]

    def list_templates(self, prefix: str = "") -> list[str]:
        """Return a sorted list of all ``.j2`` template paths under *prefix*."""
        search_dir = self.template_dir / prefix if prefix else self.template_dir
        if not search_dir.is_dir():
            return []
        return sorted(
            p.relative_to(self.template_dir).as_posix()
            for p in search_dir.rglob("*.j2")
        )


_default_renderer: TemplateRenderer | None = None


def get_renderer() -> TemplateRenderer:
    global _default_renderer
    if _default_renderer is None:
        _default_renderer = TemplateRenderer()
    return _default_renderer


# ---------------------------------------------------------------------------
# Builders
# ---------------------------------------------------------------------------


def _context(data: TemplateData) -> dict[str, Any]:
    return {
        "app_name": data.app_name,
        "domain": data.domain,
        "site_url": f"https://{data.domain}" if data.domain else "",
        "env_vars": list(data.env_vars),
        "connections": list(data.connections),
        "include_contact": data.include_contact,
    }


def build_next_template_files(
    data: TemplateData, renderer: TemplateRenderer | None = None
) -> list[TemplateFile]:
    """Build the Next.js files: layout, pages, shared UI and the optional contact flow."""
    renderer = renderer or get_renderer()
    entries = _NEXT_FILES + (_NEXT_CONTACT_FILES if data.include_contact else ())
    return renderer.render_files(entries, _context(data), data.base_path)


def build_expo_template_files(
    data: TemplateData, renderer: TemplateRenderer | None = None
) -> list[TemplateFile]:
    """Build the Expo Router files.  ``base_path`` is honoured for symmetry."""
    renderer = renderer or get_renderer()
    entries = _EXPO_FILES + (_EXPO_CONTACT_FILES if data.include_contact else ())
    return renderer.render_files(entries, _context(data), data.base_path)


def build_template_files(
    framework: FrameworkId | str,
    data: TemplateData,
    renderer: TemplateRenderer | None = None,
) -> list[TemplateFile]:
    if FrameworkId(framework) == FrameworkId.NEXTJS:
        return build_next_template_files(data, renderer)
    return build_expo_template_files(data, renderer)


def components_json(
    globals_path: str,
    tailwind_config: str = "tailwind.config.ts",
    renderer: TemplateRenderer | None = None,
) -> str:
    """Render the shadcn/ui ``components.json`` for a Next.js project."""
    renderer = renderer or get_renderer()
    return renderer.render(
        "nextjs/components.json.j2",
        {"globals_path": globals_path, "tailwind_config": tailwind_config},
    )


# ---------------------------------------------------------------------------
# Filters and helpers
# ---------------------------------------------------------------------------

_JS_UNSAFE = {
    "<": "\\u003c",
    ">": "\\u003e",
    "&": "\\u0026",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}


def js_string(value: Any) -> str:
    """Return *value* as a double-quoted JavaScript string literal.

    Quotes and backslashes are escaped as in JSON; ``<``, ``>``, ``&`` and the
    line/paragraph separators become ``\\uXXXX`` escapes.
    """
    literal = json.dumps(str(value), ensure_ascii=False)
    for char, escaped in _JS_UNSAFE.items():
        literal = literal.replace(char, escaped)
    return literal


def slugify(value: str, fallback: str = "aexis-zero-app") -> str:
    """Convert text to a lowercase, hyphenated slug."""
    slug = re.sub(r"[^a-z0-9-]", "-", value.strip().lower())
    slug = re.sub(r"-+", "-", slug).strip("-")
    return slug or fallback


def join_path(base_path: str, relative: str) -> str:
    base = base_path.strip("/")
    return f"{base}/{relative}" if base else relative
