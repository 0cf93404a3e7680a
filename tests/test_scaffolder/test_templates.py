"""Tests for template rendering (zero.scaffolder.templates).

Covers:
- File lists per framework, with and without the contact flow
- base_path prefixing
- js_string escaping of user strings
- Env help and connect links rendered into lib/site.ts
- components.json
- Deterministic output
"""

from __future__ import annotations

import json

import pytest

from zero.models import FrameworkId, ModuleId
from zero.registry import get_module_connections, get_module_env_help
from zero.scaffolder.templates import (
    TemplateData,
    _EXPO_CONTACT_FILES,
    _EXPO_FILES,
    _NEXT_CONTACT_FILES,
    _NEXT_FILES,
    TemplateRenderer,
    build_expo_template_files,
    build_next_template_files,
    build_template_files,
    components_json,
    join_path,
    js_string,
    slugify,
)

pytestmark = pytest.mark.unit


def paths(files):
    return [item.path for item in files]


def by_path(files):
    return {item.path: item.content for item in files}


# ---------------------------------------------------------------------------
# File lists
# ---------------------------------------------------------------------------


class TestNextFiles:
    def test_default_files(self):
        files = build_next_template_files(TemplateData(app_name="Demo"))
        assert paths(files) == [
            "lib/site.ts",
            "lib/utils.ts",
            "app/layout.tsx",
            "app/page.tsx",
            "app/setup/page.tsx",
            "components/ui/button.tsx",
            "components/site-header.tsx",
        ]

    def test_contact_files(self):
        files = build_next_template_files(TemplateData(app_name="Demo", include_contact=True))
        assert paths(files)[-3:] == [
            "components/contact-form.tsx",
            "app/contact/page.tsx",
            "app/api/contact/route.ts",
        ]

    def test_base_path_prefix(self):
        files = build_next_template_files(TemplateData(app_name="Demo", base_path="src"))
        assert all(path.startswith("src/") for path in paths(files))
        assert "src/app/layout.tsx" in paths(files)

    def test_contact_route_uses_resend(self):
        files = by_path(
            build_next_template_files(TemplateData(app_name="Demo", include_contact=True))
        )
        route = files["app/api/contact/route.ts"]
        assert "resend" in route.lower()
        assert "CONTACT_TO_EMAIL" in route


class TestExpoFiles:
    def test_default_files(self):
        files = build_expo_template_files(TemplateData(app_name="Demo"))
        assert paths(files) == [
            "lib/site.ts",
            "tamagui.config.ts",
            "metro.config.js",
            "app/_layout.tsx",
            "app/index.tsx",
            "app/setup.tsx",
        ]

    def test_contact_files(self):
        files = build_expo_template_files(TemplateData(app_name="Demo", include_contact=True))
        assert paths(files)[-2:] == ["components/contact-form.tsx", "app/contact.tsx"]

    def test_dispatch_by_framework(self):
        data = TemplateData(app_name="Demo")
        assert paths(build_template_files("expo", data)) == paths(build_expo_template_files(data))
        assert paths(build_template_files(FrameworkId.NEXTJS, data)) == paths(
            build_next_template_files(data)
        )


# ---------------------------------------------------------------------------
# Content
# ---------------------------------------------------------------------------


class TestSiteConfig:
    def test_user_strings_are_js_literals(self):
        name = 'Bob\'s "App" </script> & co'
        site = by_path(build_next_template_files(TemplateData(app_name=name)))["lib/site.ts"]
        assert f"name: {js_string(name)}," in site
        assert "</script>" not in site

    def test_domain_and_url(self):
        site = by_path(
            build_next_template_files(TemplateData(app_name="Demo", domain="demo.dev"))
        )["lib/site.ts"]
        assert 'domain: "demo.dev"' in site
        assert 'url: "https://demo.dev"' in site

    def test_empty_domain(self):
        site = by_path(build_next_template_files(TemplateData(app_name="Demo")))["lib/site.ts"]
        assert 'domain: ""' in site
        assert 'url: ""' in site

    def test_env_help_and_connections(self):
        modules = [ModuleId.STRIPE]
        data = TemplateData(
            app_name="Demo",
            env_vars=tuple(get_module_env_help(modules, FrameworkId.NEXTJS)),
            connections=tuple(get_module_connections(modules)),
        )
        site = by_path(build_next_template_files(data))["lib/site.ts"]
        assert 'key: "STRIPE_SECRET_KEY"' in site
        assert 'key: "STRIPE_WEBHOOK_SECRET"' in site
        assert '"https://dashboard.stripe.com/apikeys"' in site

    def test_output_is_deterministic(self):
        data = TemplateData(app_name="Demo", domain="demo.dev", include_contact=True)
        assert build_expo_template_files(data) == build_expo_template_files(data)
        assert build_next_template_files(data) == build_next_template_files(
            data, TemplateRenderer()
        )


class TestComponentsJson:
    def test_valid_json(self):
        document = json.loads(components_json("src/app/globals.css", "tailwind.config.js"))
        assert document["tailwind"]["css"] == "src/app/globals.css"
        assert document["tailwind"]["config"] == "tailwind.config.js"
        assert document["aliases"]["utils"] == "@/lib/utils"

    def test_default_tailwind_config(self):
        document = json.loads(components_json("app/globals.css"))
        assert document["tailwind"]["config"] == "tailwind.config.ts"


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


class TestHelpers:
    def test_js_string_escapes(self):
        assert js_string("a<b>&c") == '"a\\u003cb\\u003e\\u0026c"'
        assert js_string('say "hi"\\') == '"say \\"hi\\"\\\\"'
        assert js_string("line\u2028break\u2029") == '"line\\u2028break\\u2029"'

    def test_js_string_round_trips_through_json(self):
        value = "Zoë <b> & \"quotes\""
        assert json.loads(js_string(value)) == value

    @pytest.mark.parametrize(
        ("value", "expected"),
        [("My Cool App", "my-cool-app"), ("  --Hi!!--  ", "hi"), ("!!!", "aexis-zero-app")],
    )
    def test_slugify(self, value, expected):
        assert slugify(value) == expected

    def test_join_path(self):
        assert join_path("", "app/page.tsx") == "app/page.tsx"
        assert join_path("src/", "app/page.tsx") == "src/app/page.tsx"

    def test_list_templates(self):
        names = TemplateRenderer().list_templates("expo")
        assert "expo/app/_layout.tsx.j2" in names
        assert all(name.startswith("expo/") for name in names)

    def test_every_shipped_template_is_listed(self):
        entries = _NEXT_FILES + _NEXT_CONTACT_FILES + _EXPO_FILES + _EXPO_CONTACT_FILES
        listed = {name for name, _ in entries} | {"nextjs/components.json.j2"}
        assert set(TemplateRenderer().list_templates()) == listed
