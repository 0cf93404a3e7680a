"""Typed, idempotent upserts for the JSON manifests of a generated project.

Each manifest is a pydantic model that only declares the fields we manage;
``extra="allow"`` keeps every other key untouched.  Files are read with a
"missing means empty" policy and dumped with ``exclude_unset`` so that
fields are only written when they were already present or explicitly set.
Keys keep the position they had in the file; new keys are appended.
Applying the same upsert twice yields byte-identical files.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable
from pathlib import Path
from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from zero.scaffolder.templates import slugify
from zero.utils import load_json, save_json

_DEFAULT_PACKAGE_NAME = "aexis-zero-app"
_BRAND_BACKGROUND = "#E7E5E4"

EXPO_PLATFORMS = ("ios", "android", "macos", "windows")
EXPO_PLUGINS = ("expo-router",)


class Manifest(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)


class PackageManifest(Manifest):
    """``package.json``."""

    name: str | None = None
    main: str | None = None
    scripts: dict[str, Any] | None = None


class ExpoPlatformConfig(Manifest):
    icon: str | None = None
    favicon: str | None = None
    adaptive_icon: dict[str, Any] | None = Field(default=None, alias="adaptiveIcon")


class ExpoConfig(Manifest):
    name: str | None = None
    slug: str | None = None
    icon: str | None = None
    splash: dict[str, Any] | None = None
    platforms: list[Any] | None = None
    plugins: list[Any] | None = None
    android: ExpoPlatformConfig | None = None
    ios: ExpoPlatformConfig | None = None
    web: ExpoPlatformConfig | None = None
    asset_bundle_patterns: list[str] | None = Field(default=None, alias="assetBundlePatterns")


class AppManifest(Manifest):
    """Expo ``app.json``."""

    expo: ExpoConfig | None = None


class EasManifest(Manifest):
    """Expo Application Services ``eas.json``."""

    cli: dict[str, Any] | None = None
    build: dict[str, Any] | None = None
    submit: dict[str, Any] | None = None


M = TypeVar("M", bound=Manifest)


# ---------------------------------------------------------------------------
# I/O
# ---------------------------------------------------------------------------


def keep_key_order(original: Any, updated: Any) -> Any:
    """Lay out *updated* in the key order of *original*, recursing into objects."""
    if not (isinstance(original, dict) and isinstance(updated, dict)):
        return updated
    merged = {
        key: keep_key_order(original[key], updated[key]) for key in original if key in updated
    }
    merged.update((key, value) for key, value in updated.items() if key not in merged)
    return merged


def write_manifest(path: Path, manifest: Manifest, original: Any = None) -> Path:
    """Write fields that were read or set, in the key order of *original*."""
    data = manifest.model_dump(mode="json", by_alias=True, exclude_unset=True)
    return save_json(keep_key_order(original, data), path)


def update_manifest(path: Path, model: type[M], *updates: Callable[[M], None]) -> M:
    """Read, apply each update in order, write back and return the manifest.

    A missing file is an empty manifest.

    Raises:
        json.JSONDecodeError: If the file is not valid JSON.
        pydantic.ValidationError: If a managed field has an unexpected type.
        OSError: For read errors other than the file being absent.
    """
    original = load_json(path, default={})
    manifest = model.model_validate(original)
    for update in updates:
        update(manifest)
    write_manifest(path, manifest, original)
    return manifest


# ---------------------------------------------------------------------------
# Field helpers
# ---------------------------------------------------------------------------


def merge_unique(values: Iterable[Any], additions: Iterable[Any]) -> list[Any]:
    """Append *additions* that are not already present, keeping order."""
    merged = list(values)
    for item in additions:
        if item not in merged:
            merged.append(item)
    return merged


def _plugin_names(plugins: Iterable[Any]) -> set[str]:
    names: set[str] = set()
    for plugin in plugins:
        if isinstance(plugin, str):
            names.add(plugin)
        elif isinstance(plugin, list) and plugin and isinstance(plugin[0], str):
            names.add(plugin[0])
    return names


def to_package_name(name: str) -> str:
    """npm-safe package name derived from the app name."""
    cleaned = re.sub(r"[^a-z0-9-._]", "-", name.strip().lower())
    cleaned = re.sub(r"-+", "-", cleaned)
    cleaned = re.sub(r"^[-_.]+|[-_.]+$", "", cleaned)
    return cleaned or _DEFAULT_PACKAGE_NAME


# ---------------------------------------------------------------------------
# Upserts
# ---------------------------------------------------------------------------


def set_package_name(app_name: str) -> Callable[[PackageManifest], None]:
    def update(manifest: PackageManifest) -> None:
        manifest.name = to_package_name(app_name)

    return update


def ensure_dev_flag(
    flag: str = "--turbo", default: str = "next dev"
) -> Callable[[PackageManifest], None]:
    """Make sure ``scripts.dev`` contains *flag* exactly once."""

    def update(manifest: PackageManifest) -> None:
        scripts = dict(manifest.scripts or {})
        current = scripts.get("dev")
        if not isinstance(current, str):
            current = default
        if flag not in current:
            current = f"{current} {flag}"
        scripts["dev"] = current
        manifest.scripts = scripts

    return update


def set_expo_entry(manifest: PackageManifest) -> None:
    manifest.main = "expo-router/entry"


def apply_expo_app_config(app_name: str) -> Callable[[AppManifest], None]:
    """Brand the Expo config: name, slug, icons, splash, platforms, plugins."""

    def update(manifest: AppManifest) -> None:
        expo = manifest.expo or ExpoConfig()
        expo.name = app_name
        expo.slug = slugify(app_name)
        expo.icon = "./assets/icon.png"
        expo.splash = {
            **(expo.splash or {}),
            "image": "./assets/splash.png",
            "resizeMode": "contain",
            "backgroundColor": _BRAND_BACKGROUND,
        }
        expo.platforms = merge_unique(expo.platforms or [], EXPO_PLATFORMS)

        plugins = list(expo.plugins or [])
        present = _plugin_names(plugins)
        plugins.extend(plugin for plugin in EXPO_PLUGINS if plugin not in present)
        expo.plugins = plugins

        android = expo.android or ExpoPlatformConfig()
        android.adaptive_icon = {
            "foregroundImage": "./assets/adaptive-icon.png",
            "backgroundColor": _BRAND_BACKGROUND,
        }
        expo.android = android

        ios = expo.ios or ExpoPlatformConfig()
        ios.icon = "./assets/icon.png"
        expo.ios = ios

        web = expo.web or ExpoPlatformConfig()
        web.favicon = "./assets/favicon.png"
        expo.web = web

        if expo.asset_bundle_patterns is None:
            expo.asset_bundle_patterns = ["**/*"]
        manifest.expo = expo

    return update


def apply_eas_defaults(manifest: EasManifest) -> None:
    """Create the default CLI, build profiles and submit sections if absent."""
    if manifest.cli is None:
        manifest.cli = {"version": ">= 8.0.0"}
    build = dict(manifest.build or {})
    build.setdefault("development", {"developmentClient": True, "distribution": "internal"})
    build.setdefault("preview", {"distribution": "internal"})
    build.setdefault("production", {})
    manifest.build = build
    if manifest.submit is None:
        manifest.submit = {}
