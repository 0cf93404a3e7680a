"""Brand asset generation: icons, favicons and social preview images.

Source files (``icon.svg``, ``icon.png``, ``social.png``) are checked up
front; every derived image is a cover-fit resize at a fixed size.
"""

from __future__ import annotations

import shutil
from pathlib import Path

from PIL import Image, ImageOps
from pydantic import BaseModel

from zero.errors import MissingAssetsError
from zero.utils import ensure_dir


class AssetSources(BaseModel):
    icon_svg: Path
    icon_png: Path
    social_png: Path


class AssetTargets(BaseModel):
    app_dir: Path
    public_dir: Path
    assets_dir: Path


# (source field, destination directory field, filename, width, height)
NEXT_ASSETS: tuple[tuple[str, str, str, int, int], ...] = (
    ("icon_png", "app_dir", "apple-icon.png", 180, 180),
    ("social_png", "app_dir", "opengraph-image.png", 1200, 630),
    ("social_png", "app_dir", "twitter-image.png", 1200, 630),
    ("icon_png", "public_dir", "favicon-16x16.png", 16, 16),
    ("icon_png", "public_dir", "favicon-32x32.png", 32, 32),
    ("icon_png", "public_dir", "apple-touch-icon.png", 180, 180),
    ("icon_png", "public_dir", "android-chrome-192x192.png", 192, 192),
    ("icon_png", "public_dir", "android-chrome-512x512.png", 512, 512),
)

EXPO_ASSETS: tuple[tuple[str, str, str, int, int], ...] = (
    ("icon_png", "assets_dir", "icon.png", 1024, 1024),
    ("icon_png", "assets_dir", "adaptive-icon.png", 1024, 1024),
    ("icon_png", "assets_dir", "favicon.png", 48, 48),
    ("social_png", "assets_dir", "splash.png", 1200, 630),
)


def resolve_asset_sources(assets_dir: Path) -> AssetSources:
    return AssetSources(
        icon_svg=assets_dir / "icon.svg",
        icon_png=assets_dir / "icon.png",
        social_png=assets_dir / "social.png",
    )


def assert_asset_sources(sources: AssetSources) -> None:
    """Raise :class:`MissingAssetsError` listing every missing source file."""
    missing = [
        f"{name}: {path}"
        for name, path in sources.model_dump().items()
        if not Path(path).is_file()
    ]
    if missing:
        raise MissingAssetsError(missing)


def resize_png(source: Path, destination: Path, width: int, height: int) -> Path:
    """Cover-fit *source* into ``width x height`` and save it as PNG."""
    destination.parent.mkdir(parents=True, exist_ok=True)
    with Image.open(source) as image:
        if image.mode not in ("RGB", "RGBA"):
            image = image.convert("RGBA")
        fitted = ImageOps.fit(image, (width, height), method=Image.Resampling.LANCZOS)
        fitted.save(destination, format="PNG")
    return destination


def _render(
    plan: tuple[tuple[str, str, str, int, int], ...],
    sources: AssetSources,
    targets: AssetTargets,
) -> list[Path]:
    written: list[Path] = []
    for source_field, target_field, filename, width, height in plan:
        source = getattr(sources, source_field)
        destination = getattr(targets, target_field) / filename
        written.append(resize_png(source, destination, width, height))
    return written


def generate_next_assets(sources: AssetSources, targets: AssetTargets) -> list[Path]:
    """Write the Next.js app icons, social images and public favicons."""
    icon_svg = ensure_dir(targets.app_dir) / "icon.svg"
    ensure_dir(targets.public_dir)
    shutil.copyfile(sources.icon_svg, icon_svg)
    return [icon_svg, *_render(NEXT_ASSETS, sources, targets)]


def generate_expo_assets(sources: AssetSources, targets: AssetTargets) -> list[Path]:
    """Write the Expo icon, adaptive icon, favicon and splash image."""
    ensure_dir(targets.assets_dir)
    return _render(EXPO_ASSETS, sources, targets)
