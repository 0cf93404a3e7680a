"""Tests for brand asset generation (zero.scaffolder.assets)."""

from __future__ import annotations

from pathlib import Path

import pytest
from PIL import Image

from zero.errors import MissingAssetsError
from zero.scaffolder.assets import (
    EXPO_ASSETS,
    NEXT_ASSETS,
    AssetTargets,
    assert_asset_sources,
    generate_expo_assets,
    generate_next_assets,
    resize_png,
    resolve_asset_sources,
)

pytestmark = pytest.mark.unit


@pytest.fixture
def targets(tmp_path: Path) -> AssetTargets:
    project = tmp_path / "project"
    return AssetTargets(
        app_dir=project / "app",
        public_dir=project / "public",
        assets_dir=project / "assets",
    )


class TestSources:
    def test_resolve(self, brand_assets: Path):
        sources = resolve_asset_sources(brand_assets)
        assert sources.icon_svg == brand_assets / "icon.svg"
        assert sources.social_png == brand_assets / "social.png"

    def test_present_sources_pass(self, brand_assets: Path):
        assert_asset_sources(resolve_asset_sources(brand_assets))

    def test_every_missing_file_is_listed(self, tmp_path: Path):
        (tmp_path / "icon.png").touch()
        with pytest.raises(MissingAssetsError) as exc_info:
            assert_asset_sources(resolve_asset_sources(tmp_path))
        missing = exc_info.value.missing
        assert len(missing) == 2
        assert any("icon.svg" in item for item in missing)
        assert any("social.png" in item for item in missing)
        assert str(exc_info.value).startswith("Missing asset files.")

    def test_packaged_defaults_exist(self):
        packaged = Path(__file__).resolve().parents[2] / "zero" / "assets"
        assert_asset_sources(resolve_asset_sources(packaged))


class TestResize:
    def test_cover_fit_exact_size(self, brand_assets: Path, tmp_path: Path):
        destination = resize_png(brand_assets / "social.png", tmp_path / "out" / "x.png", 50, 50)
        with Image.open(destination) as image:
            assert image.size == (50, 50)
            assert image.format == "PNG"

    def test_palette_image_converted(self, tmp_path: Path):
        source = tmp_path / "palette.png"
        Image.new("P", (20, 10)).save(source)
        destination = resize_png(source, tmp_path / "fit.png", 8, 8)
        with Image.open(destination) as image:
            assert image.mode == "RGBA"


class TestGenerate:
    def test_next_assets(self, brand_assets: Path, targets: AssetTargets):
        written = generate_next_assets(resolve_asset_sources(brand_assets), targets)

        assert len(written) == len(NEXT_ASSETS) + 1
        assert (targets.app_dir / "icon.svg").read_text(encoding="utf-8") == (
            brand_assets / "icon.svg"
        ).read_text(encoding="utf-8")
        with Image.open(targets.app_dir / "opengraph-image.png") as image:
            assert image.size == (1200, 630)
        with Image.open(targets.public_dir / "favicon-16x16.png") as image:
            assert image.size == (16, 16)
        with Image.open(targets.public_dir / "android-chrome-512x512.png") as image:
            assert image.size == (512, 512)

    def test_expo_assets(self, brand_assets: Path, targets: AssetTargets):
        written = generate_expo_assets(resolve_asset_sources(brand_assets), targets)

        assert sorted(path.name for path in written) == sorted(item[2] for item in EXPO_ASSETS)
        with Image.open(targets.assets_dir / "icon.png") as image:
            assert image.size == (1024, 1024)
        with Image.open(targets.assets_dir / "splash.png") as image:
            assert image.size == (1200, 630)
        assert not targets.app_dir.exists()
