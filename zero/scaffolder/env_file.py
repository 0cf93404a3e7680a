"""``.env.example`` generation."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from zero.models import FrameworkId, ModuleId
from zero.registry import get_base_env_vars, get_module_env_vars


def collect_env_keys(module_ids: Iterable[ModuleId], framework: FrameworkId) -> list[str]:
    """Framework and module keys, unique and sorted."""
    keys = set(get_base_env_vars(framework))
    keys.update(get_module_env_vars(module_ids, framework))
    return sorted(keys)


def render_env_example(keys: Iterable[str]) -> str:
    lines = [f"{key}=" for key in keys]
    return "\n".join(lines) + "\n" if lines else ""


def write_env_example(
    module_ids: Iterable[ModuleId], framework: FrameworkId, target_dir: Path
) -> Path:
    path = target_dir / ".env.example"
    path.write_text(render_env_example(collect_env_keys(module_ids, framework)), encoding="utf-8")
    return path
