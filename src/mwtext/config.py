"""Project configuration loaded from pyproject.toml."""

from __future__ import annotations

import tomllib
from functools import lru_cache
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field


class MWTextConfig(BaseModel):
    """Configuration for mwtext."""

    # Size of MediaWiki's page_title column (TITLE_MAX_BYTES)
    title_max_bytes: int = Field(default=255, gt=0)

    # Siteinfo JSON used by load_default_registry(); None means the bundled file
    siteinfo_path: str | None = None


@lru_cache(maxsize=1)
def load_config() -> MWTextConfig:
    """Load configuration from pyproject.toml.

    Returns:
        MWTextConfig with settings from the [tool.mwtext] section,
        falling back to defaults if not found.
    """
    pyproject_path = _find_pyproject()
    if pyproject_path is None:
        return MWTextConfig()

    with pyproject_path.open("rb") as f:
        data = tomllib.load(f)

    tool_config: dict[str, Any] = data.get("tool", {}).get("mwtext", {})
    return MWTextConfig(**tool_config)


def _find_pyproject() -> Path | None:
    """Find pyproject.toml by walking up from current file."""
    current = Path(__file__).resolve().parent
    for _ in range(10):  # Max 10 levels up
        candidate = current / "pyproject.toml"
        if candidate.exists():
            return candidate
        if current.parent == current:
            break
        current = current.parent
    return None
