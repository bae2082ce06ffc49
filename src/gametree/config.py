# ================================================================================
# Search parameters, presets and JSON config loading
#
# Author: Stefan Filges (stefan.filges@pm.me)
# Copyright (c) 2026 Stefan Filges
# ================================================================================

from __future__ import annotations

import json
from pathlib import Path

from loguru import logger
from pydantic import BaseModel, Field, ValidationError

from gametree.errors import ConfigError

DEFAULT_MAX_DEPTH = 500
DEFAULT_MAX_NODES = 100_000


class SearchParameters(BaseModel):
    """Limits and switches for building and evaluating a game tree."""

    max_depth: int = Field(default=DEFAULT_MAX_DEPTH, ge=1)
    max_nodes: int = Field(default=DEFAULT_MAX_NODES, ge=1)
    # None means: ask interactively
    print_tree: bool | None = None


# ---------------------------------------------------------------------------
# Presets
# ---------------------------------------------------------------------------

CONFIG_PRESETS: dict[str, dict] = {
    "default": {},
    "deep": {
        "max_depth": 20_000,
        "max_nodes": 1_000_000,
    },
}


def load_config(
    preset: str = "default", config_path: Path | str | None = None
) -> SearchParameters:
    """
    Build search parameters from a named preset, optionally overlaid with
    values from a JSON file.

    Args:
        preset: Key in CONFIG_PRESETS.
        config_path: Optional JSON file whose keys override the preset.

    Returns:
        SearchParameters
    """
    if preset not in CONFIG_PRESETS:
        supported = ", ".join(CONFIG_PRESETS)
        raise ConfigError(f"Unknown preset '{preset}'. Supported presets: {supported}")

    values = dict(CONFIG_PRESETS[preset])

    if config_path is not None:
        config_path = Path(config_path)
        if not config_path.is_file():
            raise FileNotFoundError(f"Config file not found: {config_path}")
        with config_path.open() as f:
            try:
                overrides = json.load(f)
            except json.JSONDecodeError as e:
                raise ConfigError(
                    f"Config file is not valid JSON: {config_path}: {e}"
                ) from e
        if not isinstance(overrides, dict):
            raise ConfigError(f"Config file must contain a JSON object: {config_path}")
        values.update(overrides)
        logger.info(f"Config loaded from: {config_path}")

    try:
        config = SearchParameters(**values)
    except ValidationError as e:
        raise ConfigError(f"Invalid search parameters: {e}") from e

    logger.debug(f"Using preset '{preset}': {config}")
    return config
