"""Loads YAML/JSON configuration files and the render settings."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Union

import yaml

logger = logging.getLogger(__name__)

ColorSpec = Union[str, Tuple[int, int, int]]


def load_config(path: str) -> Dict[str, Any]:
    """Load a YAML or JSON configuration file."""
    path_p = Path(path)
    with open(path_p, "r", encoding="utf-8") as f:
        if path_p.suffix in {".yaml", ".yml"}:
            return yaml.safe_load(f) or {}
        if path_p.suffix == ".json":
            return json.load(f)
        raise ValueError("Unsupported config format")


def load_render_config(path: Optional[Path] = None) -> Dict[str, Any]:
    """Return the renderer configuration, or ``{}`` when no file is found."""
    if path is None:
        path = Path(__file__).resolve().parents[2] / "configs" / "render_config.yaml"
    if not path.exists():
        return {}
    try:
        return load_config(str(path))
    except (OSError, yaml.YAMLError, json.JSONDecodeError) as exc:
        logger.warning("Could not read render config %s: %s", path, exc)
        return {}


def _as_color(value: Any, default: ColorSpec) -> ColorSpec:
    if value is None:
        return default
    if isinstance(value, (list, tuple)):
        return tuple(int(c) for c in value)  # type: ignore[return-value]
    return str(value)


RENDER_CONFIG: Dict[str, Any] = load_render_config()
COLOR_ENABLED: bool = bool(RENDER_CONFIG.get("color_enabled", True))
NEUTRAL_RGB: ColorSpec = _as_color(RENDER_CONFIG.get("neutral_rgb"), (192, 192, 192))
_HIGHLIGHT_CONF = RENDER_CONFIG.get("highlight", {}) or {}
RED_COLOR: ColorSpec = _as_color(_HIGHLIGHT_CONF.get("red"), "red")
GREEN_COLOR: ColorSpec = _as_color(_HIGHLIGHT_CONF.get("green"), "green")


def set_color_enabled(value: bool) -> None:
    """Enable or disable ANSI styling at runtime."""
    global COLOR_ENABLED
    COLOR_ENABLED = value
    RENDER_CONFIG["color_enabled"] = value


def set_neutral_rgb(value: ColorSpec) -> None:
    """Override the color used for unclassified cells."""
    global NEUTRAL_RGB
    NEUTRAL_RGB = _as_color(value, NEUTRAL_RGB)
    RENDER_CONFIG["neutral_rgb"] = NEUTRAL_RGB


def set_highlight_colors(red: Optional[ColorSpec] = None, green: Optional[ColorSpec] = None) -> None:
    """Override the colors used by the red and green classifiers."""
    global RED_COLOR, GREEN_COLOR
    RED_COLOR = _as_color(red, RED_COLOR)
    GREEN_COLOR = _as_color(green, GREEN_COLOR)
    RENDER_CONFIG["highlight"] = {"red": RED_COLOR, "green": GREEN_COLOR}


def print_render_config() -> None:
    """Print a summary of the current render configuration."""
    info = {
        "color_enabled": COLOR_ENABLED,
        "neutral": NEUTRAL_RGB,
        "red": RED_COLOR,
        "green": GREEN_COLOR,
    }
    print("Render configuration:")
    for k, v in info.items():
        print(f"  {k}: {v}")
