import logging
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).resolve().parent.parent / "drawmodes.yaml"


@dataclass
class AppConfig:
    view_width: int = 540
    view_height: int = 960
    fps: int = 60
    header_height: int = 96        # instructions bar above the canvas
    hit_radius: float = 50.0       # per-axis grab distance for draggable points
    point_radius: float = 27.0
    text_size: int = 40
    stroke_width: int = 5
    fractal_stroke_width: int = 3
    fractal_rule: str = "paperfold"
    max_fractal_depth: int = 12
    max_fractal_segments: int = 100000
    bezier_samples: int = 64       # curve is stroked as a polyline of this many segments
    max_points: int = 10           # the points mode clears on this tap
    start_mode: int = 0
    log_level: str = "INFO"
    log_file: str = "debug.log"    # empty string disables the file handler


def _coerce(name: str, value: Any, default: Any) -> Any:
    """Convert a raw YAML value to the type of the field's default; raise ValueError if it can't be."""
    if isinstance(default, bool):
        if not isinstance(value, bool):
            raise ValueError(f"{name} must be true or false")
        return value
    if isinstance(default, int):
        if isinstance(value, bool) or not isinstance(value, (int, float)) or int(value) != value:
            raise ValueError(f"{name} must be an integer")
        return int(value)
    if isinstance(default, float):
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValueError(f"{name} must be a number")
        return float(value)
    if value is None:
        raise ValueError(f"{name} must not be empty")
    return str(value)


def apply_overrides(cfg: AppConfig, overrides: Dict[str, Any]) -> AppConfig:
    """Return a copy of cfg with every valid override applied; bad keys and values are logged and skipped."""
    known = {f.name for f in fields(AppConfig)}
    changes: Dict[str, Any] = {}
    for key, value in overrides.items():
        if key not in known:
            logger.warning("Ignoring unknown config key %r.", key)
            continue
        try:
            changes[key] = _coerce(key, value, getattr(cfg, key))
        except (ValueError, OverflowError) as exc:
            logger.warning("Ignoring config value %r for %s: %s", value, key, exc)
    result = replace(cfg, **changes)
    if result.bezier_samples < 32:
        logger.warning("bezier_samples=%d is too coarse; using 32.", result.bezier_samples)
        result.bezier_samples = 32
    return result


def load_config(path: Optional[Path] = None) -> AppConfig:
    """
    Build the app config from defaults plus an optional YAML overrides file.
    A missing, unreadable or malformed file leaves the defaults in place.
    """
    path = path or DEFAULT_CONFIG_PATH
    cfg = AppConfig()
    if not path.exists():
        return cfg
    try:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as exc:
        logger.warning("Could not read config %s (%s); using defaults.", path, exc)
        return cfg
    if not isinstance(data, dict):
        logger.warning("Config %s is not a mapping; using defaults.", path)
        return cfg
    logger.info("Loaded config overrides from %s.", path)
    return apply_overrides(cfg, data)
