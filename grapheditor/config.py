"""
Configuration management for the graph editor.

Every tolerance and drawing size can be tuned without touching code.

Priority:
1. Environment variables GRAPH_EDITOR_<FIELD> (e.g. GRAPH_EDITOR_DRAG_THRESHOLD)
2. config.json next to the executable/project root
3. Built-in defaults from grapheditor.constants
"""

import json
import logging
import os
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional

from grapheditor import constants
from grapheditor.paths import get_config_path

logger = logging.getLogger(__name__)

ENV_PREFIX = "GRAPH_EDITOR_"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass
class EditorConfig:
    attraction_radius: int = constants.ATTRACTION_RADIUS
    edge_tolerance: int = constants.EDGE_TOLERANCE
    drag_threshold: int = constants.DRAG_THRESHOLD
    node_radius: int = constants.NODE_RADIUS
    edge_end_gap: int = constants.EDGE_END_GAP
    dot_radius: int = constants.DOT_RADIUS
    canvas_width: int = constants.CANVAS_WIDTH
    canvas_height: int = constants.CANVAS_HEIGHT
    seed_demo: bool = False
    log_level: str = "INFO"

    def __post_init__(self):
        for name in ("attraction_radius", "edge_tolerance", "drag_threshold",
                     "node_radius", "edge_end_gap", "dot_radius"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must not be negative")
        if self.canvas_width <= 0 or self.canvas_height <= 0:
            raise ValueError("canvas size must be positive")

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def load_config(config_path: Optional[Path] = None) -> dict:
    """Load raw settings from config.json. Missing or broken files yield {}."""
    config_path = Path(config_path) if config_path else get_config_path()
    if config_path.exists():
        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (json.JSONDecodeError, IOError) as e:
            logger.warning(f"Failed to load config from {config_path}: {e}")
            return {}
        if not isinstance(data, dict):
            logger.warning(f"Ignoring {config_path}: expected a JSON object")
            return {}
        return data
    return {}


def save_config(config: dict, config_path: Optional[Path] = None) -> None:
    """Save configuration to config.json."""
    config_path = Path(config_path) if config_path else get_config_path()
    with open(config_path, 'w', encoding='utf-8') as f:
        json.dump(config, f, indent=2)


def _coerce(name: str, kind: type, raw: Any) -> Any:
    if kind is bool:
        if isinstance(raw, bool):
            return raw
        text = str(raw).strip().lower()
        if text in _TRUE_VALUES:
            return True
        if text in _FALSE_VALUES:
            return False
        raise ValueError(f"{name}: not a boolean: {raw!r}")
    if kind is int:
        if isinstance(raw, bool):
            raise ValueError(f"{name}: expected an integer, got {raw!r}")
        if isinstance(raw, float) and not raw.is_integer():
            raise ValueError(f"{name}: expected an integer, got {raw!r}")
        return int(raw)
    if name == "log_level":
        level = str(raw).strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"{name}: unknown logging level {raw!r}")
        return level
    return str(raw)


def get_editor_config(config_path: Optional[Path] = None,
                      environ: Optional[Dict[str, str]] = None) -> EditorConfig:
    """
    Build the effective EditorConfig from file, environment and defaults.

    Values that cannot be converted are logged and skipped. Values that
    convert but are out of range raise ValueError.
    """
    environ = os.environ if environ is None else environ
    file_values = load_config(config_path)
    types = {f.name: f.type for f in fields(EditorConfig)}

    values: Dict[str, Any] = {}
    for name, kind in types.items():
        raw = environ.get(ENV_PREFIX + name.upper())
        source = "environment"
        if raw is None:
            raw = file_values.get(name)
            source = "config.json"
        if raw is None:
            continue
        try:
            values[name] = _coerce(name, kind, raw)
        except (TypeError, ValueError) as e:
            logger.warning(f"Ignoring invalid {name} from {source}: {e}")

    unknown = set(file_values) - set(types)
    if unknown:
        logger.warning(f"Unknown config keys ignored: {sorted(unknown)}")

    return EditorConfig(**values)
