"""
Configuration management for AQT Score
"""

import copy
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from aqtscore.annotation.annotator import Annotator
from aqtscore.detection.center_estimator import CenterEstimator
from aqtscore.detection.circle_detector import CircleDetector
from aqtscore.preprocessing.enhancement import ImagePreprocessor
from aqtscore.scoring.scorer import ZoneScorer

DEFAULT_CONFIG = {
    "preprocessing": {
        "blur_kernel": 9,
        "sigma_x": 2.0,
        "sigma_y": 2.0
    },
    "detection": {
        "dp": 1.2,
        "min_dist": 20,
        "param1": 100.0,
        "param2": 30.0,
        "min_radius": 5,
        "max_radius": 40
    },
    "center": {
        "policy": "image_center"
    },
    "scoring": {
        "zones": [[0.125, 5], [0.25, 4], [0.5, 3]],
        "edge_breaking": True,
        "target_fill_ratio": 0.9
    },
    "annotation": {
        "caliber_radius": 15,
        "crosshair_size": 8,
        "line_thickness": 2,
        "center_dot_radius": 5,
        "center_ring_radius": 10,
        "font_scale": 0.7,
        "label_offset": 20,
        "label_padding": 4,
        "zone_colors": [[0, 0, 255], [0, 165, 255], [255, 128, 0], [255, 0, 255], [128, 128, 0]]
    },
    "input": {
        "max_dimension": 2048
    }
}


def _deep_merge(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    for key, value in overrides.items():
        if isinstance(value, dict) and isinstance(base.get(key), dict):
            _deep_merge(base[key], value)
        else:
            base[key] = copy.deepcopy(value)
    return base


def merge_config(overrides: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Return a copy of the defaults with `overrides` merged in section by section."""
    config = copy.deepcopy(DEFAULT_CONFIG)
    if overrides:
        _deep_merge(config, overrides)
    return config


def load_config(config_path: Union[str, Path]) -> Dict[str, Any]:
    """Load a YAML config file on top of the defaults."""
    with open(config_path, 'r') as f:
        overrides = yaml.safe_load(f) or {}
    if not isinstance(overrides, dict):
        raise ValueError(f"Config file {config_path} must contain a mapping")
    return validate_config(merge_config(overrides))


def save_config(config: Dict[str, Any], config_path: Union[str, Path]):
    """Write a config to a YAML file."""
    Path(config_path).parent.mkdir(parents=True, exist_ok=True)
    with open(config_path, 'w') as f:
        yaml.safe_dump(config, f, default_flow_style=False, sort_keys=False)


STAGE_CLASSES = {
    "preprocessing": ImagePreprocessor,
    "detection": CircleDetector,
    "center": CenterEstimator,
    "scoring": ZoneScorer,
    "annotation": Annotator,
}


def _check_keys(config: Dict[str, Any]):
    for section, values in config.items():
        if section not in DEFAULT_CONFIG:
            raise ValueError(f"Unknown config section '{section}'")
        if not isinstance(values, dict):
            raise ValueError(f"Config section '{section}' must be a mapping")
        for key in values:
            if key not in DEFAULT_CONFIG[section]:
                raise ValueError(f"Unknown config key '{section}.{key}'")


def build_stages(config: Dict[str, Any]) -> Dict[str, Any]:
    """
    Construct every pipeline stage from a full config.

    Each stage checks its own parameters, so this is also where a config
    is validated.

    Returns:
        Stage objects keyed by config section

    Raises:
        ValueError: on an unknown key or the first invalid value found
    """
    _check_keys(config)
    if config["input"]["max_dimension"] <= 0:
        raise ValueError("input.max_dimension must be positive")

    stages = {}
    for section, stage_class in STAGE_CLASSES.items():
        try:
            stages[section] = stage_class(**config[section])
        except TypeError as e:
            raise ValueError(f"Invalid value in config section '{section}': {e}") from e
    return stages


def validate_config(config: Dict[str, Any]) -> Dict[str, Any]:
    """Check a full config; returns it unchanged or raises ValueError."""
    build_stages(config)
    return config
