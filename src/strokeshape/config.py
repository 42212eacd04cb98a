"""
Configuration management for stroke recognition.

Every tunable threshold lives in one of the dataclasses below. YAML files may
override any subset of them; missing values keep their defaults.
"""

import os
from dataclasses import asdict, dataclass, field

import yaml


@dataclass
class ClosureConfig:
    """Configuration for closure detection and path closing."""
    min_close_px: float = 8.0  # gap below which close_path leaves a stroke alone
    min_threshold: float = 10.0
    perimeter_ratio: float = 0.05


@dataclass
class SimplifyConfig:
    """Configuration for RDP simplification."""
    min_epsilon: float = 3.0
    diagonal_ratio: float = 0.01


@dataclass
class CornerConfig:
    """Configuration for corner counting."""
    angle_threshold: float = 35.0  # degrees


@dataclass
class RectangleConfig:
    """Configuration for the rectangle classifier."""
    min_rectangularity: float = 0.6
    max_circularity: float = 0.9
    rectangularity_weight: float = 0.8
    circularity_weight: float = 0.2
    square_tolerance: float = 0.2


@dataclass
class CircleConfig:
    """Configuration for the circle classifier."""
    min_size: float = 10.0
    min_circularity: float = 0.75
    circularity_weight: float = 0.9
    min_fit_points: int = 6
    singular_tolerance: float = 1e-6
    min_fit_radius: float = 6.0
    max_std_rel: float = 0.15
    fit_bonus: float = 0.1
    min_coverage_ratio: float = 0.8  # fraction of a full turn


@dataclass
class TriangleConfig:
    """Configuration for the triangle classifier."""
    min_corners: int = 3
    max_corners: int = 5
    max_circularity: float = 0.85
    corner_weight: float = 0.6
    corner_penalty: float = 0.25  # per corner away from exactly three
    circularity_weight: float = 0.4
    min_confidence: float = 0.3
    max_search_vertices: int = 30


@dataclass
class ArbitrationConfig:
    """Configuration for picking the winning candidate."""
    confidence_floor: float = 0.4


@dataclass
class TracingConfig:
    """Configuration for runtime tracing."""
    enabled: bool = False
    level: str = "INFO"
    file_path: str = None
    json_output: bool = False


@dataclass
class RecognizerConfig:
    """Complete recognizer configuration."""
    closure: ClosureConfig = field(default_factory=ClosureConfig)
    simplify: SimplifyConfig = field(default_factory=SimplifyConfig)
    corners: CornerConfig = field(default_factory=CornerConfig)
    rectangle: RectangleConfig = field(default_factory=RectangleConfig)
    circle: CircleConfig = field(default_factory=CircleConfig)
    triangle: TriangleConfig = field(default_factory=TriangleConfig)
    arbitration: ArbitrationConfig = field(default_factory=ArbitrationConfig)
    tracing: TracingConfig = field(default_factory=TracingConfig)


SECTIONS = (
    "closure",
    "simplify",
    "corners",
    "rectangle",
    "circle",
    "triangle",
    "arbitration",
    "tracing",
)


def load_config(config_path=None):
    """
    Load configuration from YAML file.

    Falls back to defaults for any missing values.
    """
    config = RecognizerConfig()

    if config_path and os.path.exists(config_path):
        with open(config_path, "r", encoding="utf-8") as f:
            yaml_data = yaml.safe_load(f) or {}

        config = _merge_config(config, yaml_data)

    return config


def _merge_config(config, yaml_data):
    """Merge YAML data into config dataclass, ignoring unknown keys."""
    for section_name in SECTIONS:
        values = yaml_data.get(section_name)
        if not isinstance(values, dict):
            continue
        section = getattr(config, section_name)
        for key, value in values.items():
            if hasattr(section, key):
                setattr(section, key, value)

    return config


def save_default_config(path):
    """Save default configuration to YAML file for reference."""
    config = RecognizerConfig()

    yaml_data = {name: asdict(getattr(config, name)) for name in SECTIONS}
    # file_path has no meaningful default to write out
    yaml_data["tracing"].pop("file_path", None)

    with open(path, "w", encoding="utf-8") as f:
        yaml.dump(yaml_data, f, default_flow_style=False, sort_keys=False)
