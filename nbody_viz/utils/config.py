"""Configuration management."""

import json
import yaml
from typing import Optional
from pathlib import Path
from dataclasses import dataclass, asdict, fields


@dataclass
class Config:
    """Simulation configuration."""
    # Physics
    G: float = 1.0
    dt: float = 0.1
    softening: float = 0.5
    integrator: str = "semi_implicit_euler"

    # Initial state
    num_bodies: int = 3
    running: bool = True

    # Rendering
    canvas_width: int = 700
    canvas_height: int = 420
    tracing: bool = False
    max_trail_length: int = 500
    afterimage_decay: float = 0.9
    frame_interval_ms: int = 16

    # Export
    output_path: str = "output"
    fps: int = 30

    def __post_init__(self):
        if self.dt <= 0:
            raise ValueError(f"dt must be positive, got {self.dt}")
        if self.softening <= 0:
            raise ValueError(f"softening must be positive, got {self.softening}")
        if self.max_trail_length < 1:
            raise ValueError(f"max_trail_length must be at least 1, got {self.max_trail_length}")
        if not 0.0 < self.afterimage_decay < 1.0:
            raise ValueError(f"afterimage_decay must be in (0, 1), got {self.afterimage_decay}")
        if self.canvas_width <= 0 or self.canvas_height <= 0:
            raise ValueError("canvas dimensions must be positive")
        if self.frame_interval_ms < 1:
            raise ValueError(f"frame_interval_ms must be at least 1, got {self.frame_interval_ms}")


def load_config(config_path: str, overrides: Optional[dict] = None) -> Config:
    """Load configuration from file.

    Args:
        config_path: Path to config file (.json or .yaml)
        overrides: Optional values that take precedence over the file

    Returns:
        Config object

    Raises:
        ValueError: For unsupported file formats or unknown keys
    """
    config_path = Path(config_path)

    with open(config_path, 'r') as f:
        if config_path.suffix in ('.yaml', '.yml'):
            data = yaml.safe_load(f) or {}
        elif config_path.suffix == '.json':
            data = json.load(f)
        else:
            raise ValueError(f"Unsupported config format: {config_path.suffix}. Use .json or .yaml")

    known = {f.name for f in fields(Config)}
    unknown = set(data) - known
    if unknown:
        raise ValueError(f"Unknown config keys: {sorted(unknown)}")

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})

    return Config(**data)


def save_config(config: Config, output_path: str):
    """Save configuration to file.

    Args:
        config: Config object
        output_path: Output file path (.json or .yaml)
    """
    output_path = Path(output_path)
    data = asdict(config)

    with open(output_path, 'w') as f:
        if output_path.suffix in ('.yaml', '.yml'):
            yaml.safe_dump(data, f, default_flow_style=False)
        elif output_path.suffix == '.json':
            json.dump(data, f, indent=2)
        else:
            raise ValueError(f"Unsupported config format: {output_path.suffix}. Use .json or .yaml")
