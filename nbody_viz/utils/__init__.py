"""Utility functions for configuration and input handling."""

from nbody_viz.utils.config import load_config, save_config, Config
from nbody_viz.utils.parsing import parse_numeric_input, clamp_mass, FIELD_NAMES

__all__ = ["load_config", "save_config", "Config", "parse_numeric_input", "clamp_mass", "FIELD_NAMES"]
