"""Parsing of free-form numeric text typed into the initial-condition fields."""

import math
from typing import Optional

FIELD_NAMES = ("x", "y", "vx", "vy", "mass")


def parse_numeric_input(text: str) -> Optional[float]:
    """Parse field text, or return None while the input is still in progress.

    Empty text, a bare sign, and anything float() rejects are treated as
    not-yet-a-number rather than as errors. Non-finite values (inf, nan)
    are rejected too since the integrator requires finite input.

    Args:
        text: Raw field contents

    Returns:
        Parsed value, or None
    """
    if text is None:
        return None
    stripped = text.strip()
    if stripped in ('', '-', '+', '.', '-.', '+.'):
        return None
    try:
        value = float(stripped)
    except ValueError:
        return None
    if not math.isfinite(value):
        return None
    return value


def clamp_mass(value: float) -> float:
    """Masses are never negative."""
    return value if value > 0 else 0.0


def format_value(value: float) -> str:
    """Render a number the way it should appear in an input field."""
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))
