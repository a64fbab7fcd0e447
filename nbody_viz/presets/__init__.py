"""Preset initial conditions, selected by body count."""

from typing import List
from nbody_viz.physics.body import Body
from nbody_viz.presets.base import Preset
from nbody_viz.presets.two_body import TwoBody
from nbody_viz.presets.three_body import ThreeBody

PRESETS = {
    2: TwoBody,
    3: ThreeBody,
}


def available_body_counts() -> List[int]:
    """Body counts that have a preset."""
    return sorted(PRESETS.keys())


def get_preset(count: int) -> Preset:
    """Get the preset for a body count.

    Raises:
        ValueError: If no preset exists for count
    """
    preset_class = PRESETS.get(count)
    if preset_class is None:
        raise ValueError(f"No preset for {count} bodies. Available: {available_body_counts()}")
    return preset_class()


def get_initial_state(count: int) -> List[Body]:
    """Fresh initial bodies for a body count."""
    return get_preset(count).generate()


__all__ = [
    "Preset",
    "TwoBody",
    "ThreeBody",
    "PRESETS",
    "available_body_counts",
    "get_preset",
    "get_initial_state",
]
