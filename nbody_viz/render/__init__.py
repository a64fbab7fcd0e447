"""Rendering of simulation snapshots on a 2D canvas."""

from nbody_viz.render.base import Renderer
from nbody_viz.render.renderer_2d import Renderer2D
from nbody_viz.render.geometry import world_to_screen

__all__ = ["Renderer", "Renderer2D", "world_to_screen"]
