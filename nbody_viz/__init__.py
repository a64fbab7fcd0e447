"""
N-Body Visualizer - interactive gravitational N-body motion on a 2D canvas.

Features:
- Softened direct-summation gravity
- Semi-implicit (symplectic) Euler integration with a fixed time step
- Two- and three-body presets with editable initial conditions
- Fading afterimage and persistent line trail rendering
- tkinter GUI, headless CLI and GIF export
"""

__version__ = "0.1.0"

from nbody_viz.physics.body import Body
from nbody_viz.physics.simulator import Simulator, Snapshot
from nbody_viz.utils.config import Config

__all__ = [
    "Body",
    "Simulator",
    "Snapshot",
    "Config",
]
