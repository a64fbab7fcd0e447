"""Physics engine for N-body simulations."""

from nbody_viz.physics.body import Body, Position, Velocity
from nbody_viz.physics.gravity import compute_acceleration, compute_accelerations
from nbody_viz.physics.trail import TrailHistory
from nbody_viz.physics.simulator import Simulator, Snapshot

__all__ = [
    "Body",
    "Position",
    "Velocity",
    "compute_acceleration",
    "compute_accelerations",
    "TrailHistory",
    "Simulator",
    "Snapshot",
]
