"""Point-mass body records."""

from dataclasses import dataclass, replace
from typing import List, NamedTuple, Optional, Sequence, Tuple
import numpy as np


class Position(NamedTuple):
    x: float
    y: float


class Velocity(NamedTuple):
    vx: float
    vy: float


DEFAULT_COLOR = '#FF6347'
BODY_COLORS = {
    1: '#FFD700',  # gold
    2: '#ADD8E6',  # light blue
    3: '#90EE90',  # light green
}


def color_for_id(body_id: int) -> str:
    """Return the display color assigned to a body id."""
    return BODY_COLORS.get(body_id, DEFAULT_COLOR)


@dataclass(frozen=True)
class Body:
    """Immutable point mass.

    Simulation steps never modify a Body; they build new ones with evolve().
    """
    id: int
    position: Position
    velocity: Velocity
    mass: float
    radius: float = 5.0
    color: str = DEFAULT_COLOR

    @classmethod
    def create(
        cls,
        body_id: int,
        mass: float,
        x: float,
        y: float,
        vx: float,
        vy: float,
        radius: float = 5.0,
        color: Optional[str] = None
    ) -> "Body":
        """Build a body from plain numbers.

        Args:
            body_id: Unique identifier
            mass: Mass (negative values are clamped to zero)
            x, y: Initial position
            vx, vy: Initial velocity
            radius: Visual radius in pixels
            color: Hex color (defaults to the color assigned to body_id)

        Returns:
            New Body
        """
        return cls(
            id=body_id,
            position=Position(float(x), float(y)),
            velocity=Velocity(float(vx), float(vy)),
            mass=max(0.0, float(mass)),
            radius=radius,
            color=color if color is not None else color_for_id(body_id),
        )

    def evolve(self, **changes) -> "Body":
        """Return a copy with the given attributes replaced."""
        return replace(self, **changes)


def copy_bodies(bodies: Sequence[Body]) -> List[Body]:
    """Return a new list holding the same (immutable) bodies."""
    return list(bodies)


def to_arrays(bodies: Sequence[Body]) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Extract numpy arrays from a body list.

    Returns:
        Tuple of (positions (n, 2), velocities (n, 2), masses (n,))
    """
    positions = np.array([b.position for b in bodies], dtype=np.float64).reshape(-1, 2)
    velocities = np.array([b.velocity for b in bodies], dtype=np.float64).reshape(-1, 2)
    masses = np.array([b.mass for b in bodies], dtype=np.float64)
    return positions, velocities, masses
