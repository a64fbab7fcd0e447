"""Softened pairwise gravitational acceleration.

Direct O(N^2) summation in plain floating point. For every other body j:

    a_i += G * m_j * (p_j - p_i) / (|p_j - p_i|^2 + eps^2)^(3/2)

The eps^2 term keeps the result finite when two bodies coincide. Summation
runs in list order, so identical inputs always give identical outputs.
"""

import math
from typing import List, Sequence, Tuple
from nbody_viz.physics.body import Body

G_DEFAULT = 1.0  # simulation units, not SI
EPSILON_DEFAULT = 0.5  # softening length


def compute_acceleration(
    target: Body,
    bodies: Sequence[Body],
    G: float = G_DEFAULT,
    epsilon: float = EPSILON_DEFAULT
) -> Tuple[float, float]:
    """Net gravitational acceleration on target from every other body.

    Args:
        target: Body to evaluate
        bodies: All bodies in the system (target may be among them)
        G: Gravitational constant
        epsilon: Softening length

    Returns:
        Tuple (ax, ay)
    """
    ax = 0.0
    ay = 0.0
    eps_sq = epsilon * epsilon

    for other in bodies:
        if other.id == target.id:
            continue

        dx = other.position.x - target.position.x
        dy = other.position.y - target.position.y
        r_sq = dx * dx + dy * dy

        r = math.sqrt(r_sq + eps_sq)
        magnitude = G * other.mass / (r * r * r)

        ax += magnitude * dx
        ay += magnitude * dy

    return ax, ay


def compute_accelerations(
    bodies: Sequence[Body],
    G: float = G_DEFAULT,
    epsilon: float = EPSILON_DEFAULT
) -> List[Tuple[float, float]]:
    """Accelerations of all bodies, evaluated against the same input state."""
    return [compute_acceleration(body, bodies, G, epsilon) for body in bodies]
