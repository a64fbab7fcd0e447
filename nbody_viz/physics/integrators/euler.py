"""Euler integrators (first order).

Both variants read accelerations from the input list only; a body never sees
another body's already-updated state within the same step.
"""

from typing import List, Sequence
from nbody_viz.physics.body import Body, Position, Velocity
from nbody_viz.physics.gravity import compute_acceleration
from nbody_viz.physics.integrators.base import Integrator


class SemiImplicitEulerIntegrator(Integrator):
    """Semi-implicit (symplectic) Euler.

    Velocity is updated first and the new velocity moves the position,
    which keeps bound orbits from spiralling outwards.
    """

    @property
    def name(self) -> str:
        return "semi_implicit_euler"

    @property
    def order(self) -> int:
        return 1

    def step(self, bodies: Sequence[Body], dt: float, G: float, epsilon: float) -> List[Body]:
        """Semi-implicit step: v_new = v + a*dt, r_new = r + v_new*dt."""
        new_bodies = []

        for body in bodies:
            ax, ay = compute_acceleration(body, bodies, G, epsilon)

            new_vx = body.velocity.vx + ax * dt
            new_vy = body.velocity.vy + ay * dt

            new_x = body.position.x + new_vx * dt
            new_y = body.position.y + new_vy * dt

            new_bodies.append(body.evolve(
                position=Position(new_x, new_y),
                velocity=Velocity(new_vx, new_vy),
            ))

        return new_bodies


class EulerIntegrator(Integrator):
    """Explicit Euler - position advanced with the old velocity.

    Drifts outward on closed orbits. Useful as a baseline only.
    """

    @property
    def name(self) -> str:
        return "euler"

    @property
    def order(self) -> int:
        return 1

    def step(self, bodies: Sequence[Body], dt: float, G: float, epsilon: float) -> List[Body]:
        """Euler step: v_new = v + a*dt, r_new = r + v*dt."""
        new_bodies = []

        for body in bodies:
            ax, ay = compute_acceleration(body, bodies, G, epsilon)

            new_x = body.position.x + body.velocity.vx * dt
            new_y = body.position.y + body.velocity.vy * dt

            new_bodies.append(body.evolve(
                position=Position(new_x, new_y),
                velocity=Velocity(body.velocity.vx + ax * dt, body.velocity.vy + ay * dt),
            ))

        return new_bodies
