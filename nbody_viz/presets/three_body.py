"""Three-body preset: equal masses in a line, outer pair counter-moving."""

from typing import List
from nbody_viz.physics.body import Body
from nbody_viz.presets.base import Preset


class ThreeBody(Preset):
    """Collinear equal-mass configuration.

    The central body sits at rest at the origin; the outer two start at
    +/- separation on the x axis with opposite velocities, so the center
    of mass stays fixed at the origin.
    """

    def __init__(self, mass: float = 500.0, separation: float = 100.0, speed: float = 2.0):
        self.mass = mass
        self.separation = separation
        self.speed = speed

    @property
    def name(self) -> str:
        return "three_body"

    @property
    def n_bodies(self) -> int:
        return 3

    def generate(self) -> List[Body]:
        return [
            Body.create(1, self.mass, 0.0, 0.0, 0.0, 0.0),
            Body.create(2, self.mass, self.separation, 0.0, 0.0, self.speed),
            Body.create(3, self.mass, -self.separation, 0.0, 0.0, -self.speed),
        ]
