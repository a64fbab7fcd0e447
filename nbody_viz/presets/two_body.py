"""Two-body preset: a light planet on a near-circular orbit around a heavy star."""

from typing import List
from nbody_viz.physics.body import Body
from nbody_viz.presets.base import Preset


class TwoBody(Preset):
    """Sun-and-planet system."""

    def __init__(
        self,
        star_mass: float = 1000.0,
        planet_mass: float = 1.0,
        orbit_radius: float = 150.0,
        orbit_speed: float = 3.0
    ):
        """Initialize two-body preset.

        Args:
            star_mass: Mass of the central body (id 1)
            planet_mass: Mass of the orbiting body (id 2)
            orbit_radius: Initial distance of the planet on the +x axis
            orbit_speed: Initial planet speed along +y
        """
        self.star_mass = star_mass
        self.planet_mass = planet_mass
        self.orbit_radius = orbit_radius
        self.orbit_speed = orbit_speed

    @property
    def name(self) -> str:
        return "two_body"

    @property
    def n_bodies(self) -> int:
        return 2

    def generate(self) -> List[Body]:
        return [
            Body.create(1, self.star_mass, 0.0, 0.0, 0.0, 0.0, radius=8),
            Body.create(2, self.planet_mass, self.orbit_radius, 0.0, 0.0, self.orbit_speed, radius=4),
        ]
