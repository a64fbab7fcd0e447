"""Base class for preset scenarios."""

from abc import ABC, abstractmethod
from typing import List
from nbody_viz.physics.body import Body


class Preset(ABC):
    """Abstract base class for preset scenarios."""

    @abstractmethod
    def generate(self) -> List[Body]:
        """Generate initial conditions.

        Returns:
            Fresh list of bodies
        """
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the name of this preset."""
        pass

    @property
    @abstractmethod
    def n_bodies(self) -> int:
        """Return the number of bodies this preset generates."""
        pass
