"""Abstract base class for numerical integrators."""

from abc import ABC, abstractmethod
from typing import List, Sequence
from nbody_viz.physics.body import Body


class Integrator(ABC):
    """Abstract interface for numerical integrators.

    An integrator is a pure function of its inputs: it returns a new body
    list and never modifies the one it was given.
    """

    @abstractmethod
    def step(self, bodies: Sequence[Body], dt: float, G: float, epsilon: float) -> List[Body]:
        """Perform one integration step.

        Args:
            bodies: Bodies at time t
            dt: Time step
            G: Gravitational constant
            epsilon: Softening length

        Returns:
            New list of bodies at time t + dt, in the same order
        """
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the name of this integrator."""
        pass

    @property
    @abstractmethod
    def order(self) -> int:
        """Return the order of accuracy."""
        pass
