"""Numerical integrators for N-body simulations."""

from nbody_viz.physics.integrators.base import Integrator
from nbody_viz.physics.integrators.euler import EulerIntegrator, SemiImplicitEulerIntegrator

INTEGRATORS = {
    'semi_implicit_euler': SemiImplicitEulerIntegrator,
    'euler': EulerIntegrator,
}


def get_integrator(name: str) -> Integrator:
    """Get integrator instance by name.

    Raises:
        ValueError: If the name is unknown
    """
    integrator_class = INTEGRATORS.get(name.lower())
    if integrator_class is None:
        raise ValueError(f"Unknown integrator: {name}. Available: {list(INTEGRATORS.keys())}")
    return integrator_class()


__all__ = [
    "Integrator",
    "EulerIntegrator",
    "SemiImplicitEulerIntegrator",
    "INTEGRATORS",
    "get_integrator",
]
