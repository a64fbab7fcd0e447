"""Diagnostics for N-body simulations."""

import numpy as np
from typing import Sequence, Tuple
from nbody_viz.physics.body import Body, to_arrays
from nbody_viz.physics.gravity import G_DEFAULT, EPSILON_DEFAULT


class Diagnostics:
    """Compute conserved quantities consistent with the softened force law."""

    def __init__(self, G: float = G_DEFAULT, epsilon: float = EPSILON_DEFAULT):
        """Initialize diagnostics.

        Args:
            G: Gravitational constant
            epsilon: Softening length (must match force calculation)
        """
        self.G = G
        self.epsilon = epsilon

    def compute_energies(self, bodies: Sequence[Body]) -> Tuple[float, float, float]:
        """Compute kinetic, potential, and total energy.

        Potential uses the same softening as the force law:
        U = -G * sum_{i<j} m_i * m_j / sqrt(r_ij^2 + eps^2)

        Args:
            bodies: Current bodies

        Returns:
            Tuple of (kinetic_energy, potential_energy, total_energy)
        """
        positions, velocities, masses = to_arrays(bodies)
        n = len(masses)

        # K = 0.5 * sum m_i * v_i^2
        v_sq = np.sum(velocities ** 2, axis=1)
        K = 0.5 * float(np.sum(masses * v_sq))

        U = 0.0
        if n > 1:
            r_diff = positions[np.newaxis, :, :] - positions[:, np.newaxis, :]
            r_sq = np.sum(r_diff ** 2, axis=2)
            r_soft = np.sqrt(r_sq + self.epsilon ** 2)
            pair_mass = masses[:, np.newaxis] * masses[np.newaxis, :]
            # Upper triangle counts each pair once
            iu = np.triu_indices(n, k=1)
            U = -self.G * float(np.sum(pair_mass[iu] / r_soft[iu]))

        return K, U, K + U

    def center_of_mass(self, bodies: Sequence[Body]) -> Tuple[float, float]:
        """Mass-weighted center; the plain centroid if total mass is zero."""
        positions, _, masses = to_arrays(bodies)
        if len(masses) == 0:
            return 0.0, 0.0

        total_mass = np.sum(masses)
        if total_mass > 0:
            com = np.sum(masses[:, np.newaxis] * positions, axis=0) / total_mass
        else:
            com = np.mean(positions, axis=0)
        return float(com[0]), float(com[1])

    def total_momentum(self, bodies: Sequence[Body]) -> Tuple[float, float]:
        """Total linear momentum (px, py)."""
        _, velocities, masses = to_arrays(bodies)
        p = np.sum(masses[:, np.newaxis] * velocities, axis=0) if len(masses) else np.zeros(2)
        return float(p[0]), float(p[1])

    def angular_momentum(self, bodies: Sequence[Body]) -> float:
        """Angular momentum about the origin (z component)."""
        positions, velocities, masses = to_arrays(bodies)
        if len(masses) == 0:
            return 0.0
        lz = masses * (positions[:, 0] * velocities[:, 1] - positions[:, 1] * velocities[:, 0])
        return float(np.sum(lz))
