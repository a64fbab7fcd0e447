"""Tests for the gravitational acceleration kernel."""

import math
import numpy as np
from nbody_viz.physics.body import Body
from nbody_viz.physics.gravity import compute_acceleration, compute_accelerations


def test_acceleration_points_toward_other_body():
    """Test that attraction pulls the target toward the source."""
    target = Body.create(1, 1.0, 0.0, 0.0, 0.0, 0.0)
    source = Body.create(2, 100.0, 10.0, 0.0, 0.0, 0.0)

    ax, ay = compute_acceleration(target, [target, source])

    assert ax > 0
    assert ay == 0.0


def test_acceleration_matches_softened_formula():
    """Test a single pair against a*(dx, dy) / (r^2 + eps^2)^(3/2)."""
    target = Body.create(1, 1.0, 1.0, 2.0, 0.0, 0.0)
    source = Body.create(2, 50.0, 4.0, 6.0, 0.0, 0.0)
    G, eps = 2.0, 0.3

    ax, ay = compute_acceleration(target, [target, source], G=G, epsilon=eps)

    expected = G * 50.0 / (25.0 + eps ** 2) ** 1.5
    assert np.isclose(ax, expected * 3.0)
    assert np.isclose(ay, expected * 4.0)


def test_massless_body_exerts_no_force():
    """Test that a mass-0 body contributes exactly zero acceleration."""
    target = Body.create(1, 10.0, 0.0, 0.0, 0.0, 0.0)
    ghost = Body.create(2, 0.0, 3.0, -4.0, 1.0, 1.0)

    assert compute_acceleration(target, [target, ghost]) == (0.0, 0.0)


def test_massless_body_is_still_attracted():
    """Test that a mass-0 body feels the gravity of others."""
    star = Body.create(1, 1000.0, 0.0, 0.0, 0.0, 0.0)
    ghost = Body.create(2, 0.0, 100.0, 0.0, 0.0, 0.0)

    ax, ay = compute_acceleration(ghost, [star, ghost])

    assert ax < 0
    assert ay == 0.0


def test_body_ignores_itself():
    """Test that a lone body has zero acceleration."""
    body = Body.create(1, 1000.0, 5.0, 5.0, 0.0, 0.0)
    assert compute_acceleration(body, [body]) == (0.0, 0.0)


def test_coincident_bodies_stay_finite():
    """Test that softening prevents infinite or NaN acceleration."""
    a = Body.create(1, 1000.0, 7.0, 7.0, 0.0, 0.0)
    b = Body.create(2, 1000.0, 7.0, 7.0, 0.0, 0.0)

    for ax, ay in compute_accelerations([a, b]):
        assert math.isfinite(ax) and math.isfinite(ay)
        assert (ax, ay) == (0.0, 0.0)


def test_near_coincident_bodies_stay_finite():
    """Test extremely close bodies still give bounded values."""
    a = Body.create(1, 1000.0, 0.0, 0.0, 0.0, 0.0)
    b = Body.create(2, 1000.0, 1e-12, 0.0, 0.0, 0.0)

    for ax, ay in compute_accelerations([a, b], epsilon=0.01):
        assert math.isfinite(ax) and math.isfinite(ay)


def test_accelerations_are_deterministic():
    """Test identical input order gives bit-identical output."""
    bodies = [
        Body.create(1, 500.0, 0.0, 0.0, 0.0, 0.0),
        Body.create(2, 500.0, 100.0, 0.0, 0.0, 2.0),
        Body.create(3, 500.0, -100.0, 0.0, 0.0, -2.0),
        Body.create(4, 3.3, 17.1, -42.7, 0.4, 0.1),
    ]

    first = compute_accelerations(bodies)
    second = compute_accelerations(list(bodies))

    assert first == second


def test_compute_accelerations_keeps_order():
    """Test that the result list lines up with the input list."""
    bodies = [
        Body.create(1, 10.0, -5.0, 0.0, 0.0, 0.0),
        Body.create(2, 10.0, 5.0, 0.0, 0.0, 0.0),
    ]

    (ax1, _), (ax2, _) = compute_accelerations(bodies)

    assert ax1 > 0
    assert ax2 < 0
    assert ax1 == -ax2


def test_create_assigns_color_from_id():
    """Test bodies without an explicit color get the color for their id."""
    assert Body.create(1, 1.0, 0, 0, 0, 0).color == '#FFD700'
    assert Body.create(7, 1.0, 0, 0, 0, 0).color == '#FF6347'
    assert Body.create(7, 1.0, 0, 0, 0, 0, color=None).color == '#FF6347'
    assert Body.create(2, 1.0, 0, 0, 0, 0, color='#123456').color == '#123456'
