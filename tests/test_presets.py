"""Tests for preset scenarios."""

import pytest
from nbody_viz.presets import TwoBody, ThreeBody, available_body_counts, get_initial_state, get_preset


def test_two_body():
    """Test the sun/planet preset."""
    preset = get_preset(2)
    star, planet = preset.generate()

    assert preset.name == "two_body"
    assert isinstance(preset, TwoBody)
    assert (star.id, star.mass, star.radius) == (1, 1000.0, 8)
    assert star.position == (0.0, 0.0) and star.velocity == (0.0, 0.0)
    assert (planet.id, planet.mass, planet.radius) == (2, 1.0, 4)
    assert planet.position == (150.0, 0.0) and planet.velocity == (0.0, 3.0)
    assert star.color == '#FFD700'
    assert planet.color == '#ADD8E6'


def test_three_body():
    """Test the collinear three-body preset."""
    preset = get_preset(3)
    bodies = preset.generate()

    assert preset.name == "three_body"
    assert isinstance(preset, ThreeBody)
    assert [b.id for b in bodies] == [1, 2, 3]
    assert all(b.mass == 500.0 and b.radius == 5.0 for b in bodies)
    assert [b.position for b in bodies] == [(0.0, 0.0), (100.0, 0.0), (-100.0, 0.0)]
    assert [b.velocity for b in bodies] == [(0.0, 0.0), (0.0, 2.0), (0.0, -2.0)]
    assert bodies[2].color == '#90EE90'


def test_unknown_count():
    """Test that counts without a preset raise."""
    assert available_body_counts() == [2, 3]
    with pytest.raises(ValueError):
        get_initial_state(5)


def test_presets_return_fresh_lists():
    """Test each call yields an independent list."""
    first = get_initial_state(3)
    second = get_initial_state(3)

    assert first == second
    assert first is not second
