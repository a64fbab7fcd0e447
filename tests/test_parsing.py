"""Tests for numeric input parsing."""

import pytest
from nbody_viz.utils.parsing import clamp_mass, format_value, parse_numeric_input


@pytest.mark.parametrize("text", ['', '   ', '-', '+', '.', '-.', 'abc', '1e', '--1', '1.2.3', 'nan', 'inf', '-inf', None])
def test_in_progress_text_is_not_a_number(text):
    """Test partial or non-numeric text parses to None without raising."""
    assert parse_numeric_input(text) is None


@pytest.mark.parametrize("text,expected", [
    ('3', 3.0),
    ('-2.5', -2.5),
    (' 7 ', 7.0),
    ('.5', 0.5),
    ('5.', 5.0),
    ('1e3', 1000.0),
    ('-0', 0.0),
])
def test_valid_numbers(text, expected):
    """Test ordinary numeric text."""
    assert parse_numeric_input(text) == expected


def test_clamp_mass():
    """Test masses are clamped at zero."""
    assert clamp_mass(-3.0) == 0.0
    assert clamp_mass(0.0) == 0.0
    assert clamp_mass(12.5) == 12.5


def test_format_value():
    """Test field text formatting drops trailing .0 only."""
    assert format_value(150.0) == '150'
    assert format_value(-2.0) == '-2'
    assert format_value(0.25) == '0.25'
