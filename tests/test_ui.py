"""Tests for GUI control handlers."""

from types import SimpleNamespace
import pytest
from nbody_viz.physics.simulator import Simulator
from nbody_viz.utils.config import Config

pytest.importorskip("tkinter")
from nbody_viz.ui.main import NBodyVizGUI  # noqa: E402


def _gui_stub(sim, selected):
    calls = []
    stub = SimpleNamespace(
        simulator=sim,
        body_count_var=SimpleNamespace(get=lambda: selected),
        _build_body_inputs=lambda: calls.append('inputs'),
        _refresh_buttons=lambda: calls.append('buttons'),
        draw=lambda: calls.append('draw'),
        _schedule=lambda: calls.append('schedule'),
    )
    return stub, calls


def test_reselecting_body_count_keeps_edits():
    """Test choosing the current body count leaves edited initial conditions alone."""
    sim = Simulator(Config(num_bodies=2))
    sim.handle_input_change(2, 'vy', '2.5')
    stub, calls = _gui_stub(sim, 2)

    NBodyVizGUI._on_body_count_selected(stub)

    assert sim.editable_bodies[1].velocity.vy == 2.5
    assert sim.input_strings[2]['vy'] == '2.5'
    assert calls == []


def test_selecting_new_body_count_loads_preset():
    """Test choosing another body count replaces the bodies and rebuilds the inputs."""
    sim = Simulator(Config(num_bodies=2))
    sim.handle_input_change(2, 'vy', '2.5')
    stub, calls = _gui_stub(sim, 3)

    NBodyVizGUI._on_body_count_selected(stub)

    assert sim.num_bodies == 3
    assert len(sim.editable_bodies) == 3
    assert calls == ['inputs', 'buttons', 'draw', 'schedule']
