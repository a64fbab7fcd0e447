"""Tests for configuration loading and validation."""

import json
import pytest
from nbody_viz.utils.config import Config, load_config, save_config


def test_defaults():
    """Test default physics and canvas settings."""
    config = Config()

    assert (config.G, config.dt, config.softening) == (1.0, 0.1, 0.5)
    assert (config.canvas_width, config.canvas_height) == (700, 420)
    assert config.max_trail_length == 500
    assert config.num_bodies == 3


@pytest.mark.parametrize("kwargs", [
    {'dt': 0.0},
    {'softening': -0.1},
    {'max_trail_length': 0},
    {'afterimage_decay': 1.0},
    {'canvas_width': 0},
    {'frame_interval_ms': 0},
])
def test_invalid_values(kwargs):
    """Test validation in __post_init__."""
    with pytest.raises(ValueError):
        Config(**kwargs)


def test_save_load_json(tmp_path):
    """Test JSON config files."""
    path = tmp_path / "config.json"
    save_config(Config(dt=0.05, num_bodies=2), str(path))

    assert json.loads(path.read_text())['dt'] == 0.05
    loaded = load_config(str(path))
    assert loaded.dt == 0.05
    assert loaded.num_bodies == 2


def test_load_yaml_with_overrides(tmp_path):
    """Test YAML config files and command line overrides."""
    path = tmp_path / "config.yaml"
    path.write_text("softening: 0.01\ntracing: true\n")

    loaded = load_config(str(path), overrides={'softening': 0.2, 'dt': None})

    assert loaded.softening == 0.2
    assert loaded.tracing is True
    assert loaded.dt == 0.1


def test_unsupported_format(tmp_path):
    """Test that unknown suffixes and keys are rejected."""
    path = tmp_path / "config.toml"
    path.write_text("dt = 0.1\n")
    with pytest.raises(ValueError):
        load_config(str(path))

    with pytest.raises(ValueError):
        save_config(Config(), str(tmp_path / "config.ini"))

    bad_keys = tmp_path / "bad.json"
    bad_keys.write_text('{"timestep": 0.1}')
    with pytest.raises(ValueError):
        load_config(str(bad_keys))
