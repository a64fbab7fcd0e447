"""Tests for GIF export."""

import re
import numpy as np
from pathlib import Path
import pytest
from nbody_viz.io.gif_exporter import GIFExporter


def test_export_without_frames_fails(tmp_path):
    """Test exporting an empty exporter raises."""
    exporter = GIFExporter(str(tmp_path / "empty.gif"))

    with pytest.raises(ValueError):
        exporter.export()


def test_float_frames_converted():
    """Test float frames are scaled to uint8."""
    exporter = GIFExporter("unused.gif", fps=10)
    exporter.add_frame(np.ones((4, 4, 3)))

    assert len(exporter) == 1
    assert exporter.frames[0].dtype == np.uint8
    assert exporter.frames[0].max() == 255
    assert exporter.duration == pytest.approx(0.1)


def test_frame_validation():
    """Test alpha channels are dropped and mismatched sizes rejected."""
    exporter = GIFExporter("unused.gif")
    exporter.add_frame(np.zeros((4, 6, 4), dtype=np.uint8))

    assert exporter.frames[0].shape == (4, 6, 3)
    with pytest.raises(ValueError):
        exporter.add_frame(np.zeros((5, 6, 3), dtype=np.uint8))
    with pytest.raises(ValueError):
        exporter.add_frame(np.zeros((4, 6), dtype=np.uint8))


def test_export_gif(tmp_path):
    """Test writing a small animated GIF."""
    pytest.importorskip("imageio.v2")
    path = tmp_path / "out.gif"
    exporter = GIFExporter(str(path), fps=10)
    for shade in (0, 128, 255):
        exporter.add_frame(np.full((8, 8, 3), shade, dtype=np.uint8))

    exporter.export()

    assert path.exists() and path.stat().st_size > 0


def test_export_extra_supports_v2_api():
    """Test the export extra pins an imageio release that ships imageio.v2."""
    setup_py = Path(__file__).resolve().parent.parent / "setup.py"
    match = re.search(r'"imageio>=(\d+)\.(\d+)', setup_py.read_text())

    assert match is not None
    assert (int(match.group(1)), int(match.group(2))) >= (2, 16)
