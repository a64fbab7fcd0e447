"""Frame export."""

from nbody_viz.io.gif_exporter import GIFExporter

__all__ = ["GIFExporter"]
