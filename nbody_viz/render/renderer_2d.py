"""2D canvas renderer using matplotlib."""

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.backends.backend_agg import FigureCanvasAgg
from matplotlib.collections import LineCollection, PatchCollection
from matplotlib.colors import to_rgb
from matplotlib.figure import Figure
from matplotlib.patches import Circle
from typing import Optional
from nbody_viz.physics.simulator import Snapshot
from nbody_viz.render.base import Renderer
from nbody_viz.render.geometry import (
    afterimage_alphas,
    afterimage_depth,
    points_to_screen,
    segment_alphas,
    trail_segments,
    world_to_screen,
)


class Renderer2D(Renderer):
    """Draws bodies and trails on a pixel-space canvas.

    The axes fill the whole figure and use one data unit per pixel with y
    pointing down, so body radii and trail widths read as canvas pixels.
    """

    BACKGROUND = 'black'
    TRAIL_LINEWIDTH = 1.5

    def __init__(
        self,
        width: int = 700,
        height: int = 420,
        dpi: int = 100,
        afterimage_decay: float = 0.9,
        interactive: bool = False,
        title: str = "N-Body Simulation"
    ):
        """Initialize 2D renderer.

        Args:
            width: Canvas width in pixels
            height: Canvas height in pixels
            dpi: Dots per inch
            afterimage_decay: Per-frame opacity factor of fading afterimages
            interactive: Open a pyplot window (otherwise draw off-screen)
            title: Window title in interactive mode
        """
        self.width = width
        self.height = height
        self.dpi = dpi
        self.afterimage_decay = afterimage_decay
        self.interactive = interactive
        self.title = title

        self.fig: Optional[Figure] = None
        self.ax = None
        self.initialized = False
        self._drawn = False

    def _initialize(self):
        """Create the figure if not already done."""
        if self.initialized:
            return

        figsize = (self.width / self.dpi, self.height / self.dpi)
        if self.interactive:
            self.fig = plt.figure(figsize=figsize, dpi=self.dpi)
            manager = self.fig.canvas.manager
            if manager is not None:
                manager.set_window_title(self.title)
        else:
            self.fig = Figure(figsize=figsize, dpi=self.dpi)
            FigureCanvasAgg(self.fig)

        self.fig.patch.set_facecolor(self.BACKGROUND)
        self.ax = self.fig.add_axes([0, 0, 1, 1])
        self._setup_axes()

        if self.interactive:
            plt.show(block=False)
            plt.pause(0.1)

        self.initialized = True

    def get_figure(self) -> Figure:
        """Return the figure, creating it if needed (for embedding in a GUI)."""
        self._initialize()
        return self.fig

    def _setup_axes(self):
        self.ax.set_facecolor(self.BACKGROUND)
        self.ax.set_xlim(0, self.width)
        self.ax.set_ylim(self.height, 0)
        self.ax.set_aspect('equal')
        self.ax.set_axis_off()

    def _is_figure_open(self) -> bool:
        """Check if the interactive window is still open."""
        if self.fig is None:
            return False
        if not self.interactive:
            return True
        if not plt.fignum_exists(self.fig.number):
            self.initialized = False
            self.fig = None
            self.ax = None
            return False
        return True

    def render(self, snapshot: Snapshot):
        """Render current frame."""
        if self.initialized and not self._is_figure_open():
            return
        self._initialize()

        self.ax.clear()
        self._setup_axes()

        if snapshot.tracing:
            self._draw_line_trails(snapshot)
        else:
            self._draw_afterimages(snapshot)
        self._draw_bodies(snapshot)

        self._drawn = True
        self.fig.canvas.draw_idle()
        if self.interactive:
            plt.pause(0.001)

    def _draw_line_trails(self, snapshot: Snapshot):
        """Persistent trails: every stored position, older segments fainter."""
        for body in snapshot.bodies:
            history = snapshot.trails.get(body.id, ())
            if len(history) < 2:
                continue
            screen = points_to_screen(history, self.width, self.height)
            segments = trail_segments(screen)
            colors = np.zeros((len(segments), 4))
            colors[:, :3] = to_rgb(body.color)
            colors[:, 3] = segment_alphas(len(history))
            self.ax.add_collection(LineCollection(
                segments, colors=colors, linewidths=self.TRAIL_LINEWIDTH
            ))

    def _draw_afterimages(self, snapshot: Snapshot):
        """Fading ghosts of the last few positions, like a translucent veil per frame."""
        depth = afterimage_depth(self.afterimage_decay)
        for body in snapshot.bodies:
            history = snapshot.trails.get(body.id, ())
            # The newest entry is the current position, drawn as the body itself
            ghosts = list(history[-(depth + 1):-1])[::-1]
            if not ghosts:
                continue
            screen = points_to_screen(ghosts, self.width, self.height)
            colors = np.zeros((len(ghosts), 4))
            colors[:, :3] = to_rgb(body.color)
            colors[:, 3] = afterimage_alphas(len(ghosts), self.afterimage_decay)
            patches = [Circle((sx, sy), body.radius) for sx, sy in screen]
            self.ax.add_collection(PatchCollection(
                patches, facecolors=colors, edgecolors='none'
            ))

    def _draw_bodies(self, snapshot: Snapshot):
        for body in snapshot.bodies:
            screen_x, screen_y = world_to_screen(
                body.position.x, body.position.y, self.width, self.height
            )
            self.ax.add_patch(Circle((screen_x, screen_y), body.radius, color=body.color))

    def capture_frame(self) -> np.ndarray:
        """Capture current frame as image array."""
        if self.fig is None or not self._drawn:
            raise RuntimeError("Renderer not initialized. Call render() first.")

        self.fig.canvas.draw()
        buf = np.asarray(self.fig.canvas.buffer_rgba())
        return np.ascontiguousarray(buf[:, :, :3])

    def close(self):
        """Close the renderer."""
        if self.fig is not None:
            if self.interactive:
                plt.close(self.fig)
            self.fig = None
            self.ax = None
            self.initialized = False
            self._drawn = False
