"""World-to-screen mapping and trail shading."""

import math
from typing import Sequence, Tuple
import numpy as np

MIN_VISIBLE_ALPHA = 0.02


def world_to_screen(x: float, y: float, width: float, height: float) -> Tuple[float, float]:
    """Map world coordinates to canvas pixels.

    The origin sits at the canvas center and the y axis points up in the
    world but down on screen.
    """
    return width / 2 + x, height / 2 - y


def points_to_screen(points: Sequence[Tuple[float, float]], width: float, height: float) -> np.ndarray:
    """Vectorized world_to_screen for a sequence of (x, y) points.

    Returns:
        Array (n, 2) of screen coordinates
    """
    pts = np.asarray(points, dtype=np.float64).reshape(-1, 2)
    screen = np.empty_like(pts)
    screen[:, 0] = width / 2 + pts[:, 0]
    screen[:, 1] = height / 2 - pts[:, 1]
    return screen


def trail_segments(screen_points: np.ndarray) -> np.ndarray:
    """Consecutive point pairs as line segments, shape (n - 1, 2, 2)."""
    if len(screen_points) < 2:
        return np.empty((0, 2, 2))
    return np.stack([screen_points[:-1], screen_points[1:]], axis=1)


def segment_alphas(n_points: int) -> np.ndarray:
    """Opacity of each trail segment: segment i of n is drawn at i/n.

    The newest segment is nearly opaque, the oldest nearly transparent.
    """
    if n_points < 2:
        return np.empty(0)
    return np.arange(1, n_points) / n_points


def afterimage_depth(decay: float, min_alpha: float = MIN_VISIBLE_ALPHA) -> int:
    """Number of past frames still visible when each frame fades by decay."""
    return max(1, math.ceil(math.log(min_alpha) / math.log(decay)))


def afterimage_alphas(n_ghosts: int, decay: float) -> np.ndarray:
    """Opacity of ghosts aged 1..n_ghosts frames, newest first."""
    return decay ** np.arange(1, n_ghosts + 1)
