"""GIF export of rendered canvas frames."""

import numpy as np
from pathlib import Path
from typing import List, Optional, Tuple


class GIFExporter:
    """Collects canvas frames and writes them as a looping GIF.

    All frames must share the size of the first one, which is the case for
    frames captured from one Renderer2D.
    """

    def __init__(self, output_path: str, fps: int = 30, duration: Optional[float] = None):
        """
        Args:
            output_path: Output file path (.gif)
            fps: Frames per second (used if duration is None)
            duration: Seconds per frame (overrides fps)
        """
        if duration is None and fps <= 0:
            raise ValueError(f"fps must be positive, got {fps}")
        self.output_path = output_path
        self.fps = fps
        self.duration = duration if duration is not None else (1.0 / fps)
        self.frames: List[np.ndarray] = []
        self._frame_size: Optional[Tuple[int, int]] = None

    def add_frame(self, frame: np.ndarray):
        """Queue a frame.

        Args:
            frame: (H, W, 3) or (H, W, 4) image, uint8 or floats in [0, 1].
                An alpha channel is dropped.

        Raises:
            ValueError: If the frame size differs from earlier frames
        """
        if frame.ndim != 3 or frame.shape[2] not in (3, 4):
            raise ValueError(f"Expected an (H, W, 3) or (H, W, 4) image, got shape {frame.shape}")
        frame = frame[:, :, :3]
        if frame.dtype != np.uint8:
            frame = (np.clip(frame, 0.0, 1.0) * 255).astype(np.uint8)

        size = frame.shape[:2]
        if self._frame_size is None:
            self._frame_size = size
        elif size != self._frame_size:
            raise ValueError(f"Frame size {size} does not match {self._frame_size}")
        self.frames.append(np.ascontiguousarray(frame))

    def __len__(self) -> int:
        return len(self.frames)

    def export(self):
        """Write all queued frames.

        Raises:
            ValueError: If no frames were added
        """
        if not self.frames:
            raise ValueError("No frames to export")

        try:
            import imageio.v2 as imageio
        except ImportError:
            raise ImportError(
                "GIF export requires imageio. Install with: pip install nbody-viz[export]"
            )

        Path(self.output_path).parent.mkdir(parents=True, exist_ok=True)
        imageio.mimsave(self.output_path, self.frames, duration=self.duration, loop=0)
