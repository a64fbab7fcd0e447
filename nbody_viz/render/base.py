"""Base renderer interface."""

from abc import ABC, abstractmethod
import numpy as np
from nbody_viz.physics.simulator import Snapshot


class Renderer(ABC):
    """Abstract base class for renderers."""

    @abstractmethod
    def render(self, snapshot: Snapshot):
        """Render current frame.

        Args:
            snapshot: Read-only simulation state
        """
        pass

    @abstractmethod
    def capture_frame(self) -> np.ndarray:
        """Capture current frame as image array.

        Returns:
            Image array (H, W, 3) uint8
        """
        pass

    @abstractmethod
    def close(self):
        """Close the renderer."""
        pass
