"""Bounded per-body position history used for drawing trails."""

from collections import deque
from typing import Deque, Dict, Iterable, Iterator, List, Tuple
from nbody_viz.physics.body import Body, Position

MAX_TRAIL_LENGTH_DEFAULT = 500


class TrailHistory:
    """FIFO position history keyed by body id.

    Each history keeps at most max_length samples; recording one more evicts
    the oldest. Physics never reads from here.
    """

    def __init__(self, max_length: int = MAX_TRAIL_LENGTH_DEFAULT):
        if max_length < 1:
            raise ValueError(f"max_length must be at least 1, got {max_length}")
        self.max_length = max_length
        self._histories: Dict[int, Deque[Position]] = {}

    def record(self, bodies: Iterable[Body]):
        """Append the current position of each body to its history."""
        for body in bodies:
            history = self._histories.get(body.id)
            if history is None:
                history = deque(maxlen=self.max_length)
                self._histories[body.id] = history
            history.append(body.position)

    def clear(self):
        """Drop every history."""
        self._histories.clear()

    def get(self, body_id: int) -> List[Position]:
        """Return a copy of one body's history, oldest first."""
        return list(self._histories.get(body_id, ()))

    def snapshot(self) -> Dict[int, Tuple[Position, ...]]:
        """Return an immutable copy of all histories."""
        return {body_id: tuple(history) for body_id, history in self._histories.items()}

    def __len__(self) -> int:
        return len(self._histories)

    def __contains__(self, body_id: int) -> bool:
        return body_id in self._histories

    def __iter__(self) -> Iterator[int]:
        return iter(self._histories)
