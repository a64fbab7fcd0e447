"""Main simulator controller.

Owns the mutable simulation state: the initial conditions being edited, the
live body list, trail history and the running/tracing flags. The presentation
layer only ever receives a read-only Snapshot.
"""

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple
from nbody_viz.physics.body import Body, Position, copy_bodies
from nbody_viz.physics.diagnostics import Diagnostics
from nbody_viz.physics.integrators import Integrator, get_integrator
from nbody_viz.physics.trail import TrailHistory
from nbody_viz.presets import get_initial_state
from nbody_viz.utils.config import Config
from nbody_viz.utils.parsing import FIELD_NAMES, clamp_mass, format_value, parse_numeric_input

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Snapshot:
    """Read-only view of the simulation handed to renderers."""
    bodies: Tuple[Body, ...]
    trails: Dict[int, Tuple[Position, ...]]
    tracing: bool
    running: bool
    time: float
    step_count: int


class Simulator:
    """Main simulation controller.

    Step semantics: the body list is replaced as a whole on every step, so a
    partially-updated state is never observable from outside step().
    """

    def __init__(self, config: Optional[Config] = None, integrator: Optional[Integrator] = None):
        """Initialize simulator.

        Args:
            config: Simulation configuration (defaults used if None)
            integrator: Integrator to use (default: taken from config)
        """
        self.config = config or Config()
        self.integrator = integrator or get_integrator(self.config.integrator)
        self.dt = self.config.dt
        self.G = self.config.G
        self.epsilon = self.config.softening

        self.num_bodies = self.config.num_bodies
        self.running = self.config.running
        self.tracing = self.config.tracing

        self.trails = TrailHistory(self.config.max_trail_length)
        self.editable_bodies: List[Body] = get_initial_state(self.num_bodies)
        self.input_strings: Dict[int, Dict[str, str]] = {}
        self.bodies: List[Body] = []
        self.time = 0.0
        self.step_count = 0

        self._initialize_input_strings()
        self._restart()

    def _initialize_input_strings(self):
        """Rebuild the field text for every editable body from its values."""
        self.input_strings = {
            body.id: {
                'x': format_value(body.position.x),
                'y': format_value(body.position.y),
                'vx': format_value(body.velocity.vx),
                'vy': format_value(body.velocity.vy),
                'mass': format_value(body.mass),
            }
            for body in self.editable_bodies
        }

    def _restart(self):
        self.bodies = copy_bodies(self.editable_bodies)
        self.trails.clear()
        self.time = 0.0
        self.step_count = 0

    def reset(self) -> List[Body]:
        """Restart from the edited initial conditions.

        Returns:
            The new live body list
        """
        self.running = True
        self._restart()
        logger.debug("Simulation reset with %d bodies", len(self.bodies))
        return self.bodies

    def set_body_count(self, count: int) -> List[Body]:
        """Replace the whole body set with the preset for count and restart.

        Raises:
            ValueError: If no preset exists for count
        """
        new_state = get_initial_state(count)
        self.num_bodies = count
        self.editable_bodies = new_state
        self._initialize_input_strings()
        logger.info("Switched to %d-body preset", count)
        return self.reset()

    def handle_input_change(self, body_id: int, field: str, value_string: str) -> bool:
        """Record typed text for a field and commit it if it parses.

        Text that is not yet a number ('', '-', 'abc') is stored for display
        but leaves the initial conditions untouched. Negative masses are
        clamped to zero. Changes take effect on the next reset().

        Args:
            body_id: Id of the edited body
            field: One of 'x', 'y', 'vx', 'vy', 'mass'
            value_string: Raw field text

        Returns:
            True if a value was committed

        Raises:
            ValueError: If field is unknown
            KeyError: If no editable body has body_id
        """
        if field not in FIELD_NAMES:
            raise ValueError(f"Unknown field: {field}. Available: {list(FIELD_NAMES)}")
        index = self._index_of(body_id)

        self.input_strings.setdefault(body_id, {})[field] = value_string

        value = parse_numeric_input(value_string)
        if value is None:
            logger.debug("Input %r for body %d field %s not committed", value_string, body_id, field)
            return False

        body = self.editable_bodies[index]
        if field == 'mass':
            updated = body.evolve(mass=clamp_mass(value))
        elif field in ('x', 'y'):
            updated = body.evolve(position=body.position._replace(**{field: value}))
        else:
            updated = body.evolve(velocity=body.velocity._replace(**{field: value}))

        self.editable_bodies = [
            updated if i == index else b for i, b in enumerate(self.editable_bodies)
        ]
        return True

    def _index_of(self, body_id: int) -> int:
        for i, body in enumerate(self.editable_bodies):
            if body.id == body_id:
                return i
        raise KeyError(f"No body with id {body_id}")

    def step(self) -> List[Body]:
        """Advance the live bodies by one fixed time step."""
        self.bodies = self.integrator.step(self.bodies, self.dt, self.G, self.epsilon)
        self.trails.record(self.bodies)
        self.time += self.dt
        self.step_count += 1
        return self.bodies

    def tick(self) -> bool:
        """Per-frame callback: step once if running.

        Returns:
            True if a step was taken
        """
        if not self.running:
            return False
        self.step()
        return True

    def run_steps(self, k: int):
        """Run up to k ticks, stopping early once paused."""
        for _ in range(k):
            if not self.tick():
                return

    def pause(self):
        """Pause simulation."""
        self.running = False

    def resume(self):
        """Resume simulation."""
        self.running = True

    def toggle_running(self) -> bool:
        self.running = not self.running
        return self.running

    def toggle_tracing(self) -> bool:
        """Switch between fading afterimages and persistent line trails."""
        self.tracing = not self.tracing
        return self.tracing

    def snapshot(self) -> Snapshot:
        """Immutable view of the current state."""
        return Snapshot(
            bodies=tuple(self.bodies),
            trails=self.trails.snapshot(),
            tracing=self.tracing,
            running=self.running,
            time=self.time,
            step_count=self.step_count,
        )

    def get_energy(self) -> float:
        """Get current total (softened) energy."""
        return Diagnostics(self.G, self.epsilon).compute_energies(self.bodies)[2]
