"""CLI main entry point."""

import argparse
import logging
from dataclasses import replace
from typing import List, Optional, Tuple
from nbody_viz.io.gif_exporter import GIFExporter
from nbody_viz.physics.diagnostics import Diagnostics
from nbody_viz.physics.integrators import INTEGRATORS
from nbody_viz.physics.simulator import Simulator
from nbody_viz.presets import available_body_counts
from nbody_viz.render.renderer_2d import Renderer2D
from nbody_viz.utils.config import Config, load_config
from nbody_viz.utils.parsing import FIELD_NAMES

logger = logging.getLogger(__name__)


def parse_assignment(text: str) -> Tuple[int, str, str]:
    """Split an 'ID:FIELD=VALUE' override into its parts.

    The value is returned as raw text; it is parsed by the simulator the
    same way typed input is.

    Raises:
        ValueError: If text is malformed
    """
    target, sep, value = text.partition('=')
    body_id, colon, field = target.partition(':')
    if not sep or not colon:
        raise ValueError(f"Expected ID:FIELD=VALUE, got {text!r}")
    try:
        body_id_int = int(body_id)
    except ValueError:
        raise ValueError(f"Body id must be an integer, got {body_id!r}")
    field = field.strip()
    if field not in FIELD_NAMES:
        raise ValueError(f"Unknown field: {field}. Available: {list(FIELD_NAMES)}")
    return body_id_int, field, value


def build_config(args) -> Config:
    """Config from --config (if any) with command line values on top."""
    config = load_config(args.config) if args.config else Config()
    if args.config and args.bodies is not None and args.bodies != config.num_bodies:
        import warnings
        warnings.warn(
            f"--bodies {args.bodies} overrides num_bodies={config.num_bodies} from {args.config}",
            UserWarning
        )
    overrides = {
        'G': args.G,
        'dt': args.dt,
        'softening': args.softening,
        'max_trail_length': args.max_trail,
        'num_bodies': args.bodies,
        'integrator': args.integrator,
        'fps': args.fps,
    }
    if args.trails:
        overrides['tracing'] = True
    if args.output is not None:
        overrides['output_path'] = args.output
    return replace(config, **{k: v for k, v in overrides.items() if v is not None})


def run_simulation(args, config: Config):
    """Run a headless simulation and print a diagnostics table."""
    sim = Simulator(config)

    for body_id, field, value in args.assignments:
        if not sim.handle_input_change(body_id, field, value):
            logger.warning("Ignoring non-numeric value %r for body %d field %s", value, body_id, field)
    sim.reset()

    diagnostics = Diagnostics(G=sim.G, epsilon=sim.epsilon)

    renderer = None
    if args.render or args.export_gif:
        renderer = Renderer2D(
            width=config.canvas_width,
            height=config.canvas_height,
            afterimage_decay=config.afterimage_decay,
            interactive=args.render,
        )

    gif_exporter = None
    if args.export_gif:
        gif_exporter = GIFExporter(config.output_path + ".gif", fps=config.fps)

    print(f"Running simulation: {sim.num_bodies} bodies, {args.steps} steps")
    print(f"Integrator: {sim.integrator.name}, dt: {sim.dt}, G: {sim.G}, eps: {sim.epsilon}")

    K0, U0, E0 = diagnostics.compute_energies(sim.bodies)
    cx, cy = diagnostics.center_of_mass(sim.bodies)

    print(f"{'Step':<8} {'Time':<10} {'K':<12} {'U':<12} {'E':<12} {'COMx':<10} {'COMy':<10} {'dE/E0':<10}")
    print("-" * 90)
    print(f"{0:<8} {0.0:<10.2f} {K0:<12.4f} {U0:<12.4f} {E0:<12.4f} {cx:<10.4f} {cy:<10.4f} {0.0:<10.2f}%")

    for step in range(1, args.steps + 1):
        sim.step()

        if renderer and step % args.render_every == 0:
            renderer.render(sim.snapshot())
            if gif_exporter:
                gif_exporter.add_frame(renderer.capture_frame())

        if step % args.debug_every == 0 or step == args.steps:
            K, U, E = diagnostics.compute_energies(sim.bodies)
            cx, cy = diagnostics.center_of_mass(sim.bodies)
            dE = (E - E0) / abs(E0) * 100 if abs(E0) > 0 else 0.0
            print(f"{step:<8} {sim.time:<10.2f} {K:<12.4f} {U:<12.4f} {E:<12.4f} {cx:<10.4f} {cy:<10.4f} {dE:<10.2f}%")

    if gif_exporter:
        print(f"Exporting GIF to {gif_exporter.output_path}...")
        gif_exporter.export()

    if renderer:
        renderer.close()

    print("Simulation complete!")
    return sim


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="N-Body Simulator - headless runner")

    # Simulation parameters
    parser.add_argument('--bodies', type=int, default=None, choices=available_body_counts(),
                        help='Number of bodies (selects the preset)')
    parser.add_argument('--steps', type=int, default=1000,
                        help='Number of simulation steps')
    parser.add_argument('--dt', type=float, default=None,
                        help='Time step (default: 0.1)')
    parser.add_argument('--G', type=float, default=None,
                        help='Gravitational constant (default: 1.0)')
    parser.add_argument('--softening', type=float, default=None,
                        help='Softening length epsilon (default: 0.5)')
    parser.add_argument('--integrator', type=str, default=None,
                        choices=sorted(INTEGRATORS.keys()),
                        help='Numerical integrator (default: semi_implicit_euler)')
    parser.add_argument('--set', dest='assignments', action='append', default=[],
                        type=_assignment_arg, metavar='ID:FIELD=VALUE',
                        help=f'Edit an initial condition before starting; FIELD is one of {", ".join(FIELD_NAMES)}')
    parser.add_argument('--config', type=str, default=None,
                        help='Config file (.json or .yaml)')
    parser.add_argument('--debug-every', type=int, default=100,
                        help='Print diagnostics every N steps')

    # Rendering
    parser.add_argument('--render', action='store_true',
                        help='Show the canvas in a window while running')
    parser.add_argument('--render-every', type=int, default=1,
                        help='Render every N steps')
    parser.add_argument('--trails', action='store_true',
                        help='Persistent line trails instead of fading afterimages')
    parser.add_argument('--max-trail', type=int, default=None,
                        help='Maximum trail length per body (default: 500)')

    # Export
    parser.add_argument('--export-gif', action='store_true',
                        help='Export rendered frames to an animated GIF')
    parser.add_argument('--output', type=str, default=None,
                        help='Output file base name')
    parser.add_argument('--fps', type=int, default=None,
                        help='Frames per second for export')

    parser.add_argument('--verbose', action='store_true',
                        help='Enable debug logging')
    return parser


def _assignment_arg(text: str) -> Tuple[int, str, str]:
    try:
        return parse_assignment(text)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e))


def main(argv: Optional[List[str]] = None):
    """CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format='%(levelname)s %(name)s: %(message)s')

    if args.steps < 0:
        parser.error("--steps must be non-negative")
    if args.debug_every < 1 or args.render_every < 1:
        parser.error("--debug-every and --render-every must be at least 1")

    try:
        config = build_config(args)
    except ValueError as e:
        parser.error(str(e))

    try:
        run_simulation(args, config)
    except (KeyError, ValueError) as e:
        parser.error(str(e))


if __name__ == '__main__':
    main()
