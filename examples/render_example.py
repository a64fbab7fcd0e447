"""Render a three-body run to an animated GIF (requires imageio)."""

from nbody_viz import Config, Simulator
from nbody_viz.io import GIFExporter
from nbody_viz.render import Renderer2D


def main():
    config = Config(num_bodies=3, tracing=True)
    sim = Simulator(config)
    renderer = Renderer2D(width=config.canvas_width, height=config.canvas_height)
    exporter = GIFExporter("three_body.gif", fps=30)

    for step in range(600):
        sim.step()
        if step % 5 == 0:
            renderer.render(sim.snapshot())
            exporter.add_frame(renderer.capture_frame())

    exporter.export()
    renderer.close()
    print(f"Wrote {len(exporter)} frames to {exporter.output_path}")


if __name__ == "__main__":
    main()
