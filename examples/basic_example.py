"""Basic example of using the N-body simulator without a window."""

from nbody_viz import Config, Simulator
from nbody_viz.physics.diagnostics import Diagnostics


def main():
    """Run the two-body preset with a slightly faster planet."""
    sim = Simulator(Config(num_bodies=2))

    # Same path the GUI entry fields use
    sim.handle_input_change(2, 'vy', '2.8')
    sim.reset()

    diagnostics = Diagnostics(sim.G, sim.epsilon)

    print("Running simulation...")
    print(f"Initial energy: {sim.get_energy():.6f}")

    for step in range(1000):
        sim.step()
        if step % 200 == 0:
            planet = sim.bodies[1]
            print(f"Step {step}: Time={sim.time:.1f}, "
                  f"Planet=({planet.position.x:.1f}, {planet.position.y:.1f}), "
                  f"Lz={diagnostics.angular_momentum(sim.bodies):.3f}")

    print(f"Final energy: {sim.get_energy():.6f}")
    print("Simulation complete!")


if __name__ == "__main__":
    main()
