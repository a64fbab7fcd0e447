"""GUI application using tkinter."""

import argparse
import logging
import tkinter as tk
from tkinter import ttk, messagebox
from typing import Dict, List, Optional
from matplotlib.backends.backend_tkagg import FigureCanvasTkAgg
from nbody_viz.physics.simulator import Simulator
from nbody_viz.presets import available_body_counts
from nbody_viz.render.renderer_2d import Renderer2D
from nbody_viz.utils.config import Config, load_config
from nbody_viz.utils.parsing import FIELD_NAMES

FIELD_LABELS = {
    'x': "Position X",
    'y': "Position Y",
    'vx': "Velocity Vx",
    'vy': "Velocity Vy",
    'mass': "Mass M",
}


class NBodyVizGUI:
    """Main GUI application.

    The frame loop is driven by root.after: each callback runs one complete
    step and draw, then schedules the next. Pausing cancels the pending
    callback, so a step is never interrupted.
    """

    def __init__(self, root, config: Optional[Config] = None):
        self.root = root
        self.root.title("N-Body Simulator")

        self.config = config or Config()
        self.simulator = Simulator(self.config)
        self.renderer = Renderer2D(
            width=self.config.canvas_width,
            height=self.config.canvas_height,
            afterimage_decay=self.config.afterimage_decay,
        )
        self._after_id: Optional[str] = None
        self._input_vars: List[tk.StringVar] = []

        self._create_widgets()
        self._setup_layout()
        self._build_body_inputs()
        self._refresh_buttons()
        self.draw()

        self.root.protocol("WM_DELETE_WINDOW", self.close)
        if self.simulator.running:
            self._schedule()

    def _create_widgets(self):
        """Create GUI widgets."""
        # Canvas (left)
        self.canvas_frame = ttk.Frame(self.root)
        self.canvas = FigureCanvasTkAgg(self.renderer.get_figure(), master=self.canvas_frame)

        # Control panel (right)
        self.control_frame = ttk.LabelFrame(self.root, text="Controls", padding=10)

        buttons = ttk.Frame(self.control_frame)
        buttons.grid(row=0, column=0, columnspan=2, sticky='ew', pady=5)
        self.play_button = ttk.Button(buttons, text="Pause", command=self.toggle_play)
        self.play_button.pack(side='left', expand=True, fill='x', padx=2)
        self.reset_button = ttk.Button(buttons, text="Reset", command=self.reset)
        self.reset_button.pack(side='left', expand=True, fill='x', padx=2)
        self.trail_button = ttk.Button(buttons, text="Trails: Fading", command=self.toggle_trails)
        self.trail_button.pack(side='left', expand=True, fill='x', padx=2)

        # Body count
        ttk.Label(self.control_frame, text="Bodies:").grid(row=1, column=0, sticky='w', pady=5)
        self.body_count_var = tk.IntVar(value=self.simulator.num_bodies)
        body_count_combo = ttk.Combobox(self.control_frame, textvariable=self.body_count_var,
                                        values=available_body_counts(), state="readonly", width=10)
        body_count_combo.grid(row=1, column=1, sticky='w', pady=5)
        body_count_combo.bind("<<ComboboxSelected>>", self._on_body_count_selected)

        # Initial conditions
        self.bodies_frame = ttk.LabelFrame(self.control_frame, text="Initial conditions (applied on reset)",
                                           padding=5)
        self.bodies_frame.grid(row=2, column=0, columnspan=2, sticky='nsew', pady=10)

        # Info display
        self.info_frame = ttk.LabelFrame(self.control_frame, text="Simulation Info", padding=5)
        self.info_frame.grid(row=3, column=0, columnspan=2, sticky='ew')
        self.time_label = ttk.Label(self.info_frame, text="Time: 0.00")
        self.time_label.pack(anchor='w')
        self.steps_label = ttk.Label(self.info_frame, text="Steps: 0")
        self.steps_label.pack(anchor='w')
        self.energy_label = ttk.Label(self.info_frame, text="Energy: 0.00")
        self.energy_label.pack(anchor='w')

    def _setup_layout(self):
        """Setup window layout."""
        self.canvas_frame.pack(side='left', padx=10, pady=10)
        self.canvas.get_tk_widget().pack()
        self.control_frame.pack(side='left', fill='y', padx=10, pady=10)

    def _build_body_inputs(self):
        """One column of entry fields per editable body."""
        for child in self.bodies_frame.winfo_children():
            child.destroy()
        self._input_vars = []

        for column, body in enumerate(self.simulator.editable_bodies):
            frame = ttk.LabelFrame(self.bodies_frame, text=f"Body {body.id}", padding=5)
            frame.grid(row=0, column=column, sticky='n', padx=3)
            tk.Label(frame, text="●", fg=body.color).grid(row=0, column=0, sticky='w')

            texts: Dict[str, str] = self.simulator.input_strings.get(body.id, {})
            for row, field in enumerate(FIELD_NAMES, start=1):
                ttk.Label(frame, text=FIELD_LABELS[field]).grid(row=2 * row - 1, column=0, sticky='w')
                var = tk.StringVar(value=texts.get(field, ''))
                ttk.Entry(frame, textvariable=var, width=10).grid(row=2 * row, column=0, sticky='ew')
                var.trace_add('write', self._make_input_callback(body.id, field, var))
                self._input_vars.append(var)

    def _make_input_callback(self, body_id: int, field: str, var: tk.StringVar):
        def callback(*_):
            self.simulator.handle_input_change(body_id, field, var.get())
        return callback

    def _schedule(self):
        if self._after_id is None:
            self._after_id = self.root.after(self.config.frame_interval_ms, self._tick)

    def _cancel(self):
        if self._after_id is not None:
            self.root.after_cancel(self._after_id)
            self._after_id = None

    def _tick(self):
        """One frame: fixed-dt step, draw, then schedule the next frame."""
        self._after_id = None
        if self.simulator.tick():
            self.draw()
        if self.simulator.running:
            self._schedule()

    def draw(self):
        self.renderer.render(self.simulator.snapshot())
        self.canvas.draw_idle()
        self.update_info()

    def toggle_play(self):
        """Toggle play/pause."""
        if self.simulator.toggle_running():
            self._schedule()
        else:
            self._cancel()
        self._refresh_buttons()

    def toggle_trails(self):
        self.simulator.toggle_tracing()
        self._refresh_buttons()
        self.draw()

    def reset(self):
        """Restart from the edited initial conditions."""
        self.simulator.reset()
        self._refresh_buttons()
        self.draw()
        self._schedule()

    def _on_body_count_selected(self, _event=None):
        count = int(self.body_count_var.get())
        # Re-selecting the current count keeps the edited initial conditions
        if count == self.simulator.num_bodies:
            return
        try:
            self.simulator.set_body_count(count)
        except Exception as e:
            messagebox.showerror("Error", f"Failed to change body count: {str(e)}")
            return
        self._build_body_inputs()
        self._refresh_buttons()
        self.draw()
        self._schedule()

    def _refresh_buttons(self):
        self.play_button.config(text="Pause" if self.simulator.running else "Play")
        self.trail_button.config(text="Trails: Lines" if self.simulator.tracing else "Trails: Fading")

    def update_info(self):
        """Update info display."""
        self.time_label.config(text=f"Time: {self.simulator.time:.2f}")
        self.steps_label.config(text=f"Steps: {self.simulator.step_count}")
        self.energy_label.config(text=f"Energy: {self.simulator.get_energy():.4f}")

    def close(self):
        self._cancel()
        self.renderer.close()
        self.root.destroy()


def run_gui(argv=None):
    """Run GUI application."""
    parser = argparse.ArgumentParser(description="N-Body Simulator GUI")
    parser.add_argument('--config', type=str, default=None,
                        help='Config file (.json or .yaml)')
    parser.add_argument('--verbose', action='store_true',
                        help='Enable debug logging')
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format='%(asctime)s %(name)s %(levelname)s: %(message)s')

    config = load_config(args.config) if args.config else Config()

    root = tk.Tk()
    NBodyVizGUI(root, config)
    root.mainloop()


if __name__ == '__main__':
    run_gui()
