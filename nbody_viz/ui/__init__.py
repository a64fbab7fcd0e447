"""tkinter GUI."""
