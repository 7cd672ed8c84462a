"""View models holding UI state for the Tk and NiceGUI runtimes (no I/O)."""
