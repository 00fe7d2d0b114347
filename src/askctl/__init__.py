"""askctl: prompt for a single validated answer on the terminal."""

__version__ = "0.1.0"
