"""taskpad: a local, single-user to-do list manager for the terminal."""

__version__ = "0.1.0"
