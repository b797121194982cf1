"""jotter - a distraction-free, autosaving text file session in the terminal."""

__version__ = "0.1.0"
