"""Auto clicker that stops when the pointer is moved."""

__version__ = "0.1.0"
