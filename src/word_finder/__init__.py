"""Multi-target text occurrence scanner."""

__version__ = "0.1.0"
