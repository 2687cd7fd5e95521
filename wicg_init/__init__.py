"""WICG init — scaffold a new incubation project in the current directory."""

__version__ = "0.1.0"
