"""Parse and validate .cub raycaster scene files, load XPM textures and draw onto an in-memory canvas."""

__version__ = "0.1.0"