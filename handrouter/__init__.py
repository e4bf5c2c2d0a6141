"""Geometry, preset paths, G-code parsing and CoreXY conversion for a handheld CNC router."""

__version__ = "0.1.0"