"""Docking layout model: binary split trees, nodes, tabs and surfaces."""

__version__ = "0.16.0"

__all__ = [
    "indices",
    "node",
    "split",
    "surface",
    "translations",
    "tree",
    "window_state",
]