"""Pannable, zoomable plane viewer: grid, axes, slope field and a plotted curve."""
