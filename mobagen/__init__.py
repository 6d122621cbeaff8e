"""2D game toolkit: vectors, polygons, colours, a grid, and terminal chess and catch-the-cat games."""

__version__ = "0.1.0"