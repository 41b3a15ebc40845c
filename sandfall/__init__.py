"""A falling-sand simulation on a grid of cells, with a pygame window to play it."""

__version__ = "0.1.0"