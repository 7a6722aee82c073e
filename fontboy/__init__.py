"""Widget models for a font browser: fonts, preferences, split panes, box grids, colours, sliders and details-window text."""

__version__ = "0.1.0"