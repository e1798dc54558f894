"""Measure and place glyphs of multi-font, multi-line text against an anchor point."""

__version__ = "0.1.0"
__all__ = ["model", "measure", "placement"]