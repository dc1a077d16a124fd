"""A vertical-scrolling arcade shooter: settings, sprites, game scene and window."""

__version__ = "1.0.0"
__all__ = ["config", "sprites", "scene", "app"]