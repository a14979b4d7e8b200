"""In-memory graphics toolkit: windows, images, XPM loading, colour names and event hooks."""

__version__ = "0.1.0"

__all__ = ["colors", "strings", "visual", "image", "xpm", "events", "display"]