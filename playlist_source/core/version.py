"""Version information for playlist-source."""

__version__ = "1.0.0"
