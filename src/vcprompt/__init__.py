"""Version control information in your prompt."""

__version__ = "0.2.0"
