"""A falling rain, hail and snow simulation drawn with pygame."""

__version__ = "0.1.0"
__all__ = ["__version__"]