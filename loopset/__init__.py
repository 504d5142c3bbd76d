"""A looping playlist of songs with navigation, sorting, shuffling and a text menu."""

__version__ = "0.1.0"
__all__ = ["__version__"]