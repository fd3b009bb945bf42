"""Write text to streams and files, and log words from standard input."""

__version__ = "0.1.0"
__all__ = ["__version__"]