"""Browse drives, directories and files: cached directory listings, file operations and a text-mode browser."""

__version__ = "0.1.0"
__all__ = ["__version__"]