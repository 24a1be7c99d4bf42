"""frontreg — resolve installed front-end libraries to files on disk."""

__version__ = "0.1.0"
