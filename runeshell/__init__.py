"""A small interactive Unix shell with built-in commands, command lookup and pipelines."""

__version__ = "0.1.0"
__all__ = ["__version__"]