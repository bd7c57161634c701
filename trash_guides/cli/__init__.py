"""trash-guides command line interface."""

from .app import cli

__all__ = ["cli"]
