"""App Center CLI - Command-line interface for App Center and CodePush."""

__version__ = "0.1.0"

from .cli import cli

__all__ = ["cli"]
