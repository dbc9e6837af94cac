"""
CLI module for gotagger.

The command-line interface providing tags and summary commands.
"""

from cli.main import app

__all__ = ["app"]
