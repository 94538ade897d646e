"""CLI package for odds-distribution.

Parses lines from the command line and renders distributions with rich.
"""

from odds_distribution.cli.main import cli

__all__ = ["cli"]
