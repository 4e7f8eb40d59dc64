"""Command-line interface for ringselect.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- Ring selection for union, intersection and difference
- Listing of every extracted ring
- JSON output of the selection map
- Verbose/quiet output modes
"""

from ringselect.cli.app import cli, main

__all__ = ["cli", "main"]
