"""Command-line interface for glyphpath.

This module provides the CLI using Typer with rich output for
user-friendly feedback and progress reporting.

Key features:
- Message or explicit codepoint input
- Native curves or flattened line segments
- Explicit coordinate precision control
- Point overlays for inspecting outlines
"""

from glyphpath.cli.app import cli, main

__all__ = ["cli", "main"]
