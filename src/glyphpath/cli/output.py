"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with progress bars and formatted messages. Everything goes to stderr so
that SVG written to stdout can be piped.
"""

from rich.console import Console
from rich.progress import (
    BarColumn,
    Progress,
    TaskProgressColumn,
    TextColumn,
    TimeElapsedColumn,
)
from rich.text import Text

console = Console(stderr=True)

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def create_progress() -> Progress:
    """Create a rich progress bar for glyph rendering.

    Returns:
        Configured Progress instance with bar and time elapsed.
    """
    return Progress(
        TextColumn("  "),
        BarColumn(bar_width=40, complete_style="green", finished_style="green"),
        TaskProgressColumn(),
        TimeElapsedColumn(),
        console=console,
        transient=True,
    )


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]Glyphpath[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def print_text_info(font_path: str, codepoints: list[int]) -> None:
    """Print the font and the codepoints about to be rendered.

    Args:
        font_path: Path to the font file
        codepoints: Codepoints in text order
    """
    # Use Text to safely handle paths with special characters
    line = Text("  ")
    line.append(font_path)
    console.print(line)
    shown = " ".join(f"U+{cp:04X}" for cp in codepoints[:12])
    if len(codepoints) > 12:
        shown += f" {SYM_DOT}{SYM_DOT}{SYM_DOT} (+{len(codepoints) - 12} more)"
    console.print(f"  {len(codepoints)} glyphs {SYM_DOT} {shown}")


def _format_time(seconds: float) -> str:
    """Format seconds into human-readable time string."""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    elif seconds < 60:
        return f"{seconds:.1f}s"
    else:
        mins = int(seconds // 60)
        secs = seconds % 60
        return f"{mins}m {secs:.1f}s"


def print_success(
    output_path: str | None,
    total_time_s: float,
    rendered: int,
    placeholders: int,
    path_ops: int,
) -> None:
    """Print success message with summary.

    Args:
        output_path: Path to output file (None when written to stdout)
        total_time_s: Total rendering time in seconds
        rendered: Number of glyphs rendered as paths
        placeholders: Number of glyphs without outline
        path_ops: Total number of path operations
    """
    time_str = _format_time(total_time_s)

    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green] in {time_str}")

    line = Text("  ")
    line.append(output_path or "<stdout>", style="bold")
    console.print(line)

    console.print(
        f"  {rendered} paths {SYM_DOT} {placeholders} empty {SYM_DOT} {path_ops} path operations"
    )


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")
