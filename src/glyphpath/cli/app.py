"""CLI application entry point for glyphpath.

This module provides the main CLI interface using Typer.
"""

from pathlib import Path
from typing import Annotated

import typer

from glyphpath import __version__
from glyphpath.cli.output import (
    console,
    create_progress,
    print_error,
    print_header,
    print_step,
    print_success,
    print_text_info,
)
from glyphpath.config import (
    CoordinateFormat,
    DocumentConfig,
    GlyphPathSettings,
    LoggingConfig,
    ProcessingConfig,
    RenderConfig,
)
from glyphpath.exceptions import FontError, FontLoadError, GlyphPathError, GlyphRenderError
from glyphpath.io import SvgWriter, render_text_document
from glyphpath.utils import RenderLogger, configure_logging

# Create the Typer app
app = typer.Typer(
    name="glyphpath",
    help="Convert TrueType glyph outlines to SVG paths.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Glyphpath[/bold blue] v{__version__}")
        raise typer.Exit()


def parse_codepoint(text: str) -> int:
    """Parse a codepoint given as decimal, 0x-hex or U+ notation.

    Args:
        text: Codepoint text such as "65", "0x41" or "U+0041"

    Returns:
        Integer codepoint

    Raises:
        typer.BadParameter: If the text is not a valid codepoint
    """
    value = text.strip()
    try:
        if value[:2].upper() == "U+":
            codepoint = int(value[2:], 16)
        else:
            codepoint = int(value, 0)
    except ValueError:
        raise typer.BadParameter(f"Invalid codepoint: {text}") from None
    if not 0 <= codepoint <= 0x10FFFF:
        raise typer.BadParameter(f"Codepoint out of range: {text}")
    return codepoint


@app.command()
def render(
    font: Annotated[
        Path,
        typer.Argument(
            help="Path to input TTF font file",
            show_default=False,
        ),
    ],
    message: Annotated[
        str | None,
        typer.Argument(
            help="Text to render, one glyph per character",
            show_default=False,
        ),
    ] = None,
    codepoints: Annotated[
        list[str] | None,
        typer.Option(
            "--codepoint",
            "-c",
            help="Codepoint to render after the message (65, 0x41 or U+0041); repeatable",
        ),
    ] = None,
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Output SVG path (default: stdout)",
        ),
    ] = None,
    lines: Annotated[
        bool,
        typer.Option(
            "--lines",
            help="Flatten quadratic curves into line segments",
        ),
    ] = False,
    step: Annotated[
        float,
        typer.Option(
            "--step",
            help="Parametric step for flattening (0 < step <= 1)",
            min=0.001,
            max=1.0,
        ),
    ] = 0.1,
    precision: Annotated[
        int | None,
        typer.Option(
            "--precision",
            help="Decimals written per coordinate (default: exact)",
            min=0,
            max=12,
        ),
    ] = None,
    truncate: Annotated[
        bool,
        typer.Option(
            "--truncate",
            help="Truncate coordinates to integers",
        ),
    ] = False,
    show_points: Annotated[
        bool,
        typer.Option(
            "--show-points",
            help="Draw outline points (control points hollow)",
        ),
    ] = False,
    border: Annotated[
        bool,
        typer.Option(
            "--border",
            help="Draw a border around the document",
        ),
    ] = False,
    show_axes: Annotated[
        bool,
        typer.Option(
            "--axes",
            help="Draw dashed x and y axes through the origin",
        ),
    ] = False,
    show_metrics: Annotated[
        bool,
        typer.Option(
            "--metrics",
            help="Draw each glyph's advance box",
        ),
    ] = False,
    show_point_lines: Annotated[
        bool,
        typer.Option(
            "--point-lines",
            help="Connect consecutive outline points with straight lines",
        ),
    ] = False,
    label_points: Annotated[
        bool,
        typer.Option(
            "--labels",
            help="Label outline points with their coordinates",
        ),
    ] = False,
    workers: Annotated[
        int | None,
        typer.Option(
            "--workers",
            "-j",
            help="Number of parallel workers (default: render in-process)",
            min=1,
        ),
    ] = None,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Minimal console output",
        ),
    ] = False,
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Render text from a TrueType font as an SVG document.

    Each character of MESSAGE becomes one <path> element; glyphs are laid
    out left to right. Curves are written as quadratic Q statements unless
    --lines is given.

    Example:
        glyphpath DejaVuSans.ttf "Hello" -o hello.svg
    """
    if not font.exists():
        print_error(
            f"Input file not found: {font}",
            details=f"The file '{font}' does not exist or is not accessible.",
        )
        raise typer.Exit(code=1)

    if not font.is_file():
        print_error(
            f"Input path is not a file: {font}",
            details="Please provide a path to a TTF font file.",
        )
        raise typer.Exit(code=1)

    all_codepoints = [ord(ch) for ch in message or ""]
    all_codepoints.extend(parse_codepoint(c) for c in codepoints or [])
    if not all_codepoints:
        print_error("Nothing to render", details="Give a message or at least one --codepoint.")
        raise typer.Exit(code=1)

    if not quiet:
        print_header(__version__)

    settings = GlyphPathSettings(
        render=RenderConfig(
            generate_curve_statements=not lines,
            flatten_step=step,
            coordinates=CoordinateFormat(precision=precision, truncate=truncate),
        ),
        document=DocumentConfig(
            show_points=show_points,
            border=border,
            show_axes=show_axes,
            show_metrics=show_metrics,
            show_point_lines=show_point_lines,
            label_points=label_points,
        ),
        processing=ProcessingConfig(max_workers=workers),
        logging=LoggingConfig(
            log_file=log_file,
            log_level=log_level if not quiet else "ERROR",
        ),
    )

    logger = RenderLogger(
        configure_logging(
            log_file=settings.logging.log_file,
            console_level=settings.logging.log_level,
            file_level=settings.logging.file_log_level,
            quiet=quiet,
        )
    )

    try:
        if not quiet:
            print_step("Rendering")
            print_text_info(str(font), all_codepoints)
            with create_progress() as progress:
                task_id = progress.add_task("Rendering", total=len(all_codepoints))

                def update_progress(completed: int, *_: object) -> None:
                    progress.update(task_id, completed=completed)

                document = render_text_document(
                    font, all_codepoints, settings, logger=logger, progress_callback=update_progress
                )
        else:
            document = render_text_document(font, all_codepoints, settings, logger=logger)

        if output is None:
            typer.echo(document, nl=False)
        else:
            SvgWriter.save(document, output)

        if not quiet:
            stats = logger.stats
            print_success(
                output_path=str(output) if output else None,
                total_time_s=stats.duration_seconds,
                rendered=stats.rendered_count,
                placeholders=stats.placeholder_count,
                path_ops=stats.path_op_count,
            )

    except KeyboardInterrupt:
        print_error("Cancelled")
        raise typer.Exit(code=130) from None
    except FontLoadError as e:
        print_error(f"Could not load font: {e.reason}")
        raise typer.Exit(code=1)
    except FontError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    except GlyphRenderError as e:
        print_error(str(e), details=f"{logger.stats.error_count} glyph(s) failed")
        raise typer.Exit(code=1)
    except GlyphPathError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    except typer.Exit:
        raise
    except Exception as e:
        print_error(f"Unexpected error: {e}")
        raise typer.Exit(code=1)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
