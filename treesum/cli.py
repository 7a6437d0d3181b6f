"""
treesum - CLI Interface.

Writes a checksum report of the files under the current working directory.
Each line of the report, shasums.txt, holds the SHA-1 digest and absolute
path of one file.

Usage Examples:
    # Hash every non-hidden file under the current directory
    python -m treesum

    # Hash only the jar files
    python -m treesum '.*\\.jar'
"""

import logging
import re
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from treesum.orchestration import REPORT_FILE_NAME, ChecksumOrchestrator

__version__ = "1.0.0"

# Initialize Typer app
app = typer.Typer(
    name="treesum",
    help="Write SHA-1 checksums of the files under the current directory to shasums.txt.",
    add_completion=False,
)

# Rich console for consistent output formatting
console = Console()
# Diagnostics go to stderr so they never mix with the report output
log_console = Console(stderr=True)

logger = logging.getLogger("treesum")


def configure_logging() -> None:
    """Attach a RichHandler to the treesum logger, once per process."""
    if any(isinstance(handler, RichHandler) for handler in logger.handlers):
        return
    handler = RichHandler(console=log_console, show_path=False)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.setLevel(logging.INFO)


def validate_pattern(value: Optional[str]) -> Optional[str]:
    """
    Validate that the file name pattern is a regular expression.

    Args:
        value: Pattern to validate, or None.

    Returns:
        Validated pattern.

    Raises:
        typer.BadParameter: If the pattern does not compile.
    """
    if value is None:
        return value
    try:
        re.compile(value)
    except re.error as e:
        raise typer.BadParameter(f"Invalid regular expression: {e}")
    return value


@app.command()
def main(
    pattern: Optional[str] = typer.Argument(
        None,
        metavar="PATTERN",
        help="Regular expression the file names must match, e.g. '.*\\.jar'. "
        "All non-hidden files are hashed when omitted.",
        callback=validate_pattern,
    ),
) -> None:
    """
    Write checksums of the files under the current directory.

    Walks the current directory recursively and writes one
    '<sha1> <absolute path>' line per matching file to shasums.txt.
    """
    configure_logging()
    working_dir = Path.cwd()

    if pattern is not None:
        logger.info("Calculating SHA in %s for files matching %s", working_dir.name, pattern)
    else:
        logger.info("Calculating SHA in %s of all files (filter example: .*\\.jar)", working_dir.name)

    try:
        orchestrator = ChecksumOrchestrator(
            base_path=working_dir,
            file_pattern=pattern,
            report_path=working_dir / REPORT_FILE_NAME,
        )
        summary = orchestrator.run()

    except KeyboardInterrupt:
        console.print("\n[yellow]Scan interrupted by user.[/yellow]")
        raise typer.Exit(130)

    except PermissionError as e:
        console.print(f"[red]Error:[/red] Permission denied - {e}")
        raise typer.Exit(1)

    except OSError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    logger.info("Report saved in %s", summary.report_path.name)


if __name__ == "__main__":
    app()
