"""treesum - Directory Checksum Tool.

A Python application for writing checksum reports of directory trees. Files
are found by a lazy depth-first walk that keeps only one directory listing in
memory, so very large trees can be hashed.
"""

__version__ = "1.0.0"

from .models import (
    ChecksumEntry,
    ReportSummary,
    ScanStatistics,
)

__all__ = [
    "__version__",
    "ChecksumEntry",
    "ReportSummary",
    "ScanStatistics",
]


def main() -> None:
    """Entry point for the treesum CLI application.

    This function is called when the `treesum` command is invoked after
    package installation via pip. It imports and runs the Typer app
    from the treesum.cli module.
    """
    from treesum.cli import app
    app()
