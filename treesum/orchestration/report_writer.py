"""ChecksumReportWriter for writing checksum reports.

This module provides the ChecksumReportWriter class that writes one
``<hex-digest> <absolute-path>`` line per hashed file, in the format read by
``sha1sum -c`` and friends.
"""

from pathlib import Path
from typing import Optional, TextIO, Union

from treesum.models import ChecksumEntry


class ChecksumReportWriter:
    """Writer for checksum report files.

    The report file is truncated when the writer is entered and closed when
    it is left, whether or not an exception occurred. Lines written before a
    failure stay on disk.

    Usage:
        with ChecksumReportWriter(Path("shasums.txt")) as writer:
            for path in files:
                writer.write_entry(hasher.hash_file(path), path)

    Lines end with the platform line terminator.
    """

    def __init__(self, report_path: Union[str, Path]) -> None:
        """Initialize the ChecksumReportWriter.

        Args:
            report_path: Path of the report file to create.
        """
        self._report_path = Path(report_path)
        self._file_handle: Optional[TextIO] = None
        self._entries_written = 0

    def __enter__(self) -> "ChecksumReportWriter":
        """Enter the context manager, truncating and opening the report.

        Returns:
            The ChecksumReportWriter instance.

        Raises:
            OSError: If the file cannot be opened for writing.
        """
        # Text mode translates "\n" to os.linesep; surrogateescape writes
        # undecodable file name bytes back out unchanged
        self._file_handle = open(
            self._report_path, "w", encoding="utf-8", errors="surrogateescape"
        )
        self._entries_written = 0
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Exit the context manager, closing the report file."""
        self.close()

    def close(self) -> None:
        """Close the report file if it is open."""
        if self._file_handle is not None:
            try:
                self._file_handle.close()
            finally:
                self._file_handle = None

    def write_entry(self, digest: str, path: Path) -> None:
        """Write a single report line.

        Args:
            digest: Hex digest of the file.
            path: Absolute path of the file.

        Raises:
            ValueError: If the writer is not open.
            OSError: If writing fails.
        """
        self.write(ChecksumEntry(digest=digest, path=path))

    def write(self, entry: ChecksumEntry) -> None:
        """Write a ChecksumEntry as a report line."""
        if self._file_handle is None:
            raise ValueError(f"Report file is not open: {self._report_path}")
        self._file_handle.write(entry.to_line() + "\n")
        self._entries_written += 1

    def get_report_path(self) -> Path:
        """Get the path to the report file."""
        return self._report_path

    @property
    def entries_written(self) -> int:
        """Number of lines written since the report was opened."""
        return self._entries_written
