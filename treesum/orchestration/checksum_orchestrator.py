"""ChecksumOrchestrator for producing checksum reports of directory trees.

This module provides the ChecksumOrchestrator class that wires together
DirectoryFileIterator, FileHasher and ChecksumReportWriter: it walks a
directory, hashes every matching file and writes one report line per file.

Example:
    from treesum.orchestration import ChecksumOrchestrator
    from pathlib import Path

    orchestrator = ChecksumOrchestrator(
        base_path=Path("/data/release"),
        file_pattern=r".*\\.jar",
    )
    summary = orchestrator.run()
    print(f"{summary.files_written} files hashed")
"""

import logging
import time
from pathlib import Path
from typing import Optional, Union

from treesum.models import ReportSummary
from treesum.orchestration.report_writer import ChecksumReportWriter
from treesum.scanning import DirectoryFileIterator, FileHasher, create_file_filter, exclude_paths

# Name of the report written into the scanned directory
REPORT_FILE_NAME = "shasums.txt"

logger = logging.getLogger(__name__)


class ChecksumOrchestrator:
    """Orchestrates the scan, hash and report workflow.

    The file filter is built at construction, so an invalid pattern fails
    before the report file is touched. The report file itself is never
    hashed, even when it lies inside the scanned tree.

    Any error while hashing or writing aborts the run; the report written up
    to that point is left on disk.

    Attributes:
        base_path: Root of the scanned directory tree.
        file_pattern: Regular expression file names must match, or None.
        report_path: Path of the report file.
        recursive: Whether sub-directories are scanned.

    Example:
        orchestrator = ChecksumOrchestrator(base_path=Path.cwd())
        summary = orchestrator.run()
    """

    def __init__(
        self,
        base_path: Union[str, Path],
        file_pattern: Optional[str] = None,
        report_path: Optional[Union[str, Path]] = None,
        recursive: bool = True,
        file_hasher: Optional[FileHasher] = None,
        logger_instance: Optional[logging.Logger] = logger,
    ) -> None:
        """Initialize the ChecksumOrchestrator.

        Args:
            base_path: Directory to scan.
            file_pattern: Regular expression the file names must fully match.
                None accepts every non-hidden file.
            report_path: Where to write the report. Defaults to
                shasums.txt inside base_path.
            recursive: Whether to descend into sub-directories.
            file_hasher: Optional FileHasher instance. If not provided,
                a SHA-1 hasher is created.
            logger_instance: Logger for scan diagnostics. None disables them.

        Raises:
            re.error: If file_pattern is not a valid regular expression.
        """
        self.base_path = Path(base_path)
        self.file_pattern = file_pattern
        self.report_path = (
            Path(report_path) if report_path is not None else self.base_path / REPORT_FILE_NAME
        )
        self.recursive = recursive
        self._file_hasher = file_hasher if file_hasher is not None else FileHasher()
        self._logger = logger_instance
        self._file_filter = exclude_paths(create_file_filter(file_pattern), self.report_path)

    def run(self) -> ReportSummary:
        """Scan base_path, hash each matching file and write the report.

        Returns:
            ReportSummary with the counts of the run.

        Raises:
            OSError: If a file cannot be read or the report cannot be written.
        """
        start_time = time.monotonic()

        iterator = DirectoryFileIterator(
            self.base_path,
            recursive=self.recursive,
            dir_filter=None,
            file_filter=self._file_filter,
            logger=self._logger,
        )

        summary = ReportSummary(report_path=self.report_path)

        with ChecksumReportWriter(self.report_path) as writer:
            for file_path in iterator:
                digest = self._file_hasher.hash_file(file_path)
                writer.write_entry(digest, file_path)
            summary.files_written = writer.entries_written

        summary.statistics = iterator.get_statistics()
        summary.bytes_hashed = summary.statistics.matched_bytes
        summary.empty_directories = iterator.get_empty_directories()
        summary.duration = time.monotonic() - start_time

        if self._logger is not None and summary.empty_directories:
            self._logger.info("Found %d empty directories", len(summary.empty_directories))

        return summary

    @property
    def file_hasher(self) -> FileHasher:
        """Get the FileHasher instance used by this orchestrator."""
        return self._file_hasher
