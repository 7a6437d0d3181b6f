"""
Core data models for treesum.

This module contains the following dataclasses:
- ScanStatistics: Counters collected by DirectoryFileIterator during a scan
- ChecksumEntry: A single line of a checksum report
- ReportSummary: Summary of a checksum report run
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List


@dataclass
class ScanStatistics:
    """Counters collected while walking a directory tree."""
    matched_files: int = 0            # Files accepted by the file filter
    matched_bytes: int = 0            # Total size of matched files
    scanned_dirs: int = 0             # Sub-directories seen in listings
    scanned_files: int = 0            # Regular files seen in listings
    rejected_dirs: int = 0            # Directories rejected or unlistable
    rejected_files: int = 0           # Files rejected or not regular

    def summary(self) -> str:
        """Render the end-of-scan summary line.

        Zero counters other than the matched ones are left out, e.g.
        ``Found 3 files (1024b) dirs=2 files=5 rejected files=2``.
        """
        parts = [f"Found {self.matched_files} files ({self.matched_bytes}b)"]
        if self.scanned_dirs > 0:
            parts.append(f"dirs={self.scanned_dirs}")
        if self.scanned_files > 0:
            parts.append(f"files={self.scanned_files}")
        if self.rejected_dirs > 0:
            parts.append(f"rejected dirs={self.rejected_dirs}")
        if self.rejected_files > 0:
            parts.append(f"rejected files={self.rejected_files}")
        return " ".join(parts)


@dataclass(frozen=True)
class ChecksumEntry:
    """A single line of a checksum report."""
    digest: str                       # Lowercase hex digest
    path: Path                        # Absolute path of the hashed file

    def to_line(self) -> str:
        """Format the entry as ``<digest> <path>`` without a line terminator."""
        return f"{self.digest} {self.path}"


@dataclass
class ReportSummary:
    """Summary of a report run returned by ChecksumOrchestrator."""
    report_path: Path                 # Where the report was written
    files_written: int = 0            # Lines written to the report
    bytes_hashed: int = 0             # Total size of hashed files
    statistics: ScanStatistics = field(default_factory=ScanStatistics)
    empty_directories: List[str] = field(default_factory=list)  # Root-relative
    duration: float = 0.0             # Total run duration in seconds
