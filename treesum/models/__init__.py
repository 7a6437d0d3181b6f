"""
Models package for treesum.

This package provides convenient imports for all data models:
- ScanStatistics: Counters collected while walking a directory tree
- ChecksumEntry: One digest/path pair of a checksum report
- ReportSummary: Results of a complete report run
"""

from .data_models import (
    ChecksumEntry,
    ReportSummary,
    ScanStatistics,
)

__all__ = [
    "ChecksumEntry",
    "ReportSummary",
    "ScanStatistics",
]
