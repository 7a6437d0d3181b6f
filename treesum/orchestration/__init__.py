"""Workflow orchestration package for treesum.

This package contains the components producing checksum reports:
- ChecksumReportWriter: Writes digest/path lines to a report file.
- ChecksumOrchestrator: Walks a directory, hashes files and writes the report.
"""

from treesum.orchestration.checksum_orchestrator import REPORT_FILE_NAME, ChecksumOrchestrator
from treesum.orchestration.report_writer import ChecksumReportWriter

__all__ = ["REPORT_FILE_NAME", "ChecksumOrchestrator", "ChecksumReportWriter"]
