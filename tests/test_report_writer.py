"""Unit tests for ChecksumReportWriter."""

import os
from pathlib import Path
from unittest.mock import patch

import pytest

from treesum.models import ChecksumEntry
from treesum.orchestration import ChecksumReportWriter


class TestChecksumReportWriterBasic:
    """Basic ChecksumReportWriter functionality."""

    def test_writes_lines_in_order(self, temp_dir: Path) -> None:
        report = temp_dir / "shasums.txt"

        with ChecksumReportWriter(report) as writer:
            writer.write_entry("aaa", Path("/data/one.txt"))
            writer.write_entry("bbb", Path("/data/two.txt"))

        lines = report.read_text(encoding="utf-8").splitlines()
        assert lines == [f"aaa {Path('/data/one.txt')}", f"bbb {Path('/data/two.txt')}"]

    def test_platform_line_terminator(self, temp_dir: Path) -> None:
        """Test that lines end with os.linesep on disk."""
        report = temp_dir / "shasums.txt"

        with ChecksumReportWriter(report) as writer:
            writer.write_entry("aaa", Path("/data/one.txt"))

        assert report.read_bytes().endswith(os.linesep.encode("ascii"))

    def test_truncates_existing_report(self, temp_dir: Path) -> None:
        report = temp_dir / "shasums.txt"
        report.write_text("stale line\n" * 10)

        with ChecksumReportWriter(report) as writer:
            writer.write_entry("fresh", Path("/data/file.txt"))

        assert report.read_text(encoding="utf-8").splitlines() == [f"fresh {Path('/data/file.txt')}"]

    def test_empty_report_created(self, temp_dir: Path) -> None:
        report = temp_dir / "shasums.txt"

        with ChecksumReportWriter(report):
            pass

        assert report.exists()
        assert report.read_bytes() == b""

    def test_utf8_paths(self, temp_dir: Path) -> None:
        report = temp_dir / "shasums.txt"
        path = Path("/data/ünïcödé-文件.txt")

        with ChecksumReportWriter(report) as writer:
            writer.write_entry("abc", path)

        assert report.read_bytes().decode("utf-8").startswith(f"abc {path}")

    @pytest.mark.skipif(os.name == "nt", reason="Windows file names are not bytes")
    def test_surrogate_escaped_path_written_as_raw_bytes(self, temp_dir: Path) -> None:
        """Test that undecodable name bytes are written back unchanged."""
        report = temp_dir / "shasums.txt"
        path = Path(os.fsdecode(b"/data/bad\xff.txt"))

        with ChecksumReportWriter(report) as writer:
            writer.write_entry("abc", path)

        assert report.read_bytes().startswith(b"abc /data/bad\xff.txt")

    def test_entries_written_counter(self, temp_dir: Path) -> None:
        with ChecksumReportWriter(temp_dir / "shasums.txt") as writer:
            assert writer.entries_written == 0
            writer.write(ChecksumEntry(digest="a", path=Path("/x")))
            writer.write(ChecksumEntry(digest="b", path=Path("/y")))
            assert writer.entries_written == 2

    def test_get_report_path(self, temp_dir: Path) -> None:
        report = temp_dir / "custom.txt"

        assert ChecksumReportWriter(report).get_report_path() == report


class TestChecksumReportWriterErrors:
    """Error handling for ChecksumReportWriter."""

    def test_write_before_open_raises(self, temp_dir: Path) -> None:
        writer = ChecksumReportWriter(temp_dir / "shasums.txt")

        with pytest.raises(ValueError, match="not open"):
            writer.write_entry("abc", Path("/x"))

    def test_write_after_close_raises(self, temp_dir: Path) -> None:
        with ChecksumReportWriter(temp_dir / "shasums.txt") as writer:
            pass

        with pytest.raises(ValueError):
            writer.write_entry("abc", Path("/x"))

    def test_unwritable_location_raises(self, temp_dir: Path) -> None:
        """Test that opening a report in a missing directory fails."""
        writer = ChecksumReportWriter(temp_dir / "missing" / "shasums.txt")

        with pytest.raises(OSError):
            with writer:
                pass

    def test_partial_report_kept_on_failure(self, temp_dir: Path) -> None:
        """Test that lines written before a failure stay on disk and the file is closed."""
        report = temp_dir / "shasums.txt"

        with pytest.raises(RuntimeError):
            with ChecksumReportWriter(report) as writer:
                writer.write_entry("first", Path("/data/one.txt"))
                raise RuntimeError("hashing failed")

        assert report.read_text(encoding="utf-8").splitlines() == [f"first {Path('/data/one.txt')}"]
        with pytest.raises(ValueError):
            writer.write_entry("late", Path("/data/two.txt"))

    def test_close_is_idempotent(self, temp_dir: Path) -> None:
        writer = ChecksumReportWriter(temp_dir / "shasums.txt")
        with writer:
            writer.close()
        writer.close()

    def test_open_error_propagates(self, temp_dir: Path) -> None:
        with patch("builtins.open", side_effect=PermissionError("Permission denied")):
            with pytest.raises(PermissionError):
                with ChecksumReportWriter(temp_dir / "shasums.txt"):
                    pass
