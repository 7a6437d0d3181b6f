"""Pytest fixtures for treesum tests."""

import os
import platform
import tempfile
from pathlib import Path
from typing import Generator, Optional

import pytest


def pytest_configure(config) -> None:
    config.addinivalue_line("markers", "integration: end-to-end tests touching the filesystem")


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for isolated test environments.

    Yields:
        Path to the temporary directory.
    """
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def simple_tree(temp_dir: Path) -> Path:
    """Create the small tree used by the filtering scenarios.

    Creates:
        temp_dir/
        ├── a.txt ("x")
        ├── sub/
        │   └── b.log
        └── empty/

    Args:
        temp_dir: Temporary directory fixture.

    Returns:
        Path to the root of the tree.
    """
    (temp_dir / "a.txt").write_text("x")
    sub = temp_dir / "sub"
    sub.mkdir()
    (sub / "b.log").write_text("log line")
    (temp_dir / "empty").mkdir()
    return temp_dir


@pytest.fixture
def nested_tree(temp_dir: Path) -> Path:
    """Create a deeper tree with hidden entries.

    Creates:
        temp_dir/
        ├── root.txt (10 bytes)
        ├── .hidden.txt (5 bytes)
        ├── docs/
        │   ├── readme.md (20 bytes)
        │   └── guide/
        │       └── intro.txt (30 bytes)
        ├── build/
        │   ├── app.jar (40 bytes)
        │   └── classes/
        │       └── Main.class (50 bytes)
        └── .git/
            └── config (60 bytes)

    Args:
        temp_dir: Temporary directory fixture.

    Returns:
        Path to the root of the tree.
    """
    (temp_dir / "root.txt").write_bytes(b"r" * 10)
    (temp_dir / ".hidden.txt").write_bytes(b"h" * 5)

    docs = temp_dir / "docs"
    (docs / "guide").mkdir(parents=True)
    (docs / "readme.md").write_bytes(b"d" * 20)
    (docs / "guide" / "intro.txt").write_bytes(b"i" * 30)

    build = temp_dir / "build"
    (build / "classes").mkdir(parents=True)
    (build / "app.jar").write_bytes(b"j" * 40)
    (build / "classes" / "Main.class").write_bytes(b"c" * 50)

    git = temp_dir / ".git"
    git.mkdir()
    (git / "config").write_bytes(b"g" * 60)

    return temp_dir


@pytest.fixture
def restricted_dir(temp_dir: Path) -> Generator[Optional[Path], None, None]:
    """Create a directory with no read permissions.

    Note: This fixture is platform-specific. On Windows, or when running as
    root, permissions are not enforced and None is yielded.

    Args:
        temp_dir: Temporary directory fixture.

    Yields:
        Path to the restricted directory, or None if it cannot be restricted.
    """
    if platform.system() == "Windows" or os.geteuid() == 0:
        yield None
        return

    restricted = temp_dir / "locked"
    restricted.mkdir()
    (restricted / "secret.txt").write_text("secret content")

    original_mode = restricted.stat().st_mode
    os.chmod(restricted, 0o000)

    try:
        yield restricted
    finally:
        # Restore permissions for cleanup
        os.chmod(restricted, original_mode)


def relative_names(root: Path, paths) -> list:
    """Return the sorted root-relative POSIX names of paths."""
    return sorted(Path(p).relative_to(root).as_posix() for p in paths)
