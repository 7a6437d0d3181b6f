"""Lazy depth-first iterator over the files of a directory tree.

This module provides the DirectoryFileIterator class, which yields the files
under a root directory one at a time. Directories waiting to be visited are
kept on an explicit stack instead of the call stack, and only the listing of
the directory currently being consumed is held in memory, so arbitrarily deep
or wide trees can be walked with bounded memory.

Example:
    >>> from treesum.scanning import DirectoryFileIterator
    >>> iterator = DirectoryFileIterator(Path("/data"), file_filter=is_text)
    >>> for path in iterator:
    ...     print(path)
    >>> print(iterator.get_empty_directories())
"""

import logging
import os
import stat
from dataclasses import replace
from pathlib import Path
from typing import Callable, List, Optional, Union

from treesum.models import ScanStatistics

# A predicate deciding whether a directory is descended into or a file is
# returned.
PathFilter = Callable[[Path], bool]

# Number of scanned files between two progress messages
PROGRESS_INTERVAL = 10000


class DirectoryFileIterator:
    """Iterates over the files under a directory, depth first.

    The iterator always holds the next matching file ahead of the consumer,
    so has_next() answers without touching the filesystem. Each call to
    next() hands out the held file and immediately searches for the one
    after it.

    Directory and file filters are independent. The directory filter decides
    whether a sub-directory is descended into; the file filter decides
    whether a regular file is returned. Either may be None to accept
    everything.

    Filesystem irregularities never raise: a directory that cannot be listed
    and entries that are neither directories nor regular files are counted
    as rejected and skipped, with a warning when a logger was given.

    Symbolic links are followed. Link cycles are not detected, so a tree
    containing one is walked until its paths can no longer be resolved.

    Attributes:
        _root_path: Absolute, normalized root of the scan.
        _dir_stack: Absolute paths of directories still to be listed.
        _current_dir: Directory whose listing is being consumed.
        _dir_contents: Names in the listing of _current_dir.
        _dir_contents_index: Position of the next name in _dir_contents.
        _next_file: The next matching file, or None once exhausted.
        _statistics: Scan counters, never decreasing.
        _empty_dirs: Root-relative paths of directories with no entries.

    Example:
        >>> iterator = DirectoryFileIterator(Path("."), recursive=False)
        >>> while iterator.has_next():
        ...     print(next(iterator))
    """

    def __init__(
        self,
        root_path: Union[str, Path],
        recursive: bool = True,
        dir_filter: Optional[PathFilter] = None,
        file_filter: Optional[PathFilter] = None,
        logger: Optional[logging.Logger] = None,
        progress_interval: int = PROGRESS_INTERVAL,
    ) -> None:
        """Create an iterator over the files under root_path.

        The first matching file is searched for right away.

        Args:
            root_path: The directory to scan. Relative paths are made
                absolute against the current working directory.
            recursive: True to descend into sub-directories, False to
                return only the immediate files of root_path.
            dir_filter: Optional predicate accepting the sub-directories,
                at any level, that should be descended into.
            file_filter: Optional predicate accepting the files, at any
                level, that should be returned.
            logger: Optional logger for warnings, progress and the final
                summary. None disables logging.
            progress_interval: Number of scanned files between two progress
                messages.
        """
        self._root_path = Path(os.path.abspath(root_path))
        self._recursive = recursive
        self._dir_filter = dir_filter
        self._file_filter = file_filter
        self._logger = logger
        self._progress_interval = progress_interval

        self._dir_stack: List[Path] = [self._root_path]
        self._current_dir: Optional[Path] = None
        self._dir_contents: List[str] = []
        self._dir_contents_index = 0

        self._statistics = ScanStatistics()
        self._empty_dirs: List[str] = []

        self._next_file = self._find_next_matching_file()
        if self._next_file is None:
            self._log_summary()

    def __iter__(self) -> "DirectoryFileIterator":
        return self

    def __next__(self) -> Path:
        """Return the next matching file.

        Returns:
            Absolute path of the file.

        Raises:
            StopIteration: If there are no more matching files.
        """
        if self._next_file is None:
            raise StopIteration

        to_return = self._next_file
        self._next_file = self._find_next_matching_file()
        if self._next_file is None:
            self._log_summary()
        return to_return

    def has_next(self) -> bool:
        """Return True if another matching file is available."""
        return self._next_file is not None

    def get_empty_directories(self) -> List[str]:
        """Get the directories found so far that contain no entries at all.

        A directory counts as empty only when its listing had no entries,
        before any filtering.

        Returns:
            Paths relative to the root; the root itself is "".
        """
        return self._empty_dirs.copy()

    def get_statistics(self) -> ScanStatistics:
        """Get a snapshot of the scan counters."""
        return replace(self._statistics)

    @property
    def root_path(self) -> Path:
        """The absolute root directory of the scan."""
        return self._root_path

    @property
    def recursive(self) -> bool:
        """Whether sub-directories are descended into."""
        return self._recursive

    def _find_next_matching_file(self) -> Optional[Path]:
        """Advance through the tree until the next matching file.

        Returns:
            The next matching file, or None when the tree is exhausted.
        """
        stats = self._statistics
        while True:
            if self._current_dir is None or self._dir_contents_index >= len(self._dir_contents):
                if not self._dir_stack:
                    self._current_dir = None
                    self._dir_contents = []
                    return None
                if not self._open_next_directory():
                    continue

            while self._dir_contents_index < len(self._dir_contents):
                name = self._dir_contents[self._dir_contents_index]
                self._dir_contents_index += 1
                path = self._current_dir / name

                try:
                    st = os.stat(path)
                except OSError as e:
                    stats.rejected_files += 1
                    self._warn("Cannot access \"%s\" in %s: %s", name, self._current_dir, e)
                    continue

                if stat.S_ISDIR(st.st_mode):
                    stats.scanned_dirs += 1
                    if not self._recursive:
                        if self._logger is not None:
                            self._logger.debug("Ignoring %s", path)
                    elif self._dir_filter is not None and not self._dir_filter(path):
                        stats.rejected_dirs += 1
                    else:
                        self._dir_stack.append(path)
                elif stat.S_ISREG(st.st_mode):
                    stats.scanned_files += 1
                    if (
                        self._logger is not None
                        and self._progress_interval > 0
                        and stats.scanned_files % self._progress_interval == 0
                    ):
                        self._logger.info(
                            "Scanned %d files, last %s", stats.scanned_files, path
                        )

                    if self._file_filter is not None and not self._file_filter(path):
                        stats.rejected_files += 1
                    else:
                        stats.matched_files += 1
                        stats.matched_bytes += st.st_size
                        return path
                else:
                    stats.rejected_files += 1
                    self._warn("Not normal file \"%s\" found in %s", name, self._current_dir)

    def _open_next_directory(self) -> bool:
        """Pop the next directory off the stack and list it.

        Returns:
            True if the directory was listed, False if it could not be.
        """
        self._current_dir = self._dir_stack.pop()
        self._dir_contents_index = 0
        try:
            self._dir_contents = os.listdir(self._current_dir)
        except OSError as e:
            self._dir_contents = []
            self._statistics.rejected_dirs += 1
            self._warn("%s is not a listable directory, ignoring it: %s", self._current_dir, e)
            return False

        if not self._dir_contents:
            self._empty_dirs.append(self._relative_name(self._current_dir))
        return True

    def _relative_name(self, directory: Path) -> str:
        if directory == self._root_path:
            return ""
        return str(directory.relative_to(self._root_path))

    def _log_summary(self) -> None:
        if self._logger is not None:
            self._logger.info(self._statistics.summary())

    def _warn(self, msg: str, *args: object) -> None:
        if self._logger is not None:
            self._logger.warning(msg, *args)
