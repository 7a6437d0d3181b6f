"""File scanning package for treesum.

This package provides utilities for walking directory trees and computing
file digests:

- DirectoryFileIterator: Lazily yields the files under a directory, depth
  first, keeping only one directory listing in memory.
- FileHasher: Computes hex digests of files in fixed-size chunks.
- create_file_filter / is_hidden / exclude_paths: Path predicates for the
  iterator.

Example:
    >>> from treesum.scanning import DirectoryFileIterator, FileHasher, create_file_filter
    >>> from pathlib import Path
    >>>
    >>> iterator = DirectoryFileIterator(Path("/data"), file_filter=create_file_filter(r".*\\.txt"))
    >>> hasher = FileHasher()
    >>> for path in iterator:
    ...     print(hasher.hash_file(path), path)
"""

from .directory_iterator import DirectoryFileIterator
from .file_hasher import FileHasher
from .filters import create_file_filter, exclude_paths, is_hidden

__all__ = [
    "DirectoryFileIterator",
    "FileHasher",
    "create_file_filter",
    "exclude_paths",
    "is_hidden",
]
