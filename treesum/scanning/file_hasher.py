"""File hashing utility.

This module provides the FileHasher class for computing hex digests of files
by streaming their content through a hashlib hash in fixed-size chunks.

Example:
    >>> from treesum.scanning import FileHasher
    >>> hasher = FileHasher()
    >>> hash_value = hasher.hash_file(Path("/path/to/file.txt"))
    >>> print(f"SHA1: {hash_value}")
"""

import hashlib
from pathlib import Path

# Hash algorithm used for shasums.txt reports
DEFAULT_ALGORITHM = "sha1"

# Buffer size for chunked file reading (4KB)
CHUNK_SIZE = 4096


class FileHasher:
    """Computes hex digests of files.

    The hasher reads files in fixed-size chunks so large files are never
    loaded into memory at once. Any algorithm known to hashlib.new() can be
    used; the default is SHA-1.

    Read errors are not caught: a file that cannot be read aborts the caller.

    Example:
        >>> hasher = FileHasher("sha256")
        >>> hash1 = hasher.hash_file(Path("file.txt"))
        >>> hash2 = hasher.hash_file(Path("file.txt"))
        >>> assert hash1 == hash2
    """

    def __init__(self, algorithm: str = DEFAULT_ALGORITHM, chunk_size: int = CHUNK_SIZE) -> None:
        """Initialize the FileHasher.

        Args:
            algorithm: Name of the hashlib algorithm to use.
            chunk_size: Number of bytes read per chunk.

        Raises:
            ValueError: If the algorithm is unknown or chunk_size is not
                positive.
        """
        if chunk_size <= 0:
            raise ValueError(f"Chunk size must be positive, got {chunk_size}")
        # Fail early on unknown algorithm names
        hashlib.new(algorithm)
        self._algorithm = algorithm
        self._chunk_size = chunk_size

    def hash_file(self, file_path: Path) -> str:
        """Compute the digest of a file.

        Args:
            file_path: Path to the file to hash.

        Returns:
            The lowercase hex digest of the file content.

        Raises:
            OSError: If the file cannot be opened or read.
        """
        digest = hashlib.new(self._algorithm)

        with open(file_path, "rb") as f:
            while True:
                chunk = f.read(self._chunk_size)
                if not chunk:
                    break
                digest.update(chunk)

        return digest.hexdigest()

    @property
    def algorithm(self) -> str:
        """Name of the hash algorithm."""
        return self._algorithm
