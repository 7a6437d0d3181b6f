"""Path predicates for DirectoryFileIterator.

A predicate is any callable taking a Path and returning True to accept it.
"""

import os
import re
import stat
import sys
from pathlib import Path
from typing import Optional, Union

from .directory_iterator import PathFilter


def is_hidden(path: Path) -> bool:
    """Return True if the file is hidden.

    Dot files are hidden everywhere; on Windows the hidden attribute counts
    as well.
    """
    if path.name.startswith("."):
        return True
    if sys.platform == "win32":
        try:
            attributes = os.stat(path).st_file_attributes
        except OSError:
            return False
        return bool(attributes & stat.FILE_ATTRIBUTE_HIDDEN)
    return False


def create_file_filter(pattern: Optional[str] = None) -> PathFilter:
    """Build the file predicate for a name pattern.

    Args:
        pattern: Regular expression the whole file name must match, or None
            to accept every file.

    Returns:
        A predicate accepting non-hidden files whose name matches pattern.

    Raises:
        re.error: If pattern is not a valid regular expression.

    Example:
        >>> accept = create_file_filter(r".*\\.jar")
        >>> accept(Path("lib/app.jar"))
        True
        >>> accept(Path("lib/.app.jar"))
        False
    """
    if pattern is None:
        def accept_visible(path: Path) -> bool:
            return not is_hidden(path)

        return accept_visible

    compiled = re.compile(pattern)

    def accept_matching(path: Path) -> bool:
        return not is_hidden(path) and compiled.fullmatch(path.name) is not None

    return accept_matching


def exclude_paths(file_filter: Optional[PathFilter], *excluded: Union[str, Path]) -> PathFilter:
    """Wrap a predicate so that the given paths are always rejected.

    Args:
        file_filter: The predicate to wrap, or None to accept everything else.
        *excluded: Paths to reject, compared after making them absolute.

    Returns:
        The wrapped predicate.
    """
    excluded_paths = {Path(os.path.abspath(p)) for p in excluded}

    def accept(path: Path) -> bool:
        if Path(os.path.abspath(path)) in excluded_paths:
            return False
        return file_filter is None or file_filter(path)

    return accept
