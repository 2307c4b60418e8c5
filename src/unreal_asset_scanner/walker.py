"""Lazy, fault-tolerant directory traversal."""

import logging
import os
from typing import Callable, Iterator, NamedTuple, Optional

logger = logging.getLogger(__name__)


class DirectoryEntry(NamedTuple):
    """One entry produced by a traversal."""
    path: str
    is_file: bool


# Called with (path, error) whenever an entry has to be skipped
ErrorCallback = Callable[[str, OSError], None]


def walk_entries(
    root: str,
    on_error: Optional[ErrorCallback] = None,
    follow_symlinks: bool = False
) -> Iterator[DirectoryEntry]:
    """Yield every entry below ``root``, depth first, without a depth limit.
    
    Directories that cannot be listed and entries whose type cannot be read are
    skipped (reported through ``on_error``) instead of aborting the walk.
    Symlinked directories are only descended into when ``follow_symlinks`` is set.

    The walk is lazy between directories only: each directory's listing is
    read in full before its entries are yielded.

    Args:
        root: Directory to walk (not yielded itself)
        on_error: Optional callback for skipped entries
        follow_symlinks: Whether to recurse into symlinked directories
    
    Yields:
        DirectoryEntry for each file and directory found
    """
    pending = [root]
    while pending:
        directory = pending.pop()
        try:
            with os.scandir(directory) as it:
                entries = list(it)
        except OSError as e:
            logger.debug(f"Skipping unreadable directory {directory}: {e}")
            if on_error:
                on_error(directory, e)
            continue

        subdirectories = []
        for entry in entries:
            try:
                is_dir = entry.is_dir(follow_symlinks=follow_symlinks)
                is_file = entry.is_file()
            except OSError as e:
                logger.debug(f"Skipping unreadable entry {entry.path}: {e}")
                if on_error:
                    on_error(entry.path, e)
                continue

            yield DirectoryEntry(path=entry.path, is_file=is_file)
            if is_dir:
                subdirectories.append(entry.path)

        # Reversed so subdirectories are visited in listing order
        pending.extend(reversed(subdirectories))
