"""Relative path computation for report output."""

import os
from pathlib import Path


def get_relative_path(
    file_path: Path,
    base: Path,
    case_insensitive: bool = True,
) -> str:
    """
    Get the path of a file relative to a base directory.

    The comparison is a plain prefix test on the path text, so it does not
    touch the file system. Whether letter case matters is the caller's
    decision: it depends on the file system the project lives on.

    Args:
        file_path: The file path to make relative.
        base: The base directory.
        case_insensitive: If True, compare the prefix ignoring case.

    Returns:
        The part of the path after the base directory, or the full path if
        the file does not lie under the base.
    """
    full = str(file_path)
    prefix = str(base)
    if not prefix.endswith(os.sep):
        prefix += os.sep

    if case_insensitive:
        matches = full.casefold().startswith(prefix.casefold())
    else:
        matches = full.startswith(prefix)

    if matches:
        return full[len(prefix):]
    return full
