"""File discovery utilities for scanning Unity projects."""

from pathlib import Path
from typing import Iterator, List, Set, Optional


SCENE_EXTENSIONS = {".unity"}
SCRIPT_EXTENSIONS = {".cs"}
DEFAULT_EXCLUDE_DIRS = {
    ".git", ".hg", ".svn",
    ".idea", ".vscode", ".vs",
}
# Generated by the Unity editor next to Assets/; only skipped at the project root
UNITY_GENERATED_DIRS = {"Library", "Temp", "Logs", "obj"}


def iter_files(
    root: Path,
    include_ext: Set[str],
    exclude_dirs: Optional[Set[str]] = None,
    root_exclude_dirs: Optional[Set[str]] = None,
) -> Iterator[Path]:
    """
    Iterate over files in a directory tree.

    Args:
        root: Root directory to scan.
        include_ext: Set of file extensions to include (e.g., {'.unity'}).
                    Matching is case-sensitive, like the extension filters
                    the Unity editor applies.
        exclude_dirs: Set of directory names to skip at any depth.
                     If None, uses DEFAULT_EXCLUDE_DIRS.
        root_exclude_dirs: Set of directory names to skip only directly
                          under root. If None, uses UNITY_GENERATED_DIRS.

    Yields:
        Resolved Path objects for matching files, in sorted walk order.
    """
    if exclude_dirs is None:
        exclude_dirs = DEFAULT_EXCLUDE_DIRS
    if root_exclude_dirs is None:
        root_exclude_dirs = UNITY_GENERATED_DIRS

    root = root.resolve()

    def _walk(current: Path) -> Iterator[Path]:
        for entry in sorted(current.iterdir()):
            if entry.is_dir():
                if entry.name in exclude_dirs:
                    continue
                if current == root and entry.name in root_exclude_dirs:
                    continue
                yield from _walk(entry)
            elif entry.is_file():
                if entry.suffix in include_ext:
                    yield entry

    yield from _walk(root)


def find_scene_files(root: Path, exclude_dirs: Optional[Set[str]] = None) -> List[Path]:
    """Return every scene file under root."""
    return list(iter_files(root, SCENE_EXTENSIONS, exclude_dirs))


def find_script_files(root: Path, exclude_dirs: Optional[Set[str]] = None) -> List[Path]:
    """Return every script source file under root."""
    return list(iter_files(root, SCRIPT_EXTENSIONS, exclude_dirs))
