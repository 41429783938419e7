"""Plain-text exporter for scene hierarchies (one name per line)."""

from pathlib import Path
from typing import Iterable, List

DUMP_SUFFIX = ".dump"


def dump_path_for(scene: Path, output_dir: Path) -> Path:
    """Return where a scene's hierarchy dump goes (``Main.unity`` -> ``Main.dump``)."""
    return output_dir / scene.with_suffix(DUMP_SUFFIX).name


def to_dump(names: Iterable[str]) -> str:
    """
    Convert hierarchy names to dump text.

    Every name is followed by a newline, so N names give N lines and an
    empty hierarchy gives an empty file.
    """
    return "".join(f"{name}\n" for name in names)


def write_dump(names: List[str], file_path: Path) -> None:
    """Write a hierarchy dump, replacing any existing file."""
    # Text mode translates "\n" to the platform line ending.
    with open(file_path, "w", encoding="utf-8") as handle:
        handle.write(to_dump(names))
