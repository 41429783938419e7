"""Exporters for writing scan results to disk."""

from .dump_exporter import to_dump, write_dump, dump_path_for
from .csv_exporter import to_csv, write_unused_scripts, UNUSED_SCRIPTS_FILENAME
from .json_exporter import to_json

__all__ = [
    "to_dump",
    "write_dump",
    "dump_path_for",
    "to_csv",
    "write_unused_scripts",
    "UNUSED_SCRIPTS_FILENAME",
    "to_json",
]
