"""CSV exporter for the unused-script table."""

import csv
import io
from pathlib import Path
from typing import Iterable

from model.report import UnusedScriptRecord

UNUSED_SCRIPTS_FILENAME = "UnusedScripts.csv"
HEADER = ("Relative Path", "GUID")


def to_csv(records: Iterable[UnusedScriptRecord]) -> str:
    """
    Convert unused-script records to CSV text.

    Returns:
        Header row followed by one row per record, comma-joined. A field is
        wrapped in double quotes only when it contains a comma, a double
        quote, a carriage return or a newline; double quotes inside such a
        field are doubled. Every other row is the plain comma-joined text.
    """
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(HEADER)
    for record in records:
        writer.writerow((record.relative_path, record.guid))
    return buffer.getvalue()


def write_unused_scripts(records: Iterable[UnusedScriptRecord], file_path: Path) -> None:
    """Write the unused-script table, replacing any existing file."""
    with open(file_path, "w", encoding="utf-8") as handle:
        handle.write(to_csv(records))
