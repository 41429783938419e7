"""JSON exporter for project scan reports (machine-friendly format)."""

import json
from pathlib import Path
from typing import Any, Dict, List, Optional

from model.report import ProjectReport


def to_json(
    report: ProjectReport,
    base: Optional[Path] = None,
    indent: int = 2,
) -> str:
    """
    Convert a project report to JSON format.

    Args:
        report: The scan report to export.
        base: Optional base path for scene paths (default: project root).
        indent: JSON indentation level.

    Returns:
        JSON string with scenes, used GUIDs, unused scripts and failures.
    """
    if base is None:
        base = report.root

    scenes: List[Dict[str, Any]] = []
    for path, names in report.iter_scenes():
        scenes.append({"path": _get_path_str(path, base, report.root), "objects": names})

    unused: List[Dict[str, str]] = [
        {"path": record.relative_path, "guid": record.guid}
        for record in report.unused
    ]

    failures: List[Dict[str, str]] = [
        {"path": _get_path_str(path, base, report.root), "error": message}
        for path, message in sorted(report.failures.items())
    ]

    data: Dict[str, Any] = {
        "scenes": scenes,
        "used_guids": sorted(report.used_guids),
        "unused_scripts": unused,
        "failures": failures,
    }

    return json.dumps(data, indent=indent)


def _get_path_str(path: Path, base: Path, root: Path) -> str:
    """Get the string representation of a path."""
    try:
        rel_path = path.relative_to(base)
        return str(rel_path).replace("\\", "/")
    except ValueError:
        try:
            rel_path = path.relative_to(root)
            return str(rel_path).replace("\\", "/")
        except ValueError:
            return str(path).replace("\\", "/")
