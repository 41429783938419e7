"""Project scanner that orchestrates parsing, collection and resolution."""

from pathlib import Path
from typing import Callable, Optional, Set

from model.report import ProjectReport, SceneHierarchy, UsageMatch
from .discovery import find_scene_files, find_script_files
from .hierarchy import extract_scene_hierarchy
from .inventory import find_unused_scripts, meta_path_for, read_script_guid
from .parser import ParseError, parse_file
from .progress import ProgressReporter
from .usage import extract_script_guids


def scan_project(
    root: Path,
    base: Path,
    match_by: UsageMatch = UsageMatch.IDENTIFIER,
    case_insensitive: bool = True,
    keep_going: bool = False,
    exclude_dirs: Optional[Set[str]] = None,
    on_scene: Optional[Callable[[SceneHierarchy], None]] = None,
    reporter: Optional[ProgressReporter] = None,
) -> ProjectReport:
    """
    Scan a Unity project for scene hierarchies and unused scripts.

    Every scene is parsed once: its hierarchy is handed to ``on_scene`` as
    soon as it is extracted, and its script GUIDs join the used set. The
    script inventory is only compared once all scenes are done.

    Args:
        root: Project root directory.
        base: Directory the unused-script paths are made relative to.
        match_by: How scripts are tested against the used GUID set.
        case_insensitive: Case policy for relative path computation.
        keep_going: If True, record malformed scenes and continue instead
                    of raising.
        exclude_dirs: Directory names to skip (default: VCS and Unity
                      generated folders).
        on_scene: Called with each scene's hierarchy, in scan order.
        reporter: Receives progress events.

    Returns:
        ProjectReport with hierarchies, used GUIDs and unused scripts.

    Raises:
        ParseError: On a malformed scene file, unless keep_going is set.
    """
    if reporter is None:
        reporter = ProgressReporter()

    root = root.resolve()
    report = ProjectReport(root)

    # Phase 1: hierarchies and used GUIDs from every scene
    for scene_file in find_scene_files(root, exclude_dirs):
        reporter.scene_found(scene_file)
        try:
            documents = parse_file(scene_file)
        except ParseError as e:
            if not keep_going:
                raise
            reporter.scene_failed(scene_file, e)
            report.add_failure(scene_file, str(e))
            continue

        scene = SceneHierarchy(scene_file, extract_scene_hierarchy(documents))
        report.add_scene(scene)
        if on_scene is not None:
            on_scene(scene)

        report.add_used_guids(extract_script_guids(documents))

    # Phase 2: compare the script inventory against the finished set
    scripts = find_script_files(root, exclude_dirs)
    for script in scripts:
        reporter.script_found(script)
        report.add_script(script)

    def _lookup(script: Path) -> str:
        guid = read_script_guid(script)
        reporter.meta_lookup(meta_path_for(script), guid)
        return guid

    for record in find_unused_scripts(
        scripts,
        report.used_guids,
        base=base,
        match_by=match_by,
        case_insensitive=case_insensitive,
        guid_lookup=_lookup,
    ):
        report.add_unused(record)

    reporter.finished(report)
    return report
