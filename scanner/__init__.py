"""Scanner module for scene parsing, script usage and inventory resolution."""

from .discovery import iter_files, find_scene_files, find_script_files
from .parser import ParseError, parse_documents, parse_file
from .entities import EntityKind, classify_key
from .hierarchy import extract_hierarchy, extract_scene_hierarchy
from .usage import extract_script_guids, collect_used_guids
from .inventory import GUID_NOT_FOUND, read_script_guid, find_unused_scripts
from .resolver import get_relative_path
from .progress import ProgressReporter, LoggingReporter
from .builder import scan_project

__all__ = [
    "iter_files",
    "find_scene_files",
    "find_script_files",
    "ParseError",
    "parse_documents",
    "parse_file",
    "EntityKind",
    "classify_key",
    "extract_hierarchy",
    "extract_scene_hierarchy",
    "extract_script_guids",
    "collect_used_guids",
    "GUID_NOT_FOUND",
    "read_script_guid",
    "find_unused_scripts",
    "get_relative_path",
    "ProgressReporter",
    "LoggingReporter",
    "scan_project",
]
