"""Collection of script GUIDs referenced by scene documents."""

from pathlib import Path
from typing import Iterable, Optional, Set

from model.nodes import Node
from .entities import EntityKind, classify_key
from .parser import parse_file


SCRIPT_KEY = "m_Script"
GUID_KEY = "guid"


def _script_guid(body: Node) -> Optional[str]:
    """Follow ``m_Script.guid`` inside a MonoBehaviour body, if every link exists."""
    behaviour = body.as_mapping()
    if behaviour is None:
        return None
    script_node = behaviour.get(SCRIPT_KEY)
    if script_node is None:
        return None
    script = script_node.as_mapping()
    if script is None:
        return None
    guid_node = script.get(GUID_KEY)
    if guid_node is None:
        return None
    guid = guid_node.as_scalar()
    return guid.value if guid is not None else None


def extract_script_guids(documents: Iterable[Node]) -> Set[str]:
    """
    Return the script GUIDs referenced by MonoBehaviour entries.

    Args:
        documents: Parsed documents of one or more scene files.

    Returns:
        Set of GUID strings, compared as-is.
    """
    guids: Set[str] = set()

    for document in documents:
        root = document.as_mapping()
        if root is None:
            continue
        for key, value in root.items():
            if classify_key(key) is not EntityKind.MONO_BEHAVIOUR:
                continue
            guid = _script_guid(value)
            if guid is not None:
                guids.add(guid)

    return guids


def collect_used_guids(scene_files: Iterable[Path]) -> Set[str]:
    """
    Parse every scene file and return all script GUIDs they reference.

    Standalone entry point for callers that only need the used set.
    scan_project parses each scene once for both the hierarchy and the
    GUIDs, so it calls extract_script_guids on the parsed documents instead.

    Raises:
        ParseError: On the first malformed scene file.
    """
    used: Set[str] = set()
    for scene_file in scene_files:
        used.update(extract_script_guids(parse_file(scene_file)))
    return used
