"""Resolution of script identities and detection of unused scripts."""

from pathlib import Path
from typing import Callable, Iterable, List, Set

from model.report import UnusedScriptRecord, UsageMatch
from .resolver import get_relative_path


GUID_NOT_FOUND = "GUID_NOT_FOUND"
META_SUFFIX = ".meta"
GUID_PREFIX = "guid:"


def meta_path_for(script: Path) -> Path:
    """Return the sidecar metadata path of a script (``Foo.cs`` -> ``Foo.cs.meta``)."""
    return script.with_name(script.name + META_SUFFIX)


def read_script_guid(script: Path) -> str:
    """
    Read a script's GUID from its ``.meta`` sidecar file.

    The first line starting with ``guid:`` wins; the rest of that line,
    stripped of surrounding whitespace, is the GUID.

    Returns:
        The GUID, or GUID_NOT_FOUND if the sidecar is missing or has no
        ``guid:`` line.
    """
    meta = meta_path_for(script)
    if not meta.is_file():
        return GUID_NOT_FOUND

    with open(meta, encoding="utf-8", errors="replace") as handle:
        for line in handle:
            if line.startswith(GUID_PREFIX):
                return line[len(GUID_PREFIX):].strip()

    return GUID_NOT_FOUND


def is_script_used(
    script: Path,
    guid: str,
    used_guids: Set[str],
    match_by: UsageMatch = UsageMatch.IDENTIFIER,
) -> bool:
    """
    Test one script against the set of GUIDs referenced by scenes.

    With UsageMatch.FILE_NAME the script's file name is looked up instead of
    its GUID, which only matches when a file name happens to equal a GUID.
    """
    if match_by is UsageMatch.FILE_NAME:
        return script.name in used_guids
    return guid in used_guids


def find_unused_scripts(
    scripts: Iterable[Path],
    used_guids: Set[str],
    base: Path,
    match_by: UsageMatch = UsageMatch.IDENTIFIER,
    case_insensitive: bool = True,
    guid_lookup: Callable[[Path], str] = read_script_guid,
) -> List[UnusedScriptRecord]:
    """
    Return a record for every script no scene references.

    Args:
        scripts: Script inventory, in the order records should appear.
        used_guids: Complete set of GUIDs collected from all scenes.
        base: Directory the record paths are made relative to.
        match_by: Which key of the script is tested against used_guids.
        case_insensitive: Case policy for the relative path prefix test.
        guid_lookup: Resolves a script's GUID (sidecar lookup by default).

    Returns:
        UnusedScriptRecord list; unresolved GUIDs carry GUID_NOT_FOUND.
    """
    unused: List[UnusedScriptRecord] = []

    for script in scripts:
        guid = guid_lookup(script)
        if is_script_used(script, guid, used_guids, match_by):
            continue
        unused.append(
            UnusedScriptRecord(
                relative_path=get_relative_path(script, base, case_insensitive),
                guid=guid,
            )
        )

    return unused
