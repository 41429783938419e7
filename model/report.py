"""Result model for a full project scan."""

from enum import Enum
from pathlib import Path
from typing import Dict, Iterator, List, NamedTuple, Set, Tuple


class UsageMatch(Enum):
    """How a script file is tested against the set of used identifiers."""

    # Compare the GUID read from the script's .meta file.
    IDENTIFIER = "guid"
    # Compare the script's file name, as the reference tool does.
    FILE_NAME = "name"


class UnusedScriptRecord(NamedTuple):
    """One row of the unused-script table."""

    relative_path: str
    guid: str


class SceneHierarchy(NamedTuple):
    """The GameObject names found in a single scene file, in document order."""

    path: Path
    names: List[str]


class ProjectReport:
    """
    Everything a project scan produced.

    Scene hierarchies and failures are keyed by the scene file path. The used
    GUID set is complete before any unused-script record is added.
    """

    def __init__(self, root: Path):
        self.root = root
        self._scenes: Dict[Path, List[str]] = {}
        self._used_guids: Set[str] = set()
        self._scripts: List[Path] = []
        self._unused: List[UnusedScriptRecord] = []
        self._failures: Dict[Path, str] = {}

    @property
    def scenes(self) -> Dict[Path, List[str]]:
        """Return scene path -> hierarchy names."""
        return {k: list(v) for k, v in self._scenes.items()}

    @property
    def used_guids(self) -> Set[str]:
        """Return the GUIDs referenced by any scene."""
        return self._used_guids.copy()

    @property
    def scripts(self) -> List[Path]:
        """Return the script inventory in discovery order."""
        return list(self._scripts)

    @property
    def unused(self) -> List[UnusedScriptRecord]:
        """Return the unused-script records in inventory order."""
        return list(self._unused)

    @property
    def failures(self) -> Dict[Path, str]:
        """Return scene path -> error message for scenes that failed to parse."""
        return dict(self._failures)

    def add_scene(self, scene: SceneHierarchy) -> None:
        self._scenes[scene.path] = list(scene.names)

    def add_used_guids(self, guids: Set[str]) -> None:
        self._used_guids.update(guids)

    def add_script(self, script: Path) -> None:
        self._scripts.append(script)

    def add_unused(self, record: UnusedScriptRecord) -> None:
        self._unused.append(record)

    def add_failure(self, scene: Path, message: str) -> None:
        self._failures[scene] = message

    def has_failures(self) -> bool:
        return bool(self._failures)

    def iter_scenes(self) -> Iterator[Tuple[Path, List[str]]]:
        """Iterate over (scene path, names) in scan order."""
        for path, names in self._scenes.items():
            yield path, list(names)

    def __repr__(self) -> str:
        return (
            f"ProjectReport(scenes={len(self._scenes)}, used_guids={len(self._used_guids)}, "
            f"scripts={len(self._scripts)}, unused={len(self._unused)}, failures={len(self._failures)})"
        )
