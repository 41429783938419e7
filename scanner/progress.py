"""Progress reporting for project scans."""

import logging
from pathlib import Path

from model.report import ProjectReport


logger = logging.getLogger(__name__)


class ProgressReporter:
    """
    Receives progress events from a project scan.

    The base class ignores every event. Subclass it to print, log or
    collect progress; scanning code never writes to the console itself.
    """

    def scene_found(self, scene: Path) -> None:
        pass

    def script_found(self, script: Path) -> None:
        pass

    def meta_lookup(self, meta: Path, guid: str) -> None:
        pass

    def dump_written(self, scene: Path, dump: Path, count: int) -> None:
        pass

    def dump_collision(self, dump: Path, previous: Path, scene: Path) -> None:
        pass

    def scene_failed(self, scene: Path, error: Exception) -> None:
        pass

    def finished(self, report: ProjectReport) -> None:
        pass


class LoggingReporter(ProgressReporter):
    """Forwards scan progress to the standard logging module."""

    def __init__(self, log: logging.Logger = logger):
        self.log = log

    def scene_found(self, scene: Path) -> None:
        self.log.info("Scene: %s", scene)

    def script_found(self, script: Path) -> None:
        self.log.info("Script: %s", script)

    def meta_lookup(self, meta: Path, guid: str) -> None:
        self.log.debug("Meta %s -> %s", meta, guid)

    def dump_written(self, scene: Path, dump: Path, count: int) -> None:
        self.log.debug("Wrote %d names from %s to %s", count, scene.name, dump)

    def dump_collision(self, dump: Path, previous: Path, scene: Path) -> None:
        self.log.warning("%s from %s overwrites the dump of %s", dump.name, scene, previous)

    def scene_failed(self, scene: Path, error: Exception) -> None:
        self.log.warning("Skipping %s: %s", scene, error)

    def finished(self, report: ProjectReport) -> None:
        self.log.info(
            "Scanned %d scenes and %d scripts: %d GUIDs in use, %d scripts unused",
            len(report.scenes),
            len(report.scripts),
            len(report.used_guids),
            len(report.unused),
        )
        if report.has_failures():
            self.log.warning("%d scene(s) could not be parsed", len(report.failures))
