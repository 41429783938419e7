#!/usr/bin/env python3
"""
Unity Scan CLI

A tool for scanning Unity projects: dumps the GameObject names of every
scene and lists the scripts no scene references.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Dict

from model.report import SceneHierarchy, UsageMatch
from scanner.builder import scan_project
from scanner.discovery import DEFAULT_EXCLUDE_DIRS
from scanner.progress import LoggingReporter
from exporters import (
    UNUSED_SCRIPTS_FILENAME,
    dump_path_for,
    to_json,
    write_dump,
    write_unused_scripts,
)


logger = logging.getLogger("unityscan")


def parse_args(args=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="unityscan",
        description="Dump scene hierarchies and find unused scripts in a Unity project.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  unityscan ./MyGame ./out                   # Scene dumps + UnusedScripts.csv
  unityscan ./MyGame ./out --match-by name   # Match scripts by file name
  unityscan ./MyGame ./out --keep-going      # Skip scenes that fail to parse
  unityscan ./MyGame ./out --json out/report.json
        """,
    )

    # Positional arguments
    parser.add_argument(
        "root",
        help="Unity project root directory",
    )

    parser.add_argument(
        "output",
        help="Output directory for .dump files and UnusedScripts.csv",
    )

    # Analysis options
    parser.add_argument(
        "--match-by",
        choices=[m.value for m in UsageMatch],
        default=UsageMatch.IDENTIFIER.value,
        help="Test scripts by their .meta GUID or by file name (default: guid)",
    )

    parser.add_argument(
        "--relative-to",
        type=str,
        default=None,
        help="Base path for script paths in the CSV (default: output directory)",
    )

    parser.add_argument(
        "--case-sensitive-paths",
        action="store_true",
        help="Compare path prefixes case-sensitively when making paths relative",
    )

    parser.add_argument(
        "--keep-going",
        action="store_true",
        help="Report scenes that fail to parse and continue with the rest",
    )

    parser.add_argument(
        "--exclude-dir",
        nargs="+",
        default=None,
        help="Additional directory names to exclude",
    )

    # Output options
    parser.add_argument(
        "--json",
        type=str,
        default=None,
        help="Also write a JSON summary to this file",
    )

    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log sidecar lookups and written files",
    )
    verbosity.add_argument(
        "-q", "--quiet",
        action="store_true",
        help="Only log warnings and errors",
    )

    return parser.parse_args(args)


def configure_logging(verbose: bool = False, quiet: bool = False) -> None:
    """Send progress logging to stderr at the requested level."""
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.WARNING
    else:
        level = logging.INFO
    logging.basicConfig(level=level, format="%(message)s", stream=sys.stderr)


def main(args=None):
    """Main entry point."""
    parsed = parse_args(args)
    configure_logging(parsed.verbose, parsed.quiet)

    # Resolve paths
    root = Path(parsed.root).resolve()
    if not root.is_dir():
        print(f"Error: '{parsed.root}' is not a directory", file=sys.stderr)
        return 1

    output_dir = Path(parsed.output).resolve()
    base = Path(parsed.relative_to).resolve() if parsed.relative_to else output_dir

    exclude_dirs = None
    if parsed.exclude_dir:
        exclude_dirs = set(parsed.exclude_dir) | DEFAULT_EXCLUDE_DIRS

    reporter = LoggingReporter()
    written: Dict[Path, Path] = {}

    def write_scene(scene: SceneHierarchy) -> None:
        dump_path = dump_path_for(scene.path, output_dir)
        if dump_path in written:
            reporter.dump_collision(dump_path, written[dump_path], scene.path)
        write_dump(scene.names, dump_path)
        written[dump_path] = scene.path
        reporter.dump_written(scene.path, dump_path, len(scene.names))

    # Scan the project, writing dumps as scenes are processed
    try:
        output_dir.mkdir(parents=True, exist_ok=True)
        report = scan_project(
            root=root,
            base=base,
            match_by=UsageMatch(parsed.match_by),
            case_insensitive=not parsed.case_sensitive_paths,
            keep_going=parsed.keep_going,
            exclude_dirs=exclude_dirs,
            on_scene=write_scene,
            reporter=reporter,
        )
    except Exception as e:
        print(f"Error scanning project: {e}", file=sys.stderr)
        return 1

    # Write reports
    try:
        csv_path = output_dir / UNUSED_SCRIPTS_FILENAME
        write_unused_scripts(report.unused, csv_path)
        logger.info("Unused scripts written to: %s", csv_path)

        if parsed.json:
            json_path = Path(parsed.json)
            json_path.write_text(to_json(report), encoding="utf-8")
            logger.info("JSON summary written to: %s", json_path)
    except Exception as e:
        print(f"Error writing output: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
