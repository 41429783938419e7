"""Parser for Unity's multi-document YAML scene format."""

import re
from pathlib import Path
from typing import Dict, List, Optional, TextIO

import yaml

from model.nodes import Mapping, Node, Scalar, Sequence


# Loader used only for composing; no constructors run, so Unity's
# "tag:unity3d.com,2011:<classID>" tags need no registration.
_LOADER = getattr(yaml, "CSafeLoader", yaml.SafeLoader)

TAG_DIRECTIVE = re.compile(r"^%TAG[ \t]+(\S+)[ \t]+(\S+)[ \t]*$", re.MULTILINE)
DOCUMENT_HEADER = re.compile(r"^---(?:[ \t][^\n]*)?$", re.MULTILINE)
# "--- !u!1 &1234 stripped" marks objects stripped out of a prefab instance.
STRIPPED_SUFFIX = re.compile(r"[ \t]+stripped[ \t]*$")


class ParseError(Exception):
    """Raised when a scene document stream is not well-formed."""

    def __init__(self, message: str, path: Optional[Path] = None):
        self.path = path
        if path is not None:
            message = f"{path}: {message}"
        super().__init__(message)


def normalize_headers(content: str) -> str:
    """
    Make Unity's document headers loadable by a standard YAML parser.

    Unity declares ``%TAG !u! tag:unity3d.com,2011:`` once for the whole
    file, but YAML scopes directives to a single document. Shorthand tags on
    document headers are expanded to verbatim ``!<...>`` tags, and the
    ``stripped`` marker is dropped.
    """
    handles = dict(TAG_DIRECTIVE.findall(content))
    shorthand = None
    if handles:
        alternatives = "|".join(re.escape(h) for h in sorted(handles, key=len, reverse=True))
        shorthand = re.compile(r"(?<!\S)(" + alternatives + r")(?!<)(\S+)")

    def _rewrite(match):
        header = STRIPPED_SUFFIX.sub("", match.group(0))
        if shorthand is not None:
            header = shorthand.sub(lambda m: f"!<{handles[m.group(1)]}{m.group(2)}>", header)
        return header

    return DOCUMENT_HEADER.sub(_rewrite, content)


def parse_documents(stream: TextIO, path: Optional[Path] = None) -> List[Node]:
    """
    Parse every document in a stream.

    Args:
        stream: Readable text stream.
        path: Source file, used only in error messages.

    Returns:
        The root node of each document, in stream order.

    Raises:
        ParseError: If the stream is not well-formed.
    """
    content = normalize_headers(stream.read())

    try:
        composed = list(yaml.compose_all(content, Loader=_LOADER))
    except yaml.YAMLError as e:
        raise ParseError(str(e), path) from e

    converted: Dict[int, Node] = {}
    return [_convert(node, converted, path) for node in composed if node is not None]


def parse_file(file_path: Path) -> List[Node]:
    """
    Parse a scene file into its documents.

    Scenes saved with Unity's binary serialization are not text and are
    reported as ParseError.

    Raises:
        ParseError: If the file is not well-formed or not UTF-8 text.
        OSError: If the file cannot be read.
    """
    with open(file_path, encoding="utf-8") as handle:
        try:
            return parse_documents(handle, file_path)
        except UnicodeDecodeError as e:
            raise ParseError(str(e), file_path) from e


def _convert(node: yaml.Node, converted: Dict[int, Node], path: Optional[Path]) -> Node:
    """Convert a composed PyYAML node into the project's node types."""
    # Aliases compose to the same object; reuse the conversion so that
    # recursive anchors terminate.
    if id(node) in converted:
        return converted[id(node)]

    if isinstance(node, yaml.ScalarNode):
        result: Node = Scalar(node.value)
        converted[id(node)] = result
        return result

    if isinstance(node, yaml.SequenceNode):
        sequence = Sequence()
        converted[id(node)] = sequence
        for item in node.value:
            sequence.items.append(_convert(item, converted, path))
        return sequence

    mapping = Mapping()
    converted[id(node)] = mapping
    for key_node, value_node in node.value:
        if not isinstance(key_node, yaml.ScalarNode):
            raise ParseError(
                f"unsupported non-scalar mapping key {key_node.start_mark}".strip(), path
            )
        try:
            mapping.add(key_node.value, _convert(value_node, converted, path))
        except KeyError:
            raise ParseError(
                f"duplicate key {key_node.value!r} {key_node.start_mark}".strip(), path
            ) from None
    return mapping
