"""Extraction of GameObject names from scene documents."""

from typing import Iterable, List

from model.nodes import Node
from .entities import EntityKind, classify_key


NAME_KEY = "m_Name"


def extract_hierarchy(document: Node) -> List[str]:
    """
    Return the GameObject names of one document, in document order.

    Entries without a scalar ``m_Name`` are skipped. Documents whose root is
    not a mapping contribute nothing.
    """
    names: List[str] = []

    root = document.as_mapping()
    if root is None:
        return names

    for key, value in root.items():
        if classify_key(key) is not EntityKind.GAME_OBJECT:
            continue
        body = value.as_mapping()
        if body is None:
            continue
        name_node = body.get(NAME_KEY)
        if name_node is None:
            continue
        name = name_node.as_scalar()
        if name is not None:
            names.append(name.value)

    return names


def extract_scene_hierarchy(documents: Iterable[Node]) -> List[str]:
    """Concatenate the hierarchy of every document in one scene file."""
    names: List[str] = []
    for document in documents:
        names.extend(extract_hierarchy(document))
    return names
