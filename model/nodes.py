"""Node types for parsed markup documents.

Every parsed value is exactly one of :class:`Mapping`, :class:`Scalar` or
:class:`Sequence`. Callers narrow a node with the ``as_*`` accessors, which
return ``None`` instead of raising when the node is of another kind, so a
missing or mistyped field is handled with a plain ``if``.
"""

from typing import Dict, Iterator, List, Optional, Tuple


class Node:
    """Base class for parsed document nodes."""

    kind = "node"

    def as_mapping(self) -> Optional["Mapping"]:
        return None

    def as_scalar(self) -> Optional["Scalar"]:
        return None

    def as_sequence(self) -> Optional["Sequence"]:
        return None


class Scalar(Node):
    """A leaf value. The text is kept exactly as written, never converted."""

    kind = "scalar"

    def __init__(self, value: str):
        self.value = value

    def as_scalar(self) -> Optional["Scalar"]:
        return self

    def __eq__(self, other) -> bool:
        return isinstance(other, Scalar) and other.value == self.value

    def __hash__(self) -> int:
        return hash(self.value)

    def __repr__(self) -> str:
        return f"Scalar({self.value!r})"


class Sequence(Node):
    """An ordered list of nodes."""

    kind = "sequence"

    def __init__(self, items: Optional[List[Node]] = None):
        self.items: List[Node] = items if items is not None else []

    def as_sequence(self) -> Optional["Sequence"]:
        return self

    def __iter__(self) -> Iterator[Node]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def __repr__(self) -> str:
        return f"Sequence(items={len(self.items)})"


class Mapping(Node):
    """
    An ordered mapping of string keys to nodes.

    Keys are unique and iteration follows insertion (document) order.
    """

    kind = "mapping"

    def __init__(self, entries: Optional[Dict[str, Node]] = None):
        self._entries: Dict[str, Node] = dict(entries) if entries else {}

    def as_mapping(self) -> Optional["Mapping"]:
        return self

    def add(self, key: str, value: Node) -> None:
        """Add an entry. Raises KeyError if the key is already present."""
        if key in self._entries:
            raise KeyError(key)
        self._entries[key] = value

    def get(self, key: str) -> Optional[Node]:
        """Return the child stored under ``key``, or None."""
        return self._entries.get(key)

    def items(self) -> Iterator[Tuple[str, Node]]:
        return iter(self._entries.items())

    def keys(self) -> List[str]:
        return list(self._entries)

    def __contains__(self, key: str) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"Mapping(keys={list(self._entries)!r})"
