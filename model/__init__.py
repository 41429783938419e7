"""Data model for parsed scene documents and scan results."""

from .nodes import Node, Mapping, Scalar, Sequence
from .report import ProjectReport, SceneHierarchy, UnusedScriptRecord, UsageMatch

__all__ = [
    "Node",
    "Mapping",
    "Scalar",
    "Sequence",
    "ProjectReport",
    "SceneHierarchy",
    "UnusedScriptRecord",
    "UsageMatch",
]
