"""Classification of top-level scene document keys."""

from enum import Enum


GAME_OBJECT_PREFIX = "GameObject"
MONO_BEHAVIOUR_KEY = "MonoBehaviour"


class EntityKind(Enum):
    GAME_OBJECT = "GameObject"
    MONO_BEHAVIOUR = "MonoBehaviour"
    OTHER = "other"


def classify_key(key: str) -> EntityKind:
    """
    Map a top-level key to the kind of entity it introduces.

    GameObject entries are recognised by prefix, so keys such as
    ``GameObject &12`` still count. MonoBehaviour must match exactly.
    """
    if key.startswith(GAME_OBJECT_PREFIX):
        return EntityKind.GAME_OBJECT
    if key == MONO_BEHAVIOUR_KEY:
        return EntityKind.MONO_BEHAVIOUR
    return EntityKind.OTHER
