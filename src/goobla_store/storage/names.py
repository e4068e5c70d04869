"""
Model name validity and filepath encoding.

A ``ModelName`` is the fully qualified ``host/namespace/model:tag`` form of a
model reference. Each part has its own character and length rules; a name is
valid only when every part is. Valid names map onto nested manifest
directories via :meth:`ModelName.filepath`.
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum

__all__ = ["ModelName", "PartKind", "is_valid_part"]


class PartKind(str, Enum):
    """Which component of a name a string is validated as."""
    HOST = "host"
    NAMESPACE = "namespace"
    MODEL = "model"
    TAG = "tag"


# Inclusive (min, max) lengths per part
_PART_LENGTHS = {
    PartKind.HOST: (1, 350),
    PartKind.NAMESPACE: (1, 80),
    PartKind.MODEL: (1, 80),
    PartKind.TAG: (1, 80),
}


def _is_alnum_or_underscore(c: str) -> bool:
    return c == "_" or ("a" <= c <= "z") or ("A" <= c <= "Z") or ("0" <= c <= "9")


def is_valid_part(kind: PartKind, s: str) -> bool:
    """
    Check a single name component.

    Rules:
    - Length within the bounds for ``kind``
    - First character is ASCII alphanumeric or ``_``
    - Remaining characters are alphanumeric, ``_`` or ``-``
    - ``.`` is allowed everywhere except the namespace
    - ``:`` is allowed only in the host (port separator)

    Examples:
        >>> is_valid_part(PartKind.MODEL, "llama3.2")
        True
        >>> is_valid_part(PartKind.NAMESPACE, "my.org")
        False
        >>> is_valid_part(PartKind.HOST, "localhost:5000")
        True
    """
    lo, hi = _PART_LENGTHS[kind]
    if not lo <= len(s) <= hi:
        return False

    for i, c in enumerate(s):
        if i == 0:
            if not _is_alnum_or_underscore(c):
                return False
            continue
        if c in ("_", "-"):
            continue
        if c == ".":
            if kind is PartKind.NAMESPACE:
                return False
            continue
        if c == ":":
            if kind is not PartKind.HOST:
                return False
            continue
        if not _is_alnum_or_underscore(c):
            return False
    return True


@dataclass(frozen=True)
class ModelName:
    """
    Fully qualified model name.

    Attributes:
        host: Registry host, optionally with port
        namespace: Owner namespace
        model: Model (repository) name
        tag: Tag
    """
    host: str
    namespace: str
    model: str
    tag: str

    def is_valid(self) -> bool:
        """Return True when every part passes :func:`is_valid_part`."""
        return (
            is_valid_part(PartKind.HOST, self.host)
            and is_valid_part(PartKind.NAMESPACE, self.namespace)
            and is_valid_part(PartKind.MODEL, self.model)
            and is_valid_part(PartKind.TAG, self.tag)
        )

    def filepath(self) -> str:
        """
        Relative manifest path for this name: ``host/namespace/model/tag``.

        Lower-cased so names differing only by case share one manifest.

        Raises:
            ValueError: If the name is not valid
        """
        if not self.is_valid():
            raise ValueError(f"illegal attempt to get filepath of invalid name: {self}")
        return os.path.join(self.host, self.namespace, self.model, self.tag).lower()

    def __str__(self) -> str:
        return f"{self.host}/{self.namespace}/{self.model}:{self.tag}"
