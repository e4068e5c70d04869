"""
Path safety utilities for the model store.

Manifest sub-paths are derived from user-provided references, so they are
checked to stay inside the manifests directory before being joined to it.
"""
from __future__ import annotations

from pathlib import PurePath, PurePosixPath


def safe_relpath(path: str) -> str:
    """
    Validate a store-relative path to prevent traversal.

    This function enforces the following safety rules:
    - No empty strings or "." (prevents addressing the store root itself)
    - No absolute paths
    - No parent directory references ('..' components)

    Both ``/`` and the platform separator are treated as separators.

    Args:
        path: Relative path derived from a model name

    Returns:
        The path unchanged, if safe

    Raises:
        ValueError: If path violates safety rules

    Examples:
        >>> safe_relpath("registry.goobla.ai/library/llama/7b")
        'registry.goobla.ai/library/llama/7b'

        >>> safe_relpath("../secrets")
        ValueError: unsafe path: ../secrets
    """
    posix = PurePosixPath(path.replace("\\", "/"))
    native = PurePath(path)
    s = str(posix)
    if not path or s == ".":
        raise ValueError(f"unsafe path: {path}")
    if posix.is_absolute() or native.is_absolute() or native.anchor:
        raise ValueError(f"unsafe path: {path}")
    if ".." in posix.parts:
        raise ValueError(f"unsafe path: {path}")
    return path
