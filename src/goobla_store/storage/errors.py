"""
Model store error classes.

Provides a clear taxonomy of errors that can occur while resolving model
references and digests into on-disk paths. Each class also derives from the
closest built-in exception so callers that only know about ``FileNotFoundError``,
``ValueError`` or ``OSError`` keep working.
"""
from __future__ import annotations

import errno
from pathlib import Path
from typing import Optional


TRAVERSABLE_HINT = "ensure path elements are traversable"


class ModelPathError(Exception):
    """
    Base class for all model store path errors.
    """
    pass


class InvalidIdentity(ModelPathError, FileNotFoundError):
    """
    Model reference can never resolve to a manifest.

    Raised when:
    - The name validity check rejects registry/namespace/repository/tag
    - The repository is empty (unparseable reference)

    Carries ``ENOENT`` so it reads as "file does not exist" to callers,
    distinct from an I/O failure.
    """

    def __init__(self, name: str):
        super().__init__(errno.ENOENT, "invalid model name", name)
        self.name = name


class InvalidDigestFormat(ModelPathError, ValueError):
    """
    Digest string is not ``sha256:<64 hex>`` or ``sha256-<64 hex>``.
    """

    def __init__(self, digest: str):
        super().__init__(f"invalid digest format: {digest!r}")
        self.digest = digest


class DirectoryCreateFailed(ModelPathError, OSError):
    """
    A store directory could not be created.

    Raised when:
    - A path component exists but is a regular file
    - Permissions forbid creating or traversing a parent directory

    The underlying ``OSError`` is chained as ``__cause__``.
    """

    def __init__(self, path: Path, cause: OSError):
        super().__init__(cause.errno, f"{cause.strerror or cause}: {TRAVERSABLE_HINT}", str(path))
        self.path = path
        self.cause = cause

    def __str__(self) -> str:
        return f"{self.cause}: {TRAVERSABLE_HINT}"


class StoreRootUnavailable(ModelPathError):
    """
    The models directory could not be determined.

    Raised when:
    - No models directory is configured and the home directory cannot be resolved
    """
    pass


class InvalidProtocol(ModelPathError, ValueError):
    """
    Protocol scheme is neither ``http`` nor ``https``.
    """

    def __init__(self, scheme: str, message: Optional[str] = None):
        super().__init__(message or f"invalid protocol scheme: {scheme!r}")
        self.scheme = scheme


class InsecureProtocol(ModelPathError, ValueError):
    """
    Plain ``http`` was requested without explicitly allowing insecure registries.
    """
    pass


__all__ = [
    "ModelPathError",
    "InvalidIdentity",
    "InvalidDigestFormat",
    "DirectoryCreateFailed",
    "StoreRootUnavailable",
    "InvalidProtocol",
    "InsecureProtocol",
    "TRAVERSABLE_HINT",
]
