"""
Store layout path construction.

Centralizes the pure path arithmetic of the on-disk store. Nothing here
touches the filesystem, so every function can be tested without one:

    <models>/manifests/<host>/<namespace>/<model>/<tag>
    <models>/blobs/<hex[:2]>/sha256-<hex>     (sharded, current)
    <models>/blobs/sha256-<hex>               (legacy, flat)
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from ..path_safety import safe_relpath
from .digest import shard_prefix
from .names import ModelName

__all__ = [
    "MANIFESTS_DIR",
    "BLOBS_DIR",
    "BlobLayout",
    "BlobLocation",
    "manifests_dir",
    "blobs_dir",
    "manifest_file",
    "sharded_blob",
    "legacy_blob",
]

MANIFESTS_DIR = "manifests"
BLOBS_DIR = "blobs"


class BlobLayout(str, Enum):
    """Which on-disk convention a blob path follows."""
    LEGACY = "legacy"
    SHARDED = "sharded"


@dataclass(frozen=True)
class BlobLocation:
    """
    Resolved location of a blob.

    Attributes:
        layout: Legacy (flat) or sharded
        path: Absolute blob file path
    """
    layout: BlobLayout
    path: Path

    @property
    def is_legacy(self) -> bool:
        return self.layout is BlobLayout.LEGACY


def manifests_dir(models_dir: Path) -> Path:
    return models_dir / MANIFESTS_DIR


def blobs_dir(models_dir: Path) -> Path:
    return models_dir / BLOBS_DIR


def manifest_file(models_dir: Path, name: ModelName) -> Path:
    """
    Build the manifest path for a valid name.

    Args:
        models_dir: Store root
        name: Valid model name

    Returns:
        ``<models>/manifests/<name.filepath()>``

    Raises:
        ValueError: If the name is invalid or its filepath escapes the
            manifests directory
    """
    return manifests_dir(models_dir) / safe_relpath(name.filepath())


def sharded_blob(models_dir: Path, digest: str) -> Path:
    """
    Sharded blob path for a canonical (``sha256-<hex>``) digest.

    Examples:
        >>> sharded_blob(Path("/m"), "sha256-" + "ab" * 32).parent
        PosixPath('/m/blobs/ab')
    """
    return blobs_dir(models_dir) / shard_prefix(digest) / digest


def legacy_blob(models_dir: Path, digest: str) -> Path:
    """Flat blob path used before sharding was introduced."""
    return blobs_dir(models_dir) / digest
