"""
Model store path resolution.

Maps model identities to manifest files and digests to blob files inside the
models directory. Path arithmetic lives in :mod:`.layout`; this module adds
validation, directory creation and the legacy blob probe.

Every call is stateless: settings are read per call when not injected, and
directory creation is idempotent, so concurrent callers need no coordination.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Optional

from ..settings import Settings, create_settings_from_env
from . import layout
from .digest import canonical_digest, validate_digest
from .errors import DirectoryCreateFailed, InvalidDigestFormat, InvalidIdentity
from .layout import BlobLayout, BlobLocation
from .names import ModelName
from .reference import ModelIdentity

__all__ = [
    "PathResolver",
    "ensure_directory",
    "select_blob_location",
    "get_manifest_path",
    "get_manifests_directory",
    "get_blobs_path",
]

logger = logging.getLogger(__name__)

DIR_MODE = 0o755


def ensure_directory(path: Path) -> Path:
    """
    Create ``path`` and any missing parents (``mkdir -p``).

    Args:
        path: Directory to create

    Returns:
        ``path``

    Raises:
        DirectoryCreateFailed: If a component is not a directory or cannot be created
    """
    try:
        path.mkdir(mode=DIR_MODE, parents=True, exist_ok=True)
    except OSError as e:
        raise DirectoryCreateFailed(path, e) from e
    return path


def select_blob_location(
    legacy: Path,
    sharded: Path,
    exists: Callable[[Path], bool] = Path.exists,
) -> BlobLocation:
    """
    Choose between the legacy and sharded location of one blob.

    The legacy path is probed first and wins whenever it exists, even if a
    sharded copy exists too. Otherwise the sharded path is returned, whether
    or not a file is there yet.

    Args:
        legacy: Flat ``blobs/sha256-<hex>`` path
        sharded: ``blobs/<hex[:2]>/sha256-<hex>`` path
        exists: Existence predicate (injectable for tests)
    """
    if exists(legacy):
        return BlobLocation(layout=BlobLayout.LEGACY, path=legacy)
    return BlobLocation(layout=BlobLayout.SHARDED, path=sharded)


class PathResolver:
    """
    Resolve manifest and blob paths under a models directory.

    Args:
        settings: Store settings; loaded from the environment on every call if None
    """

    def __init__(self, settings: Optional[Settings] = None):
        self._settings = settings

    @property
    def models_dir(self) -> Path:
        settings = self._settings if self._settings is not None else create_settings_from_env()
        return settings.models_dir

    def manifest_path(self, identity: ModelIdentity) -> Path:
        """
        Path of the manifest file for ``identity``.

        The directory is not created; manifest writers own that step.

        Raises:
            InvalidIdentity: If the identity is not a valid model name (checked
                before the models directory is consulted)
            StoreRootUnavailable: If the models directory cannot be determined
        """
        name = ModelName(
            host=identity.registry,
            namespace=identity.namespace,
            model=identity.repository,
            tag=identity.tag,
        )
        if not name.is_valid():
            raise InvalidIdentity(str(name))

        try:
            return layout.manifest_file(self.models_dir, name)
        except ValueError as e:
            raise InvalidIdentity(str(name)) from e

    def manifests_directory(self) -> Path:
        """
        The manifests root, created if absent.

        Raises:
            DirectoryCreateFailed: If the directory cannot be created
            StoreRootUnavailable: If the models directory cannot be determined
        """
        return ensure_directory(layout.manifests_dir(self.models_dir))

    def locate_blob(self, digest: str) -> BlobLocation:
        """
        Resolve a non-empty digest to its blob location.

        The shard directory is always created so the sharded path is
        writable; the legacy path is still preferred if a blob already sits there.

        Raises:
            InvalidDigestFormat: If ``digest`` is malformed or empty
            DirectoryCreateFailed: If the shard directory cannot be created
        """
        if not digest:
            raise InvalidDigestFormat(digest)
        validate_digest(digest)
        digest = canonical_digest(digest)
        models_dir = self.models_dir

        sharded = layout.sharded_blob(models_dir, digest)
        ensure_directory(sharded.parent)

        location = select_blob_location(layout.legacy_blob(models_dir, digest), sharded)
        if location.is_legacy:
            logger.debug(f"Using legacy blob path {location.path}")
        return location

    def blob_path(self, digest: str) -> Path:
        """
        Path of the blob for ``digest``.

        An empty digest returns the blobs root itself, created if absent.

        Raises:
            InvalidDigestFormat: If ``digest`` is non-empty and malformed
            DirectoryCreateFailed: If a directory cannot be created
            StoreRootUnavailable: If the models directory cannot be determined
        """
        validate_digest(digest)
        if not digest:
            return ensure_directory(layout.blobs_dir(self.models_dir))
        return self.locate_blob(digest).path


def get_manifest_path(identity: ModelIdentity, settings: Optional[Settings] = None) -> Path:
    """Module-level shortcut for :meth:`PathResolver.manifest_path`."""
    return PathResolver(settings).manifest_path(identity)


def get_manifests_directory(settings: Optional[Settings] = None) -> Path:
    """Module-level shortcut for :meth:`PathResolver.manifests_directory`."""
    return PathResolver(settings).manifests_directory()


def get_blobs_path(digest: str, settings: Optional[Settings] = None) -> Path:
    """Module-level shortcut for :meth:`PathResolver.blob_path`."""
    return PathResolver(settings).blob_path(digest)
