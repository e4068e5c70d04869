"""
Operations Facade - Application service layer.

Provides a clean interface between the CLI and the path resolution API,
centralizing settings injection while keeping CLI commands thin and testable.
"""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from ..settings import Settings
from ..storage.layout import BlobLayout, BlobLocation
from ..storage.reference import ModelIdentity, parse_model_path
from ..storage.resolver import PathResolver


@dataclass(frozen=True)
class OpsConfig:
    """
    Configuration for Operations facade.
    """
    verbose: bool = False         # Show detailed output


class Operations:
    """
    Application service facade for CLI operations.

    One method per CLI verb. Exceptions bubble up for central mapping in
    :func:`run_and_exit`.
    """

    def __init__(self, config: OpsConfig, settings: Optional[Settings] = None):
        """
        Initialize Operations facade.

        Args:
            config: Configuration settings
            settings: Optional settings (if None, loaded from environment per call)
        """
        self.cfg = config
        self.settings = settings
        self.resolver = PathResolver(settings)

    def parse(self, ref: str) -> ModelIdentity:
        """Parse a reference without touching the filesystem."""
        return parse_model_path(ref)

    def manifest_path(self, ref: str) -> Path:
        """Manifest file path for a reference."""
        return self.resolver.manifest_path(parse_model_path(ref))

    def manifests_directory(self) -> Path:
        """Manifests root, created if absent."""
        return self.resolver.manifests_directory()

    def blob_location(self, digest: str) -> BlobLocation:
        """
        Blob location for a digest.

        An empty digest resolves to the blobs root, reported as sharded.
        """
        if not digest:
            return BlobLocation(layout=BlobLayout.SHARDED, path=self.resolver.blob_path(""))
        return self.resolver.locate_blob(digest)
