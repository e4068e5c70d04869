"""
Tests for the Operations facade.
"""
from __future__ import annotations

import pytest

from goobla_store.operations import Operations, OpsConfig
from goobla_store.storage.errors import InvalidIdentity
from goobla_store.storage.layout import BlobLayout
from tests.conftest import CANONICAL_DIGEST, DIGEST


@pytest.fixture
def ops(settings):
    return Operations(config=OpsConfig(), settings=settings)


class TestOperations:
    """Test facade delegation."""

    def test_parse(self, ops):
        identity = ops.parse("research/llama:13b")
        assert identity.namespace == "research"
        assert identity.tag == "13b"

    def test_manifest_path(self, ops, models_dir):
        assert ops.manifest_path("llama") == models_dir / "manifests" / "registry.goobla.ai" / "library" / "llama" / "latest"

    def test_manifest_path_invalid(self, ops):
        with pytest.raises(InvalidIdentity):
            ops.manifest_path("a/b/c/d")

    def test_manifests_directory(self, ops, models_dir):
        assert ops.manifests_directory().is_dir()

    def test_blob_location_for_root(self, ops, models_dir):
        location = ops.blob_location("")
        assert location.path == models_dir / "blobs"
        assert location.layout is BlobLayout.SHARDED

    def test_blob_location_legacy(self, ops, models_dir):
        (models_dir / "blobs").mkdir(parents=True)
        (models_dir / "blobs" / CANONICAL_DIGEST).write_bytes(b"x")

        location = ops.blob_location(DIGEST)
        assert location.layout is BlobLayout.LEGACY

    def test_environment_settings(self, tmp_path):
        ops = Operations(config=OpsConfig())
        assert ops.blob_location("").path == tmp_path / "env-models" / "blobs"
