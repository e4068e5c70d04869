"""
Tests for digest validation and canonicalisation.
"""
from __future__ import annotations

import pytest

from goobla_store.storage.digest import (
    canonical_digest,
    digest_hex,
    is_valid_digest,
    shard_prefix,
    validate_digest,
)
from goobla_store.storage.errors import InvalidDigestFormat

HEX = "0123456789abcdef" * 4


class TestValidateDigest:
    """Test digest syntax checks."""

    @pytest.mark.parametrize(
        "digest",
        [f"sha256:{HEX}", f"sha256-{HEX}", f"sha256:{HEX.upper()}", "sha256:" + "a" * 64],
    )
    def test_valid_digests(self, digest):
        assert is_valid_digest(digest)
        validate_digest(digest)

    @pytest.mark.parametrize(
        "digest",
        [
            "sha256:" + "g" * 64,
            "md5:" + "a" * 32,
            "sha256:" + "a" * 63,
            "sha256:" + "a" * 65,
            "sha256_" + "a" * 64,
            "SHA256:" + "a" * 64,
            "a" * 64,
            f"sha256:{HEX}\n",
            f" sha256:{HEX}",
        ],
    )
    def test_invalid_digests(self, digest):
        assert not is_valid_digest(digest)
        with pytest.raises(InvalidDigestFormat):
            validate_digest(digest)

    def test_empty_digest_allowed(self):
        """Test that the empty digest passes validation."""
        validate_digest("")

    def test_error_is_value_error(self):
        with pytest.raises(ValueError, match="invalid digest format"):
            validate_digest("nope")


class TestCanonicalDigest:
    """Test digest canonicalisation helpers."""

    def test_colon_replaced(self):
        assert canonical_digest(f"sha256:{HEX}") == f"sha256-{HEX}"

    def test_dash_form_unchanged(self):
        assert canonical_digest(f"sha256-{HEX}") == f"sha256-{HEX}"

    def test_digest_hex(self):
        assert digest_hex(f"sha256-{HEX}") == HEX

    def test_shard_prefix(self):
        assert shard_prefix(f"sha256-{HEX}") == "01"

    def test_shard_prefix_keeps_case(self):
        assert shard_prefix(f"sha256-{HEX.upper()}") == "01"
        assert shard_prefix("sha256-AB" + "0" * 62) == "AB"
