"""
Digest validation and canonicalisation.

Only sha256 digests are accepted. Both ``sha256:<hex>`` (registry form) and
``sha256-<hex>`` (on-disk form) are valid input; the on-disk form is canonical.
"""
from __future__ import annotations

import re

from .errors import InvalidDigestFormat

__all__ = [
    "DIGEST_PATTERN",
    "DIGEST_PREFIX",
    "is_valid_digest",
    "validate_digest",
    "canonical_digest",
    "digest_hex",
    "shard_prefix",
]

DIGEST_PATTERN = re.compile(r"^sha256[:-][0-9a-fA-F]{64}$")
DIGEST_PREFIX = "sha256-"
SHARD_WIDTH = 2


def is_valid_digest(digest: str) -> bool:
    """Return True if ``digest`` matches ``sha256[:-]<64 hex>``."""
    # fullmatch so a trailing newline is not accepted by "$"
    return DIGEST_PATTERN.fullmatch(digest) is not None


def validate_digest(digest: str) -> None:
    """
    Reject malformed digests.

    The empty string is allowed and means "the blobs directory itself".

    Raises:
        InvalidDigestFormat: If ``digest`` is non-empty and malformed
    """
    if digest and not is_valid_digest(digest):
        raise InvalidDigestFormat(digest)


def canonical_digest(digest: str) -> str:
    """
    Convert a digest to its on-disk form.

    Examples:
        >>> canonical_digest("sha256:" + "ab" * 32)[:9]
        'sha256-ab'
    """
    return digest.replace(":", "-")


def digest_hex(digest: str) -> str:
    """Strip the ``sha256-`` prefix from a canonical digest."""
    if digest.startswith(DIGEST_PREFIX):
        return digest[len(DIGEST_PREFIX):]
    return digest


def shard_prefix(digest: str) -> str:
    """First two hex characters of a canonical digest, used as the shard directory."""
    return digest_hex(digest)[:SHARD_WIDTH]
