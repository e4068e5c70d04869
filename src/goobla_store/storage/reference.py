"""
Model reference parsing.

Turns strings like ``llama3:8b``, ``research/llama:13b`` or
``https://myregistry.example.com/research/llama:13b`` into a fully populated
:class:`ModelIdentity`. Parsing never fails; anything the string leaves out
is filled from :class:`ReferenceDefaults`. Whether the result names a real
model is decided later by the name validity check.
"""
from __future__ import annotations

import os
from dataclasses import dataclass, field
from urllib.parse import urlunsplit

from .errors import InsecureProtocol, InvalidProtocol

__all__ = [
    "DEFAULT_REGISTRY",
    "DEFAULT_NAMESPACE",
    "DEFAULT_TAG",
    "DEFAULT_PROTOCOL_SCHEME",
    "ReferenceDefaults",
    "DEFAULTS",
    "ModelIdentity",
    "parse_model_path",
]

DEFAULT_REGISTRY = "registry.goobla.ai"
DEFAULT_NAMESPACE = "library"
DEFAULT_TAG = "latest"
DEFAULT_PROTOCOL_SCHEME = "https"

_ALLOWED_SCHEMES = ("http", "https")


@dataclass(frozen=True)
class ReferenceDefaults:
    """
    Values used for any part a reference string omits.

    Attributes:
        protocol_scheme: Scheme used to reach the registry
        registry: Registry host
        namespace: Owner namespace
        tag: Tag
    """
    protocol_scheme: str = DEFAULT_PROTOCOL_SCHEME
    registry: str = DEFAULT_REGISTRY
    namespace: str = DEFAULT_NAMESPACE
    tag: str = DEFAULT_TAG


DEFAULTS = ReferenceDefaults()


@dataclass(frozen=True)
class ModelIdentity:
    """
    Structured identity of a model reference.

    Attributes:
        protocol_scheme: Scheme for registry access (e.g. "https")
        registry: Registry host (e.g. "registry.goobla.ai")
        namespace: Owner namespace (e.g. "library")
        repository: Model name; empty if the reference had none
        tag: Tag (e.g. "latest")
        defaults: Defaults the identity was parsed against
    """
    protocol_scheme: str = DEFAULT_PROTOCOL_SCHEME
    registry: str = DEFAULT_REGISTRY
    namespace: str = DEFAULT_NAMESPACE
    repository: str = ""
    tag: str = DEFAULT_TAG
    defaults: ReferenceDefaults = field(default=DEFAULTS, repr=False, compare=False)

    @property
    def namespace_repository(self) -> str:
        """``namespace/repository``"""
        return f"{self.namespace}/{self.repository}"

    @property
    def full_tag_name(self) -> str:
        """Fully qualified ``registry/namespace/repository:tag``."""
        return f"{self.registry}/{self.namespace}/{self.repository}:{self.tag}"

    @property
    def short_tag_name(self) -> str:
        """
        Shortest form that still round-trips against the defaults.

        Examples:
            >>> parse_model_path("llama:7b").short_tag_name
            'llama:7b'
            >>> parse_model_path("research/llama:7b").short_tag_name
            'research/llama:7b'
            >>> parse_model_path("example.com/library/llama:7b").short_tag_name
            'example.com/library/llama:7b'
        """
        if self.registry == self.defaults.registry:
            if self.namespace == self.defaults.namespace:
                return f"{self.repository}:{self.tag}"
            return f"{self.namespace}/{self.repository}:{self.tag}"
        return self.full_tag_name

    @property
    def base_url(self) -> str:
        """Registry endpoint base, ``scheme://registry``."""
        return urlunsplit((self.protocol_scheme, self.registry, "", "", ""))

    def check_protocol(self, insecure: bool = False) -> None:
        """
        Enforce the registry protocol policy.

        Args:
            insecure: Allow plain http

        Raises:
            InvalidProtocol: If the scheme is not http or https
            InsecureProtocol: If the scheme is http and ``insecure`` is False
        """
        scheme = self.protocol_scheme.lower()
        if scheme not in _ALLOWED_SCHEMES:
            raise InvalidProtocol(self.protocol_scheme)
        if scheme == "http" and not insecure:
            raise InsecureProtocol("insecure protocol http")

    def __str__(self) -> str:
        return self.full_tag_name


def parse_model_path(name: str, defaults: ReferenceDefaults = DEFAULTS) -> ModelIdentity:
    """
    Parse a model reference string.

    Accepted forms (any part may be omitted from the left):
    - "repository[:tag]"
    - "namespace/repository[:tag]"
    - "registry/namespace/repository[:tag]"
    - any of the above prefixed with "scheme://"

    A string with zero or more than three ``/``-separated parts leaves the
    repository empty; the identity is then rejected by manifest resolution.

    Args:
        name: Reference string
        defaults: Values for omitted parts

    Returns:
        ModelIdentity with every field populated

    Examples:
        >>> parse_model_path("llama:7b")
        ModelIdentity(protocol_scheme='https', registry='registry.goobla.ai', namespace='library', repository='llama', tag='7b')
    """
    scheme = defaults.protocol_scheme
    registry = defaults.registry
    namespace = defaults.namespace
    repository = ""
    tag = defaults.tag

    before, sep, after = name.partition("://")
    if sep:
        scheme = before
        name = after

    name = name.replace(os.sep, "/")
    parts = name.split("/")
    if len(parts) == 3:
        registry, namespace, repository = parts
    elif len(parts) == 2:
        namespace, repository = parts
    elif len(parts) == 1:
        repository = parts[0]

    repo, sep, rest = repository.partition(":")
    if sep:
        repository, tag = repo, rest

    return ModelIdentity(
        protocol_scheme=scheme,
        registry=registry,
        namespace=namespace,
        repository=repository,
        tag=tag,
        defaults=defaults,
    )
