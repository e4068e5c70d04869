"""
goobla-store: resolve model references and digests to local store paths.
"""
from .storage.errors import (
    DirectoryCreateFailed,
    InsecureProtocol,
    InvalidDigestFormat,
    InvalidIdentity,
    InvalidProtocol,
    ModelPathError,
    StoreRootUnavailable,
)
from .storage.reference import (
    DEFAULT_NAMESPACE,
    DEFAULT_PROTOCOL_SCHEME,
    DEFAULT_REGISTRY,
    DEFAULT_TAG,
    ModelIdentity,
    ReferenceDefaults,
    parse_model_path,
)
from .settings import Settings, create_settings_from_env
from .storage.resolver import (
    PathResolver,
    get_blobs_path,
    get_manifest_path,
    get_manifests_directory,
)

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_NAMESPACE",
    "DEFAULT_PROTOCOL_SCHEME",
    "DEFAULT_REGISTRY",
    "DEFAULT_TAG",
    "DirectoryCreateFailed",
    "InsecureProtocol",
    "InvalidDigestFormat",
    "InvalidIdentity",
    "InvalidProtocol",
    "ModelIdentity",
    "ModelPathError",
    "PathResolver",
    "ReferenceDefaults",
    "Settings",
    "StoreRootUnavailable",
    "create_settings_from_env",
    "get_blobs_path",
    "get_manifest_path",
    "get_manifests_directory",
    "parse_model_path",
]
