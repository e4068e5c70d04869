"""
Serializable views of resolution results for ``--json`` output.
"""
from __future__ import annotations

from pydantic import BaseModel, Field

from ..storage.layout import BlobLocation
from ..storage.reference import ModelIdentity


class IdentityView(BaseModel):
    """Parsed model reference with derived names."""
    protocol_scheme: str = Field(..., description="Registry protocol scheme")
    registry: str = Field(..., description="Registry host")
    namespace: str = Field(..., description="Owner namespace")
    repository: str = Field(..., description="Model name, empty if missing")
    tag: str = Field(..., description="Tag")
    full_tag_name: str = Field(..., description="registry/namespace/repository:tag")
    short_tag_name: str = Field(..., description="Shortest form relative to defaults")
    base_url: str = Field(..., description="Registry endpoint base")

    @classmethod
    def from_identity(cls, identity: ModelIdentity) -> IdentityView:
        return cls(
            protocol_scheme=identity.protocol_scheme,
            registry=identity.registry,
            namespace=identity.namespace,
            repository=identity.repository,
            tag=identity.tag,
            full_tag_name=identity.full_tag_name,
            short_tag_name=identity.short_tag_name,
            base_url=identity.base_url,
        )


class BlobView(BaseModel):
    """Resolved blob path and which layout it follows."""
    path: str
    layout: str

    @classmethod
    def from_location(cls, location: BlobLocation) -> BlobView:
        return cls(path=str(location.path), layout=location.layout.value)
