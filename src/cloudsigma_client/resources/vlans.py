"""VLAN operations."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ..http import Response
from ..models import CloudSigmaModel, ResourceLink, Tag
from ..options import ListOptions
from .base import ResourceBase

if TYPE_CHECKING:  # pragma: no cover - import-time guard
    from ..context import Context


class VLANSubscription(CloudSigmaModel):
    id: int | None = None
    resource_uri: str | None = None


class VLAN(CloudSigmaModel):
    """Private network; VLANs are obtained through subscriptions, not created."""

    meta: dict[str, Any] | None = None
    owner: ResourceLink | None = None
    resource_uri: str | None = None
    servers: list[ResourceLink] | None = None
    subscription: VLANSubscription | None = None
    tags: list[Tag] | None = None
    uuid: str | None = None


class VLANsResource(ResourceBase):
    base_path = "vlans"
    list_path = "vlans/detail/"

    def list(
        self, *, options: ListOptions | None = None, ctx: Context | None = None
    ) -> Response[list[VLAN]]:
        return self._list(VLAN, options=options, ctx=ctx)

    def get(self, uuid: str, *, ctx: Context | None = None) -> Response[VLAN]:
        return self._retrieve(VLAN, uuid, ctx=ctx)

    def update(self, uuid: str, vlan: VLAN, *, ctx: Context | None = None) -> Response[VLAN]:
        """Edit VLAN meta and tags."""
        return self._update(VLAN, uuid, vlan, ctx=ctx)
