"""Public IP address operations."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pydantic import Field

from ..http import Response
from ..models import CloudSigmaModel, ResourceLink, Tag
from ..options import ListOptions
from .base import ResourceBase

if TYPE_CHECKING:  # pragma: no cover - import-time guard
    from ..context import Context


class IP(CloudSigmaModel):
    """Public IPv4 address; ``tags`` is always sent, as an empty list if unset."""

    gateway: str | None = None
    meta: dict[str, Any] | None = None
    nameservers: list[str] | None = None
    netmask: int | None = None
    owner: ResourceLink | None = None
    resource_uri: str | None = None
    server: ResourceLink | None = None
    subscription: ResourceLink | None = None
    tags: list[Tag] = Field(default_factory=list)
    uuid: str | None = None


class IPsResource(ResourceBase):
    """Read public IP addresses owned by the account."""

    base_path = "ips"
    list_path = "ips/detail/"

    def list(
        self, *, options: ListOptions | None = None, ctx: Context | None = None
    ) -> Response[list[IP]]:
        return self._list(IP, options=options, ctx=ctx)

    def get(self, uuid: str, *, ctx: Context | None = None) -> Response[IP]:
        return self._retrieve(IP, uuid, ctx=ctx)
