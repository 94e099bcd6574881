"""Firewall policy operations."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

from ..http import Response
from ..models import CloudSigmaModel, ResourceLink, Tag
from ..options import ListOptions
from .base import ResourceBase

if TYPE_CHECKING:  # pragma: no cover - import-time guard
    from ..context import Context


class FirewallPolicyRule(CloudSigmaModel):
    action: str | None = None
    comment: str | None = None
    direction: str | None = None
    dst_ip: str | None = None
    dst_port: str | None = None
    ip_proto: str | None = None
    src_ip: str | None = None
    src_port: str | None = None


class FirewallPolicy(CloudSigmaModel):
    """Set of firewall rules applied to server NICs."""

    meta: dict[str, Any] | None = None
    name: str | None = None
    owner: ResourceLink | None = None
    resource_uri: str | None = None
    rules: list[FirewallPolicyRule] | None = None
    servers: list[ResourceLink] | None = None
    tags: list[Tag] | None = None
    uuid: str | None = None


class FirewallPoliciesResource(ResourceBase):
    """Manage firewall policies.

    API docs: https://cloudsigma-docs.readthedocs.io/en/latest/fwpolicies.html
    """

    base_path = "fwpolicies"
    list_path = "fwpolicies/detail/"

    def list(
        self, *, options: ListOptions | None = None, ctx: Context | None = None
    ) -> Response[list[FirewallPolicy]]:
        return self._list(FirewallPolicy, options=options, ctx=ctx)

    def get(self, uuid: str, *, ctx: Context | None = None) -> Response[FirewallPolicy]:
        return self._retrieve(FirewallPolicy, uuid, ctx=ctx)

    def create(
        self, policies: Sequence[FirewallPolicy], *, ctx: Context | None = None
    ) -> Response[list[FirewallPolicy]]:
        return self._create(FirewallPolicy, policies, ctx=ctx)

    def update(
        self, uuid: str, policy: FirewallPolicy, *, ctx: Context | None = None
    ) -> Response[FirewallPolicy]:
        return self._update(FirewallPolicy, uuid, policy, ctx=ctx)

    def delete(self, uuid: str, *, ctx: Context | None = None) -> Response[None]:
        return self._destroy(uuid, ctx=ctx)
