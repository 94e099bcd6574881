"""Access control list operations."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

from pydantic import Field

from ..http import Response
from ..models import CloudSigmaModel, ResourceLink, Tag
from .base import ResourceBase

if TYPE_CHECKING:  # pragma: no cover - import-time guard
    from ..context import Context


class ACLRule(CloudSigmaModel):
    permission: str | None = None


class ACL(CloudSigmaModel):
    """Grants permissions on tagged resources to other accounts.

    ``rules`` and ``tags`` are always sent, as empty lists when unset.
    """

    meta: dict[str, Any] | None = None
    name: str | None = None
    owner: ResourceLink | None = None
    resource_uri: str | None = None
    rules: list[ACLRule] = Field(default_factory=list)
    tags: list[Tag] = Field(default_factory=list)
    uuid: str | None = None


class ACLsResource(ResourceBase):
    """Manage ACLs.

    API docs: https://cloudsigma-docs.readthedocs.io/en/latest/acls.html
    """

    base_path = "acls"

    def list(self, *, ctx: Context | None = None) -> Response[list[ACL]]:
        return self._list(ACL, ctx=ctx)

    def get(self, uuid: str, *, ctx: Context | None = None) -> Response[ACL]:
        return self._retrieve(ACL, uuid, ctx=ctx)

    def create(self, acls: Sequence[ACL], *, ctx: Context | None = None) -> Response[list[ACL]]:
        return self._create(ACL, acls, ctx=ctx)

    def update(self, uuid: str, acl: ACL, *, ctx: Context | None = None) -> Response[ACL]:
        return self._update(ACL, uuid, acl, ctx=ctx)

    def delete(self, uuid: str, *, ctx: Context | None = None) -> Response[None]:
        return self._destroy(uuid, ctx=ctx)
