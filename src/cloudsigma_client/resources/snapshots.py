"""Snapshot helpers."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

from ..http import Response
from ..models import CloudSigmaModel, ResourceLink, Tag
from ..options import ListOptions
from .base import ResourceBase
from .drives import Drive

if TYPE_CHECKING:  # pragma: no cover - import-time guard
    from ..context import Context


class Snapshot(CloudSigmaModel):
    """Point-in-time copy of a drive."""

    allocated_size: int | None = None
    drive: Drive | None = None
    meta: dict[str, Any] | None = None
    name: str | None = None
    owner: ResourceLink | None = None
    resource_uri: str | None = None
    status: str | None = None
    tags: list[Tag] | None = None
    timestamp: str | None = None
    uuid: str | None = None


class SnapshotsResource(ResourceBase):
    """Interact with drive snapshots."""

    base_path = "snapshots"
    list_path = "snapshots/detail/"

    def list(
        self, *, options: ListOptions | None = None, ctx: Context | None = None
    ) -> Response[list[Snapshot]]:
        return self._list(Snapshot, options=options, ctx=ctx)

    def get(self, uuid: str, *, ctx: Context | None = None) -> Response[Snapshot]:
        return self._retrieve(Snapshot, uuid, ctx=ctx)

    def create(
        self, snapshots: Sequence[Snapshot], *, ctx: Context | None = None
    ) -> Response[list[Snapshot]]:
        return self._create(Snapshot, snapshots, ctx=ctx)

    def update(self, uuid: str, snapshot: Snapshot, *, ctx: Context | None = None) -> Response[Snapshot]:
        return self._update(Snapshot, uuid, snapshot, ctx=ctx)

    def delete(self, uuid: str, *, ctx: Context | None = None) -> Response[None]:
        return self._destroy(uuid, ctx=ctx)
