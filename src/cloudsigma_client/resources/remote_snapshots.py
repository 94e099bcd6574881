"""Remote snapshot operations."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from ..http import Response
from ..models import CloudSigmaModel
from ..options import ListOptions
from .base import ResourceBase
from .snapshots import Snapshot

if TYPE_CHECKING:  # pragma: no cover - import-time guard
    from ..context import Context


class RemoteSnapshotDriveMetadata(CloudSigmaModel):
    media: str | None = None
    name: str | None = None
    size: int | None = None
    src_uuid: str | None = None
    storage_type: str | None = None


class RemoteSnapshot(Snapshot):
    """Snapshot stored in another location."""

    drive_meta: RemoteSnapshotDriveMetadata | None = None
    location: str | None = None


class RemoteSnapshotsResource(ResourceBase):
    """Manage snapshots replicated to other locations."""

    base_path = "remotesnapshots"
    list_path = "remotesnapshots/detail/"

    def list(
        self, *, options: ListOptions | None = None, ctx: Context | None = None
    ) -> Response[list[RemoteSnapshot]]:
        return self._list(RemoteSnapshot, options=options, ctx=ctx)

    def get(self, uuid: str, *, ctx: Context | None = None) -> Response[RemoteSnapshot]:
        return self._retrieve(RemoteSnapshot, uuid, ctx=ctx)

    def create(
        self, snapshots: Sequence[RemoteSnapshot], *, ctx: Context | None = None
    ) -> Response[list[RemoteSnapshot]]:
        return self._create(RemoteSnapshot, snapshots, ctx=ctx)

    def update(
        self, uuid: str, snapshot: RemoteSnapshot, *, ctx: Context | None = None
    ) -> Response[RemoteSnapshot]:
        return self._update(RemoteSnapshot, uuid, snapshot, ctx=ctx)

    def delete(self, uuid: str, *, ctx: Context | None = None) -> Response[None]:
        return self._destroy(uuid, ctx=ctx)
