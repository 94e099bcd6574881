"""Drive operations."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

from ..http import Response
from ..models import CloudSigmaModel, ResourceLink, Tag
from ..options import ListOptions
from .base import ResourceBase, _require_argument, _require_payload
from .licenses import License

if TYPE_CHECKING:  # pragma: no cover - import-time guard
    from ..context import Context


class DriveLicense(CloudSigmaModel):
    """License attached to a drive."""

    amount: int | None = None
    license: License | None = None
    user: ResourceLink | None = None


class Drive(CloudSigmaModel):
    """Block storage drive."""

    affinities: list[str] | None = None
    allow_multimount: bool | None = None
    jobs: list[ResourceLink] | None = None
    licenses: list[DriveLicense] | None = None
    media: str | None = None
    meta: dict[str, Any] | None = None
    mounted_on: list[ResourceLink] | None = None
    name: str | None = None
    owner: ResourceLink | None = None
    resource_uri: str | None = None
    size: int | None = None
    status: str | None = None
    storage_type: str | None = None
    tags: list[Tag] | None = None
    uuid: str | None = None


class DriveCloneRequest(CloudSigmaModel):
    """Attributes of the drive created by a clone action."""

    media: str | None = None
    name: str | None = None
    size: int | None = None
    storage_type: str | None = None


class DrivesResource(ResourceBase):
    """Interact with CloudSigma drives.

    API docs: https://cloudsigma-docs.readthedocs.io/en/latest/drives.html
    """

    base_path = "drives"
    list_path = "drives/detail/"

    def list(
        self, *, options: ListOptions | None = None, ctx: Context | None = None
    ) -> Response[list[Drive]]:
        return self._list(Drive, options=options, ctx=ctx)

    def get(self, uuid: str, *, ctx: Context | None = None) -> Response[Drive]:
        return self._retrieve(Drive, uuid, ctx=ctx)

    def create(self, drives: Sequence[Drive], *, ctx: Context | None = None) -> Response[list[Drive]]:
        return self._create(Drive, drives, ctx=ctx)

    def update(self, uuid: str, drive: Drive, *, ctx: Context | None = None) -> Response[Drive]:
        """Edit the drive identified by ``uuid``; ``drive.uuid`` is never sent."""
        return self._update(Drive, uuid, drive, ctx=ctx)

    def delete(self, uuid: str, *, ctx: Context | None = None) -> Response[None]:
        return self._destroy(uuid, ctx=ctx)

    def resize(self, uuid: str, drive: Drive, *, ctx: Context | None = None) -> Response[Drive]:
        """Resize a drive. ``drive`` must carry the new ``size`` in bytes.

        The drive has to be unmounted, and a drive can only grow.
        """
        _require_argument(uuid)
        _require_payload(drive)
        return self._single_from_action(
            Drive, uuid, "resize", drive.to_payload(exclude={"uuid"}), ctx=ctx
        )

    def clone(
        self,
        uuid: str,
        clone_request: DriveCloneRequest | None = None,
        *,
        ctx: Context | None = None,
    ) -> Response[Drive]:
        """Duplicate a drive. Without ``clone_request`` the copy keeps the source attributes."""
        return self._single_from_action(Drive, uuid, "clone", clone_request, ctx=ctx)
