"""Drive library (pre-installed and installation images)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ..http import Response
from ..models import CloudSigmaModel
from ..options import ListOptions
from .base import ResourceBase

if TYPE_CHECKING:  # pragma: no cover - import-time guard
    from ..context import Context


class LibraryDrive(CloudSigmaModel):
    arch: str | None = None
    description: str | None = None
    favourite: bool | None = None
    image_type: str | None = None
    media: str | None = None
    meta: dict[str, Any] | None = None
    name: str | None = None
    os: str | None = None
    paid: bool | None = None
    resource_uri: str | None = None
    size: int | None = None
    status: str | None = None
    storage_type: str | None = None
    uuid: str | None = None
    version: str | None = None


class LibraryDrivesResource(ResourceBase):
    """Browse the drive library and clone images into the account.

    API docs: https://cloudsigma-docs.readthedocs.io/en/latest/libdrives.html
    """

    base_path = "libdrives"

    def list(
        self, *, options: ListOptions | None = None, ctx: Context | None = None
    ) -> Response[list[LibraryDrive]]:
        return self._list(LibraryDrive, options=options, ctx=ctx)

    def get(self, uuid: str, *, ctx: Context | None = None) -> Response[LibraryDrive]:
        return self._retrieve(LibraryDrive, uuid, ctx=ctx)

    def clone(
        self,
        uuid: str,
        clone_request: LibraryDrive | None = None,
        *,
        ctx: Context | None = None,
    ) -> Response[LibraryDrive]:
        """Copy a library drive into the account; ``clone_request`` overrides name, media, etc."""
        payload = clone_request.to_payload(exclude={"uuid"}) if clone_request is not None else None
        return self._single_from_action(LibraryDrive, uuid, "clone", payload, ctx=ctx)
