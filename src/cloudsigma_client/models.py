"""Shared data transfer objects for CloudSigma payloads."""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")


class CloudSigmaModel(BaseModel):
    """Base for every DTO; unset fields stay ``None`` and are left out on the wire."""

    model_config = ConfigDict(populate_by_name=True)

    def to_payload(self, *, exclude: set[str] | None = None) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True, exclude=exclude)


class Meta(CloudSigmaModel):
    """Pagination information attached to collection responses."""

    limit: int | None = None
    offset: int | None = None
    total_count: int | None = None


class ResourceLink(CloudSigmaModel):
    """Reference to another CloudSigma resource."""

    resource_uri: str | None = None
    uuid: str | None = None


class Owner(CloudSigmaModel):
    resource_uri: str | None = None
    uuid: str | None = None


class TagMeta(CloudSigmaModel):
    color: str | None = None


class Tag(CloudSigmaModel):
    meta: TagMeta | None = None
    name: str | None = None
    owner: Owner | None = None
    resource_uri: str | None = None
    uuid: str | None = None


class ErrorEntry(CloudSigmaModel):
    """Single entry of the error array returned with non-2xx responses."""

    message: str | None = Field(default=None, alias="error_message")
    point: str | None = Field(default=None, alias="error_point")
    type: str | None = Field(default=None, alias="error_type")


class ObjectsEnvelope(CloudSigmaModel, Generic[T]):
    """Collection root: ``{"objects": [...], "meta": {...}}``."""

    objects: list[T] = Field(default_factory=list)
    meta: Meta | None = None
