"""Cloud status and feature flags."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..http import Response
from ..models import CloudSigmaModel
from .base import ResourceBase

if TYPE_CHECKING:  # pragma: no cover - import-time guard
    from ..context import Context


class CloudStatusFreeTier(CloudSigmaModel):
    dssd: int | None = None
    mem: int | None = None


class CloudStatusFreeTierMonthly(CloudSigmaModel):
    tx: int | None = None


class CloudStatus(CloudSigmaModel):
    free_tier: CloudStatusFreeTier | None = None
    free_tier_monthly: CloudStatusFreeTierMonthly | None = None
    guest: bool | None = None
    host_availability_zones: bool | None = None
    remote_snapshots: bool | None = None
    signup: bool | None = None
    sso: list[str] | None = None
    trial: bool | None = None
    vmware: bool | None = None
    vpc: bool | None = None


class CloudStatusResource(ResourceBase):
    """Report which features the cloud location offers."""

    base_path = "cloud_status"

    def get(self, *, ctx: Context | None = None) -> Response[CloudStatus]:
        return self._get(self._collection_path(), CloudStatus, ctx=ctx)
