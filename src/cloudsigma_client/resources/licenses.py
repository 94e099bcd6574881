"""License catalog."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..http import Response
from ..models import CloudSigmaModel
from .base import ResourceBase

if TYPE_CHECKING:  # pragma: no cover - import-time guard
    from ..context import Context


class License(CloudSigmaModel):
    burstable: bool | None = None
    long_name: str | None = None
    name: str | None = None
    resource_uri: str | None = None
    type: str | None = None
    user_metric: str | None = None


class LicensesResource(ResourceBase):
    """List licenses that can be attached to drives."""

    base_path = "licenses"

    def list(self, *, ctx: Context | None = None) -> Response[list[License]]:
        return self._list(License, ctx=ctx)
