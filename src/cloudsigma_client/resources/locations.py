"""Cloud locations."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..http import Response
from ..models import CloudSigmaModel
from .base import ResourceBase

if TYPE_CHECKING:  # pragma: no cover - import-time guard
    from ..context import Context


class Location(CloudSigmaModel):
    """A CloudSigma location; ``id`` is the subdomain used for its API endpoint."""

    alternative_frontend_url: str | None = None
    api_endpoint: str | None = None
    country_code: str | None = None
    default_frontend_signup_url: str | None = None
    default_frontend_url: str | None = None
    display_name: str | None = None
    documentation_url: str | None = None
    id: str | None = None
    upload_url: str | None = None
    websocket_url: str | None = None


class LocationsResource(ResourceBase):
    base_path = "locations"

    def list(self, *, ctx: Context | None = None) -> Response[list[Location]]:
        return self._list(Location, ctx=ctx)
