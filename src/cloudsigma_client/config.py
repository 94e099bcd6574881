"""Configuration helpers for CloudSigma client."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from .version import __version__

DEFAULT_LOCATION = "zrh"
DEFAULT_BASE_URL = "cloudsigma.com/api/2.0/"
DEFAULT_USER_AGENT = f"cloudsigma-client-python/{__version__}"

MEDIA_TYPE = "application/json"
HEADER_REQUEST_ID = "X-REQUEST-ID"


def build_api_endpoint(location: str | None = None, base_url: str | None = None) -> str:
    """Compose ``https://{location}.{base_url}``, falling back to defaults for empty parts.

    The result is not normalized: a ``base_url`` without a trailing slash
    yields an endpoint that the request builder will reject.
    """

    return f"https://{location or DEFAULT_LOCATION}.{base_url or DEFAULT_BASE_URL}"


@dataclass(slots=True)
class ClientConfig:
    """Typed configuration for `CloudSigmaClient`."""

    api_endpoint: str
    user_agent: str = DEFAULT_USER_AGENT
    verify_ssl: bool | str = True
    timeout: float | None = None
    default_headers: Mapping[str, str] | None = None

    def resolved_headers(self) -> dict[str, str]:
        headers: dict[str, str] = {
            "Accept": MEDIA_TYPE,
            "Content-Type": MEDIA_TYPE,
        }
        if self.default_headers:
            headers.update(self.default_headers)
        headers["User-Agent"] = self.user_agent
        return headers
