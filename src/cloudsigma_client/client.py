"""High-level CloudSigma REST client."""

from __future__ import annotations

import json
import logging
import threading
from collections.abc import Mapping
from concurrent.futures import Future
from typing import Any
from urllib.parse import urljoin, urlsplit

import requests
import urllib3
from pydantic_core import PydanticSerializationError, to_jsonable_python
from urllib3.exceptions import HTTPError as TransportHTTPError
from urllib3.exceptions import InsecureRequestWarning

from .auth.base import CredentialsProvider
from .config import ClientConfig, build_api_endpoint
from .context import Context
from .exceptions import ConfigurationError, EncodeError, RequestError
from .http import Response, check_response, decode, new_response
from .options import ListOptions, add_options
from .resources import (
    ACLsResource,
    CapabilitiesResource,
    CloudStatusResource,
    DrivesResource,
    FirewallPoliciesResource,
    IPsResource,
    KeypairsResource,
    LibraryDrivesResource,
    LicensesResource,
    LocationsResource,
    ProfileResource,
    PubkeysResource,
    RemoteSnapshotsResource,
    ServersResource,
    SnapshotsResource,
    SubscriptionsResource,
    TagsResource,
    VLANsResource,
)


logger = logging.getLogger(__name__)


class CloudSigmaClient:
    """Wrap CloudSigma REST endpoints with per-resource services.

    The client holds only configuration and the credentials provider; calls
    do not mutate it, so one instance may serve several threads.
    """

    def __init__(
        self,
        credentials_provider: CredentialsProvider,
        *,
        location: str | None = None,
        base_url: str | None = None,
        user_agent: str | None = None,
        verify_ssl: bool | str = True,
        timeout: float | None = None,
        default_headers: Mapping[str, str] | None = None,
        session: requests.Session | None = None,
    ) -> None:
        self.config = ClientConfig(
            api_endpoint=build_api_endpoint(location, base_url),
            verify_ssl=verify_ssl,
            timeout=timeout,
            default_headers=default_headers,
        )
        if user_agent:
            self.config.user_agent = user_agent
        self._suppress_insecure_warning_if_needed()
        self._session = session or requests.Session()
        self._credentials_provider = credentials_provider
        self.acls = ACLsResource(self)
        self.capabilities = CapabilitiesResource(self)
        self.cloud_status = CloudStatusResource(self)
        self.drives = DrivesResource(self)
        self.firewall_policies = FirewallPoliciesResource(self)
        self.ips = IPsResource(self)
        self.keypairs = KeypairsResource(self)
        self.library_drives = LibraryDrivesResource(self)
        self.licenses = LicensesResource(self)
        self.locations = LocationsResource(self)
        self.profile = ProfileResource(self)
        self.pubkeys = PubkeysResource(self)
        self.remote_snapshots = RemoteSnapshotsResource(self)
        self.servers = ServersResource(self)
        self.snapshots = SnapshotsResource(self)
        self.subscriptions = SubscriptionsResource(self)
        self.tags = TagsResource(self)
        self.vlans = VLANsResource(self)

    # Context manager helpers -------------------------------------------------
    def __enter__(self) -> CloudSigmaClient:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:  # pragma: no cover - passthrough
        self.close()

    # Configuration -----------------------------------------------------------
    @property
    def api_endpoint(self) -> str:
        return self.config.api_endpoint

    @api_endpoint.setter
    def api_endpoint(self, endpoint: str) -> None:
        self.config.api_endpoint = endpoint

    @property
    def user_agent(self) -> str:
        return self.config.user_agent

    def set_api_endpoint(self, location: str | None = None, base_url: str | None = None) -> None:
        """Point the client at ``https://{location}.{base_url}``.

        Defaults are ``zrh`` and ``cloudsigma.com/api/2.0/``.
        """
        self.config.api_endpoint = build_api_endpoint(location, base_url)

    def set_user_agent(self, user_agent: str) -> None:
        self.config.user_agent = user_agent

    # Public API --------------------------------------------------------------
    def new_request(self, method: str, path: str, body: Any | None = None) -> requests.PreparedRequest:
        """Build a signed request for ``path`` resolved against the API endpoint.

        Relative paths should not start with a slash: they are resolved with
        standard URL semantics, so a leading slash replaces the endpoint path.
        No network I/O happens here.
        """
        endpoint = self.config.api_endpoint
        if not urlsplit(endpoint).path.endswith("/"):
            raise ConfigurationError(
                f"API endpoint must have a trailing slash, but {endpoint!r} does not"
            )
        url = urljoin(endpoint, path)

        data: bytes | None = None
        if body is not None:
            data = self._encode_body(body)

        headers = self.config.resolved_headers()
        credentials = self._credentials_provider.retrieve()
        credentials.apply(headers)

        return requests.Request(method.upper(), url, headers=headers, data=data).prepare()

    def do(
        self,
        request: requests.PreparedRequest,
        target: Any | None = None,
        *,
        ctx: Context | None = None,
    ) -> Response[Any]:
        """Send ``request`` and decode a successful body into ``target``.

        Raises `ResponseError` for non-2xx statuses. With a ``ctx`` the
        exchange runs on a worker thread and the call returns with the
        context's error as soon as it is cancelled or its deadline passes,
        whether the request is still being sent or its body is being read.
        A done context also wins over a transport error or a late success.
        """
        if ctx is not None:
            ctx.raise_if_done()
        self._log_request(request)
        if ctx is None:
            return self._exchange(request, target, None)

        future: Future[Response[Any]] = Future()
        finished = threading.Event()
        future.add_done_callback(lambda _: finished.set())
        unregister = ctx.add_done_callback(finished.set)
        worker = threading.Thread(
            target=self._run_exchange,
            args=(future, request, target, ctx),
            name="cloudsigma-request",
            daemon=True,
        )
        try:
            ctx.raise_if_done()
            worker.start()
            finished.wait()
        finally:
            unregister()
        ctx.raise_if_done()
        return future.result()

    def request(
        self,
        method: str,
        path: str,
        *,
        body: Any | None = None,
        target: Any | None = None,
        options: ListOptions | None = None,
        ctx: Context | None = None,
    ) -> Response[Any]:
        request = self.new_request(method, add_options(path, options), body)
        return self.do(request, target, ctx=ctx)

    def close(self) -> None:
        self._session.close()

    # Internal helpers -------------------------------------------------------
    def _run_exchange(
        self,
        future: Future[Response[Any]],
        request: requests.PreparedRequest,
        target: Any | None,
        ctx: Context,
    ) -> None:
        if not future.set_running_or_notify_cancel():  # pragma: no cover - never cancelled
            return
        try:
            future.set_result(self._exchange(request, target, ctx))
        except Exception as exc:  # re-raised by ``do`` on the calling thread
            future.set_exception(exc)

    def _exchange(
        self,
        request: requests.PreparedRequest,
        target: Any | None,
        ctx: Context | None,
    ) -> Response[Any]:
        try:
            raw = self._session.send(
                request,
                stream=True,
                timeout=self._effective_timeout(ctx),
                verify=self.config.verify_ssl,
            )
        except requests.RequestException as exc:
            if ctx is not None:
                ctx.raise_if_done()
            reason = str(exc).strip() or exc.__class__.__name__
            raise RequestError(
                f"Failed to communicate with CloudSigma API: {reason}", details=reason
            ) from exc

        # closing the response unblocks a body read once the context is done
        unregister = ctx.add_done_callback(raw.close) if ctx is not None else None
        try:
            with raw:
                response = new_response(raw)
                check_response(raw, response)
                try:
                    response.data, response.meta = decode(raw, target, ctx)
                except (requests.RequestException, TransportHTTPError, OSError, ValueError) as exc:
                    if ctx is not None:
                        ctx.raise_if_done()
                    if not isinstance(exc, requests.RequestException):
                        raise
                    reason = str(exc).strip() or exc.__class__.__name__
                    raise RequestError(
                        f"Failed to read CloudSigma API response: {reason}", details=reason
                    ) from exc
        finally:
            if unregister is not None:
                unregister()
        if ctx is not None:
            ctx.raise_if_done()
        return response

    @staticmethod
    def _encode_body(body: Any) -> bytes:
        try:
            payload = to_jsonable_python(body, by_alias=True, exclude_none=True)
            return json.dumps(payload, allow_nan=False).encode("utf-8")
        except (PydanticSerializationError, TypeError, ValueError) as exc:
            raise EncodeError(f"Request body could not be encoded as JSON: {exc}") from exc

    def _effective_timeout(self, ctx: Context | None) -> float | None:
        timeout = self.config.timeout
        remaining = ctx.remaining() if ctx is not None else None
        if remaining is None:
            return timeout
        if remaining <= 0:
            ctx.raise_if_done()
        if timeout is None:
            return remaining
        return min(timeout, remaining)

    def _log_request(self, request: requests.PreparedRequest) -> None:
        logger.info("CloudSigma request %s %s", request.method, request.url)

    def _suppress_insecure_warning_if_needed(self) -> None:
        if isinstance(self.config.verify_ssl, bool) and not self.config.verify_ssl:
            urllib3.disable_warnings(InsecureRequestWarning)
