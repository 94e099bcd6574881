"""HTTP response handling for CloudSigma API access."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from functools import lru_cache
from typing import IO, TYPE_CHECKING, Any, Generic, TypeVar

from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError
from requests import Response as RawResponse

from .config import HEADER_REQUEST_ID
from .exceptions import ResponseError, UnexpectedResponseError
from .models import ErrorEntry, Meta

if TYPE_CHECKING:  # pragma: no cover - import-time guard
    from .context import Context

T = TypeVar("T")

logger = logging.getLogger(__name__)

_ERRORS_ADAPTER = TypeAdapter(list[ErrorEntry])
_META_FIELDS = ("limit", "offset", "total_count")


@dataclass(slots=True)
class Response(Generic[T]):
    """Typed response envelope returned by every client call."""

    status_code: int
    headers: Mapping[str, str]
    method: str
    url: str
    data: T | None = None
    meta: Meta | None = None
    request_id: str | None = None


@dataclass(slots=True)
class RawSink:
    """Decode target that receives the undecoded body bytes.

    Used for binary payloads such as drive images; ``stream`` is any object
    with a ``write(bytes)`` method.
    """

    stream: IO[bytes]
    chunk_size: int = 64 * 1024

    def consume(self, response: RawResponse, ctx: Context | None = None) -> int:
        written = 0
        for chunk in response.iter_content(chunk_size=self.chunk_size):
            if ctx is not None:
                ctx.raise_if_done()
            if chunk:
                self.stream.write(chunk)
                written += len(chunk)
        return written


def new_response(response: RawResponse) -> Response[Any]:
    """Wrap a transport response, copying the correlation id when present."""

    request = response.request
    envelope: Response[Any] = Response(
        status_code=response.status_code,
        headers=response.headers,
        method=(request.method or "") if request is not None else "",
        url=(request.url or response.url or "") if request is not None else (response.url or ""),
    )
    request_id = response.headers.get(HEADER_REQUEST_ID)
    if request_id:
        envelope.request_id = request_id
        logger.debug("CloudSigma response %s (request %s)", response.status_code, request_id)
    return envelope


def check_response(response: RawResponse, envelope: Response[Any] | None = None) -> None:
    """Raise `ResponseError` if the status code is outside the 2xx range.

    The body of an error response is a JSON array of error entries. A body
    that is not such an array raises `UnexpectedResponseError` instead, and
    an empty body yields a `ResponseError` without entries. ``envelope`` is
    the already built `Response` for this exchange, if any.
    """

    if 200 <= response.status_code <= 299:
        return

    if envelope is None:
        envelope = new_response(response)
    errors: list[ErrorEntry] = []
    data = response.content
    if data:
        try:
            errors = _ERRORS_ADAPTER.validate_json(data)
        except PydanticValidationError as exc:
            raise UnexpectedResponseError(
                f"CloudSigma API error {response.status_code} did not contain a list of errors: "
                f"{response.text[:200]}",
                status_code=response.status_code,
                details=response.text,
            ) from exc

    raise ResponseError(
        method=envelope.method,
        url=envelope.url,
        status_code=response.status_code,
        errors=errors,
        request_id=envelope.request_id,
        response=response,
    )


def read_body(response: RawResponse, ctx: Context | None = None, chunk_size: int = 64 * 1024) -> bytes:
    """Read the whole body, checking ``ctx`` between chunks."""

    if ctx is None:
        return response.content
    chunks: list[bytes] = []
    for chunk in response.iter_content(chunk_size=chunk_size):
        ctx.raise_if_done()
        chunks.append(chunk)
    ctx.raise_if_done()
    return b"".join(chunks)


def parse_json(body: bytes, status_code: int) -> Any:
    """Parse JSON with helpful error context."""

    try:
        return json.loads(body)
    except ValueError as exc:
        raise UnexpectedResponseError(
            "Response did not contain valid JSON",
            status_code=status_code,
            details=body[:200].decode("utf-8", errors="replace"),
        ) from exc


def decode(response: RawResponse, target: Any, ctx: Context | None = None) -> tuple[Any, Meta | None]:
    """Decode a successful response into ``target``.

    ``target`` is ``None`` (body ignored), a `RawSink` (bytes copied), or a
    structured target: a type or `TypeAdapter` validated against the JSON
    body. Returns the decoded value and any pagination metadata. A done
    ``ctx`` stops the body read with its error.
    """

    if target is None:
        return None, None
    if isinstance(target, RawSink):
        target.consume(response, ctx)
        return None, None

    adapter = _adapter_for(target)
    body = read_body(response, ctx)
    if not body:
        try:
            return adapter.validate_python(None), None
        except PydanticValidationError as exc:
            raise UnexpectedResponseError(
                "Response body is empty but a JSON document was expected",
                status_code=response.status_code,
            ) from exc

    payload = parse_json(body, response.status_code)
    try:
        data = adapter.validate_python(payload)
    except PydanticValidationError as exc:
        raise UnexpectedResponseError(
            f"Response did not match the expected shape: {exc.error_count()} error(s)",
            status_code=response.status_code,
            details=exc.errors(include_url=False),
        ) from exc
    return data, extract_meta(payload)


def extract_meta(payload: Any) -> Meta | None:
    """Return collection metadata when ``payload`` is a list envelope carrying it."""

    if not isinstance(payload, Mapping) or "objects" not in payload:
        return None
    meta = payload.get("meta")
    if not isinstance(meta, Mapping) or not any(key in meta for key in _META_FIELDS):
        return None
    try:
        return Meta.model_validate(meta)
    except PydanticValidationError as exc:
        raise UnexpectedResponseError("Response meta did not match the expected shape") from exc


def _adapter_for(target: Any) -> TypeAdapter[Any]:
    if isinstance(target, TypeAdapter):
        return target
    return _cached_adapter(target)


@lru_cache(maxsize=256)
def _cached_adapter(target: Any) -> TypeAdapter[Any]:
    return TypeAdapter(target)
