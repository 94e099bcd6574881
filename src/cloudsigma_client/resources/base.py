"""Common helpers for resource services."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Any, TypeVar
from urllib.parse import quote

from ..exceptions import EmptyArgumentError, EmptyPayloadError, UnexpectedResponseError
from ..http import Response
from ..models import CloudSigmaModel, ObjectsEnvelope
from ..options import ListOptions

if TYPE_CHECKING:  # pragma: no cover - import-time guard
    from ..client import CloudSigmaClient
    from ..context import Context

M = TypeVar("M", bound=CloudSigmaModel)


class ResourceBase:
    """Provide shared helpers for resource services.

    Subclasses set ``base_path`` (without slashes) and, for collections
    served from a detailed listing, ``list_path``.
    """

    base_path: str = ""
    list_path: str | None = None

    def __init__(self, client: CloudSigmaClient) -> None:
        self._client = client

    # Paths -------------------------------------------------------------------
    def _collection_path(self) -> str:
        return f"{self.base_path}/"

    def _item_path(self, uuid: str) -> str:
        return f"{self.base_path}/{quote(uuid, safe='')}/"

    def _action_path(self, uuid: str, action: str) -> str:
        return f"{self._item_path(uuid)}action/?do={quote(action, safe='')}"

    # Verbs -------------------------------------------------------------------
    def _get(
        self,
        path: str,
        target: Any,
        *,
        options: ListOptions | None = None,
        ctx: Context | None = None,
    ) -> Response[Any]:
        return self._client.request("GET", path, target=target, options=options, ctx=ctx)

    def _post(
        self,
        path: str,
        payload: Any | None,
        target: Any,
        *,
        ctx: Context | None = None,
    ) -> Response[Any]:
        return self._client.request("POST", path, body=payload, target=target, ctx=ctx)

    def _put(self, path: str, payload: Any, target: Any, *, ctx: Context | None = None) -> Response[Any]:
        return self._client.request("PUT", path, body=payload, target=target, ctx=ctx)

    def _delete(self, path: str, *, ctx: Context | None = None) -> Response[None]:
        return self._client.request("DELETE", path, ctx=ctx)

    # Shared operations -------------------------------------------------------
    def _list(
        self,
        model: type[M],
        *,
        options: ListOptions | None = None,
        ctx: Context | None = None,
    ) -> Response[list[M]]:
        path = self.list_path or self._collection_path()
        response = self._get(path, ObjectsEnvelope[model], options=options, ctx=ctx)
        return _unwrap_objects(response)

    def _retrieve(self, model: type[M], uuid: str, *, ctx: Context | None = None) -> Response[M]:
        _require_argument(uuid)
        return self._get(self._item_path(uuid), model, ctx=ctx)

    def _create(
        self,
        model: type[M],
        objects: Sequence[M] | None,
        *,
        ctx: Context | None = None,
    ) -> Response[list[M]]:
        if not objects:
            raise EmptyPayloadError()
        payload = ObjectsEnvelope[model](objects=list(objects))
        response = self._post(self._collection_path(), payload, ObjectsEnvelope[model], ctx=ctx)
        return _unwrap_objects(response)

    def _update(
        self,
        model: type[M],
        uuid: str,
        payload: M | None,
        *,
        ctx: Context | None = None,
    ) -> Response[M]:
        _require_argument(uuid)
        _require_payload(payload)
        # the API rejects a body that carries the identifier
        body = payload.to_payload(exclude={"uuid"})
        return self._put(self._item_path(uuid), body, model, ctx=ctx)

    def _destroy(self, uuid: str, *, ctx: Context | None = None) -> Response[None]:
        _require_argument(uuid)
        return self._delete(self._item_path(uuid), ctx=ctx)

    def _single_from_action(
        self,
        model: type[M],
        uuid: str,
        action: str,
        payload: Any | None,
        *,
        ctx: Context | None = None,
    ) -> Response[M]:
        _require_argument(uuid)
        response = self._post(
            self._action_path(uuid, action), payload, ObjectsEnvelope[model], ctx=ctx
        )
        return _unwrap_first(response, action)


def _require_argument(value: str | None) -> None:
    if not value:
        raise EmptyArgumentError()


def _require_payload(payload: Any | None) -> None:
    if payload is None:
        raise EmptyPayloadError()


def _unwrap_objects(response: Response[Any]) -> Response[Any]:
    envelope = response.data
    response.data = envelope.objects if envelope is not None else []
    return response


def _unwrap_first(response: Response[Any], action: str) -> Response[Any]:
    envelope = response.data
    if envelope is None or not envelope.objects:
        raise UnexpectedResponseError(
            f"Action {action!r} returned no objects",
            status_code=response.status_code,
        )
    response.data = envelope.objects[0]
    return response
