"""Tag operations."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from ..exceptions import UnexpectedResponseError
from ..http import Response
from ..models import Tag
from .base import ResourceBase

if TYPE_CHECKING:  # pragma: no cover - import-time guard
    from ..context import Context


class TagsResource(ResourceBase):
    """Manage tags; resources reference tags by uuid in their ``tags`` list."""

    base_path = "tags"

    def list(self, *, ctx: Context | None = None) -> Response[list[Tag]]:
        return self._list(Tag, ctx=ctx)

    def get(self, uuid: str, *, ctx: Context | None = None) -> Response[Tag]:
        return self._retrieve(Tag, uuid, ctx=ctx)

    def create(self, tags: Sequence[Tag], *, ctx: Context | None = None) -> Response[Tag]:
        """Create tags and return the single tag the API answers with.

        A reply holding more than one tag, or none, raises `UnexpectedResponseError`.
        """
        response = self._create(Tag, tags, ctx=ctx)
        created = response.data
        if len(created) != 1:
            raise UnexpectedResponseError(
                f"Tag create returned {len(created)} objects, expected exactly one",
                status_code=response.status_code,
            )
        response.data = created[0]
        return response

    def update(self, uuid: str, tag: Tag, *, ctx: Context | None = None) -> Response[Tag]:
        return self._update(Tag, uuid, tag, ctx=ctx)

    def delete(self, uuid: str, *, ctx: Context | None = None) -> Response[None]:
        return self._destroy(uuid, ctx=ctx)
