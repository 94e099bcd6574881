"""Public keys shared with the account."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..http import Response
from .base import ResourceBase
from .keypairs import Keypair

if TYPE_CHECKING:  # pragma: no cover - import-time guard
    from ..context import Context


class PubkeysResource(ResourceBase):
    """Read public keys; entries use the keypair shape."""

    base_path = "pubkeys"

    def list(self, *, ctx: Context | None = None) -> Response[list[Keypair]]:
        return self._list(Keypair, ctx=ctx)

    def get(self, uuid: str, *, ctx: Context | None = None) -> Response[Keypair]:
        return self._retrieve(Keypair, uuid, ctx=ctx)
