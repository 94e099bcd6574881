"""SSH keypair operations."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

from ..http import Response
from ..models import CloudSigmaModel
from ..options import ListOptions
from .base import ResourceBase

if TYPE_CHECKING:  # pragma: no cover - import-time guard
    from ..context import Context


class Keypair(CloudSigmaModel):
    """SSH keypair. The private key is only returned when the API generated it."""

    fingerprint: str | None = None
    has_private_key: bool | None = None
    meta: dict[str, Any] | None = None
    name: str | None = None
    permissions: list[str] | None = None
    private_key: str | None = None
    public_key: str | None = None
    resource_uri: str | None = None
    uuid: str | None = None


class KeypairsResource(ResourceBase):
    """Manage SSH keypairs.

    API docs: https://cloudsigma-docs.readthedocs.io/en/latest/keypairs.html
    """

    base_path = "keypairs"

    def list(
        self, *, options: ListOptions | None = None, ctx: Context | None = None
    ) -> Response[list[Keypair]]:
        return self._list(Keypair, options=options, ctx=ctx)

    def get(self, uuid: str, *, ctx: Context | None = None) -> Response[Keypair]:
        return self._retrieve(Keypair, uuid, ctx=ctx)

    def create(
        self, keypairs: Sequence[Keypair], *, ctx: Context | None = None
    ) -> Response[list[Keypair]]:
        return self._create(Keypair, keypairs, ctx=ctx)

    def update(self, uuid: str, keypair: Keypair, *, ctx: Context | None = None) -> Response[Keypair]:
        return self._update(Keypair, uuid, keypair, ctx=ctx)

    def delete(self, uuid: str, *, ctx: Context | None = None) -> Response[None]:
        return self._destroy(uuid, ctx=ctx)
