"""Account profile."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ..exceptions import EmptyPayloadError
from ..http import Response
from ..models import CloudSigmaModel
from .base import ResourceBase

if TYPE_CHECKING:  # pragma: no cover - import-time guard
    from ..context import Context


class Profile(CloudSigmaModel):
    address: str | None = None
    api_https_only: bool | None = None
    autotopup_amount: str | None = None
    autotopup_threshold: str | None = None
    bank_reference: str | None = None
    clone_naming: str | None = None
    company: str | None = None
    country: str | None = None
    currency: str | None = None
    email: str | None = None
    first_name: str | None = None
    has_autotopup: bool | None = None
    has_tx_autotopup: bool | None = None
    invoicing: bool | None = None
    key_auth: bool | None = None
    language: str | None = None
    last_name: str | None = None
    mailing_list: bool | None = None
    meta: dict[str, Any] | None = None
    my_notes: str | None = None
    network_restrictions: str | None = None
    nickname: str | None = None
    phone: str | None = None
    postcode: str | None = None
    reseller: str | None = None
    signup_time: str | None = None
    state: str | None = None
    tax_name: str | None = None
    tax_rate: str | None = None
    title: str | None = None
    town: str | None = None
    tx_autotopup_amount: str | None = None
    tx_autotopup_threshold: str | None = None
    uuid: str | None = None
    vat: str | None = None


class ProfileResource(ResourceBase):
    """Read and edit the authenticated account's profile."""

    base_path = "profile"

    def get(self, *, ctx: Context | None = None) -> Response[Profile]:
        return self._get(self._collection_path(), Profile, ctx=ctx)

    def update(self, profile: Profile, *, ctx: Context | None = None) -> Response[Profile]:
        if profile is None:
            raise EmptyPayloadError()
        return self._put(self._collection_path(), profile, Profile, ctx=ctx)
