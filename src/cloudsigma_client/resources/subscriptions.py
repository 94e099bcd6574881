"""Subscription operations."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from ..http import Response
from ..models import CloudSigmaModel
from ..options import ListOptions
from .base import ResourceBase

if TYPE_CHECKING:  # pragma: no cover - import-time guard
    from ..context import Context


class Subscription(CloudSigmaModel):
    """Prepaid resource subscription (VLANs, IPs, licenses, ...)."""

    amount: str | None = None
    auto_renew: bool | None = None
    free_tier: bool | None = None
    id: str | None = None
    period: str | None = None
    price: str | None = None
    remaining: str | None = None
    resource: str | None = None
    resource_uri: str | None = None
    status: str | None = None
    subscribed_object: str | None = None
    uuid: str | None = None


class SubscriptionsResource(ResourceBase):
    base_path = "subscriptions"

    def list(
        self, *, options: ListOptions | None = None, ctx: Context | None = None
    ) -> Response[list[Subscription]]:
        return self._list(Subscription, options=options, ctx=ctx)

    def create(
        self, subscriptions: Sequence[Subscription], *, ctx: Context | None = None
    ) -> Response[list[Subscription]]:
        return self._create(Subscription, subscriptions, ctx=ctx)
