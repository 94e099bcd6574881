"""Cloud capability limits."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..http import Response
from ..models import CloudSigmaModel
from .base import ResourceBase

if TYPE_CHECKING:  # pragma: no cover - import-time guard
    from ..context import Context


class CapabilitiesLimitation(CloudSigmaModel):
    max: int | None = None
    min: int | None = None


class CapabilitiesHost(CloudSigmaModel):
    cpu: CapabilitiesLimitation | None = None
    cpu_per_smp: CapabilitiesLimitation | None = None
    mem: CapabilitiesLimitation | None = None
    smp: CapabilitiesLimitation | None = None


class CapabilitiesHosts(CloudSigmaModel):
    amd: CapabilitiesHost | None = None
    intel: CapabilitiesHost | None = None


class CapabilitiesHypervisors(CloudSigmaModel):
    kvm: list[str] | None = None


class Capabilities(CloudSigmaModel):
    """Resource limits per CPU vendor and the available hypervisor features."""

    hosts: CapabilitiesHosts | None = None
    hypervisors: CapabilitiesHypervisors | None = None


class CapabilitiesResource(ResourceBase):
    base_path = "capabilities"

    def get(self, *, ctx: Context | None = None) -> Response[Capabilities]:
        return self._get(self._collection_path(), Capabilities, ctx=ctx)
