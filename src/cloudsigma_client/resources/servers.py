"""Server operations."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

from ..http import Response
from ..models import CloudSigmaModel, ResourceLink, Tag
from ..options import ListOptions
from .base import ResourceBase, _require_argument
from .drives import Drive
from .firewall_policies import FirewallPolicy
from .ips import IP
from .keypairs import Keypair
from .vlans import VLAN

if TYPE_CHECKING:  # pragma: no cover - import-time guard
    from ..context import Context


class ServerDrive(CloudSigmaModel):
    """Drive attached to a server."""

    boot_order: int | None = None
    dev_channel: str | None = None
    device: str | None = None
    drive: Drive | None = None


class EnclavePageCache(CloudSigmaModel):
    size: int | None = None


class ServerIPConfiguration(CloudSigmaModel):
    """NIC address assignment; ``conf`` is ``dhcp``, ``static`` or ``manual``."""

    conf: str | None = None
    ip: IP | None = None


class ServerNIC(CloudSigmaModel):
    boot_order: int | None = None
    firewall_policy: FirewallPolicy | None = None
    ip_v4_conf: ServerIPConfiguration | None = None
    ip_v6_conf: ServerIPConfiguration | None = None
    mac: str | None = None
    model: str | None = None
    vlan: VLAN | None = None


class ServerRuntimeIP(CloudSigmaModel):
    resource_uri: str | None = None
    uuid: str | None = None


class ServerRuntimeNIC(CloudSigmaModel):
    interface_type: str | None = None
    ip_v4: ServerRuntimeIP | None = None
    ip_v6: ServerRuntimeIP | None = None


class ServerRuntime(CloudSigmaModel):
    nics: list[ServerRuntimeNIC] | None = None


class Server(CloudSigmaModel):
    """Virtual server definition and, for running servers, its runtime."""

    auto_start: bool | None = None
    context: bool | None = None
    cpu: int | None = None
    cpu_type: str | None = None
    cpus_instead_of_cores: bool | None = None
    drives: list[ServerDrive] | None = None
    enable_numa: bool | None = None
    epcs: list[EnclavePageCache] | None = None
    hypervisor: str | None = None
    mem: int | None = None
    meta: dict[str, Any] | None = None
    name: str | None = None
    nics: list[ServerNIC] | None = None
    owner: ResourceLink | None = None
    pubkeys: list[Keypair] | None = None
    resource_uri: str | None = None
    runtime: ServerRuntime | None = None
    smp: int | None = None
    status: str | None = None
    tags: list[Tag] | None = None
    uuid: str | None = None
    vnc_password: str | None = None


class ServerAction(CloudSigmaModel):
    """Result of a start, stop or shutdown action."""

    action: str | None = None
    result: str | None = None
    uuid: str | None = None


class ServersResource(ResourceBase):
    """Manage virtual servers.

    API docs: https://cloudsigma-docs.readthedocs.io/en/latest/servers.html
    """

    base_path = "servers"
    list_path = "servers/detail/"

    def list(
        self, *, options: ListOptions | None = None, ctx: Context | None = None
    ) -> Response[list[Server]]:
        return self._list(Server, options=options, ctx=ctx)

    def get(self, uuid: str, *, ctx: Context | None = None) -> Response[Server]:
        return self._retrieve(Server, uuid, ctx=ctx)

    def create(self, servers: Sequence[Server], *, ctx: Context | None = None) -> Response[list[Server]]:
        return self._create(Server, servers, ctx=ctx)

    def update(self, uuid: str, server: Server, *, ctx: Context | None = None) -> Response[Server]:
        """Edit a server; also used to attach NICs and drives.

        While a server is running only ``name``, ``meta`` and ``tags`` can
        change; other edits are ignored by the API.
        """
        return self._update(Server, uuid, server, ctx=ctx)

    def delete(self, uuid: str, *, ctx: Context | None = None) -> Response[None]:
        return self._destroy(uuid, ctx=ctx)

    def start(self, uuid: str, *, ctx: Context | None = None) -> Response[ServerAction]:
        return self._do_action(uuid, "start", ctx=ctx)

    def stop(self, uuid: str, *, ctx: Context | None = None) -> Response[ServerAction]:
        return self._do_action(uuid, "stop", ctx=ctx)

    def shutdown(self, uuid: str, *, ctx: Context | None = None) -> Response[ServerAction]:
        """Send an ACPI shutdown; the server is stopped if it is still up after a minute."""
        return self._do_action(uuid, "shutdown", ctx=ctx)

    def _do_action(self, uuid: str, action: str, *, ctx: Context | None = None) -> Response[ServerAction]:
        _require_argument(uuid)
        _require_argument(action)
        return self._post(self._action_path(uuid, action), None, ServerAction, ctx=ctx)
