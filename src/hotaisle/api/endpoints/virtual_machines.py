"""Virtual machine API endpoints."""

from __future__ import annotations

from hotaisle.api.client import HotAisleClient
from hotaisle.api.models import (
    AvailableVirtualMachineTypes,
    VirtualMachineDetails,
    VirtualMachineSpecs,
    VirtualMachineState,
    VirtualMachineUpdate,
)
from hotaisle.api.paths import build_path

COLLECTION = "/teams/{team}/virtual_machines/"
ITEM = "/teams/{team}/virtual_machines/{vm}/"


class VirtualMachinesAPI:
    def __init__(self, client: HotAisleClient) -> None:
        self._client = client

    @staticmethod
    def _path(team: str, vm: str, suffix: str = "") -> str:
        return build_path(ITEM + suffix, {"team": team, "vm": vm})

    async def list(self, team: str) -> list[VirtualMachineDetails] | None:
        path = build_path(COLLECTION, {"team": team})
        return await self._client.get(path, result_type=list[VirtualMachineDetails])

    async def get(self, team: str, vm: str) -> VirtualMachineDetails | None:
        return await self._client.get(self._path(team, vm), result_type=VirtualMachineDetails)

    async def provision(self, team: str, specs: VirtualMachineSpecs) -> VirtualMachineDetails | None:
        path = build_path(COLLECTION, {"team": team})
        return await self._client.post(path, body=specs, result_type=VirtualMachineDetails)

    async def update(self, team: str, vm: str, update: VirtualMachineUpdate) -> None:
        await self._client.patch(self._path(team, vm), body=update)

    async def delete(self, team: str, vm: str) -> None:
        """Delete the virtual machine and everything attached to it."""
        await self._client.delete(self._path(team, vm))

    async def list_available(self, team: str) -> list[AvailableVirtualMachineTypes] | None:
        path = build_path(COLLECTION + "available/", {"team": team})
        return await self._client.get(path, result_type=list[AvailableVirtualMachineTypes])

    async def get_state(self, team: str, vm: str) -> VirtualMachineState | None:
        return await self._client.get(self._path(team, vm, "state/"), result_type=VirtualMachineState)

    async def start(self, team: str, vm: str) -> None:
        await self._client.post(self._path(team, vm, "start/"))

    async def stop(self, team: str, vm: str) -> None:
        """Stop immediately, without a guest shutdown."""
        await self._client.post(self._path(team, vm, "stop/"))

    async def shutdown(self, team: str, vm: str) -> None:
        await self._client.post(self._path(team, vm, "shutdown/"))

    async def reboot(self, team: str, vm: str) -> None:
        await self._client.post(self._path(team, vm, "reboot/"))

    async def hard_reset(self, team: str, vm: str) -> None:
        await self._client.post(self._path(team, vm, "hard-reset/"))

    async def rebuild(self, team: str, vm: str) -> None:
        """Rebuild the virtual machine from scratch to its initial state."""
        await self._client.post(self._path(team, vm, "rebuild/"))
