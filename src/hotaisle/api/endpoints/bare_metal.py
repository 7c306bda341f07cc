"""Bare metal server API endpoints.

Power actions only ask the server to change state; they return as soon as
the request is accepted. Poll ``get_power_state`` to observe the result.
"""

from __future__ import annotations

from hotaisle.api.client import HotAisleClient
from hotaisle.api.models import (
    AvailableBareMetalTypes,
    BareMetalServerConsoleURL,
    BareMetalServerDetails,
    BareMetalServerPowerState,
    BareMetalServerReservation,
    BareMetalServerReservationResponse,
    BareMetalServerUpdate,
)
from hotaisle.api.paths import build_path

COLLECTION = "/teams/{team}/bare_metal/"
ITEM = "/teams/{team}/bare_metal/{server}/"


class BareMetalAPI:
    def __init__(self, client: HotAisleClient) -> None:
        self._client = client

    @staticmethod
    def _path(team: str, server: str, suffix: str = "") -> str:
        return build_path(ITEM + suffix, {"team": team, "server": server})

    async def list(self, team: str) -> list[BareMetalServerDetails] | None:
        path = build_path(COLLECTION, {"team": team})
        return await self._client.get(path, result_type=list[BareMetalServerDetails])

    async def get(self, team: str, server: str) -> BareMetalServerDetails | None:
        return await self._client.get(self._path(team, server), result_type=BareMetalServerDetails)

    async def reserve(
        self, team: str, req: BareMetalServerReservation
    ) -> BareMetalServerReservationResponse | None:
        path = build_path(COLLECTION, {"team": team})
        return await self._client.post(
            path, body=req, result_type=BareMetalServerReservationResponse
        )

    async def update(self, team: str, server: str, update: BareMetalServerUpdate) -> None:
        await self._client.patch(self._path(team, server), body=update)

    async def delete(self, team: str, server: str) -> None:
        """Release the server back to the available pool."""
        await self._client.delete(self._path(team, server))

    async def list_available(self, team: str) -> list[AvailableBareMetalTypes] | None:
        path = build_path(COLLECTION + "available/", {"team": team})
        return await self._client.get(path, result_type=list[AvailableBareMetalTypes])

    async def get_power_state(self, team: str, server: str) -> BareMetalServerPowerState | None:
        return await self._client.get(
            self._path(team, server, "power/"), result_type=BareMetalServerPowerState
        )

    async def power_on(self, team: str, server: str) -> None:
        await self._client.post(self._path(team, server, "power/power_on/"))

    async def graceful_shutdown(self, team: str, server: str) -> None:
        """Send an ACPI shutdown signal."""
        await self._client.post(self._path(team, server, "power/graceful_shutdown/"))

    async def force_shutdown(self, team: str, server: str) -> None:
        await self._client.post(self._path(team, server, "power/force_shutdown/"))

    async def warm_reboot(self, team: str, server: str) -> None:
        """Reboot without cutting power."""
        await self._client.post(self._path(team, server, "power/warm_reboot/"))

    async def cold_reboot(self, team: str, server: str) -> None:
        await self._client.post(self._path(team, server, "power/cold_reboot/"))

    async def ac_reset(self, team: str, server: str) -> None:
        await self._client.post(self._path(team, server, "power/ac_reset/"))

    async def reinstall(self, team: str, server: str) -> BareMetalServerDetails | None:
        """Reset BIOS settings, wipe every disk and reinstall the OS."""
        return await self._client.post(
            self._path(team, server, "reinstall/"), result_type=BareMetalServerDetails
        )

    async def get_console_url(self, team: str, server: str) -> BareMetalServerConsoleURL | None:
        """Generate a short-lived URL for the server's remote console."""
        return await self._client.post(
            self._path(team, server, "console/"), result_type=BareMetalServerConsoleURL
        )

    async def enable_support_access(self, team: str, server: str) -> None:
        await self._client.put(self._path(team, server, "support_access_enable/"))

    async def disable_support_access(self, team: str, server: str) -> None:
        await self._client.delete(self._path(team, server, "support_access_enable/"))
