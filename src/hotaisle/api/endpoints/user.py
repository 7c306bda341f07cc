"""User API endpoints: profile, SSH keys and API keys."""

from __future__ import annotations

from hotaisle.api.client import HotAisleClient
from hotaisle.api.models import (
    GetUserResponse,
    SSHKey,
    SSHKeyRequest,
    User,
    UserAPIKey,
    UserAPIKeyRequest,
    UserAPIKeyWithToken,
    UserUpdate,
)
from hotaisle.api.paths import build_path


class UserAPI:
    def __init__(self, client: HotAisleClient) -> None:
        self._client = client

    async def get(self) -> GetUserResponse | None:
        """The authenticated user and the teams they belong to."""
        return await self._client.get("/user/", result_type=GetUserResponse)

    async def update(self, update: UserUpdate) -> User | None:
        return await self._client.patch("/user/", body=update, result_type=User)

    async def list_ssh_keys(self) -> list[SSHKey] | None:
        return await self._client.get("/user/ssh_keys/", result_type=list[SSHKey])

    async def add_ssh_key(self, key: SSHKeyRequest) -> SSHKey | None:
        return await self._client.post("/user/ssh_keys/", body=key, result_type=SSHKey)

    async def delete_ssh_key(self, fingerprint: str) -> None:
        path = build_path("/user/ssh_keys/{fingerprint}/", {"fingerprint": fingerprint})
        await self._client.delete(path)

    async def list_api_keys(self) -> list[UserAPIKey] | None:
        return await self._client.get("/user/api_keys/", result_type=list[UserAPIKey])

    async def get_api_key(self, prefix: str) -> UserAPIKey | None:
        path = build_path("/user/api_keys/{prefix}/", {"prefix": prefix})
        return await self._client.get(path, result_type=UserAPIKey)

    async def create_api_key(self, req: UserAPIKeyRequest) -> UserAPIKeyWithToken | None:
        """Create an API key. The returned token is not retrievable later."""
        return await self._client.post(
            "/user/api_keys/", body=req, result_type=UserAPIKeyWithToken
        )

    async def update_api_key(self, prefix: str, req: UserAPIKeyRequest) -> UserAPIKey | None:
        path = build_path("/user/api_keys/{prefix}/", {"prefix": prefix})
        return await self._client.patch(path, body=req, result_type=UserAPIKey)

    async def delete_api_key(self, prefix: str) -> None:
        path = build_path("/user/api_keys/{prefix}/", {"prefix": prefix})
        await self._client.delete(path)
