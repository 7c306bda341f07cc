"""Team API endpoints: teams, invitations, members and billing."""

from __future__ import annotations

from hotaisle.api.client import HotAisleClient
from hotaisle.api.models import (
    BalanceInfo,
    PurchaseTeamCreditsRequest,
    PurchaseTeamCreditsResponse,
    RequestPaymentApprovalRequest,
    Team,
    TeamInvitationRequest,
    TeamMember,
    TeamMemberUpdate,
    TeamUpdate,
    UserTeam,
    UserTeamDetails,
    UserTeamWithMembers,
)
from hotaisle.api.paths import build_path


class TeamsAPI:
    def __init__(self, client: HotAisleClient) -> None:
        self._client = client

    async def list(self) -> list[UserTeam] | None:
        return await self._client.get("/teams/", result_type=list[UserTeam])

    async def create(self, team: Team) -> UserTeamWithMembers | None:
        return await self._client.post("/teams/", body=team, result_type=UserTeamWithMembers)

    async def get(self, team: str) -> UserTeamDetails | None:
        path = build_path("/teams/{team}/", {"team": team})
        return await self._client.get(path, result_type=UserTeamDetails)

    async def update(self, team: str, update: TeamUpdate) -> UserTeamWithMembers | None:
        path = build_path("/teams/{team}/", {"team": team})
        return await self._client.patch(path, body=update, result_type=UserTeamWithMembers)

    async def list_invitations(self) -> list[UserTeam] | None:
        """Invitations addressed to the authenticated user."""
        return await self._client.get("/teams/invitations/", result_type=list[UserTeam])

    async def accept_invitation(self, team: str) -> UserTeamWithMembers | None:
        path = build_path("/teams/{team}/accept-invitation/", {"team": team})
        return await self._client.post(path, result_type=UserTeamWithMembers)

    async def get_balance(self, team: str) -> BalanceInfo | None:
        path = build_path("/teams/{team}/balance/", {"team": team})
        return await self._client.get(path, result_type=BalanceInfo)

    async def purchase_credits(
        self, team: str, req: PurchaseTeamCreditsRequest
    ) -> PurchaseTeamCreditsResponse | None:
        """Start a checkout session; the response carries the checkout URL."""
        path = build_path("/teams/{team}/purchase-credits/", {"team": team})
        return await self._client.post(path, body=req, result_type=PurchaseTeamCreditsResponse)

    async def request_payment_approval(
        self, team: str, req: RequestPaymentApprovalRequest
    ) -> None:
        path = build_path("/teams/{team}/request-payment-approval/", {"team": team})
        await self._client.post(path, body=req)

    async def list_team_invitations(self, team: str) -> list[TeamMember] | None:
        """Pending invitations sent out by *team*."""
        path = build_path("/teams/{team}/members/invitations/", {"team": team})
        return await self._client.get(path, result_type=list[TeamMember])

    async def invite_member(self, team: str, req: TeamInvitationRequest) -> None:
        path = build_path("/teams/{team}/members/invitations/", {"team": team})
        await self._client.post(path, body=req)

    async def update_member(
        self, team: str, email: str, update: TeamMemberUpdate
    ) -> TeamMember | None:
        path = build_path("/teams/{team}/members/{email}/", {"team": team, "email": email})
        return await self._client.patch(path, body=update, result_type=TeamMember)

    async def remove_member(self, team: str, email: str) -> None:
        path = build_path("/teams/{team}/members/{email}/", {"team": team, "email": email})
        await self._client.delete(path)
