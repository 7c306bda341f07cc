"""Pydantic models for Hot Aisle API requests and responses.

Records that share fields extend one another, so the JSON stays flat: a
``UserTeam`` carries every ``Team`` key next to its own. Keys listed in
``OMIT_EMPTY`` are dropped from serialized output when their value is empty.
"""

from __future__ import annotations

from datetime import datetime
from typing import Annotated, Any, ClassVar, TypeVar

from pydantic import (
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    SerializerFunctionWrapHandler,
    model_serializer,
)

T = TypeVar("T")


def _none_to_list(v: list | None) -> list:
    """Coerce None to empty list for API fields that may return null."""
    return v if v is not None else []


NullableList = Annotated[list[T], BeforeValidator(_none_to_list)]


class _HotAisleModel(BaseModel):
    """Base model that ignores extra fields from the API."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    OMIT_EMPTY: ClassVar[frozenset[str]] = frozenset()

    @classmethod
    def _omit_empty_fields(cls) -> set[str]:
        names: set[str] = set()
        for klass in cls.__mro__:
            names |= klass.__dict__.get("OMIT_EMPTY", frozenset())
        return names

    @model_serializer(mode="wrap")
    def _drop_empty(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        data = handler(self)
        fields = type(self).model_fields
        for name in self._omit_empty_fields():
            for key in (name, fields[name].alias):
                if key in data and not data[key]:
                    del data[key]
        return data


# -- users --


class User(_HotAisleModel):
    name: str = ""
    email: str = ""
    created: datetime | None = None


class UserUpdate(_HotAisleModel):
    name: str = ""


# -- teams --


class Team(_HotAisleModel):
    OMIT_EMPTY = frozenset(
        {
            "description",
            "self_service_payment_enabled",
            "maximum_virtual_machines",
            "maximum_bare_metal_servers",
        }
    )

    handle: str = ""
    name: str = ""
    description: str = ""
    self_service_payment_enabled: bool = False
    maximum_virtual_machines: int = 0
    maximum_bare_metal_servers: int = 0


class TeamUpdate(_HotAisleModel):
    OMIT_EMPTY = frozenset({"description"})

    handle: str = ""
    name: str = ""
    description: str = ""


class UserTeam(Team):
    """A team as seen by one of its members."""

    OMIT_EMPTY = frozenset({"invitation"})

    roles: NullableList[str] = Field(default_factory=list)
    effective_roles: NullableList[str] = Field(default_factory=list)
    invitation: bool = False


class TeamMember(_HotAisleModel):
    """A team member or a pending invitation."""

    OMIT_EMPTY = frozenset({"invitation"})

    name: str = ""
    email: str = ""
    created: datetime | None = None
    roles: NullableList[str] = Field(default_factory=list)
    invitation: bool = False


class UserTeamWithMembers(UserTeam):
    OMIT_EMPTY = frozenset({"members"})

    members: NullableList[TeamMember] = Field(default_factory=list)


class GetUserResponse(_HotAisleModel):
    user: User = Field(default_factory=User)
    teams: NullableList[UserTeam] = Field(default_factory=list)


class TeamMemberUpdate(_HotAisleModel):
    roles: NullableList[str] = Field(default_factory=list)


class TeamInvitationRequest(_HotAisleModel):
    name: str = ""
    email: str = ""
    roles: NullableList[str] = Field(default_factory=list)


# -- billing --


class BalanceInfo(_HotAisleModel):
    """Balance in cents and the estimated time until it runs out."""

    OMIT_EMPTY = frozenset({"estimated_runout_time", "minimum_balance"})

    available_balance: int = 0
    hourly_rate: int = 0
    estimated_runout_time: datetime | None = None
    minimum_balance: int = 0


class PurchaseTeamCreditsRequest(_HotAisleModel):
    cents: int = 0


class PurchaseTeamCreditsResponse(_HotAisleModel):
    checkout_url: str = ""
    expires_at: datetime | None = None


class RequestPaymentApprovalRequest(_HotAisleModel):
    message: str = ""


# -- credentials --


class SSHKey(_HotAisleModel):
    OMIT_EMPTY = frozenset({"comment"})

    type: str = ""
    public_key: str = ""
    fingerprint: str = ""
    comment: str = ""


class SSHKeyRequest(_HotAisleModel):
    authorized_key: str = ""


class APIKeyTeam(Team):
    """A team an API key has access to, with the roles it grants."""

    roles: NullableList[str] = Field(default_factory=list)


class UserAPIKey(_HotAisleModel):
    OMIT_EMPTY = frozenset({"prefix", "label", "teams"})

    prefix: str = ""
    label: str = ""
    user_role: str = ""
    teams: NullableList[APIKeyTeam] = Field(default_factory=list)


class UserAPIKeyTeamRoles(_HotAisleModel):
    team: str = ""
    roles: NullableList[str] = Field(default_factory=list)


class UserAPIKeyRequest(_HotAisleModel):
    OMIT_EMPTY = frozenset({"label", "user_role", "teams"})

    label: str = ""
    user_role: str = ""
    teams: NullableList[UserAPIKeyTeamRoles] = Field(default_factory=list)


class UserAPIKeyWithToken(UserAPIKey):
    """A freshly created API key; the token is only ever returned once."""

    OMIT_EMPTY = frozenset({"token"})

    token: str = ""


# -- hardware --


class Components(_HotAisleModel):
    count: int = 0
    manufacturer: str = ""
    model: str = ""


class CPUs(Components):
    cores: int = 0
    frequency: int = 0


class Disks(Components):
    type: str = ""
    capacity: int = 0


class GPUs(Components):
    pass


class MemoryModules(Components):
    capacity: int = 0


class ExternalService(_HotAisleModel):
    OMIT_EMPTY = frozenset({"dns_name"})

    ip_address: str = ""
    port: int = 0
    dns_name: str = ""


# -- bare metal --


class BareMetalServer(_HotAisleModel):
    OMIT_EMPTY = frozenset({"description", "ssh_access", "support_access_enabled"})

    name: str = ""
    ip_address: str = ""
    manufacturer: str = ""
    model: str = ""
    description: str = ""
    ssh_access: ExternalService | None = None
    support_access_enabled: bool = False


class BareMetalServerSpecs(_HotAisleModel):
    OMIT_EMPTY = frozenset({"cpus", "disks", "gpus", "memory_modules"})

    cpu_cores: int = 0
    ram_capacity: int = 0
    disk_capacity: int = 0
    cpus: NullableList[CPUs] = Field(default_factory=list)
    disks: NullableList[Disks] = Field(default_factory=list)
    gpus: NullableList[GPUs] = Field(default_factory=list)
    memory_modules: NullableList[MemoryModules] = Field(default_factory=list)


class BareMetalServerOSStatus(_HotAisleModel):
    os_selection: str = ""
    os_status: str = Field("", alias="os_install_status")
    last_imaging_update: datetime | None = None


class BareMetalServerDetails(BareMetalServer, BareMetalServerSpecs):
    """A bare metal server together with its hardware specifications."""

    OMIT_EMPTY = frozenset({"os_status"})

    os_status: BareMetalServerOSStatus | None = None


class BareMetalServerReservationResponse(BareMetalServerDetails):
    """The server handed out by a successful reservation."""


class BareMetalServerUpdate(_HotAisleModel):
    OMIT_EMPTY = frozenset({"description"})

    description: str = ""


class BareMetalServerReservation(_HotAisleModel):
    OMIT_EMPTY = frozenset({"description"})

    description: str = ""
    specs: BareMetalServerSpecs = Field(default_factory=BareMetalServerSpecs)


class BareMetalServerPowerState(_HotAisleModel):
    state: str = ""


class BareMetalServerConsoleURL(_HotAisleModel):
    url: str = ""


class AvailableBareMetalTypes(_HotAisleModel):
    """How many servers of one configuration can currently be reserved."""

    OMIT_EMPTY = frozenset({"on_demand_price"})

    quantity: int = Field(0, alias="Quantity")
    minimum_reservation_minutes: int = Field(0, alias="MinimumReservationMinutes")
    on_demand_price: int = Field(0, alias="OnDemandPrice")
    specs: BareMetalServerSpecs = Field(default_factory=BareMetalServerSpecs, alias="Specs")


# -- virtual machines --


class VirtualMachine(_HotAisleModel):
    OMIT_EMPTY = frozenset({"description", "ssh_access"})

    name: str = ""
    ip_address: str = ""
    description: str = ""
    ssh_access: ExternalService | None = None


class VirtualMachineSpecs(_HotAisleModel):
    OMIT_EMPTY = frozenset({"cpus", "gpus"})

    cpu_cores: int = 0
    ram_capacity: int = 0
    disk_capacity: int = 0
    cpus: CPUs | None = None
    gpus: NullableList[GPUs] = Field(default_factory=list)


class VirtualMachineDetails(VirtualMachine, VirtualMachineSpecs):
    pass


class VirtualMachineUpdate(_HotAisleModel):
    OMIT_EMPTY = frozenset({"description"})

    description: str = ""


class VirtualMachineState(_HotAisleModel):
    state: str = ""
    host: str = ""


class AvailableVirtualMachineTypes(_HotAisleModel):
    """How many virtual machines of one configuration can be deployed."""

    OMIT_EMPTY = frozenset({"on_demand_price"})

    quantity: int = Field(0, alias="Quantity")
    minimum_reservation_minutes: int = Field(0, alias="MinimumReservationMinutes")
    on_demand_price: int = Field(0, alias="OnDemandPrice")
    specs: VirtualMachineSpecs = Field(default_factory=VirtualMachineSpecs, alias="Specs")


# -- team details --


class UserTeamDetails(UserTeamWithMembers):
    """A team with its members and every resource it owns."""

    OMIT_EMPTY = frozenset({"bare_metal_servers", "virtual_machines"})

    bare_metal_servers: NullableList[BareMetalServerDetails] = Field(default_factory=list)
    virtual_machines: NullableList[VirtualMachineDetails] = Field(default_factory=list)
