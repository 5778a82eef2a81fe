"""Core data models for public IP discovery."""

from enum import Enum
from ipaddress import IPv4Address, IPv6Address
from typing import Union

import dns.rdataclass
import dns.rdatatype
from pydantic import BaseModel, ConfigDict, Field, IPvAnyAddress, model_validator

from getip.core.errors import GetIPError

IPAddress = Union[IPv4Address, IPv6Address]


class AddressVersion(str, Enum):
    """Version of IP address to resolve."""

    V4 = "v4"
    V6 = "v6"
    ANY = "any"

    def matches(self, addr: IPAddress) -> bool:
        """Return True if the address family of ``addr`` matches this version."""
        return (
            self is AddressVersion.ANY
            or (self is AddressVersion.V4 and addr.version == 4)
            or (self is AddressVersion.V6 and addr.version == 6)
        )


class QueryMethod(str, Enum):
    """How an address is requested from a provider and read back from its answer."""

    A = "A"
    AAAA = "AAAA"
    TXT = "TXT"

    @property
    def rdtype(self) -> dns.rdatatype.RdataType:
        return dns.rdatatype.from_text(self.value)


class QueryClass(str, Enum):
    """DNS query classes used by providers."""

    IN = "IN"
    CH = "CH"

    @property
    def rdclass(self) -> dns.rdataclass.RdataClass:
        return dns.rdataclass.from_text(self.value)


# ============================================================================
# Provider Models
# ============================================================================


class Provider(BaseModel):
    """A DNS echo service that answers with the address of the querying client."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Short provider label")
    query_name: str = Field(..., description="Name to query")
    servers: tuple[IPvAnyAddress, ...] = Field(..., min_length=1, description="Candidate servers")
    port: int = Field(default=53, ge=1, le=65535, description="DNS port")
    method: QueryMethod
    query_class: QueryClass = QueryClass.IN

    def servers_for(self, version: AddressVersion) -> list[IPAddress]:
        """Servers whose address family matches ``version``, in catalog order."""
        return [server for server in self.servers if version.matches(server)]


class ResolveOptions(BaseModel):
    """Options applied to every resolution attempt."""

    timeout: float = Field(default=5.0, gt=0, description="Per-attempt timeout in seconds")


# ============================================================================
# Attempt Models
# ============================================================================


class Attempt(BaseModel):
    """One query against one server of a provider."""

    model_config = ConfigDict(frozen=True)

    provider: Provider
    server: IPvAnyAddress

    @property
    def endpoint(self) -> str:
        if self.server.version == 6:
            return f"[{self.server}]:{self.provider.port}"
        return f"{self.server}:{self.provider.port}"


class AttemptOutcome(BaseModel):
    """Result of a single attempt: either an address or the error that ended it."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    attempt: Attempt | None = None
    address: IPvAnyAddress | None = None
    error: GetIPError | None = None

    @model_validator(mode="after")
    def _exactly_one(self) -> "AttemptOutcome":
        if (self.address is None) == (self.error is None):
            raise ValueError("exactly one of address or error must be set")
        return self

    @property
    def ok(self) -> bool:
        return self.error is None
