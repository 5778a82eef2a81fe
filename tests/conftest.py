"""Pytest configuration and fixtures."""

import asyncio
from ipaddress import ip_address

import dns.message
import dns.rdataclass
import dns.rdatatype
import dns.rdtypes.ANY.TXT
import dns.rrset
import pytest

from getip.core.errors import TransportError
from getip.core.models import Provider, QueryClass, QueryMethod
from getip.core.transport import BaseDNSTransport

HANG = object()


def a_rrset(name: str, address: str) -> dns.rrset.RRset:
    return dns.rrset.from_text(name, 60, "IN", "A", address)


def aaaa_rrset(name: str, address: str) -> dns.rrset.RRset:
    return dns.rrset.from_text(name, 60, "IN", "AAAA", address)


def txt_rrset(name: str, *chunks: bytes, rdclass: str = "IN") -> dns.rrset.RRset:
    rdata = dns.rdtypes.ANY.TXT.TXT(
        dns.rdataclass.from_text(rdclass), dns.rdatatype.TXT, list(chunks)
    )
    return dns.rrset.from_rdata(name, 60, rdata)


def make_response(query: dns.message.Message, *rrsets: dns.rrset.RRset) -> dns.message.Message:
    response = dns.message.make_response(query)
    response.answer.extend(rrsets)
    return response


class FakeTransport(BaseDNSTransport):
    """
    Scripted transport keyed by server address.

    A script entry is an exception to raise, a list of rrsets to answer
    with, or ``HANG`` to never answer. Unscripted servers fail.
    """

    def __init__(self, script: dict | None = None):
        self.script = {str(ip_address(k)): v for k, v in (script or {}).items()}
        self.calls: list[tuple[dns.message.Message, str, int]] = []
        self.cancelled: list[str] = []

    @property
    def servers(self) -> list[str]:
        return [server for _, server, _ in self.calls]

    async def exchange(self, query, server, port):
        self.calls.append((query, str(server), port))
        entry = self.script.get(str(server))

        if entry is None:
            raise TransportError(f"{server} unreachable", server=str(server))
        if entry is HANG:
            try:
                await asyncio.Event().wait()
            except asyncio.CancelledError:
                self.cancelled.append(str(server))
                raise
        if isinstance(entry, Exception):
            raise entry
        return make_response(query, *entry)


@pytest.fixture
def transport() -> FakeTransport:
    return FakeTransport()


@pytest.fixture
def dual_stack_provider() -> Provider:
    """Provider with servers of both families."""
    return Provider(
        name="dual",
        query_name="whoami.example",
        servers=("192.0.2.1", "2001:db8::53", "192.0.2.2"),
        method=QueryMethod.TXT,
    )


@pytest.fixture
def a_provider() -> Provider:
    return Provider(
        name="a-echo",
        query_name="myip.example",
        servers=("198.51.100.1", "198.51.100.2"),
        method=QueryMethod.A,
    )


@pytest.fixture
def chaos_provider() -> Provider:
    return Provider(
        name="chaos-echo",
        query_name="whoami.example",
        servers=("203.0.113.53",),
        method=QueryMethod.TXT,
        query_class=QueryClass.CH,
    )
