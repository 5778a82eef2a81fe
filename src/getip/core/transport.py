"""DNS transport used to exchange one query with one server."""

from abc import ABC, abstractmethod

import dns.asyncquery
import dns.exception
import dns.message
import dns.name

from getip.core.errors import TransportError
from getip.core.models import IPAddress, Provider


def build_query(provider: Provider) -> dns.message.Message:
    """Build the EDNS-enabled query a provider expects."""
    try:
        qname = dns.name.from_text(provider.query_name)
    except dns.exception.DNSException as e:
        raise TransportError(f"invalid query name {provider.query_name!r}: {e}") from e

    return dns.message.make_query(
        qname,
        provider.method.rdtype,
        provider.query_class.rdclass,
        use_edns=0,
    )


class BaseDNSTransport(ABC):
    """Abstract base class for DNS transports."""

    @abstractmethod
    async def exchange(
        self,
        query: dns.message.Message,
        server: IPAddress,
        port: int,
    ) -> dns.message.Message:
        """Send ``query`` to ``server`` and return its single response."""
        ...


class UDPTransport(BaseDNSTransport):
    """
    Plain UDP transport backed by dnspython.

    Every exchange opens its own socket, which dnspython closes when the
    exchange finishes or is cancelled.
    """

    def __init__(self, timeout: float | None = None):
        self.timeout = timeout

    async def exchange(
        self,
        query: dns.message.Message,
        server: IPAddress,
        port: int,
    ) -> dns.message.Message:
        endpoint = f"[{server}]:{port}" if server.version == 6 else f"{server}:{port}"
        try:
            return await dns.asyncquery.udp(
                query,
                str(server),
                timeout=self.timeout,
                port=port,
            )
        except dns.exception.DNSException as e:
            raise TransportError(str(e) or type(e).__name__, server=endpoint) from e
        except OSError as e:
            raise TransportError(str(e), server=endpoint) from e
