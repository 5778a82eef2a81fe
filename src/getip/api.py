"""Public resolve API."""

from ipaddress import IPv4Address, IPv6Address

from getip.core.engine import ResolutionEngine
from getip.core.models import AddressVersion, IPAddress, ResolveOptions


async def resolve(
    version: AddressVersion = AddressVersion.ANY,
    options: ResolveOptions | None = None,
) -> IPAddress:
    """
    Resolve the public address of this host.

    Providers are queried one at a time in priority order. Raises
    ``NoAddressError`` or ``TransportError`` (the last failure seen) when no
    provider answers, and ``VersionMismatchError`` as soon as any provider
    answers with an address of the wrong family.
    """
    engine = ResolutionEngine(options=options)
    return await engine.resolve(version)


async def addr(options: ResolveOptions | None = None) -> IPAddress:
    """Public address of any version."""
    return await resolve(AddressVersion.ANY, options)


async def addr_v4(options: ResolveOptions | None = None) -> IPv4Address:
    """Public IPv4 address."""
    address = await resolve(AddressVersion.V4, options)
    assert isinstance(address, IPv4Address), f"resolve(V4) returned {address!r}"
    return address


async def addr_v6(options: ResolveOptions | None = None) -> IPv6Address:
    """Public IPv6 address."""
    address = await resolve(AddressVersion.V6, options)
    assert isinstance(address, IPv6Address), f"resolve(V6) returned {address!r}"
    return address
