"""Extraction of the client address from a provider's DNS answer."""

from ipaddress import IPv4Address, IPv6Address, ip_address

import dns.message
import dns.rdatatype

from getip.core.errors import NoAddressError
from getip.core.models import IPAddress, QueryMethod


def parse_answer(response: dns.message.Message, method: QueryMethod) -> IPAddress:
    """
    Read the client address out of the first answer record of ``response``.

    Only the record type implied by ``method`` is accepted. A and AAAA
    payloads are returned as-is; for TXT the first character-string is
    decoded as UTF-8 and parsed as an IPv4 or IPv6 literal. Any later
    records are ignored.
    """
    if not response.answer or len(response.answer[0]) == 0:
        raise NoAddressError("no answer record")

    rrset = response.answer[0]
    rdata = rrset[0]

    if rrset.rdtype != method.rdtype:
        raise NoAddressError(
            f"expected {method.value} record, got {dns.rdatatype.to_text(rrset.rdtype)}"
        )

    if method is QueryMethod.A:
        return IPv4Address(rdata.address)
    if method is QueryMethod.AAAA:
        return IPv6Address(rdata.address)
    return _parse_txt(rdata.strings)


def _parse_txt(strings: tuple[bytes, ...]) -> IPAddress:
    if not strings:
        raise NoAddressError("empty TXT record")

    try:
        text = strings[0].decode("utf-8")
    except UnicodeDecodeError:
        raise NoAddressError("TXT record is not valid UTF-8") from None

    try:
        return ip_address(text)
    except ValueError:
        raise NoAddressError(f"not an IP address: {text!r}") from None
