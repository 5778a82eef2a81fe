"""Find the public IP address of this host using DNS echo services."""

__version__ = "0.2.1"

from getip.core.errors import (
    GetIPError,
    NoAddressError,
    TransportError,
    VersionMismatchError,
)
from getip.core.models import AddressVersion, ResolveOptions
from getip.api import addr, addr_v4, addr_v6, resolve

__all__ = [
    "__version__",
    "addr",
    "addr_v4",
    "addr_v6",
    "resolve",
    "AddressVersion",
    "ResolveOptions",
    "GetIPError",
    "NoAddressError",
    "TransportError",
    "VersionMismatchError",
]
