"""Core library modules for public IP discovery."""

from getip.core.engine import ResolutionEngine
from getip.core.errors import (
    GetIPError,
    NoAddressError,
    TransportError,
    VersionMismatchError,
)
from getip.core.models import (
    AddressVersion,
    Attempt,
    AttemptOutcome,
    Provider,
    QueryClass,
    QueryMethod,
    ResolveOptions,
)

__all__ = [
    "ResolutionEngine",
    "GetIPError",
    "NoAddressError",
    "TransportError",
    "VersionMismatchError",
    "AddressVersion",
    "Attempt",
    "AttemptOutcome",
    "Provider",
    "QueryClass",
    "QueryMethod",
    "ResolveOptions",
]
