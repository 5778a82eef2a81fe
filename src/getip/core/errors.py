"""Exceptions raised while resolving the public address."""

from typing import Any


class GetIPError(Exception):
    """Base class for all resolution errors."""


class NoAddressError(GetIPError):
    """No answer was returned, or no valid address could be read from it."""

    def __init__(self, detail: str | None = None):
        self.detail = detail
        message = "no or invalid IP address string found"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class VersionMismatchError(GetIPError):
    """A provider answered with an address of the wrong family."""

    def __init__(self, address: Any, version: Any):
        self.address = address
        self.version = version
        super().__init__("IP version not requested was returned")


class TransportError(GetIPError):
    """The DNS exchange itself failed (socket, timeout or malformed response)."""

    def __init__(self, detail: str, server: str | None = None):
        self.detail = detail
        self.server = server
        super().__init__(f"dns resolver: {detail}")
