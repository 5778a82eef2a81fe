"""Resolution engine: ordered fallback across providers and their servers."""

import asyncio
import logging
from contextlib import aclosing
from typing import AsyncIterator, Sequence

import dns.message

from getip.core import providers as catalog
from getip.core.errors import GetIPError, NoAddressError, TransportError, VersionMismatchError
from getip.core.models import (
    AddressVersion,
    Attempt,
    AttemptOutcome,
    IPAddress,
    Provider,
    ResolveOptions,
)
from getip.core.parser import parse_answer
from getip.core.transport import BaseDNSTransport, UDPTransport, build_query

logger = logging.getLogger(__name__)


class ResolutionEngine:
    """
    Walks the provider catalog in priority order until one answer decides.

    Attempts run strictly one after another. A matching address ends the
    resolution; an address of the wrong family aborts it with
    ``VersionMismatchError``; transport and parse failures move on to the
    next server and then the next provider.
    """

    def __init__(
        self,
        providers: Sequence[Provider] | None = None,
        transport: BaseDNSTransport | None = None,
        options: ResolveOptions | None = None,
    ):
        self.providers = tuple(catalog.ALL if providers is None else providers)
        self.transport = transport or UDPTransport()
        self.options = options or ResolveOptions()

    async def resolve(self, version: AddressVersion = AddressVersion.ANY) -> IPAddress:
        """Resolve the public address of the requested version."""
        last_error: GetIPError = NoAddressError()

        async with aclosing(self.attempts(version)) as outcomes:
            async for outcome in outcomes:
                if outcome.error is not None:
                    last_error = outcome.error
                    continue

                address = outcome.address
                if version.matches(address):
                    logger.debug(f"Resolved {address} via {outcome.attempt.provider.name}")
                    return address

                logger.warning(
                    f"{outcome.attempt.provider.name} returned {address} "
                    f"for requested version {version.value}"
                )
                raise VersionMismatchError(address, version)

        raise last_error

    async def attempts(self, version: AddressVersion) -> AsyncIterator[AttemptOutcome]:
        """Lazily yield the outcome of every attempt across the catalog."""
        for provider in self.providers:
            async for outcome in self.provider_attempts(provider, version):
                yield outcome

    async def provider_attempts(
        self,
        provider: Provider,
        version: AddressVersion,
    ) -> AsyncIterator[AttemptOutcome]:
        """Lazily yield the outcome of querying each matching server of ``provider``."""
        servers = provider.servers_for(version)
        if not servers:
            logger.debug(f"Skipping {provider.name}: no {version.value} servers")
            return

        try:
            query = build_query(provider)
        except TransportError as e:
            logger.debug(f"Skipping {provider.name}: {e}")
            yield AttemptOutcome(error=e)
            return

        for server in servers:
            attempt = Attempt(provider=provider, server=server)
            yield await self._run(attempt, query)

    async def _run(self, attempt: Attempt, query: dns.message.Message) -> AttemptOutcome:
        provider = attempt.provider
        logger.debug(f"Querying {provider.name} at {attempt.endpoint}")

        try:
            response = await asyncio.wait_for(
                self.transport.exchange(query, attempt.server, provider.port),
                timeout=self.options.timeout,
            )
        except asyncio.TimeoutError:
            error = TransportError(
                f"no response within {self.options.timeout}s", server=attempt.endpoint
            )
            logger.debug(f"{provider.name} at {attempt.endpoint} failed: {error}")
            return AttemptOutcome(attempt=attempt, error=error)
        except TransportError as e:
            logger.debug(f"{provider.name} at {attempt.endpoint} failed: {e}")
            return AttemptOutcome(attempt=attempt, error=e)

        try:
            address = parse_answer(response, provider.method)
        except NoAddressError as e:
            logger.debug(f"{provider.name} at {attempt.endpoint} gave no address: {e}")
            return AttemptOutcome(attempt=attempt, error=e)

        return AttemptOutcome(attempt=attempt, address=address)
