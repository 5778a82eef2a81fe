"""Tests for CLI commands."""

import json
from ipaddress import IPv4Address, IPv6Address
from unittest.mock import AsyncMock, patch

from typer.testing import CliRunner

from getip.cli.main import app
from getip.core.errors import TransportError
from getip.core.models import AddressVersion, ResolveOptions

runner = CliRunner()


class TestAddrCommand:
    """Tests for `getip addr`."""

    def test_prints_address(self):
        with patch("getip.cli.commands.lookup.ResolutionEngine") as engine:
            engine.return_value.resolve = AsyncMock(return_value=IPv4Address("203.0.113.5"))

            result = runner.invoke(app, ["addr"])

            assert result.exit_code == 0
            assert "203.0.113.5" in result.output
            engine.return_value.resolve.assert_awaited_once_with(AddressVersion.ANY)

    def test_ipv6_flag_and_timeout(self):
        with patch("getip.cli.commands.lookup.ResolutionEngine") as engine:
            engine.return_value.resolve = AsyncMock(return_value=IPv6Address("2001:db8::1"))

            result = runner.invoke(app, ["addr", "-6", "--timeout", "2"])

            assert result.exit_code == 0
            engine.assert_called_once_with(options=ResolveOptions(timeout=2.0))
            engine.return_value.resolve.assert_awaited_once_with(AddressVersion.V6)

    def test_json_output(self):
        with patch("getip.cli.commands.lookup.ResolutionEngine") as engine:
            engine.return_value.resolve = AsyncMock(return_value=IPv4Address("203.0.113.5"))

            result = runner.invoke(app, ["addr", "-4", "--output", "json"])

            assert result.exit_code == 0
            assert json.loads(result.output) == {"address": "203.0.113.5", "version": 4}

    def test_error_exit_code(self):
        with patch("getip.cli.commands.lookup.ResolutionEngine") as engine:
            engine.return_value.resolve = AsyncMock(side_effect=TransportError("timed out"))

            result = runner.invoke(app, ["addr"])

            assert result.exit_code == 1
            assert "timed out" in result.output

    def test_conflicting_flags(self):
        result = runner.invoke(app, ["addr", "-4", "-6"])

        assert result.exit_code == 2


class TestProvidersCommand:
    """Tests for `getip providers`."""

    def test_lists_catalog(self):
        result = runner.invoke(app, ["providers"])

        assert result.exit_code == 0
        assert "opendns-v4" in result.output
        assert "cloudflare-v6" in result.output

    def test_filters_by_family(self):
        result = runner.invoke(app, ["providers", "-4"])

        assert result.exit_code == 0
        assert "google-v4" in result.output
        assert "google-v6" not in result.output


def test_version_command():
    result = runner.invoke(app, ["version"])

    assert result.exit_code == 0
    assert "0.2.1" in result.output
