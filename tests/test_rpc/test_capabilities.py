"""
Tests for node capability probes.

Tests cover:
- supports_rpc_method outcome interpretation
- Error code extraction from different error shapes
- is_geth with and without a ClientVersionCache
- ClientVersionCache sharing and failure handling
"""

import asyncio
from unittest.mock import AsyncMock, MagicMock

import pytest

from bundler_utils.errors import RpcError, RpcErrorCode
from bundler_utils.rpc import (
    ClientVersionCache,
    extract_rpc_error_code,
    is_geth,
    supports_rpc_method,
)

from ..conftest import StubProvider


def _raise(error: Exception):
    def handler(_params):
        raise error

    return handler


class ErrorWithPayload(Exception):
    """Exception shaped like a rejected JSON-RPC response."""

    def __init__(self, error):
        super().__init__("rejected")
        self.error = error


# =============================================================================
# supports_rpc_method
# =============================================================================


class TestSupportsRpcMethod:
    """Tests for supports_rpc_method."""

    @pytest.mark.asyncio
    async def test_invalid_params_means_supported(self) -> None:
        provider = MagicMock()
        provider.send = AsyncMock(side_effect=RpcError("missing value", RpcErrorCode.INVALID_PARAMS))

        assert await supports_rpc_method(provider, "debug_traceCall") is True
        provider.send.assert_awaited_once_with("debug_traceCall", [])

    @pytest.mark.asyncio
    async def test_nested_error_payload(self) -> None:
        provider = MagicMock()
        provider.send = AsyncMock(side_effect=ErrorWithPayload({"code": -32602}))

        assert await supports_rpc_method(provider, "debug_traceCall") is True

    @pytest.mark.asyncio
    async def test_raw_response_as_exception_argument(self) -> None:
        provider = MagicMock()
        provider.send = AsyncMock(side_effect=Exception({"error": {"code": -32602, "message": "bad"}}))

        assert await supports_rpc_method(provider, "eth_foo") is True

    @pytest.mark.asyncio
    async def test_method_not_found_is_unsupported(self) -> None:
        provider = MagicMock()
        provider.send = AsyncMock(side_effect=RpcError("no such method", RpcErrorCode.METHOD_NOT_FOUND))

        assert await supports_rpc_method(provider, "debug_traceCall") is False

    @pytest.mark.asyncio
    async def test_success_is_unsupported(self) -> None:
        provider = MagicMock()
        provider.send = AsyncMock(return_value="0x1")

        assert await supports_rpc_method(provider, "eth_chainId") is False

    @pytest.mark.asyncio
    async def test_unrelated_exception_is_swallowed(self) -> None:
        provider = MagicMock()
        provider.send = AsyncMock(side_effect=ConnectionError("connection refused"))

        assert await supports_rpc_method(provider, "debug_traceCall") is False


class TestExtractRpcErrorCode:
    """Tests for extract_rpc_error_code."""

    def test_code_attribute(self) -> None:
        assert extract_rpc_error_code(RpcError("x", -32000)) == -32000

    def test_web3_style_rpc_response(self) -> None:
        error = Exception("boom")
        error.rpc_response = {"error": {"code": -32601}}
        assert extract_rpc_error_code(error) == -32601

    def test_mapping_response(self) -> None:
        assert extract_rpc_error_code({"error": {"code": 3}}) == 3

    def test_no_code(self) -> None:
        assert extract_rpc_error_code("0x1") is None
        assert extract_rpc_error_code(None) is None
        assert extract_rpc_error_code(ValueError("x")) is None


# =============================================================================
# is_geth / ClientVersionCache
# =============================================================================


def geth_handlers():
    return {
        "web3_clientVersion": lambda _params: "Geth/v1.13.5-stable/linux-amd64/go1.21.4",
        "debug_traceCall": _raise(RpcError("missing value for required argument 0", -32602)),
    }


class TestIsGeth:
    """Tests for is_geth."""

    @pytest.mark.asyncio
    async def test_geth_node(self) -> None:
        provider = StubProvider(handlers=geth_handlers())

        assert await is_geth(provider) is True
        assert provider.methods_sent() == ["web3_clientVersion", "debug_traceCall"]

    @pytest.mark.asyncio
    async def test_node_without_debug_trace_call(self) -> None:
        provider = StubProvider(
            handlers={
                "web3_clientVersion": lambda _params: "erigon/2.48.1/linux-amd64/go1.20.5",
                "debug_traceCall": _raise(RpcError("the method debug_traceCall does not exist", -32601)),
            }
        )

        assert await is_geth(provider) is False

    @pytest.mark.asyncio
    async def test_without_cache_fetches_version_every_time(self) -> None:
        provider = StubProvider(handlers=geth_handlers())

        await is_geth(provider)
        await is_geth(provider)

        assert provider.methods_sent().count("web3_clientVersion") == 2

    @pytest.mark.asyncio
    async def test_cache_fetches_version_once_per_provider(self) -> None:
        cache = ClientVersionCache()
        first = StubProvider(handlers=geth_handlers())
        second = StubProvider(handlers=geth_handlers())

        await is_geth(first, cache)
        await is_geth(first, cache)
        await is_geth(second, cache)

        assert first.methods_sent().count("web3_clientVersion") == 1
        assert first.methods_sent().count("debug_traceCall") == 2
        assert second.methods_sent().count("web3_clientVersion") == 1
        assert first in cache
        assert second in cache
        assert len(cache) == 2

    @pytest.mark.asyncio
    async def test_client_version_error_propagates(self) -> None:
        provider = StubProvider(
            handlers={"web3_clientVersion": _raise(RpcError("unauthorized", -32000))}
        )

        with pytest.raises(RpcError):
            await is_geth(provider, ClientVersionCache())


class TestClientVersionCache:
    """Tests for ClientVersionCache."""

    @pytest.mark.asyncio
    async def test_returns_version(self) -> None:
        cache = ClientVersionCache()
        provider = StubProvider(handlers=geth_handlers())

        assert (await cache.get(provider)).startswith("Geth/")

    @pytest.mark.asyncio
    async def test_concurrent_lookups_share_request(self) -> None:
        calls = []

        async def slow_send(method, params):
            calls.append(method)
            await asyncio.sleep(0.01)
            return "Nethermind/v1.25.0"

        provider = MagicMock()
        provider.send = slow_send
        cache = ClientVersionCache()

        results = await asyncio.gather(*(cache.get(provider) for _ in range(5)))

        assert results == ["Nethermind/v1.25.0"] * 5
        assert calls == ["web3_clientVersion"]

    @pytest.mark.asyncio
    async def test_failure_is_not_cached(self) -> None:
        attempts = []

        def flaky(_params):
            attempts.append(1)
            if len(attempts) == 1:
                raise RpcError("temporarily unavailable", -32002)
            return "Geth/v1.13.5"

        provider = StubProvider(handlers={"web3_clientVersion": flaky})
        cache = ClientVersionCache()

        with pytest.raises(RpcError):
            await cache.get(provider)
        assert provider not in cache

        assert await cache.get(provider) == "Geth/v1.13.5"
        assert len(attempts) == 2

    @pytest.mark.asyncio
    async def test_clear(self) -> None:
        cache = ClientVersionCache()
        provider = StubProvider(handlers=geth_handlers())
        await cache.get(provider)

        cache.clear()

        assert len(cache) == 0
        assert provider not in cache

    @pytest.mark.asyncio
    async def test_discard_releases_provider(self) -> None:
        cache = ClientVersionCache()
        retired = StubProvider(handlers=geth_handlers())
        active = StubProvider(handlers=geth_handlers())
        await cache.get(retired)
        await cache.get(active)

        cache.discard(retired)

        assert retired not in cache
        assert active in cache
        assert len(cache) == 1

        # a later lookup fetches the version again
        await cache.get(retired)
        versions = [m for m, _ in retired.sent if m == "web3_clientVersion"]
        assert len(versions) == 2

    def test_discard_unknown_provider_is_noop(self) -> None:
        cache = ClientVersionCache()

        cache.discard(StubProvider())

        assert len(cache) == 0
