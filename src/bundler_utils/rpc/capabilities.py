"""
Node capability detection.

Probes tell what kind of node sits behind a provider by calling methods
with deliberately wrong arguments: a node that implements a method
complains about the parameters, one that does not complains about the
method.
"""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING, Any, Dict, Mapping, Optional, Tuple

from bundler_utils.constants import CLIENT_VERSION_METHOD, GETH_PROBE_METHOD
from bundler_utils.errors import RpcErrorCode
from bundler_utils.utils.logging import get_logger

if TYPE_CHECKING:
    from bundler_utils.provider import RpcProvider

_logger = get_logger(__name__)


def _code_of(value: Any) -> Optional[int]:
    if value is None:
        return None
    if isinstance(value, Mapping):
        return value.get("code")
    return getattr(value, "code", None)


def extract_rpc_error_code(outcome: Any) -> Optional[int]:
    """
    Find a JSON-RPC error code on an exception or a response.

    Looks at a nested ``error`` first, then a web3 style
    ``rpc_response``, then ``code`` on the object itself.
    """
    if outcome is None:
        return None

    if isinstance(outcome, Mapping):
        error = outcome.get("error")
    else:
        error = getattr(outcome, "error", None)
    code = _code_of(error)
    if code is not None:
        return code

    rpc_response = getattr(outcome, "rpc_response", None)
    if isinstance(rpc_response, Mapping):
        code = _code_of(rpc_response.get("error"))
        if code is not None:
            return code

    # errors raised with the raw response as their only argument
    if isinstance(outcome, BaseException) and outcome.args:
        payload = outcome.args[0]
        if isinstance(payload, Mapping):
            code = extract_rpc_error_code(payload)
            if code is not None:
                return code

    return _code_of(outcome)


async def supports_rpc_method(provider: RpcProvider, method: str) -> bool:
    """
    Check whether the node implements ``method``.

    Calls the method without parameters. An "invalid params" error means
    the method exists; success or any other error counts as unsupported.
    Never raises.
    """
    try:
        outcome: Any = await provider.send(method, [])
    except Exception as e:
        outcome = e
    return extract_rpc_error_code(outcome) == RpcErrorCode.INVALID_PARAMS


class ClientVersionCache:
    """
    Client version strings per provider instance.

    Entries are keyed by provider identity and hold a strong reference to
    the provider, so an id is never reused while its entry exists. This
    also keeps every cached provider alive. The cache is owned by whoever
    creates the providers and there is no global instance. Call
    ``discard(provider)`` when a provider is retired, or ``clear()`` when
    the cache itself is done with.

    Example:
        ```python
        cache = ClientVersionCache()
        version = await cache.get(provider)  # one web3_clientVersion call
        version = await cache.get(provider)  # cached
        ```
    """

    def __init__(self) -> None:
        self._entries: Dict[int, Tuple[Any, "asyncio.Future[str]"]] = {}

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, provider: object) -> bool:
        entry = self._entries.get(id(provider))
        return entry is not None and entry[0] is provider

    async def get(self, provider: RpcProvider) -> str:
        """
        Client version of ``provider``, fetched on first use.

        Concurrent first lookups share one request. A failed lookup is
        not cached.
        """
        key = id(provider)
        entry = self._entries.get(key)
        if entry is None or entry[0] is not provider:
            future = asyncio.ensure_future(provider.send(CLIENT_VERSION_METHOD, []))
            entry = (provider, future)
            self._entries[key] = entry

        try:
            return await asyncio.shield(entry[1])
        except Exception:
            if self._entries.get(key) is entry:
                del self._entries[key]
            raise

    def discard(self, provider: object) -> None:
        """Drop the entry for ``provider``, if any. Unknown providers are ignored."""
        key = id(provider)
        entry = self._entries.get(key)
        if entry is not None and entry[0] is provider:
            del self._entries[key]

    def clear(self) -> None:
        self._entries.clear()


async def is_geth(provider: RpcProvider, cache: Optional[ClientVersionCache] = None) -> bool:
    """
    Best-effort check for a Go-Ethereum node.

    The client version is looked up (through ``cache`` when given) and
    logged; the answer itself comes from probing ``debug_traceCall``,
    which geth implements and most other clients do not.
    """
    if cache is not None:
        client_version = await cache.get(provider)
    else:
        client_version = await provider.send(CLIENT_VERSION_METHOD, [])
    _logger.debug("Client version", extra={"client_version": client_version})

    return await supports_rpc_method(provider, GETH_PROBE_METHOD)
