"""
Helpers shared by the validation and bundling modules.

Packed call data such as ``initCode`` or ``paymasterAndData`` starts with
the address of the contract it targets; these helpers slice it out and
run constructor-only "script" contracts whose results come back as a
custom revert error.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Mapping, Optional, Sequence, Tuple, Union

from eth_abi import decode
from eth_abi.exceptions import DecodingError
from web3 import Web3

from bundler_utils.constants import ADDRESS_LENGTH, BYTES32_LENGTH, ERROR_SELECTOR_LENGTH
from bundler_utils.errors import ContractScriptError, RpcError

if TYPE_CHECKING:
    from bundler_utils.provider import RpcProvider

BytesLike = Union[bytes, bytearray, memoryview, str, Sequence[int]]


def to_bytes(data: BytesLike) -> bytes:
    """
    Bytes from a bytes-like value or a 0x-prefixed hex string.

    Raises:
        ValueError: If a string is not 0x-prefixed hex
    """
    if isinstance(data, (bytes, bytearray, memoryview)):
        return bytes(data)
    if isinstance(data, str):
        if data[:2].lower() != "0x":
            raise ValueError(f"Hex string must start with 0x: {data!r}")
        return Web3.to_bytes(hexstr=data)
    return bytes(data)


def get_addr(data: Optional[BytesLike]) -> Optional[str]:
    """
    Extract the leading address from ``initCode`` or ``paymasterAndData``.

    Returns:
        Lowercase 0x hex of the first 20 bytes, or None if ``data`` is
        missing or shorter than an address
    """
    if data is None:
        return None
    raw = to_bytes(data)
    if len(raw) < ADDRESS_LENGTH:
        return None
    return Web3.to_hex(raw[:ADDRESS_LENGTH])


def to_bytes32(value: Union[BytesLike, int]) -> str:
    """
    Left-pad ``value`` with zeros to 32 bytes.

    Raises:
        ValueError: If ``value`` is negative or longer than 32 bytes
    """
    if isinstance(value, int) and not isinstance(value, bool):
        if value < 0:
            raise ValueError(f"Cannot encode negative value {value}")
        raw = value.to_bytes(max((value.bit_length() + 7) // 8, 1), "big")
    else:
        raw = to_bytes(value)

    if len(raw) > BYTES32_LENGTH:
        raise ValueError(f"Value is {len(raw)} bytes, longer than {BYTES32_LENGTH}")
    return Web3.to_hex(raw.rjust(BYTES32_LENGTH, b"\x00"))


def _canonical_type(param: Mapping[str, Any]) -> str:
    abi_type = param["type"]
    if abi_type.startswith("tuple"):
        inner = ",".join(_canonical_type(c) for c in param.get("components", []))
        return f"({inner}){abi_type[len('tuple'):]}"
    return abi_type


def error_selector(error_abi: Mapping[str, Any]) -> bytes:
    """4-byte selector of a custom error ABI entry."""
    types = ",".join(_canonical_type(p) for p in error_abi.get("inputs", []))
    signature = f"{error_abi['name']}({types})"
    return bytes(Web3.keccak(text=signature)[:ERROR_SELECTOR_LENGTH])


def decode_error_result(error_abi: Mapping[str, Any], data: Any) -> Tuple[Any, ...]:
    """
    Decode revert data produced by the custom error ``error_abi``.

    Raises:
        ContractScriptError: If the data is missing, carries another
            selector or does not decode
    """
    # some nodes nest the revert data one level deeper
    if isinstance(data, Mapping):
        data = data.get("data")
    if not isinstance(data, (str, bytes, bytearray)):
        raise ContractScriptError(f"unable to parse script (error) response: {data!r}")

    try:
        raw = to_bytes(data)
    except ValueError as e:
        raise ContractScriptError(f"unable to parse script (error) response: {data!r}") from e

    hex_data = Web3.to_hex(raw)
    if raw[:ERROR_SELECTOR_LENGTH] != error_selector(error_abi):
        raise ContractScriptError(
            f"unable to parse script (error) response: {hex_data}", data=hex_data
        )

    types = [_canonical_type(p) for p in error_abi.get("inputs", [])]
    try:
        return tuple(decode(types, raw[ERROR_SELECTOR_LENGTH:]))
    except DecodingError as e:
        raise ContractScriptError(
            f"unable to parse script (error) response: {hex_data}", data=hex_data
        ) from e


async def run_contract_script(
    provider: RpcProvider,
    deploy_data: BytesLike,
    error_abi: Mapping[str, Any],
) -> Tuple[Any, ...]:
    """
    Run a contract constructor as a script.

    The constructor is expected to revert with ``error_abi``, whose
    arguments are the script's return values.

    Args:
        provider: Node to run the call on
        deploy_data: Creation bytecode with ABI-encoded constructor arguments
        error_abi: ABI entry of the custom error the script reverts with

    Returns:
        Decoded error arguments

    Example:
        ```python
        (hashes,) = await run_contract_script(provider, deploy_data, GET_USER_OP_HASHES_RESULT)
        ```
    """
    tx = {"data": Web3.to_hex(to_bytes(deploy_data))}
    try:
        ret: Any = await provider.call(tx)
    except RpcError as e:
        ret = e.data
    return decode_error_result(error_abi, ret)
