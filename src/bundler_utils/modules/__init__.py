"""
Helpers used by the validation and bundling modules.
"""

from bundler_utils.modules.module_utils import (
    decode_error_result,
    error_selector,
    get_addr,
    run_contract_script,
    to_bytes,
    to_bytes32,
)

__all__ = [
    "decode_error_result",
    "error_selector",
    "get_addr",
    "run_contract_script",
    "to_bytes",
    "to_bytes32",
]
