"""Constants for bundler-utils.

Chain identifiers, third-party gas API endpoints, timing defaults and
the gas padding ratios used by the estimation heuristic.
"""

# Chains with a third-party gas price source
MAINNET_CHAIN_ID = 1
POLYGON_CHAIN_ID = 137
ARBITRUM_CHAIN_ID = 42161
SUGGESTED_FEES_CHAIN_IDS = (MAINNET_CHAIN_ID, ARBITRUM_CHAIN_ID)

# Third-party gas price APIs
POLYGON_GAS_STATION_URL = "https://gasstation-mainnet.matic.network/v2"
SUGGESTED_FEES_URL_TEMPLATE = (
    "https://gas-api.metaswap.codefi.network/networks/{chain_id}/suggestedGasFees"
)
FEE_FETCH_TIMEOUT_MS = 14_000

# Gas estimation: ceiling is 90% of the block gas limit, padding is 150%
GAS_CEILING_NUMERATOR = 9
GAS_CEILING_DENOMINATOR = 10
GAS_PADDING_NUMERATOR = 3
GAS_PADDING_DENOMINATOR = 2

# Polling
WAIT_TIMEOUT_MS = 10_000
WAIT_INTERVAL_MS = 500

# Ethereum Constants
ADDRESS_LENGTH = 20
BYTES32_LENGTH = 32
ERROR_SELECTOR_LENGTH = 4

# RPC methods
GETH_PROBE_METHOD = "debug_traceCall"
CLIENT_VERSION_METHOD = "web3_clientVersion"

__all__ = [
    "MAINNET_CHAIN_ID",
    "POLYGON_CHAIN_ID",
    "ARBITRUM_CHAIN_ID",
    "SUGGESTED_FEES_CHAIN_IDS",
    "POLYGON_GAS_STATION_URL",
    "SUGGESTED_FEES_URL_TEMPLATE",
    "FEE_FETCH_TIMEOUT_MS",
    "GAS_CEILING_NUMERATOR",
    "GAS_CEILING_DENOMINATOR",
    "GAS_PADDING_NUMERATOR",
    "GAS_PADDING_DENOMINATOR",
    "WAIT_TIMEOUT_MS",
    "WAIT_INTERVAL_MS",
    "ADDRESS_LENGTH",
    "BYTES32_LENGTH",
    "ERROR_SELECTOR_LENGTH",
    "GETH_PROBE_METHOD",
    "CLIENT_VERSION_METHOD",
]
