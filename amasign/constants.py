"""Constants for the Amadeus signing client."""

from enum import Enum

__all__ = [
    "Network",
    "MCP_ENDPOINT",
    "DEFAULT_TIMEOUT",
    "USER_AGENT",
    "JSONRPC_VERSION",
    "TOOLS_CALL_METHOD",
    "SIGNATURE_DST",
    "CURVE_ORDER",
    "SEED_LENGTH",
    "PRIVATE_KEY_LENGTH",
    "PUBLIC_KEY_LENGTH",
    "SIGNATURE_LENGTH",
    "SIGNING_PAYLOAD_LENGTH",
    "ENV_ENDPOINT",
    "ENV_TIMEOUT",
]


class Network(str, Enum):
    """Ledger networks accepted by submit_transaction."""
    MAINNET = "mainnet"
    TESTNET = "testnet"


# Remote MCP service
MCP_ENDPOINT = "https://mcp.ama.one"
DEFAULT_TIMEOUT = 30  # seconds
USER_AGENT = "amasign/1.0.0"

# JSON-RPC envelope
JSONRPC_VERSION = "2.0"
TOOLS_CALL_METHOD = "tools/call"

# Part of the wire contract: verifiers hash with the same tag
SIGNATURE_DST = b"AMADEUS_SIG_BLS12381G2_XMD:SHA-256_SSWU_RO_TX_"

# BLS12-381 scalar field order r
CURVE_ORDER = 0x73EDA753299D7D483339D80809A1D80553BDA402FFFE5BFEFFFFFFFF00000001

# Sizes in bytes
SEED_LENGTH = 64
PRIVATE_KEY_LENGTH = 32
PUBLIC_KEY_LENGTH = 48   # compressed G1
SIGNATURE_LENGTH = 96    # compressed G2
SIGNING_PAYLOAD_LENGTH = 32

# Environment overrides read by the CLI
ENV_ENDPOINT = "AMASIGN_ENDPOINT"
ENV_TIMEOUT = "AMASIGN_TIMEOUT"
