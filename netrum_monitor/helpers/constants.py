"""Common configuration constants used across the application."""

# Mining API
MINING_API_BASE_URL = "https://api.v2.netrumlabs.com"
"""Base URL of the Netrum mining API"""

LIVE_LOG_PATH = "/api/node/mining/live-log/"
"""Live mining snapshot endpoint (mined tokens and speed)"""

CLAIM_PATH = "/api/node/mining/claim/"
"""Claim endpoint, exposes the cumulative mined token count"""

# HTTP and Network Constants
DEFAULT_TIMEOUT = 30.0
"""Default per-call HTTP timeout in seconds"""

# Activity detection
ACTIVITY_SAMPLE_DELAY = 30.0
"""Seconds between the two claim samples used to detect mining"""

# Token formatting
TOKEN_SYMBOL = "NPT"
"""Display unit of the mining reward token"""

TOKEN_SCALE = 1e18
"""Wei-scaled values are divided by this for display"""

TOKEN_DISPLAY_DECIMALS = 6
"""Number of decimals shown for token amounts"""

# Validation
EVM_ADDRESS_PATTERN = r"^0x[a-fA-F0-9]{40}$"
"""EVM address: 0x followed by exactly 40 hex characters"""

# Server
DEFAULT_HOST = "0.0.0.0"
"""Default bind address for the HTTP server"""

DEFAULT_PORT = 8787
"""Default port for the HTTP server"""


__all__ = [
    "ACTIVITY_SAMPLE_DELAY",
    "CLAIM_PATH",
    "DEFAULT_HOST",
    "DEFAULT_PORT",
    "DEFAULT_TIMEOUT",
    "EVM_ADDRESS_PATTERN",
    "LIVE_LOG_PATH",
    "MINING_API_BASE_URL",
    "TOKEN_DISPLAY_DECIMALS",
    "TOKEN_SCALE",
    "TOKEN_SYMBOL",
]
