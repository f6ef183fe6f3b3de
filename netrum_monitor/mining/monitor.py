"""Mining activity check behind the monitor form.

Flow for a submitted address:
1. Validate the address, short-circuit with an inline error when invalid
2. Fetch the live snapshot (available tokens and speed)
3. Sample the claim endpoint, wait, sample it again
4. Report mining as active when the cumulative mined tokens grew

Every failure ends up as text on the page; nothing is retried.
"""

from asyncio import sleep

from netrum_monitor.helpers.constants import ACTIVITY_SAMPLE_DELAY, TOKEN_SYMBOL
from netrum_monitor.helpers.logging import get_logger
from netrum_monitor.helpers.parsers import (
    format_tokens,
    is_valid_evm_address,
    parse_wei,
)
from netrum_monitor.mining.client import MiningClient
from netrum_monitor.mining.models import LiveLogResponse, MonitorPage


logger = get_logger(__name__)

INVALID_ADDRESS_MESSAGE = "❌ Invalid EVM address"


def build_live_status(live: LiveLogResponse) -> str:
    """Turn a live-log reply into the one-line status shown to the user.

    Args:
        live: Parsed live-log response

    Returns:
        str: "Avail to claim: ... | Speed: .../s" or an "API Error" line
    """
    if not live.success or live.live_info is None:
        return f"❌ API Error: {live.error_text}"

    info = live.live_info
    return " | ".join(
        [
            f"Avail to claim: {format_tokens(info.mined_tokens)} {TOKEN_SYMBOL}",
            f"Speed: {format_tokens(info.speed_per_sec)}/s",
        ]
    )


async def sample_mined_tokens(client: MiningClient, address: str) -> int:
    """Read the cumulative mined tokens (wei) from the claim endpoint."""
    claim = await client.fetch_claim(address)
    return parse_wei(claim.mined_tokens)


async def detect_mining_activity(
    client: MiningClient,
    address: str,
    *,
    sample_delay: float = ACTIVITY_SAMPLE_DELAY,
) -> bool:
    """Check whether a node is mining by sampling its claim counter twice.

    Args:
        client: Mining API client
        address: Node EVM address
        sample_delay: Seconds to wait between the two samples

    Returns:
        bool: True if the second sample is strictly greater than the first
    """
    before = await sample_mined_tokens(client, address)
    await sleep(sample_delay)
    after = await sample_mined_tokens(client, address)

    logger.debug("Mined tokens for %s: before=%d after=%d", address, before, after)
    return after > before


async def handle_submission(
    client: MiningClient,
    address: str | None,
    *,
    sample_delay: float = ACTIVITY_SAMPLE_DELAY,
) -> MonitorPage:
    """Run the full check for a submitted address.

    Args:
        client: Mining API client
        address: Raw form value, echoed back into the form as submitted
        sample_delay: Seconds between the two claim samples

    Returns:
        MonitorPage: View model for render_page
    """
    address = address or ""
    if not is_valid_evm_address(address):
        logger.info("Rejected invalid address %r", address)
        return MonitorPage(live_status=INVALID_ADDRESS_MESSAGE, address=address)

    logger.info("Checking mining status for %s", address)
    try:
        live = await client.fetch_live_info(address)
        if not live.success or live.live_info is None:
            logger.warning("Live-log API error for %s: %s", address, live.error_text)
        live_status = build_live_status(live)

        is_mining = await detect_mining_activity(
            client, address, sample_delay=sample_delay
        )
    except Exception as e:
        logger.exception("Mining check failed for %s", address)
        return MonitorPage(
            live_status=f"❌ Error: {str(e) or type(e).__name__}", address=address
        )

    logger.info(
        "Mining activity for %s: %s", address, "active" if is_mining else "stopped"
    )
    return MonitorPage(live_status=live_status, mining_active=is_mining, address=address)


__all__ = [
    "INVALID_ADDRESS_MESSAGE",
    "build_live_status",
    "detect_mining_activity",
    "handle_submission",
    "sample_mined_tokens",
]
