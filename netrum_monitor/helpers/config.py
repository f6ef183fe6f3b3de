"""Configuration management and environment variable utilities."""

import os

from dotenv import load_dotenv

from netrum_monitor.helpers.constants import (
    ACTIVITY_SAMPLE_DELAY,
    DEFAULT_TIMEOUT,
    MINING_API_BASE_URL,
)


# Load environment variables from .env file
load_dotenv()


def get_optional_env(key: str, default: str | None = None) -> str | None:
    """Get an optional environment variable with a default value.

    Args:
        key: Environment variable name
        default: Default value if not set

    Returns:
        Environment variable value or default

    Example:
        ```python
        from netrum_monitor.helpers.config import get_optional_env

        log_level = get_optional_env("LOG_LEVEL", "INFO")
        ```
    """
    return os.getenv(key, default)


def get_float_env(key: str, default: float) -> float:
    """Get a non-negative float from the environment.

    Args:
        key: Environment variable name
        default: Value used when the variable is unset or empty

    Returns:
        Parsed float value

    Raises:
        ValueError: If the value is not a number or is negative
    """
    raw = os.getenv(key)
    if not raw:
        return default

    try:
        value = float(raw)
    except ValueError:
        msg = f"{key} must be a number, got {raw!r}"
        raise ValueError(msg) from None

    if value < 0:
        msg = f"{key} must not be negative, got {raw!r}"
        raise ValueError(msg)
    return value


def get_api_base_url(base_url: str | None = None) -> str:
    """Get the mining API base URL from parameter or environment.

    Args:
        base_url: Optional base URL to use directly

    Returns:
        Base URL without a trailing slash

    Example:
        ```python
        from netrum_monitor.helpers.config import get_api_base_url

        # Get from environment, falling back to the public API
        base_url = get_api_base_url()

        # Or provide explicitly
        base_url = get_api_base_url("http://localhost:9000")
        ```
    """
    if base_url:
        return base_url.rstrip("/")

    env_base_url = os.getenv("NETRUM_API_BASE_URL") or MINING_API_BASE_URL
    return env_base_url.rstrip("/")


def get_request_timeout() -> float:
    """Per-call timeout for outbound requests, in seconds."""
    return get_float_env("NETRUM_REQUEST_TIMEOUT", DEFAULT_TIMEOUT)


def get_sample_delay() -> float:
    """Delay between the two claim samples, in seconds."""
    return get_float_env("NETRUM_SAMPLE_DELAY", ACTIVITY_SAMPLE_DELAY)


def get_log_level() -> str:
    """Configured log level name, upper-cased."""
    return (get_optional_env("LOG_LEVEL") or "INFO").upper()


__all__ = [
    "get_api_base_url",
    "get_float_env",
    "get_log_level",
    "get_optional_env",
    "get_request_timeout",
    "get_sample_delay",
]
