"""Pydantic models for the Netrum mining API and the monitor page."""

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _amount_to_str(value: object) -> object:
    """Accept wei amounts sent as JSON numbers as well as strings."""
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    if isinstance(value, float):
        return str(int(value)) if value.is_integer() else repr(value)
    return value


def _is_blank(value: object) -> bool:
    """JSON values that count as "not sent": null, false, 0 and ""."""
    return value is None or value is False or value == 0 or value == ""


class NodeAddressRequest(BaseModel):
    """Request body shared by the live-log and claim endpoints."""

    node_address: str = Field(..., alias="nodeAddress")

    model_config = ConfigDict(populate_by_name=True)


class LiveInfo(BaseModel):
    """Live mining snapshot for a node."""

    mined_tokens: str | None = Field(
        default=None, description="Tokens available to claim, wei", alias="minedTokens"
    )
    speed_per_sec: str | None = Field(
        default=None, description="Mining speed per second, wei", alias="speedPerSec"
    )

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    @field_validator("mined_tokens", "speed_per_sec", mode="before")
    @classmethod
    def _coerce_amount(cls, value: object) -> object:
        if isinstance(value, bool):
            return str(int(value))
        value = _amount_to_str(value)
        # Display-only amounts: anything else renders as NaN
        if value is not None and not isinstance(value, str):
            return "NaN"
        return value


class LiveLogResponse(BaseModel):
    """Response from the live-log endpoint."""

    success: bool = False
    live_info: LiveInfo | None = Field(default=None, alias="liveInfo")
    error: str | None = None
    message: str | None = None

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    @field_validator("success", mode="before")
    @classmethod
    def _truthy_success(cls, value: object) -> bool:
        return bool(value)

    @field_validator("live_info", mode="before")
    @classmethod
    def _live_info_object(cls, value: object) -> object:
        # A present but non-object payload carries no amounts; both read as zero
        if isinstance(value, dict):
            return value
        return None if _is_blank(value) else {}

    @field_validator("error", "message", mode="before")
    @classmethod
    def _stringify(cls, value: object) -> str | None:
        if value is None or isinstance(value, str):
            return value
        return str(value)

    @property
    def error_text(self) -> str:
        """Upstream error description, falling back to the message field."""
        return self.error or self.message or "Unknown error"


class ClaimData(BaseModel):
    """Claim details for a node."""

    mined_tokens: str | None = Field(default=None, alias="minedTokens")

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    @field_validator("mined_tokens", mode="before")
    @classmethod
    def _coerce_amount(cls, value: object) -> object:
        return _amount_to_str(value)


class ClaimResponse(BaseModel):
    """Response from the claim endpoint."""

    claim_data: ClaimData | None = Field(default=None, alias="claimData")

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    @field_validator("claim_data", mode="before")
    @classmethod
    def _claim_data_object(cls, value: object) -> object:
        return value if isinstance(value, dict) else None

    @property
    def mined_tokens(self) -> str | None:
        """Cumulative mined tokens in wei, None when the upstream omits it."""
        return self.claim_data.mined_tokens if self.claim_data else None


class MonitorPage(BaseModel):
    """Everything the HTML page needs to render one response."""

    live_status: str = ""
    mining_active: bool | None = None
    address: str = ""

    @property
    def has_status(self) -> bool:
        return bool(self.live_status) or self.mining_active is not None


__all__ = [
    "ClaimData",
    "ClaimResponse",
    "LiveInfo",
    "LiveLogResponse",
    "MonitorPage",
    "NodeAddressRequest",
]
