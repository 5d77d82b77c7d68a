from enum import Enum
from functools import lru_cache

from pydantic import Field
from pydantic_settings import SettingsConfigDict, BaseSettings

DEMO_HUB_ADDRESS = "http://styx.fibaro.com:7777"


class CursorPolicy(str, Enum):
    """How the refresh loop picks the cursor for its next request."""

    # Keep sending the cursor obtained when streaming started.
    REPLAY = "replay"
    # Follow the ``last`` value the hub returns with each change-set.
    ADVANCE = "advance"


class ClientSettings(BaseSettings):
    hub_address: str = Field(DEMO_HUB_ADDRESS, validation_alias="HCLINK_HUB_ADDRESS")

    # Upper bound for every single gateway call, long-poll included.
    request_timeout: float = Field(30.0, validation_alias="HCLINK_REQUEST_TIMEOUT")
    poll_interval: float = Field(1.0, validation_alias="HCLINK_POLL_INTERVAL")
    retry_delay: float = Field(0.0, validation_alias="HCLINK_RETRY_DELAY")
    cursor_policy: CursorPolicy = Field(CursorPolicy.REPLAY, validation_alias="HCLINK_CURSOR_POLICY")

    log_level: str = Field("INFO", validation_alias="HCLINK_LOG_LEVEL")
    log_ring_size: int = Field(200, validation_alias="HCLINK_LOG_RING_SIZE")
    event_queue_size: int = Field(100, validation_alias="HCLINK_EVENT_QUEUE_SIZE")
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", populate_by_name=True, extra="ignore")


@lru_cache
def get_settings() -> ClientSettings:
    return ClientSettings()
