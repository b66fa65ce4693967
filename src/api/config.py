"""Reference backend configuration with environment variable loading."""

import os

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field

load_dotenv()


class ServerConfig(BaseModel):
    """Configuration for the reference chat backend.

    Attributes:
        echo_delay: Pause between streamed pieces, in seconds.
        echo_prefix: Text sent before the echoed message.
    """

    model_config = ConfigDict(validate_default=True)

    echo_delay: float = Field(
        default_factory=lambda: float(os.getenv("ECHO_DELAY", "0.05")),
        ge=0.0,
        le=10.0,
        description="Seconds to wait between streamed pieces",
    )
    echo_prefix: str = Field(
        default_factory=lambda: os.getenv("ECHO_PREFIX", ""),
        description="Text sent before the echoed message",
    )


def get_server_config() -> ServerConfig:
    """Create server configuration from environment."""
    return ServerConfig()
