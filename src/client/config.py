"""Client configuration with environment variable loading.

Pydantic-based configuration for reaching the streaming chat backend.
"""

import os

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator

# Load environment variables from .env file
load_dotenv()


class ClientConfig(BaseModel):
    """Configuration for the chat transport.

    Attributes:
        api_base_url: Base URL of the chat backend.
        chat_path: Path of the streaming chat endpoint.
        timeout: Request timeout in seconds, applied to connect and each read.
    """

    model_config = ConfigDict(validate_default=True)

    api_base_url: str = Field(
        default_factory=lambda: os.getenv("API_BASE_URL", "http://localhost:8000"),
        description="Base URL of the chat backend",
    )
    chat_path: str = Field(
        default_factory=lambda: os.getenv("CHAT_PATH", "/chat"),
        description="Path of the streaming chat endpoint",
    )
    timeout: float = Field(
        default_factory=lambda: float(os.getenv("CHAT_TIMEOUT", "120")),
        gt=0.0,
        description="Request timeout in seconds",
    )

    @field_validator("api_base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """Require an http(s) URL and drop any trailing slash."""
        v = v.strip()
        if not v.startswith(("http://", "https://")):
            raise ValueError("API_BASE_URL must start with http:// or https://")
        return v.rstrip("/")

    @field_validator("chat_path")
    @classmethod
    def validate_chat_path(cls, v: str) -> str:
        """Ensure the path is absolute."""
        v = v.strip()
        return v if v.startswith("/") else f"/{v}"

    @property
    def chat_url(self) -> str:
        return f"{self.api_base_url}{self.chat_path}"


def get_client_config() -> ClientConfig:
    """Create client configuration from environment.

    Returns:
        Configured ClientConfig instance.

    Raises:
        ValueError: If API_BASE_URL is not an http(s) URL.
    """
    return ClientConfig()
