"""Server configuration"""

import logging
import re
from dataclasses import dataclass
from pathlib import Path

from pydantic_settings import BaseSettings

from .core.llm.nvidia import DEFAULT_ENDPOINT

logger = logging.getLogger(__name__)

_API_KEY_LINE = re.compile(r"api\s*key", re.IGNORECASE)
_URL_LINE = re.compile(r"^https?://", re.IGNORECASE)


class Settings(BaseSettings):
    log_level: str = "INFO"
    port: int = 8787

    # NVIDIA chat-completions settings
    nvidia_api_endpoint: str = DEFAULT_ENDPOINT
    nvidia_api_key: str = ""
    # Plain-text secret file used when the key is not in the environment.
    # A relative path is resolved against the current working directory.
    kpi_env_path: str = "KPI.env"

    request_timeout_seconds: float = 60.0
    fallback_reason_max_chars: int = 300

    class Config:
        env_file = ".env"
        extra = "ignore"


settings = Settings()


@dataclass(frozen=True)
class RemoteConfig:
    """Endpoint and credentials for the remote optimizer."""

    endpoint: str
    api_key: str

    @property
    def masked_key(self) -> str:
        visible = min(8, len(self.api_key) // 2)
        return f"{self.api_key[:visible]}..."


def parse_kpi_env(text: str) -> tuple[str | None, str | None]:
    """
    Parse a KPI.env secret file.

    Expected lines (in any order, blank lines ignored):
        https://integrate.api.nvidia.com/v1/chat/completions
        nvidia API Key: nvapi-xxxx

    Returns:
        (endpoint, api_key); either may be None when not found
    """
    lines = [line.strip() for line in text.splitlines()]
    lines = [line for line in lines if line]

    endpoint = next((line for line in lines if _URL_LINE.match(line)), None)
    key_line = next((line for line in lines if _API_KEY_LINE.search(line)), None)

    api_key = None
    if key_line and ":" in key_line:
        api_key = key_line.split(":", 1)[1].strip() or None

    return endpoint, api_key


def get_remote_config(config: Settings | None = None) -> RemoteConfig | None:
    """
    Resolve remote optimizer credentials.

    Priority 1: NVIDIA_API_KEY / NVIDIA_API_ENDPOINT from the environment
    Priority 2: the KPI.env secret file

    Returns:
        RemoteConfig, or None when no API key is available
    """
    config = config or settings

    if config.nvidia_api_key.strip():
        return RemoteConfig(
            endpoint=config.nvidia_api_endpoint,
            api_key=config.nvidia_api_key.strip(),
        )

    kpi_path = Path(config.kpi_env_path)
    if not kpi_path.is_file():
        return None

    endpoint, api_key = parse_kpi_env(kpi_path.read_text(encoding="utf-8"))
    if not api_key:
        logger.warning(f"{kpi_path} does not contain an NVIDIA API key")
        return None

    return RemoteConfig(endpoint=endpoint or config.nvidia_api_endpoint, api_key=api_key)


def get_settings() -> Settings:
    """Get the Settings instance (dependency injection for FastAPI)"""
    return settings
