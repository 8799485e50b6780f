from dataclasses import dataclass
from typing import Optional
import os
from dotenv import load_dotenv

from src.constants import DEFAULT_HOST, DEFAULT_PORT


@dataclass(frozen=True)
class Config:
    anthropic_api_key: Optional[str]
    openai_api_key: Optional[str]
    log_level: str
    host: str
    port: int

    @classmethod
    def from_env(cls) -> "Config":
        load_dotenv()

        anthropic_api_key = os.getenv("ANTHROPIC_API_KEY") or None
        openai_api_key = os.getenv("OPENAI_API_KEY") or None
        log_level = os.getenv("LOG_LEVEL", "INFO")
        host = os.getenv("HOST", DEFAULT_HOST)
        raw_port = os.getenv("PORT", DEFAULT_PORT)

        return cls._validate(
            anthropic_api_key=anthropic_api_key,
            openai_api_key=openai_api_key,
            log_level=log_level,
            host=host,
            raw_port=raw_port,
        )

    @property
    def has_vision_credentials(self) -> bool:
        return bool(self.anthropic_api_key or self.openai_api_key)

    @staticmethod
    def _validate(
        anthropic_api_key: Optional[str],
        openai_api_key: Optional[str],
        log_level: str,
        host: str,
        raw_port: str,
    ) -> "Config":
        match host.strip():
            case "":
                raise ValueError("HOST must not be empty")
            case _:
                pass

        try:
            port = int(raw_port)
        except ValueError:
            raise ValueError(f"PORT must be an integer, got {raw_port!r}") from None

        match port:
            case p if 0 < p < 65536:
                pass
            case _:
                raise ValueError(f"PORT must be between 1 and 65535, got {port}")

        return Config(
            anthropic_api_key=anthropic_api_key,
            openai_api_key=openai_api_key,
            log_level=log_level,
            host=host.strip(),
            port=port,
        )
