"""
Configuration module for loading environment variables and settings.

This module handles:
1. Loading API keys from .env.local / .env files
2. Setting default configurations
3. Validating required settings (lax; the OpenAI key is only enforced on request)
"""

import os
from dataclasses import dataclass
from typing import Optional
from dotenv import load_dotenv

# .env.local wins over .env; neither overrides the real environment
load_dotenv(".env.local")
load_dotenv()


def _optional_float(raw: Optional[str]) -> Optional[float]:
    if raw is None or not raw.strip():
        return None
    return float(raw)


@dataclass(frozen=True)
class Settings:
    """Immutable snapshot of Config handed to the composition layer."""
    api_key: str
    base_url: Optional[str]
    model: str
    temperature: Optional[float]
    max_steps: int
    mcp_url: str
    mcp_timeout: float
    runner_command: str
    runner_timeout: Optional[float]
    log_level: str


class Config:
    """Configuration manager for model, MCP and test-runner settings."""

    # OpenAI-compatible endpoint
    OPENAI_API_KEY: str = os.getenv('OPENAI_API_KEY', '')
    OPENAI_BASE_URL: str = os.getenv('OPENAI_BASE_URL', '')

    # Generation request
    PWT_AGENT_MODEL: str = os.getenv('PWT_AGENT_MODEL', 'gpt-4.1-mini')
    PWT_AGENT_TEMPERATURE: Optional[float] = _optional_float(os.getenv('PWT_AGENT_TEMPERATURE'))
    PWT_AGENT_MAX_STEPS: int = int(os.getenv('PWT_AGENT_MAX_STEPS', '10'))

    # Playwright MCP server (SSE transport)
    PWT_MCP_URL: str = os.getenv('PWT_MCP_URL', 'http://localhost:8931/sse')
    PWT_MCP_TIMEOUT: float = float(os.getenv('PWT_MCP_TIMEOUT', '5'))

    # Test runner, invoked as "<command> test <specFile>"
    PWT_RUNNER_COMMAND: str = os.getenv('PWT_RUNNER_COMMAND', 'npx playwright')
    PWT_RUNNER_TIMEOUT: Optional[float] = _optional_float(os.getenv('PWT_RUNNER_TIMEOUT'))

    PWT_LOG_LEVEL: str = os.getenv('PWT_LOG_LEVEL', 'INFO').upper()

    # Validation flags
    REQUIRE_OPENAI_KEY: bool = os.getenv('REQUIRE_OPENAI_KEY', 'false').lower() in ('1', 'true', 'yes')

    @classmethod
    def validate_api_keys(cls) -> None:
        """
        Optionally validate that required API keys are set.
        By default the key is not required so OpenAI-compatible local servers work.
        """
        if cls.REQUIRE_OPENAI_KEY and not cls.OPENAI_API_KEY:
            raise ValueError(
                "Missing required API key: OPENAI_API_KEY. "
                "Set it in .env.local or unset REQUIRE_OPENAI_KEY."
            )

    @classmethod
    def snapshot(cls) -> Settings:
        """Freeze the current class-level values into a Settings object."""
        return Settings(
            api_key=cls.OPENAI_API_KEY,
            base_url=cls.OPENAI_BASE_URL or None,
            model=cls.PWT_AGENT_MODEL,
            temperature=cls.PWT_AGENT_TEMPERATURE,
            max_steps=cls.PWT_AGENT_MAX_STEPS,
            mcp_url=cls.PWT_MCP_URL,
            mcp_timeout=cls.PWT_MCP_TIMEOUT,
            runner_command=cls.PWT_RUNNER_COMMAND,
            runner_timeout=cls.PWT_RUNNER_TIMEOUT,
            log_level=cls.PWT_LOG_LEVEL,
        )

# Lax validation on import (no exception by default)
Config.validate_api_keys()
