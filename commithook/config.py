"""Configuration for the commithook generator.

Defaults live here as module constants. User overrides are read from
~/.commithook/config.yaml; use 'commithook config' commands to modify them.
"""

import os
from typing import Mapping, Optional

from pydantic import BaseModel, ConfigDict, field_validator

from commithook import global_config


# ============================================================
# DEFAULT VALUES
# ============================================================

DEFAULT_API_BASE_URL = "https://api.anthropic.com"
DEFAULT_API_VERSION = "2023-06-01"
DEFAULT_MODEL = "claude-sonnet-4-20250514"
DEFAULT_MAX_TOKENS = 300
DEFAULT_TIMEOUT = 30.0

# Checked in order; the first one that is set wins
API_KEY_ENV_VARS = ("CLAUDE_API_KEY", "ANTHROPIC_API_KEY")

# Literal answer the hook treats as a failed generation
INVALID_RESPONSE_SENTINEL = "Error: Invalid API response"

# Keys of config.yaml that map onto HookConfig fields
CONFIGURABLE_KEYS = (
    "api_base_url",
    "model",
    "max_tokens",
    "timeout",
    "require_api_key",
)


class HookConfig(BaseModel):
    """Settings for one hook invocation.

    Attributes:
        api_key: The Anthropic API key, or None when not configured.
        api_base_url: Base URL of the Messages API.
        api_version: Value sent in the anthropic-version header.
        model: Model identifier sent with the request.
        max_tokens: Token budget for the generated message.
        timeout: Request timeout in seconds.
        require_api_key: Abort the commit instead of falling back when no key is set.
    """

    model_config = ConfigDict(frozen=True)

    api_key: Optional[str] = None
    api_base_url: str = DEFAULT_API_BASE_URL
    api_version: str = DEFAULT_API_VERSION
    model: str = DEFAULT_MODEL
    max_tokens: int = DEFAULT_MAX_TOKENS
    timeout: float = DEFAULT_TIMEOUT
    require_api_key: bool = False

    @field_validator("api_key")
    @classmethod
    def blank_key_is_missing(cls, v: Optional[str]) -> Optional[str]:
        """Treat an empty or whitespace key as not configured."""
        if v is None or not v.strip():
            return None
        return v.strip()

    @field_validator("max_tokens")
    @classmethod
    def max_tokens_must_be_positive(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("max_tokens must be positive")
        return v

    @field_validator("timeout")
    @classmethod
    def timeout_must_be_positive(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("timeout must be positive")
        return v

    @property
    def has_api_key(self) -> bool:
        return self.api_key is not None


def resolve_api_key(environ: Optional[Mapping[str, str]] = None) -> Optional[str]:
    """Find the API key in the environment or the credentials file.

    Args:
        environ: Environment mapping to read. Defaults to os.environ.

    Returns:
        The API key, or None if it is not configured anywhere.
    """
    environ = os.environ if environ is None else environ

    for env_var in API_KEY_ENV_VARS:
        api_key = environ.get(env_var)
        if api_key and api_key.strip():
            return api_key

    for env_var in API_KEY_ENV_VARS:
        api_key = global_config.get_credential(env_var)
        if api_key:
            return api_key

    return None


def load_config(environ: Optional[Mapping[str, str]] = None, **overrides) -> HookConfig:
    """Build the HookConfig for this invocation.

    Precedence (lowest to highest): built-in defaults, ~/.commithook/config.yaml,
    keyword overrides. Overrides whose value is None are ignored.

    Args:
        environ: Environment mapping used to look up the API key.
        **overrides: Explicit field values, e.g. from CLI options.

    Returns:
        A validated HookConfig.

    Raises:
        GlobalConfigError: If config.yaml or the credentials file cannot be read.
        pydantic.ValidationError: If a configured value is invalid.
    """
    settings = {
        key: value
        for key, value in global_config.load_global_config().items()
        if key in CONFIGURABLE_KEYS
    }
    settings["api_key"] = resolve_api_key(environ)
    settings.update({k: v for k, v in overrides.items() if v is not None})

    return HookConfig(**settings)
