"""LLM module for commithook.

Wraps the single Anthropic Messages API call used to write commit messages.
Settings come from the HookConfig passed in by the caller.
"""

from dotenv import load_dotenv

from commithook.llm.anthropic_provider import AnthropicProvider, extract_text
from commithook.llm.exceptions import (
    InvalidResponseError,
    LLMError,
    MissingAPIKeyError,
    TransportError,
)
from commithook.llm.prompts import build_user_prompt

# Load environment variables from .env file
load_dotenv()


__all__ = [
    "AnthropicProvider",
    "InvalidResponseError",
    "LLMError",
    "MissingAPIKeyError",
    "TransportError",
    "build_user_prompt",
    "extract_text",
]
