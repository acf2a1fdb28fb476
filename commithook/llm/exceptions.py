"""LLM-related exception classes.

Contains all exception classes for the API path:
- LLMError: Base exception for LLM-related errors
- MissingAPIKeyError: Raised when no API key is configured
- TransportError: Raised when the request fails or times out
- InvalidResponseError: Raised when the response carries no usable message
"""


class LLMError(Exception):
    """Base exception for LLM-related errors."""

    pass


class MissingAPIKeyError(LLMError):
    """Raised when the required API key is not set."""

    pass


class TransportError(LLMError):
    """Raised when the API request fails, times out or cannot be decoded."""

    pass


class InvalidResponseError(LLMError):
    """Raised when the API answered but the answer is not a usable message."""

    pass
