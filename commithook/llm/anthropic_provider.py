"""Anthropic Claude provider implementation."""

from anthropic import Anthropic

from commithook.config import API_KEY_ENV_VARS, INVALID_RESPONSE_SENTINEL, HookConfig
from commithook.llm.exceptions import (
    InvalidResponseError,
    MissingAPIKeyError,
    TransportError,
)


def extract_text(message) -> str:
    """Return the first text content block of a Messages API response.

    Args:
        message: The response object returned by ``client.messages.create``.

    Returns:
        The stripped text of the first text block.

    Raises:
        InvalidResponseError: If the response is a structured error, has no
            text block, the text is empty, or it is the invalid-response sentinel.
    """
    if getattr(message, "type", None) == "error":
        error = getattr(message, "error", None)
        raise InvalidResponseError(f"API returned an error: {error}")

    text = None
    for block in getattr(message, "content", None) or []:
        if getattr(block, "type", None) == "text":
            text = block.text
            break

    if text is None:
        raise InvalidResponseError("Response has no text content")

    text = text.strip()
    if not text:
        raise InvalidResponseError("Response text is empty")
    if text == INVALID_RESPONSE_SENTINEL:
        raise InvalidResponseError("Response is the invalid-response sentinel")

    return text


class AnthropicProvider:
    """Anthropic Claude LLM provider."""

    def __init__(self, config: HookConfig):
        """Initialize the Anthropic provider.

        Args:
            config: Endpoint, model, token budget, timeout and API key.
        """
        self.config = config

    @property
    def model(self) -> str:
        return self.config.model

    def get_api_key(self) -> str:
        """Get the API key from the config.

        Raises:
            MissingAPIKeyError: If no key was configured.
        """
        if not self.config.api_key:
            raise MissingAPIKeyError(
                f"{API_KEY_ENV_VARS[0]} is not configured. Set it using:\n"
                f"  1. Environment variable: export {API_KEY_ENV_VARS[0]}=your_key_here\n"
                f"  2. Run: commithook config set-key"
            )
        return self.config.api_key

    def _create_client(self, api_key: str) -> Anthropic:
        # Retries are disabled: a failed request falls back immediately
        return Anthropic(
            api_key=api_key,
            base_url=self.config.api_base_url,
            timeout=self.config.timeout,
            max_retries=0,
            default_headers={"anthropic-version": self.config.api_version},
        )

    def generate(self, prompt: str) -> str:
        """Send the prompt and return the model's commit message text.

        Args:
            prompt: The instruction built by build_user_prompt().

        Returns:
            The text of the first content block.

        Raises:
            MissingAPIKeyError: If the API key is not set. No request is made.
            TransportError: If the request fails, times out or cannot be decoded.
            InvalidResponseError: If the response holds no usable text.
        """
        api_key = self.get_api_key()

        client = self._create_client(api_key)

        try:
            message = client.messages.create(
                model=self.config.model,
                max_tokens=self.config.max_tokens,
                messages=[{"role": "user", "content": prompt}],
            )
        except Exception as e:
            raise TransportError(f"Anthropic API call failed: {e}") from e

        return extract_text(message)
