"""Commit message generation: API attempt with heuristic fallback.

Flow for one commit:

    diff, branch -> issue -> API attempt -> Accepted | Rejected
                                              |          |
                                              |      fallback
                                              v          v
                                           GenerationResult

Every failure on the API path ends as Rejected and is answered with the
fallback message. Only an empty diff stops generation.
"""

from dataclasses import dataclass
from typing import Optional, Union

from commithook.config import HookConfig
from commithook.fallback import generate_fallback_message
from commithook.formatters import GeneratedMessage, message_from_text
from commithook.git.exceptions import EmptyDiffError
from commithook.issue import extract_issue
from commithook.llm import AnthropicProvider, LLMError, build_user_prompt


@dataclass(frozen=True)
class Accepted:
    """The API produced a usable message."""

    message: GeneratedMessage


@dataclass(frozen=True)
class Rejected:
    """The API path failed; reason says why."""

    reason: str


ApiOutcome = Union[Accepted, Rejected]


@dataclass(frozen=True)
class GenerationResult:
    """The final message for a commit and how it was obtained."""

    message: GeneratedMessage
    issue: Optional[str]
    used_fallback: bool
    rejection_reason: Optional[str] = None


def request_api_message(
    diff: str,
    issue: Optional[str],
    provider: AnthropicProvider,
) -> ApiOutcome:
    """Ask the model for a commit message.

    Args:
        diff: The staged diff.
        issue: The extracted issue ID, or None.
        provider: The provider that sends the request.

    Returns:
        Accepted with the parsed message, or Rejected with the failure reason.
    """
    prompt = build_user_prompt(diff, issue)

    try:
        text = provider.generate(prompt)
        return Accepted(message_from_text(text, issue))
    except LLMError as e:
        return Rejected(str(e))
    except ValueError as e:
        # Text came back but could not be turned into a message
        return Rejected(f"Unusable response text: {e}")


def generate_message(
    diff: str,
    branch_name: Optional[str],
    config: HookConfig,
    provider: Optional[AnthropicProvider] = None,
) -> GenerationResult:
    """Generate the commit message for a staged diff.

    Args:
        diff: The staged diff in unified diff format.
        branch_name: The current branch name, scanned for an issue ID.
        config: Settings for the API request.
        provider: Provider to use instead of one built from config.

    Returns:
        A GenerationResult; its message is the API answer when one was
        accepted, otherwise the heuristic fallback.

    Raises:
        EmptyDiffError: If there is nothing to commit.
    """
    if not diff or not diff.strip():
        raise EmptyDiffError("No staged changes for commit")

    issue = extract_issue(branch_name)
    provider = provider or AnthropicProvider(config)

    outcome = request_api_message(diff, issue, provider)
    if isinstance(outcome, Accepted):
        return GenerationResult(message=outcome.message, issue=issue, used_fallback=False)

    return GenerationResult(
        message=generate_fallback_message(diff, issue),
        issue=issue,
        used_fallback=True,
        rejection_reason=outcome.reason,
    )
