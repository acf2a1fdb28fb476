"""Commit message model and rendering."""

import re
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator

# Allowed type tags, in the order the prompt lists them
COMMIT_TYPES = ("feat", "fix", "docs", "style", "refactor", "test", "chore")

# Title length limit, issue prefix included
MAX_TITLE_LENGTH = 50

TRAILER_PREFIX = "issue:"
NO_ISSUE = "none"

_TITLE_PATTERN = re.compile(
    r"^(?:\[(?P<issue>[^\]]*)\]\s*)?(?P<type>[a-z]+)(?:\([^)]*\))?!?:\s*\S"
)
_ISSUE_PREFIX_PATTERN = re.compile(r"^\[[^\]]*\]\s*")


class GeneratedMessage(BaseModel):
    """A commit message ready to be written to the commit-message file.

    Attributes:
        title: The first line, issue prefix included when there is one.
        body: One to three sentences describing the change.
        issue: The issue ID taken from the branch name, or None.
        change_type: The type tag of the title, when it has a recognized one.
    """

    model_config = ConfigDict(frozen=True)

    title: str
    body: str = ""
    issue: Optional[str] = None
    change_type: Optional[str] = None

    @field_validator("title")
    @classmethod
    def title_must_not_be_empty(cls, v: str) -> str:
        """Ensure title is a single non-empty line."""
        if not v or not v.strip():
            raise ValueError("Title cannot be empty")
        return v.strip().split("\n")[0].strip()

    @field_validator("body")
    @classmethod
    def strip_body(cls, v: str) -> str:
        return v.strip()

    @field_validator("change_type")
    @classmethod
    def change_type_must_be_known(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and v not in COMMIT_TYPES:
            raise ValueError(f"Unknown commit type: {v}")
        return v

    @property
    def trailer(self) -> str:
        return f"{TRAILER_PREFIX} {self.issue or NO_ISSUE}"


def format_title(change_type: str, summary: str, issue: Optional[str]) -> str:
    """Build a ``[ISSUE] type: summary`` title, without the prefix if no issue."""
    if issue:
        return f"[{issue}] {change_type}: {summary}"
    return f"{change_type}: {summary}"


def parse_change_type(title: str) -> Optional[str]:
    """Return the type tag of a title if it is one of COMMIT_TYPES."""
    match = _TITLE_PATTERN.match(title.strip())
    if match and match.group("type") in COMMIT_TYPES:
        return match.group("type")
    return None


def ensure_issue_prefix(title: str, issue: Optional[str]) -> str:
    """Make the title carry exactly the branch issue prefix.

    A missing or different ``[KEY-1]`` prefix is replaced by ``[issue]``.
    Without an issue, an empty ``[]`` prefix is dropped.
    """
    title = title.strip()
    if issue:
        summary = _ISSUE_PREFIX_PATTERN.sub("", title, count=1)
        return f"[{issue}] {summary}"
    if title.startswith("[]"):
        return title[2:].strip()
    return title


def _is_trailer_line(line: str) -> bool:
    return line.strip().lower().startswith(TRAILER_PREFIX)


def message_from_text(text: str, issue: Optional[str]) -> GeneratedMessage:
    """Build a GeneratedMessage from free-form model output.

    The first non-blank line becomes the title and the remaining lines the
    body. The title gets the ``[issue]`` prefix when it lacks it, and any
    ``issue:`` lines are dropped; prefix and trailer always follow the issue
    extracted from the branch name.

    Args:
        text: The text returned by the model.
        issue: The issue ID extracted from the branch name.

    Returns:
        The parsed GeneratedMessage.

    Raises:
        ValueError: If the text has no title line.
    """
    lines = [line.rstrip() for line in text.strip().splitlines() if not _is_trailer_line(line)]

    # Leading blank lines left behind by dropped trailers
    while lines and not lines[0].strip():
        lines.pop(0)
    if not lines:
        raise ValueError("Message text has no title line")

    title = ensure_issue_prefix(lines[0], issue)
    body = "\n".join(lines[1:])

    return GeneratedMessage(
        title=title,
        body=body,
        issue=issue,
        change_type=parse_change_type(title),
    )


def render_commit_message(message: GeneratedMessage) -> str:
    """Render a GeneratedMessage into the text written to the commit file.

    Example output:
        [CAM-1] feat: update 3 files

        Implement new features and functionality. Modified 3 files with 10 additions and 2 deletions.

        issue: CAM-1
    """
    parts = [message.title]
    if message.body:
        parts.append(message.body)
    parts.append(message.trailer)
    return "\n\n".join(parts)
