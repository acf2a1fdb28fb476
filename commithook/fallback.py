"""Heuristic commit message used when the API cannot provide one.

The change type is picked by an ordered rule list; the first rule whose
predicate matches wins, so the list order is the priority order
(docs, then test, then refactor, then feat).
"""

from typing import Callable, NamedTuple, Optional

from commithook.diffstat import DiffStats, analyze_diff
from commithook.formatters import GeneratedMessage, format_title

DOC_SUFFIXES = (".md", ".txt")
DOC_MARKER = "README"
TEST_MARKERS = ("test", "spec")


class FallbackRule(NamedTuple):
    """A predicate over diff stats and the type it selects."""

    name: str
    matches: Callable[[DiffStats], bool]
    change_type: str
    description: str


def touches_docs(stats: DiffStats) -> bool:
    return any(path.endswith(DOC_SUFFIXES) or DOC_MARKER in path for path in stats.paths)


def touches_tests(stats: DiffStats) -> bool:
    return any(marker in path for path in stats.paths for marker in TEST_MARKERS)


def removes_more_than_adds(stats: DiffStats) -> bool:
    return stats.deletions > stats.additions


FALLBACK_RULES: tuple[FallbackRule, ...] = (
    FallbackRule("docs", touches_docs, "docs", "Update documentation files"),
    FallbackRule("test", touches_tests, "test", "Update test files and specifications"),
    FallbackRule(
        "refactor",
        removes_more_than_adds,
        "refactor",
        "Refactor code and remove unused elements",
    ),
)

DEFAULT_RULE = FallbackRule(
    "feat", lambda stats: True, "feat", "Implement new features and functionality"
)


def select_rule(stats: DiffStats) -> FallbackRule:
    """Return the first rule matching the diff, or DEFAULT_RULE."""
    for rule in FALLBACK_RULES:
        if rule.matches(stats):
            return rule
    return DEFAULT_RULE


def generate_fallback_message(diff: str, issue: Optional[str]) -> GeneratedMessage:
    """Build a commit message from diff statistics alone.

    Args:
        diff: Raw unified diff text.
        issue: The issue ID extracted from the branch name, or None.

    Returns:
        The heuristic GeneratedMessage. Same inputs always give the same message.
    """
    stats = analyze_diff(diff)
    rule = select_rule(stats)

    title = format_title(rule.change_type, f"update {stats.files_changed} files", issue)
    body = (
        f"{rule.description}. Modified {stats.files_changed} files with "
        f"{stats.additions} additions and {stats.deletions} deletions."
    )

    return GeneratedMessage(
        title=title,
        body=body,
        issue=issue,
        change_type=rule.change_type,
    )
