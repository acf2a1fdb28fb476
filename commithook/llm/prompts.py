"""Prompt construction for commit message generation."""

from typing import Optional

from commithook.formatters import COMMIT_TYPES, MAX_TITLE_LENGTH, NO_ISSUE

USER_PROMPT_TEMPLATE = """Analyze the following code changes and generate a concise and descriptive commit message.
The message should follow this EXACT format:

{title_format}

Detailed description of what changed and why.
Include technical details and impact.

issue: {issue_line}

Rules:
1. Valid types: {types}
2. Short title should be clear and specific (max {max_title} chars{prefix_note})
3. Description should be 1-3 sentences explaining the change
4. {prefix_rule}
5. Always include the issue line at the end
6. Do NOT include any other text or explanations

Changes to analyze:
```diff
{diff}
```"""


def build_user_prompt(diff: str, issue: Optional[str]) -> str:
    """Build the instruction sent to the model.

    Args:
        diff: The raw staged diff.
        issue: The issue ID extracted from the branch name, or None.

    Returns:
        The formatted user prompt.
    """
    if issue:
        title_format = f"[{issue}] type: short title"
        prefix_note = " including the issue prefix"
        prefix_rule = f"Always include the issue prefix [{issue}] in brackets at the start"
    else:
        title_format = "type: short title"
        prefix_note = ""
        prefix_rule = "There is no issue for this branch, so do not add an issue prefix"

    return USER_PROMPT_TEMPLATE.format(
        title_format=title_format,
        issue_line=issue or NO_ISSUE,
        types=", ".join(COMMIT_TYPES),
        max_title=MAX_TITLE_LENGTH,
        prefix_note=prefix_note,
        prefix_rule=prefix_rule,
        diff=diff,
    )
