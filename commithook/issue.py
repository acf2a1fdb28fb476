"""Issue ID extraction from branch names.

Branches like ``feature/CAM-421-test`` or ``TRIGB2B-42141-fix`` carry a
ticket key. The whole branch name is scanned, so path prefixes such as
``feature/`` need no special handling.
"""

import re
from typing import Optional

# Uppercase project key, hyphen, number (e.g. CAM-942, TRIGB2B-42141)
ISSUE_PATTERN = re.compile(r"[A-Z][A-Z0-9]*-[0-9]+")


def extract_issue(branch_name: Optional[str]) -> Optional[str]:
    """Return the first issue ID found in the branch name.

    Args:
        branch_name: The current branch name.

    Returns:
        The first match, or None if the branch name has no issue ID.
    """
    if not branch_name:
        return None

    match = ISSUE_PATTERN.search(branch_name)
    return match.group(0) if match else None
