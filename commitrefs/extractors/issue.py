"""Issue-ID extractor: JIRA-style keys in the branch name."""

import re
from typing import Optional

from commitrefs.extractors.constants import (
    DEFAULT_ISSUE_PATTERN,
    JIRA_ISSUE_LABEL,
    JIRA_ISSUES_LABEL,
)


def find_issue_ids(branch: str, pattern: str = DEFAULT_ISSUE_PATTERN) -> list[str]:
    """Find every issue key in a branch name.

    Args:
        branch: The branch name.
        pattern: Regex for a single issue key.

    Returns:
        Non-empty, non-overlapping matches in order of appearance.
    """
    return [match.group(0) for match in re.finditer(pattern, branch) if match.group(0)]


def extract_jira_issues(
    branch: str,
    clipboard: str,
    pattern: str = DEFAULT_ISSUE_PATTERN,
) -> Optional[str]:
    """Build the issue reference for a branch.

    Examples:
        "ABC-9" -> "JIRA Issue: ABC-9"
        "feature/ABC-123-and-XYZ-45" -> "JIRA Issues: ABC-123, XYZ-45"

    Args:
        branch: The branch name.
        clipboard: Clipboard text (unused).
        pattern: Regex for a single issue key.

    Returns:
        The reference line, or None if the branch names no issue.
    """
    issue_ids = find_issue_ids(branch, pattern)
    if not issue_ids:
        return None
    if len(issue_ids) == 1:
        return f"{JIRA_ISSUE_LABEL}: {issue_ids[0]}"
    return f"{JIRA_ISSUES_LABEL}: {', '.join(issue_ids)}"
