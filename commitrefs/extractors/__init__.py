"""Reference extractors for commitrefs.

Each extractor looks at the branch name and the clipboard text and returns
at most one reference line:
- jira: issue keys in the branch name (JIRA Issue: ABC-123)
- story: story ID from x/<name>/#<id> branch names (Story: <url>)
- merge_request: GitLab MR URL on the clipboard (GitLab Merge Request: g/p!42)
- discussion: GitLab MR comment URL on the clipboard (GitLab Discussion: <url>)
"""

from typing import Optional, TYPE_CHECKING

from commitrefs.extractors.constants import (
    DEFAULT_ISSUE_PATTERN,
    DEFAULT_STORY_URL_TEMPLATE,
    EXTRACTOR_ORDER,
    ExtractorKind,
)
from commitrefs.extractors.gitlab import (
    extract_discussion,
    extract_merge_request,
    match_merge_request_url,
)
from commitrefs.extractors.issue import extract_jira_issues, find_issue_ids
from commitrefs.extractors.story import extract_story_url

if TYPE_CHECKING:
    from commitrefs.config import RefsConfig


def run_extractor(
    kind: ExtractorKind,
    branch: str,
    clipboard: str,
    issue_pattern: str = DEFAULT_ISSUE_PATTERN,
    story_url_template: str = DEFAULT_STORY_URL_TEMPLATE,
) -> Optional[str]:
    """Run a single extractor.

    Args:
        kind: Which extractor to run.
        branch: The branch name.
        clipboard: The clipboard text.
        issue_pattern: Regex used by the jira extractor.
        story_url_template: URL template used by the story extractor.

    Returns:
        The reference line, or None.
    """
    if kind == ExtractorKind.JIRA:
        return extract_jira_issues(branch, clipboard, issue_pattern)
    elif kind == ExtractorKind.STORY:
        return extract_story_url(branch, clipboard, story_url_template)
    elif kind == ExtractorKind.MERGE_REQUEST:
        return extract_merge_request(branch, clipboard)
    else:  # DISCUSSION
        return extract_discussion(branch, clipboard)


def collect_references(
    branch: str,
    clipboard: str,
    config: Optional["RefsConfig"] = None,
) -> list[str]:
    """Run every enabled extractor and collect their references.

    Args:
        branch: The branch name (may be empty).
        clipboard: The clipboard text (may be empty).
        config: User configuration; defaults enable every extractor.

    Returns:
        Reference lines in extractor registration order. Not deduplicated.
    """
    branch = branch or ""
    clipboard = clipboard or ""

    references = []
    for kind in EXTRACTOR_ORDER:
        if config is not None and not config.is_enabled(kind):
            continue
        if config is not None:
            reference = run_extractor(
                kind,
                branch,
                clipboard,
                issue_pattern=config.issue_pattern,
                story_url_template=config.story_url_template,
            )
        else:
            reference = run_extractor(kind, branch, clipboard)
        if reference is not None:
            references.append(reference)
    return references


__all__ = [
    # Main functions
    "collect_references",
    "run_extractor",
    # Individual extractors
    "extract_jira_issues",
    "extract_story_url",
    "extract_merge_request",
    "extract_discussion",
    # Utilities
    "find_issue_ids",
    "match_merge_request_url",
    # Constants
    "ExtractorKind",
    "EXTRACTOR_ORDER",
    "DEFAULT_ISSUE_PATTERN",
    "DEFAULT_STORY_URL_TEMPLATE",
]
