"""GitLab extractors: merge requests and discussions from a copied URL."""

import re
from typing import Optional

from commitrefs.extractors.constants import (
    DISCUSSION_LABEL,
    MERGE_REQUEST_LABEL,
    MERGE_REQUEST_URL_PATTERN,
)


def match_merge_request_url(clipboard: str) -> Optional[re.Match]:
    """Find a GitLab merge request URL in the clipboard text.

    Args:
        clipboard: Clipboard text.

    Returns:
        The match, with group, project, mr_id and note groups, or None.
    """
    if not clipboard:
        return None
    return MERGE_REQUEST_URL_PATTERN.search(clipboard.strip())


def extract_merge_request(branch: str, clipboard: str) -> Optional[str]:
    """Build the merge request reference, e.g. "GitLab Merge Request: g/p!42".

    A trailing #note_<n> anchor does not change the result.
    """
    match = match_merge_request_url(clipboard)
    if not match:
        return None
    return f"{MERGE_REQUEST_LABEL}: {match.group('group')}/{match.group('project')}!{match.group('mr_id')}"


def extract_discussion(branch: str, clipboard: str) -> Optional[str]:
    """Build the discussion reference from a merge request comment URL.

    Only URLs carrying a #note_<n> anchor produce a reference.
    """
    match = match_merge_request_url(clipboard)
    if not match or not match.group("note"):
        return None
    return f"{DISCUSSION_LABEL}: {match.group(0)}"
