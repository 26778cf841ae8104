"""Hosted-story extractor: story IDs in `x/<name>/#<id>` branch names."""

from typing import Optional

from commitrefs.extractors.constants import (
    DEFAULT_STORY_URL_TEMPLATE,
    STORY_BRANCH_PATTERN,
    STORY_LABEL,
)


def extract_story_url(
    branch: str,
    clipboard: str,
    url_template: str = DEFAULT_STORY_URL_TEMPLATE,
) -> Optional[str]:
    """Build the story reference for a branch.

    Only the numeric ID is used; the middle segment of the branch is ignored.

    Args:
        branch: The branch name, e.g. "b/my-feature/#4821".
        clipboard: Clipboard text (unused).
        url_template: URL template with a {story_id} placeholder.

    Returns:
        The reference line, or None if the branch does not match.
    """
    match = STORY_BRANCH_PATTERN.fullmatch(branch)
    if not match:
        return None
    url = url_template.format(story_id=match.group("story_id"))
    return f"{STORY_LABEL}: {url}"
