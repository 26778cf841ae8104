"""Constants for the commitrefs extractors.

Contains:
- ExtractorKind: The closed set of reference extractors
- EXTRACTOR_ORDER: Registration order, which is also output order
- Patterns, URL template and reference labels
"""

import re
from enum import Enum


class ExtractorKind(Enum):
    """Available reference extractors."""

    JIRA = "jira"
    STORY = "story"
    MERGE_REQUEST = "merge_request"
    DISCUSSION = "discussion"


# References are emitted in this order
EXTRACTOR_ORDER = [
    ExtractorKind.JIRA,
    ExtractorKind.STORY,
    ExtractorKind.MERGE_REQUEST,
    ExtractorKind.DISCUSSION,
]

# Two or more uppercase letters, a hyphen, digits
DEFAULT_ISSUE_PATTERN = r"[A-Z]{2,}-\d+"

# <single-char>/<segment>/[#]<digits>, matched against the whole branch name
STORY_BRANCH_PATTERN = re.compile(r"./[^/]+/#?(?P<story_id>\d+)")

DEFAULT_STORY_URL_TEMPLATE = "https://www.pivotaltracker.com/n/stories/{story_id}"

# Host must carry "git" or "gitlab" as one of its dot-separated labels
MERGE_REQUEST_URL_PATTERN = re.compile(
    r"https?://"
    r"(?:[\w-]+\.)*git(?:lab)?(?:\.[\w-]+)*(?::\d+)?"
    r"/(?P<group>[^/\s#?]+)"
    r"/(?P<project>[^/\s#?]+)"
    r"(?:/-)?"
    r"/merge_requests/(?P<mr_id>\d+)"
    r"(?P<note>#note_\d+)?",
    re.IGNORECASE,
)

JIRA_ISSUE_LABEL = "JIRA Issue"
JIRA_ISSUES_LABEL = "JIRA Issues"
STORY_LABEL = "Story"
MERGE_REQUEST_LABEL = "GitLab Merge Request"
DISCUSSION_LABEL = "GitLab Discussion"
