"""Commit message composition for commitrefs.

Contains:
- build_template: Render the message and the refs: block
- template_file: Scoped temporary file holding a commit template
- commit_with_references: Pick the commit mode and run git commit
- annotate_message_file: Add the refs: block to an existing message file
"""

import os
import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional

from commitrefs.git import CommitTemplateError, build_commit_command, run_commit

REFS_HEADER = "refs:"
TEMPLATE_PREFIX = "commitrefs-"
TEMPLATE_SUFFIX = ".txt"


def build_template(references: list[str], message: Optional[str] = None) -> str:
    """Build the commit template text.

    Format:
        <message>

        refs:

        * <reference>
        * <reference>

    Args:
        references: Reference lines, in order.
        message: Optional user message placed above the refs block.

    Returns:
        The template text, ending with a newline.
    """
    parts = []
    if message:
        parts.append(f"{message}\n\n")
    parts.append(f"{REFS_HEADER}\n\n")
    parts.extend(f"* {reference}\n" for reference in references)
    return "".join(parts)


@contextmanager
def template_file(content: str) -> Iterator[Path]:
    """Write content to a fresh temporary file and remove it on exit.

    The file is removed whether the body returns, raises or is interrupted.

    Args:
        content: Template text to write.

    Yields:
        Path to the temporary file.

    Raises:
        CommitTemplateError: If the file cannot be created or written.
    """
    try:
        fd, name = tempfile.mkstemp(prefix=TEMPLATE_PREFIX, suffix=TEMPLATE_SUFFIX)
    except OSError as e:
        raise CommitTemplateError(f"Could not create commit template: {e}")

    path = Path(name)
    try:
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(content)
        except OSError as e:
            raise CommitTemplateError(f"Could not write commit template {path}: {e}")
        yield path
    finally:
        path.unlink(missing_ok=True)


def commit_with_references(
    references: list[str],
    message: Optional[str],
    passthrough: list[str],
) -> int:
    """Commit with the references merged into the message.

    Modes:
    - no references: git commit [-m <message>], no template
    - references and a message: git commit -F <template>
    - references, no message: git commit -t <template> (opens the editor)

    Args:
        references: Reference lines from the extractors.
        message: Literal message from -m/--message, or None.
        passthrough: Arguments forwarded to git commit.

    Returns:
        The exit code of git commit.

    Raises:
        CommitTemplateError: If the template cannot be written; git is not run.
        GitError: If git cannot be executed.
    """
    if not references:
        return run_commit(build_commit_command(passthrough, message=message))

    content = build_template(references, message)
    with template_file(content) as path:
        return run_commit(build_commit_command(passthrough, message=message, template=path))


def _has_refs_block(text: str) -> bool:
    """Check whether a message already contains a refs: line."""
    return any(line.strip() == REFS_HEADER for line in text.splitlines())


def _is_scissors_line(line: str) -> bool:
    """Check for git's "# --- >8 ---" cut line (commit -v / cleanup=scissors)."""
    return line.startswith("#") and ">8" in line


def _comment_section_start(lines: list[str]) -> int:
    """Find where git's trailing comment section begins.

    The section is the trailing run of '#' lines (blank lines allowed
    between them), plus everything from a scissors line on. A '#' line
    followed by message text is part of the message.

    Returns:
        Index of the first comment line, or len(lines) if there is none.
    """
    end = len(lines)
    for i, line in enumerate(lines):
        if _is_scissors_line(line):
            end = i
            break

    start = end
    while start > 0 and (lines[start - 1].startswith("#") or not lines[start - 1].strip()):
        start -= 1
    # Leading blank lines belong to neither section
    while start < end and not lines[start].strip():
        start += 1
    return start


def insert_references(text: str, references: list[str], split_comments: bool = True) -> str:
    """Insert the refs block into an existing commit message.

    The block goes after the message text and before git's trailing
    comment section.

    Args:
        text: Current contents of the commit message file.
        references: Reference lines to add.
        split_comments: Look for git's comment section. Off for messages
            given with -m, which git writes without comments.

    Returns:
        The updated message. Unchanged if there are no references or a
        refs: block is already present.
    """
    if not references or _has_refs_block(text):
        return text

    lines = text.splitlines()
    split_at = _comment_section_start(lines) if split_comments else len(lines)

    body = "\n".join(lines[:split_at]).strip()
    comments = "\n".join(lines[split_at:])

    annotated = build_template(references, body or None)
    if comments:
        annotated += "\n" + comments + "\n"
    return annotated


def annotate_message_file(path: Path, references: list[str], split_comments: bool = True) -> bool:
    """Add the refs block to a commit message file in place.

    Args:
        path: Commit message file (as passed to prepare-commit-msg).
        references: Reference lines to add.
        split_comments: Passed to insert_references.

    Returns:
        True if the file was changed.
    """
    text = path.read_text(encoding="utf-8")
    updated = insert_references(text, references, split_comments)
    if updated == text:
        return False
    path.write_text(updated, encoding="utf-8")
    return True
