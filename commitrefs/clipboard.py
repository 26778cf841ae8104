"""Clipboard access for commitrefs.

Reading the clipboard never fails: a missing utility, a non-zero exit or a
timeout all read as an empty clipboard.
"""

import shutil
import subprocess
from typing import Optional

# Tried in order when no clipboard command is configured
CLIPBOARD_COMMANDS = [
    ["xclip", "-selection", "clipboard", "-o"],
    ["xsel", "--clipboard", "--output"],
    ["wl-paste", "--no-newline"],
    ["pbpaste"],
]


def find_clipboard_command() -> Optional[list[str]]:
    """Find an installed clipboard reader.

    Returns:
        The command parts of the first available utility, or None.
    """
    for cmd in CLIPBOARD_COMMANDS:
        # noinspection PyArgumentList
        if shutil.which(cmd[0]):
            return list(cmd)
    return None


def read_clipboard(command: Optional[list[str]] = None, timeout: float = 2.0) -> str:
    """Read the current clipboard text.

    Args:
        command: Clipboard command to run, or None to auto-detect.
        timeout: Seconds to wait before giving up.

    Returns:
        The clipboard contents, or an empty string if unavailable.
    """
    cmd = command or find_clipboard_command()
    if not cmd:
        return ""

    try:
        result = subprocess.run(
            cmd,
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",
            check=False,
            timeout=timeout,
        )
    except (OSError, subprocess.TimeoutExpired):
        return ""

    if result.returncode != 0:
        return ""
    return result.stdout
