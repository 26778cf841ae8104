"""Argument handling for the git commit wrapper.

The wrapper owns only -m/--message. Every other argument belongs to
git commit and is forwarded verbatim.
"""

from dataclasses import dataclass, field
from typing import Optional

MESSAGE_FLAGS = ("-m", "--message")
END_OF_OPTIONS = "--"


class ArgumentError(Exception):
    """Raised when the wrapper's own arguments are malformed."""

    pass


@dataclass
class CommitArgs:
    """Arguments split between the wrapper and git commit.

    Attributes:
        message: Message from -m/--message, or None if not given.
        passthrough: Arguments for git commit, in their original order.
    """

    message: Optional[str] = None
    passthrough: list[str] = field(default_factory=list)


def split_message_clusters(args: list[str]) -> list[str]:
    """Split short-flag clusters that contain the message flag.

    A cluster such as "-am" becomes "-a", "-m" so the value that follows is
    read as this tool's message instead of reaching git as part of "-am".
    A cluster made only of m's becomes a plain "-m".

    Arguments after "--" and the value of a message flag are left alone.

    Args:
        args: Raw command-line arguments.

    Returns:
        The rewritten argument list.
    """
    result = []
    expecting_value = False
    options_ended = False

    for arg in args:
        if expecting_value or options_ended:
            result.append(arg)
            expecting_value = False
            continue

        if arg == END_OF_OPTIONS:
            options_ended = True
            result.append(arg)
        elif arg in MESSAGE_FLAGS:
            expecting_value = True
            result.append(arg)
        elif arg.startswith("-") and not arg.startswith("--") and "m" in arg:
            flags = arg[1:].replace("m", "")
            if flags:
                result.append(f"-{flags}")
            result.append("-m")
            expecting_value = True
        else:
            result.append(arg)

    return result


def normalize_args(args: list[str]) -> CommitArgs:
    """Separate the wrapper's message from git commit's arguments.

    Accepts "-m <msg>", "--message <msg>" and "--message=<msg>". Repeated
    message flags are joined as separate paragraphs, as git commit does.

    Examples:
        ["-am", "msg"] -> CommitArgs(message="msg", passthrough=["-a"])

    Args:
        args: Raw command-line arguments.

    Returns:
        CommitArgs with the message and the passthrough arguments.

    Raises:
        ArgumentError: If a message flag has no value.
    """
    tokens = split_message_clusters(args)

    messages = []
    passthrough = []
    i = 0
    while i < len(tokens):
        token = tokens[i]
        if token == END_OF_OPTIONS:
            passthrough.extend(tokens[i:])
            break
        if token in MESSAGE_FLAGS:
            if i + 1 >= len(tokens):
                raise ArgumentError(f"option '{token}' requires a value")
            messages.append(tokens[i + 1])
            i += 2
            continue
        if token.startswith("--message="):
            messages.append(token[len("--message="):])
        else:
            passthrough.append(token)
        i += 1

    message = "\n\n".join(messages) if messages else None
    return CommitArgs(message=message, passthrough=passthrough)
