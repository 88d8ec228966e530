"""
Command table and line tokenizer.
"""

from enum import Enum
from typing import NamedTuple, Optional
import re

from .exceptions import MalformedCommandError, UnrecognizedCommandError

PROMPT = "> "

MAX_TOKENS = 3

# Whitespace minus the C0 separators U+001C..U+001F, which stay part of a token.
FIELD_SEPARATOR = re.compile(r"[^\S\x1c-\x1f]+")

USAGE = """

    Available commands:
    -------------------
    READ <key>           Print value of <key>
    WRITE <key> <value>  Store <value> in <key>
    DELETE <key>         Delete <key>

    START                Start a transaction
    COMMIT               Commit transaction
    ABORT                Abort transaction

    QUIT                 Exit program
    """


class Command(Enum):
    """Known commands."""
    READ = "READ"
    WRITE = "WRITE"
    DELETE = "DELETE"
    START = "START"
    COMMIT = "COMMIT"
    ABORT = "ABORT"
    QUIT = "QUIT"

    @property
    def arity(self) -> int:
        """Number of tokens the command takes, command word included."""
        return ARITY[self]


ARITY = {
    Command.READ: 2,
    Command.WRITE: 3,
    Command.DELETE: 2,
    Command.START: 1,
    Command.COMMIT: 1,
    Command.ABORT: 1,
    Command.QUIT: 1,
}


class ParsedCommand(NamedTuple):
    command: Command
    key: Optional[str] = None
    value: Optional[str] = None


def parse_line(line: str) -> ParsedCommand:
    """
    Tokenize one input line into a command and its arguments.

    Tokens are runs of characters not matched by FIELD_SEPARATOR; the first
    one is matched against the command table case-insensitively.

    Raises:
        MalformedCommandError: Zero tokens, more than three, or the wrong
            count for the command
        UnrecognizedCommandError: The first token is not a known command
    """
    words = [word for word in FIELD_SEPARATOR.split(line) if word]

    if not words:
        raise MalformedCommandError(f"Error: expected at least one command: {USAGE}")
    if len(words) > MAX_TOKENS:
        raise MalformedCommandError(f"Error: too many arguments: {USAGE}")

    name = words[0].upper()
    try:
        command = Command[name]
    except KeyError:
        raise UnrecognizedCommandError(name)

    # A missing value is never read as the empty string.
    if len(words) < command.arity:
        raise MalformedCommandError(f"Error: too few arguments: {USAGE}")
    if len(words) > command.arity:
        raise MalformedCommandError(f"Error: too many arguments: {USAGE}")

    return ParsedCommand(command, *words[1:])
