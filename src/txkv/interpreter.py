"""
Line-oriented command interpreter over a TransactionManager.
"""

from typing import Optional, TextIO
import logging
import sys

from .commands import PROMPT, Command, ParsedCommand, parse_line
from .exceptions import InputReadError, KeyNotFoundError, StoreError
from .transaction import TransactionManager

logger = logging.getLogger(__name__)

EXIT_MESSAGE = "Exiting..."


class Interpreter:
    """
    Reads commands one line at a time and applies them to the current store.

    START pushes a transaction, COMMIT and ABORT pop one. QUIT and a failed
    read end the session at whatever depth it is in; open transactions are
    dropped without being committed.

    Example usage:
        interpreter = Interpreter()
        sys.exit(interpreter.run())
    """

    def __init__(
        self,
        manager: Optional[TransactionManager] = None,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
        stderr: Optional[TextIO] = None,
        prompt: str = PROMPT,
    ) -> None:
        self.manager = manager if manager is not None else TransactionManager()
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self.stderr = stderr if stderr is not None else sys.stderr
        self.prompt = prompt

    def log(self, message: str) -> None:
        """Write one diagnostic line to standard error."""
        print(message, file=self.stderr)

    def read_line(self) -> str:
        """
        Prompt for and read the next input line.

        Raises:
            InputReadError: On end of input, an I/O error or undecodable bytes
        """
        self.stdout.write(self.prompt)
        self.stdout.flush()
        try:
            line = self.stdin.readline()
        except (OSError, UnicodeDecodeError) as e:
            raise InputReadError(f"Error reading standard input: {e}")
        if not line:
            raise InputReadError("Error reading standard input: EOF")
        return line

    def execute(self, line: str) -> Optional[int]:
        """
        Apply one input line.

        Returns:
            An exit status if the session must end, None otherwise
        """
        try:
            parsed = parse_line(line)
            logger.debug("depth %d: %s", self.manager.depth, parsed.command.value)
            return self.dispatch(parsed)
        except StoreError as e:
            self.log(str(e))
            return None

    def dispatch(self, parsed: ParsedCommand) -> Optional[int]:
        command, key, value = parsed

        if command is Command.READ:
            found = self.manager.get(key)
            if found is None:
                raise KeyNotFoundError(key)
            print(found, file=self.stdout)
        elif command is Command.WRITE:
            self.manager.set(key, value)
        elif command is Command.DELETE:
            if not self.manager.delete(key):
                raise KeyNotFoundError(key)
        elif command is Command.START:
            self.manager.begin()
        elif command is Command.COMMIT:
            self.manager.commit()
        elif command is Command.ABORT:
            self.manager.abort()
        elif command is Command.QUIT:
            print(EXIT_MESSAGE, file=self.stdout)
            logger.debug("quit with %d open transaction(s) discarded", self.manager.depth)
            return 0
        return None

    def run(self) -> int:
        """
        Run the read-execute loop until QUIT or a read failure.

        Returns:
            0 after QUIT, 1 after a read failure
        """
        while True:
            try:
                line = self.read_line()
            except InputReadError as e:
                self.log(str(e))
                return 1

            status = self.execute(line)
            if status is not None:
                return status
