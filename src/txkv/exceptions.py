"""
Custom exceptions for the transactional key-value interpreter.

The message of every exception is the exact diagnostic line the interpreter
writes to standard error.
"""


class StoreError(Exception):
    """Base exception for all store-related errors."""
    pass


class TransactionError(StoreError):
    """Exception raised for transaction-related errors."""
    pass


class NoActiveTransactionError(TransactionError):
    """Exception raised when trying to commit/abort without an open transaction."""

    def __init__(self, message: str = "Error: you are not currently in a transaction") -> None:
        super().__init__(message)


class InvalidTransactionStateError(TransactionError):
    """Exception raised when transaction is in an invalid state for the operation."""
    pass


class KeyNotFoundError(StoreError):
    """Exception raised when a key is not found in the store."""

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"Key not found: {key}")


class CommandError(StoreError):
    """Exception raised for a command line that cannot be executed."""
    pass


class MalformedCommandError(CommandError):
    """Exception raised when a command line has the wrong number of tokens."""
    pass


class UnrecognizedCommandError(CommandError):
    """Exception raised when the command word is not a known command."""

    def __init__(self, command: str) -> None:
        self.command = command
        super().__init__(f"Unrecognized command: {command}")


class InputReadError(StoreError):
    """Exception raised when the next input line cannot be read. Fatal."""
    pass
