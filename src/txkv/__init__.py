"""
Transactional Key-Value Interpreter

An interactive, line-oriented command interpreter over an in-memory
key-value store with support for nested transactions.
"""

from .store import Store
from .transaction import TransactionManager, Transaction, TransactionState
from .commands import Command, ParsedCommand, parse_line, USAGE
from .interpreter import Interpreter
from .config import Config
from .exceptions import (
    StoreError,
    TransactionError,
    KeyNotFoundError,
    NoActiveTransactionError,
    InvalidTransactionStateError,
    CommandError,
    MalformedCommandError,
    UnrecognizedCommandError,
    InputReadError,
)

__version__ = "0.1.0"
__all__ = [
    "Store",
    "TransactionManager",
    "Transaction",
    "TransactionState",
    "Command",
    "ParsedCommand",
    "parse_line",
    "USAGE",
    "Interpreter",
    "Config",
    "StoreError",
    "TransactionError",
    "KeyNotFoundError",
    "NoActiveTransactionError",
    "InvalidTransactionStateError",
    "CommandError",
    "MalformedCommandError",
    "UnrecognizedCommandError",
    "InputReadError",
]
