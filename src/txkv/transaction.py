"""
Transaction management for the key-value interpreter.

Nesting is an explicit stack of Transaction frames sitting on top of a root
Store. Each frame owns a full copy of the Store below it.
"""

from enum import Enum
from typing import List, Optional
import logging
import uuid

from .exceptions import InvalidTransactionStateError, NoActiveTransactionError
from .store import Store

logger = logging.getLogger(__name__)


class TransactionState(Enum):
    """Transaction state enumeration."""
    ACTIVE = "active"
    COMMITTED = "committed"
    ABORTED = "aborted"


class Transaction:
    """Represents a single transaction with its working copy of the store."""

    def __init__(self, store: Store, parent: Optional['Transaction'] = None) -> None:
        self.id = str(uuid.uuid4())
        self.state = TransactionState.ACTIVE
        self.parent = parent
        self.store = store

    def finish(self, state: TransactionState) -> None:
        """Move an active transaction to a terminal state."""
        if self.state != TransactionState.ACTIVE:
            raise InvalidTransactionStateError(
                f"Cannot end transaction {self.id} in state: {self.state.value}"
            )
        self.state = state


class TransactionManager:
    """Manages the transaction stack and provides transaction operations."""

    def __init__(self, root: Optional[Store] = None) -> None:
        self._root = root if root is not None else Store()
        self.transaction_stack: List[Transaction] = []

    @property
    def root(self) -> Store:
        """The depth-0 store."""
        return self._root

    @property
    def current(self) -> Store:
        """The store at the deepest open depth; every command applies to it."""
        if self.transaction_stack:
            return self.transaction_stack[-1].store
        return self._root

    @property
    def depth(self) -> int:
        """Number of open transactions. 0 means the root store is current."""
        return len(self.transaction_stack)

    def begin(self) -> str:
        """Begin a new transaction seeded with a copy of the current store."""
        parent = self.transaction_stack[-1] if self.transaction_stack else None
        transaction = Transaction(self.current.copy(), parent)
        self.transaction_stack.append(transaction)
        logger.debug("begin transaction %s at depth %d", transaction.id, self.depth)
        return transaction.id

    def commit(self) -> Store:
        """
        Commit the current transaction.

        The parent's store (the root for a top-level transaction) is replaced
        by the committed transaction's store in full.

        Returns:
            The store that is now current

        Raises:
            NoActiveTransactionError: If no transaction is open
        """
        if not self.transaction_stack:
            raise NoActiveTransactionError()

        current_transaction = self.transaction_stack.pop()
        current_transaction.finish(TransactionState.COMMITTED)

        if current_transaction.parent is not None:
            current_transaction.parent.store = current_transaction.store
        else:
            self._root = current_transaction.store

        logger.debug("commit transaction %s, depth now %d", current_transaction.id, self.depth)
        return self.current

    def abort(self) -> None:
        """
        Abort the current transaction.

        Its store is discarded; the parent's store is left as it was at begin().

        Raises:
            NoActiveTransactionError: If no transaction is open
        """
        if not self.transaction_stack:
            raise NoActiveTransactionError()

        current_transaction = self.transaction_stack.pop()
        current_transaction.finish(TransactionState.ABORTED)
        logger.debug("abort transaction %s, depth now %d", current_transaction.id, self.depth)

    def get(self, key: str) -> Optional[str]:
        return self.current.get(key)

    def set(self, key: str, value: str) -> None:
        self.current.set(key, value)

    def delete(self, key: str) -> bool:
        return self.current.delete(key)

    def has_active_transaction(self) -> bool:
        """Check if there's an active transaction."""
        return len(self.transaction_stack) > 0

    def get_current_transaction_id(self) -> Optional[str]:
        """Get the ID of the current transaction."""
        if self.transaction_stack:
            return self.transaction_stack[-1].id
        return None
