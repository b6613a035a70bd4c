"""Linear undo/redo history of address book snapshots."""

from rolodex.domain.error import HistoryError
from rolodex.domain.model.address_book import AddressBook


class AddressBookHistory:
    """Double stack of full address book snapshots.

    ``current`` is the last committed state. Committing pushes it onto the
    undo stack and clears the redo stack; undo and redo move snapshots
    between the two stacks. Snapshots are copies, so callers can keep
    mutating their working book without touching history.
    """

    def __init__(self, initial: AddressBook, max_depth: int | None = None) -> None:
        """Initialize history with both stacks empty.

        Args:
            initial: State loaded at startup
            max_depth: Maximum number of undo snapshots kept, None for unbounded
        """
        if max_depth is not None and max_depth < 0:
            raise ValueError("max_depth must not be negative")
        self._current = initial.copy()
        self._undo_stack: list[AddressBook] = []
        self._redo_stack: list[AddressBook] = []
        self._max_depth = max_depth

    @property
    def current(self) -> AddressBook:
        return self._current.copy()

    def commit(self, state: AddressBook) -> None:
        """Adopt ``state`` as the new current state."""
        self._undo_stack.append(self._current)
        self._redo_stack.clear()
        self._current = state.copy()
        if self._max_depth is not None:
            overflow = len(self._undo_stack) - self._max_depth
            if overflow > 0:
                del self._undo_stack[:overflow]

    def undo(self) -> AddressBook:
        """Step back one commit and return the restored state.

        Raises:
            HistoryError: If there is nothing to undo
        """
        if not self._undo_stack:
            raise HistoryError("No previous state to restore")
        self._redo_stack.append(self._current)
        self._current = self._undo_stack.pop()
        return self._current.copy()

    def redo(self) -> AddressBook:
        """Step forward one undone commit and return the restored state.

        Raises:
            HistoryError: If there is nothing to redo
        """
        if not self._redo_stack:
            raise HistoryError("No undone state to restore")
        self._undo_stack.append(self._current)
        self._current = self._redo_stack.pop()
        return self._current.copy()

    def can_undo(self) -> bool:
        return bool(self._undo_stack)

    def can_redo(self) -> bool:
        return bool(self._redo_stack)

    def undo_depth(self) -> int:
        return len(self._undo_stack)

    def redo_depth(self) -> int:
        return len(self._redo_stack)
