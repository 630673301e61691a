"""In-memory transaction for testing."""

from forum.persistence.transaction import Transaction


class InMemoryTransaction(Transaction):
    """In-memory writes apply immediately; rollbacks are only counted."""

    def __init__(self) -> None:
        self.rollbacks = 0

    async def rollback(self) -> None:
        self.rollbacks += 1
