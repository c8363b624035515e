"""Credit Transaction Repository Interface

Defines the contract for credit transaction persistence operations.
"""

from abc import ABC, abstractmethod
from typing import List, Optional
from src.domain.credit_transaction import CreditTransaction


class CreditTransactionRepository(ABC):
    """
    Repository interface for CreditTransaction persistence

    Transactions are immutable and append-only for audit trail.
    """

    @abstractmethod
    async def create(self, transaction: CreditTransaction) -> CreditTransaction:
        """
        Create a new credit transaction

        Args:
            transaction: CreditTransaction entity to persist

        Returns:
            Created CreditTransaction with generated ID

        Raises:
            IntegrityError: If idempotency_key already exists (duplicate transaction)
        """
        pass

    @abstractmethod
    async def get_by_idempotency_key(self, idempotency_key: str) -> Optional[CreditTransaction]:
        """
        Retrieve transaction by idempotency key

        Args:
            idempotency_key: Unique idempotency key

        Returns:
            CreditTransaction if found, None otherwise
        """
        pass

    @abstractmethod
    async def get_by_id(self, transaction_id: str) -> Optional[CreditTransaction]:
        pass

    @abstractmethod
    async def list_by_agent(
        self, agent_id: str, limit: int = 50, offset: int = 0
    ) -> List[CreditTransaction]:
        """Newest first"""
        pass

    @abstractmethod
    async def count_by_agent(self, agent_id: str) -> int:
        pass

    @abstractmethod
    async def get_history(self, agent_id: str) -> List[CreditTransaction]:
        """All transactions for an agent in application order (oldest first)"""
        pass
