"""Payout Idempotency Repository Interface"""

from abc import ABC, abstractmethod
from typing import Optional
from src.domain.payout_idempotency import PayoutIdempotency


class PayoutIdempotencyRepository(ABC):
    """
    Repository interface for PayoutIdempotency records

    The unique idempotency_key column is the mutex: a second insert for the
    same key raises IntegrityError.
    """

    @abstractmethod
    async def get_by_key(self, idempotency_key: str, for_update: bool = False) -> Optional[PayoutIdempotency]:
        """
        Retrieve record by idempotency key

        Args:
            idempotency_key: Caller-supplied key
            for_update: If True, lock the row with SELECT FOR UPDATE

        Returns:
            PayoutIdempotency if found, None otherwise
        """
        pass

    @abstractmethod
    async def create(self, record: PayoutIdempotency) -> PayoutIdempotency:
        """
        Raises:
            IntegrityError: If a record already exists for the key
        """
        pass

    @abstractmethod
    async def save(self, record: PayoutIdempotency) -> PayoutIdempotency:
        pass
