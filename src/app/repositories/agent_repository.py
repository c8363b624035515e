"""Agent Repository Interface

Defines the contract for agent persistence, including the guarded balance
update that backs the credit ledger.
"""

from abc import ABC, abstractmethod
from datetime import datetime, timedelta
from decimal import Decimal
from typing import List, Optional
from src.domain.agent import Agent


class AgentRepository(ABC):
    """
    Repository interface for Agent persistence

    Balance writes go through apply_balance_delta only; callers never assign
    credit_balance directly.
    """

    @abstractmethod
    async def get_by_id(self, agent_id: str, for_update: bool = False) -> Optional[Agent]:
        """
        Retrieve agent by ID

        Args:
            agent_id: Agent identifier
            for_update: If True, lock the row with SELECT FOR UPDATE (pessimistic lock)

        Returns:
            Agent if found, None otherwise
        """
        pass

    @abstractmethod
    async def create(self, agent: Agent) -> Agent:
        pass

    @abstractmethod
    async def apply_balance_delta(self, agent_id: str, amount: Decimal) -> Optional[Decimal]:
        """
        Add a signed amount to the agent balance in a single guarded statement

        The update only matches when the resulting balance stays >= 0.

        Args:
            agent_id: Agent identifier
            amount: Signed delta (negative for deductions)

        Returns:
            The new balance, or None if the guard rejected the update
        """
        pass

    @abstractmethod
    async def claim_low_balance_notification(
        self, agent_id: str, now: datetime, cooldown: timedelta
    ) -> bool:
        """
        Compare-and-set the low-balance notification stamp

        Returns:
            True if this caller claimed the notification slot, False if one was
            already claimed within the cooldown window
        """
        pass

    @abstractmethod
    async def get_all(self) -> List[Agent]:
        pass
