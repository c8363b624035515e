"""Get Credit Balance Use Case

Retrieves an agent's current credit balance.
"""

from libs.result import Result, Return, Error
from src.app.repositories.agent_repository import AgentRepository
from .dtos import BalanceResponseDTO


class GetCreditBalance:
    """
    Read-only operation that retrieves the current credit balance
    for a given agent.
    """

    def __init__(self, agent_repo: AgentRepository):
        self.agent_repo = agent_repo

    async def execute(self, agent_id: str) -> Result[BalanceResponseDTO]:
        """
        Args:
            agent_id: The agent identifier

        Returns:
            Result[BalanceResponseDTO]: Success with balance data or error

        Errors:
            AGENT_NOT_FOUND: No agent with that id
        """
        agent = await self.agent_repo.get_by_id(agent_id)

        if not agent:
            return Return.err(
                Error(
                    code="AGENT_NOT_FOUND",
                    message=f"Agent not found: {agent_id}",
                )
            )

        return Return.ok(
            BalanceResponseDTO(
                agent_id=agent.id,
                balance=agent.credit_balance,
                low_balance_threshold=agent.credit_low_balance_threshold,
                last_updated=agent.updated_at,
            )
        )
