"""CheckSufficientCredits Use Case

Advisory read: the atomic deduction in ApplyCreditDelta is the authority.
"""

from decimal import Decimal
from libs.result import Result, Return
from src.app.repositories.agent_repository import AgentRepository
from .dtos import SufficientCreditsResponseDTO


class CheckSufficientCredits:
    """
    Non-mutating balance check

    A missing agent is treated as a zero balance.
    """

    def __init__(self, agent_repo: AgentRepository):
        self.agent_repo = agent_repo

    async def execute(self, agent_id: str, required: Decimal) -> Result[SufficientCreditsResponseDTO]:
        agent = await self.agent_repo.get_by_id(agent_id)
        balance = agent.credit_balance if agent else Decimal("0")

        return Return.ok(
            SufficientCreditsResponseDTO(
                agent_id=agent_id,
                required=required,
                has_sufficient_credits=(balance or Decimal("0")) >= required,
            )
        )
