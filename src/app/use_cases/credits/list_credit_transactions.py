"""List Credit Transactions Use Case"""

from libs.result import Result, Return, Error
from src.app.repositories.agent_repository import AgentRepository
from src.app.repositories.credit_transaction_repository import CreditTransactionRepository
from .dtos import ListTransactionsResponseDTO, TransactionDTO

MAX_PAGE_SIZE = 100


class ListCreditTransactions:
    def __init__(self, agent_repo: AgentRepository, transaction_repo: CreditTransactionRepository):
        self.agent_repo = agent_repo
        self.transaction_repo = transaction_repo

    async def execute(self, agent_id: str, limit: int = 20, offset: int = 0) -> Result[ListTransactionsResponseDTO]:
        agent = await self.agent_repo.get_by_id(agent_id)
        if not agent:
            return Return.err(
                Error(
                    code="AGENT_NOT_FOUND",
                    message=f"Agent not found: {agent_id}",
                )
            )

        limit = max(1, min(limit, MAX_PAGE_SIZE))
        offset = max(0, offset)

        transactions = await self.transaction_repo.list_by_agent(agent_id, limit=limit, offset=offset)
        total = await self.transaction_repo.count_by_agent(agent_id)

        return Return.ok(
            ListTransactionsResponseDTO(
                agent_id=agent_id,
                transactions=[
                    TransactionDTO(
                        transaction_id=t.id,
                        type=t.type.value,
                        amount=t.amount,
                        balance_after=t.balance_after,
                        description=t.description,
                        order_id=t.order_id,
                        service_type=t.service_type,
                        created_at=t.created_at,
                    )
                    for t in transactions
                ],
                total=total,
                limit=limit,
                offset=offset,
            )
        )
