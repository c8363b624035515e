"""ReconcileLedger Use Case

Checks every agent's ledger: each balance_after must equal the previous
snapshot plus the row's amount, and the last snapshot must equal the live
balance.
"""

import logging
import time
from decimal import Decimal
from typing import List
from libs.result import Result, Return, Error
from src.domain.base import utc_now
from src.app.repositories.agent_repository import AgentRepository
from src.app.repositories.credit_transaction_repository import CreditTransactionRepository
from src.domain.agent import Agent
from src.domain.credit_transaction import CreditTransaction
from .dtos import LedgerDiscrepancyDTO, ReconciliationResultDTO

logger = logging.getLogger(__name__)


class ReconcileLedger:
    """
    Use Case: Reconcile agent balances against the credit ledger

    Business Rules:
    1. The opening balance is implied by the first row (balance_after - amount),
       so agents seeded with a starting balance reconcile cleanly
    2. Every later row must satisfy balance_after == previous balance_after + amount
    3. The newest balance_after must equal Agent.credit_balance
    4. Read-only: nothing is modified
    """

    def __init__(
        self,
        agent_repo: AgentRepository,
        transaction_repo: CreditTransactionRepository,
    ):
        self.agent_repo = agent_repo
        self.transaction_repo = transaction_repo

    async def execute(self) -> Result[ReconciliationResultDTO]:
        start_time = time.time()
        reconciliation_time = utc_now()

        try:
            logger.info("Starting credit ledger reconciliation")

            agents = await self.agent_repo.get_all()
            discrepancies: List[LedgerDiscrepancyDTO] = []

            for agent in agents:
                history = await self.transaction_repo.get_history(agent.id)
                discrepancies.extend(self._check_agent(agent, history))

            execution_time_ms = int((time.time() - start_time) * 1000)

            if discrepancies:
                logger.warning(
                    f"Reconciliation complete. Found {len(discrepancies)} discrepancies "
                    f"across {len(agents)} agents in {execution_time_ms}ms"
                )
            else:
                logger.info(
                    f"Reconciliation complete. All {len(agents)} ledgers balanced "
                    f"in {execution_time_ms}ms"
                )

            return Return.ok(
                ReconciliationResultDTO(
                    total_agents_checked=len(agents),
                    discrepancies_found=len(discrepancies),
                    discrepancies=discrepancies,
                    reconciliation_time=reconciliation_time,
                    execution_time_ms=execution_time_ms,
                )
            )

        except Exception as e:
            logger.error(f"Reconciliation failed: {e}")
            return Return.err(
                Error(
                    code="RECONCILIATION_FAILED",
                    message="Failed to reconcile credit ledger",
                    reason=str(e),
                )
            )

    def _check_agent(self, agent: Agent, history: List[CreditTransaction]) -> List[LedgerDiscrepancyDTO]:
        if not history:
            return []

        found: List[LedgerDiscrepancyDTO] = []
        previous = history[0].balance_after

        for transaction in history[1:]:
            expected = previous + transaction.amount
            if transaction.balance_after != expected:
                found.append(
                    LedgerDiscrepancyDTO(
                        agent_id=agent.id,
                        kind="chain",
                        transaction_id=transaction.id,
                        expected_balance=expected,
                        recorded_balance=transaction.balance_after,
                        discrepancy=transaction.balance_after - expected,
                    )
                )
                logger.warning(
                    f"Ledger chain broken for agent {agent.id} at transaction {transaction.id}: "
                    f"expected={expected}, recorded={transaction.balance_after}"
                )
            previous = transaction.balance_after

        live = Decimal(agent.credit_balance)
        if live != previous:
            found.append(
                LedgerDiscrepancyDTO(
                    agent_id=agent.id,
                    kind="live_balance",
                    transaction_id=history[-1].id,
                    expected_balance=previous,
                    recorded_balance=live,
                    discrepancy=live - previous,
                )
            )
            logger.warning(
                f"Live balance mismatch for agent {agent.id}: "
                f"ledger={previous}, agent={live}"
            )

        return found
