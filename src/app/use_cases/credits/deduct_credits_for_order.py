"""DeductCreditsForOrder Use Case

Pays for an order with credits: a usage transaction linked to the order.
"""

from libs.result import Result
from .apply_credit_delta import ApplyCreditDelta
from .dtos import ApplyCreditDeltaCommandDTO, CreditDeltaResponseDTO, DeductCreditsForOrderCommandDTO
from src.domain.credit_transaction import TransactionType


class DeductCreditsForOrder:
    def __init__(self, apply_credit_delta: ApplyCreditDelta):
        self.apply_credit_delta = apply_credit_delta

    async def execute(self, command: DeductCreditsForOrderCommandDTO) -> Result[CreditDeltaResponseDTO]:
        return await self.apply_credit_delta.execute(
            ApplyCreditDeltaCommandDTO(
                agent_id=command.agent_id,
                amount=-command.credits_amount,
                type=TransactionType.USAGE,
                description=command.description or f"Order {command.order_id}",
                order_id=command.order_id,
                service_type=command.service_type,
            )
        )
