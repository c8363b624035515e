"""Data Transfer Objects for Credit Ledger Use Cases

Pydantic models for command inputs and response outputs.
"""

from datetime import datetime
from decimal import Decimal
from typing import List, Optional
from pydantic import BaseModel, Field, model_validator
from src.domain.credit_transaction import NEGATIVE_TYPES, POSITIVE_TYPES, TransactionType


class ApplyCreditDeltaCommandDTO(BaseModel):
    """
    Command DTO for applying a signed credit delta

    Used as input to ApplyCreditDelta use case.
    """

    agent_id: str = Field(
        ...,
        description="Agent identifier"
    )

    amount: Decimal = Field(
        ...,
        max_digits=10,
        decimal_places=2,
        description="Signed credit amount (negative for deductions)"
    )

    type: TransactionType = Field(
        ...,
        description="Transaction type (purchase, usage, refund, adjustment, bonus, expiry)"
    )

    description: Optional[str] = Field(default=None)

    order_id: Optional[str] = Field(default=None, description="Linked order (usage)")
    service_type: Optional[str] = Field(default=None, description="Service the credits paid for")
    package_id: Optional[str] = Field(default=None, description="Linked credit package (purchase)")
    stripe_payment_intent_id: Optional[str] = Field(default=None)
    adjusted_by: Optional[str] = Field(default=None, description="Staff member making an adjustment")
    adjustment_reason: Optional[str] = Field(default=None)

    idempotency_key: Optional[str] = Field(
        default=None,
        description="Optional key; a replay returns the original transaction"
    )

    @model_validator(mode="after")
    def check_sign_matches_type(self):
        if self.amount == 0:
            raise ValueError("amount must be non-zero")
        if self.type in POSITIVE_TYPES and self.amount < 0:
            raise ValueError(f"{self.type.value} transactions must have a positive amount")
        if self.type in NEGATIVE_TYPES and self.amount > 0:
            raise ValueError(f"{self.type.value} transactions must have a negative amount")
        return self

    class Config:
        json_schema_extra = {
            "example": {
                "agent_id": "5b1c3f7e-3c2a-4e0e-9d51-1f4a7c1f0a11",
                "amount": "-75.00",
                "type": "usage",
                "order_id": "a3d9e2b0-6f6e-4b7c-8a3c-2d8f4b1e9c22",
                "service_type": "photos_50",
                "description": "Extended Photos (Up to 50)"
            }
        }


class CreditDeltaResponseDTO(BaseModel):
    """
    Response DTO for ledger mutations

    Returned by ApplyCreditDelta and DeductCreditsForOrder.
    """

    transaction_id: str
    agent_id: str
    type: str
    amount: Decimal
    balance_after: Decimal
    description: Optional[str] = None
    order_id: Optional[str] = None
    idempotency_key: Optional[str] = None
    low_balance_notification_id: Optional[str] = Field(
        default=None,
        description="Set when this deduction raised a low-balance notification"
    )
    created_at: datetime


class DeductCreditsForOrderCommandDTO(BaseModel):
    """Command DTO for paying for an order with credits"""

    agent_id: str
    order_id: str
    credits_amount: Decimal = Field(
        ...,
        gt=0,
        max_digits=10,
        decimal_places=2,
        description="Credits to deduct (positive)"
    )
    service_type: str
    description: Optional[str] = None


class BalanceResponseDTO(BaseModel):
    agent_id: str
    balance: Decimal
    low_balance_threshold: Decimal
    last_updated: datetime


class SufficientCreditsResponseDTO(BaseModel):
    agent_id: str
    required: Decimal
    has_sufficient_credits: bool


class TransactionDTO(BaseModel):
    transaction_id: str
    type: str
    amount: Decimal
    balance_after: Decimal
    description: Optional[str] = None
    order_id: Optional[str] = None
    service_type: Optional[str] = None
    created_at: datetime


class ListTransactionsResponseDTO(BaseModel):
    agent_id: str
    transactions: List[TransactionDTO]
    total: int
    limit: int
    offset: int


class LedgerDiscrepancyDTO(BaseModel):
    """
    A broken link in an agent's ledger

    kind is "chain" when a row's balance_after is not the previous snapshot
    plus its amount, "live_balance" when the last snapshot differs from the
    agent's current balance.
    """

    agent_id: str
    kind: str
    transaction_id: Optional[str] = None
    expected_balance: Decimal
    recorded_balance: Decimal
    discrepancy: Decimal


class ReconciliationResultDTO(BaseModel):
    total_agents_checked: int
    discrepancies_found: int
    discrepancies: List[LedgerDiscrepancyDTO]
    reconciliation_time: datetime
    execution_time_ms: int
