"""Request schemas for Credits API"""

from decimal import Decimal
from typing import Optional
from pydantic import BaseModel, Field
from src.domain.credit_transaction import TransactionType


class ApplyCreditRequestSchema(BaseModel):
    """
    Request schema for applying a credit delta

    Used for POST /credits/apply endpoint. Sign rules are checked when the
    command DTO is built.
    """

    agent_id: str = Field(..., min_length=1, description="Agent identifier")
    amount: Decimal = Field(..., description="Signed credit amount (negative for deductions)")
    type: TransactionType
    description: Optional[str] = None
    order_id: Optional[str] = None
    service_type: Optional[str] = None
    package_id: Optional[str] = None
    stripe_payment_intent_id: Optional[str] = None
    adjusted_by: Optional[str] = None
    adjustment_reason: Optional[str] = None
    idempotency_key: Optional[str] = Field(default=None, min_length=1)


class DeductForOrderRequestSchema(BaseModel):
    """Request schema for POST /credits/deduct-for-order"""

    agent_id: str = Field(..., min_length=1)
    order_id: str = Field(..., min_length=1)
    credits_amount: Decimal = Field(..., gt=0)
    service_type: str = Field(..., min_length=1)
    description: Optional[str] = None
