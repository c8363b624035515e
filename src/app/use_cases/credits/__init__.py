"""Credit ledger use cases"""
from .apply_credit_delta import ApplyCreditDelta
from .deduct_credits_for_order import DeductCreditsForOrder
from .check_sufficient_credits import CheckSufficientCredits
from .get_credit_balance import GetCreditBalance
from .list_credit_transactions import ListCreditTransactions
from .reconcile_ledger import ReconcileLedger
from .dtos import (
    ApplyCreditDeltaCommandDTO,
    CreditDeltaResponseDTO,
    DeductCreditsForOrderCommandDTO,
    BalanceResponseDTO,
    SufficientCreditsResponseDTO,
    TransactionDTO,
    ListTransactionsResponseDTO,
    LedgerDiscrepancyDTO,
    ReconciliationResultDTO,
)

__all__ = [
    "ApplyCreditDelta",
    "DeductCreditsForOrder",
    "CheckSufficientCredits",
    "GetCreditBalance",
    "ListCreditTransactions",
    "ReconcileLedger",
    "ApplyCreditDeltaCommandDTO",
    "CreditDeltaResponseDTO",
    "DeductCreditsForOrderCommandDTO",
    "BalanceResponseDTO",
    "SufficientCreditsResponseDTO",
    "TransactionDTO",
    "ListTransactionsResponseDTO",
    "LedgerDiscrepancyDTO",
    "ReconciliationResultDTO",
]
