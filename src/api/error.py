"""API error type

Use case errors are raised as ClientError and rendered by the handlers in
src.api.app as {"error": {"code", "message", "reason"}}.
"""

from fastapi import status
from libs.result import Error

CONFLICT_CODES = {"PREVIOUSLY_FAILED", "INVALID_TRANSITION", "ORDER_MISMATCH", "IDEMPOTENCY_KEY_MISMATCH"}


def status_for_code(code: str) -> int:
    if code == "INSUFFICIENT_CREDITS":
        return status.HTTP_402_PAYMENT_REQUIRED
    if code.endswith("_NOT_FOUND"):
        return status.HTTP_404_NOT_FOUND
    if code in CONFLICT_CODES:
        return status.HTTP_409_CONFLICT
    if code.endswith("_FAILED") or code == "TRANSACTION_FAILURE":
        return status.HTTP_500_INTERNAL_SERVER_ERROR
    return status.HTTP_400_BAD_REQUEST


class ClientError(Exception):
    def __init__(self, error: Error, status_code: int = None):
        super().__init__(error.message)
        self.error = error
        self.status_code = status_code or status_for_code(error.code)

    def to_dict(self) -> dict:
        body = {"code": self.error.code, "message": self.error.message}
        if self.error.reason:
            body["reason"] = self.error.reason
        return {"error": body}
