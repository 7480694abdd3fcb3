"""Structured errors raised by the payment instruction pipeline."""

from __future__ import annotations

from typing import Any, Dict

from payinstruct.models.constants import StatusCode
from payinstruct.models.transaction import ErrorContext


class PaymentInstructionError(ValueError):
    """Instruction failure carrying a status code and a response-shaped context.

    Surfaced by the API as a 400 with the context as payload.
    """

    def __init__(self, message: str, code: StatusCode, *, context: ErrorContext):
        super().__init__(message)
        self.message = message
        self.code = code
        self.context = context

    @property
    def status_code(self) -> str:
        return self.code.value

    def to_dict(self) -> Dict[str, Any]:
        return {
            "message": self.message,
            "status_code": self.status_code,
            "context": self.context.model_dump(),
        }
