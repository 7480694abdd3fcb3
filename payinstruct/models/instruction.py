"""Instruction data models for payinstruct.

ParsedInstruction is what the grammar produces: field values are still raw.
ValidatedInstruction is what the semantic validator hands to execution.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import List, Optional, Union

from pydantic import BaseModel, Field, field_validator

from payinstruct.models.account import Account


class TransactionType(str, Enum):
    """Leading keyword of an instruction."""
    DEBIT = "DEBIT"
    CREDIT = "CREDIT"


@dataclass(frozen=True)
class ParsedInstruction:
    transaction_type: TransactionType
    amount: Union[int, float]  # raw; may be fractional, negative or NaN
    currency: str
    debit_account_id: str
    credit_account_id: str
    date: Optional[str] = None


@dataclass(frozen=True)
class ValidatedInstruction:
    transaction_type: TransactionType
    amount: int
    currency: str
    debit_account_id: str
    credit_account_id: str
    date: Optional[date] = None


class PaymentInstructionRequest(BaseModel):
    """Inbound payload: the full account list plus one instruction string."""

    accounts: List[Account] = Field(..., description="Accounts the instruction may reference")
    instruction: str = Field(..., min_length=1, description="Instruction text")

    @field_validator("instruction", mode="before")
    @classmethod
    def _strip_instruction(cls, v):
        return v.strip() if isinstance(v, str) else v
