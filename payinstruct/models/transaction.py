"""Transaction outcome models for payinstruct."""

from enum import Enum
from typing import List, Optional, Union

from pydantic import BaseModel, Field

from payinstruct.models.account import AccountBalance


class TransactionStatus(str, Enum):
    """Outcome status of a processed instruction."""
    SUCCESSFUL = "successful"
    PENDING = "pending"
    FAILED = "failed"


class TransactionResult(BaseModel):
    """Response for an executed or scheduled instruction."""

    type: str = Field(..., description="DEBIT or CREDIT")
    amount: int
    currency: str
    debit_account: str
    credit_account: str
    execute_by: Optional[str] = Field(None, description="YYYY-MM-DD when pending, else null")
    status: TransactionStatus
    status_code: str
    accounts: List[AccountBalance] = Field(default_factory=list)

    class Config:
        """Pydantic configuration."""
        use_enum_values = True


class ErrorContext(BaseModel):
    """Response-shaped description of what was known when an instruction failed.

    Instruction fields are null when the failure happened before parsing
    produced any structured data. Accounts never carry a balance effect.
    """

    type: Optional[str] = None
    amount: Optional[Union[int, float]] = None
    currency: Optional[str] = None
    debit_account: Optional[str] = None
    credit_account: Optional[str] = None
    execute_by: Optional[str] = None
    status: TransactionStatus = TransactionStatus.FAILED
    status_reason: str
    status_code: str
    accounts: List[AccountBalance] = Field(default_factory=list)

    class Config:
        """Pydantic configuration."""
        use_enum_values = True
