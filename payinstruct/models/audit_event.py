"""PaymentAuditEvent data model for payinstruct."""

from datetime import datetime, timezone
from enum import Enum
from typing import Optional, Dict, Any
from pydantic import BaseModel, Field


class AuditEventType(str, Enum):
    """Audit event type enumeration."""
    INSTRUCTION_EXECUTED = "instruction_executed"
    INSTRUCTION_SCHEDULED = "instruction_scheduled"
    INSTRUCTION_FAILED = "instruction_failed"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class PaymentAuditEvent(BaseModel):
    """Audit event captured for every processed instruction, whatever the outcome."""

    id: str = Field(..., description="Unique audit event identifier")
    timestamp: datetime = Field(default_factory=_utcnow, description="Event timestamp (UTC)")
    event_type: AuditEventType = Field(..., description="Type of audit event")
    status_code: str = Field(..., description="Status code the instruction resolved to")
    instruction: str = Field(..., description="Instruction text as received")
    debit_account: Optional[str] = Field(None, description="Debit account id, if parsed")
    credit_account: Optional[str] = Field(None, description="Credit account id, if parsed")
    details: Dict[str, Any] = Field(default_factory=dict, description="Additional event details")

    class Config:
        """Pydantic configuration."""
        use_enum_values = True
