"""Data models for payinstruct."""

from payinstruct.models.account import Account, AccountBalance
from payinstruct.models.instruction import (
    TransactionType,
    ParsedInstruction,
    ValidatedInstruction,
    PaymentInstructionRequest,
)
from payinstruct.models.transaction import TransactionResult, TransactionStatus, ErrorContext
from payinstruct.models.audit_event import PaymentAuditEvent, AuditEventType
from payinstruct.models.constants import StatusCode, PaymentMessage, SUPPORTED_CURRENCIES

__all__ = [
    "Account",
    "AccountBalance",
    "TransactionType",
    "ParsedInstruction",
    "ValidatedInstruction",
    "PaymentInstructionRequest",
    "TransactionResult",
    "TransactionStatus",
    "ErrorContext",
    "PaymentAuditEvent",
    "AuditEventType",
    "StatusCode",
    "PaymentMessage",
    "SUPPORTED_CURRENCIES",
]
