"""Instruction engine for payinstruct."""

from payinstruct.engine.accounts import resolve_involved_accounts
from payinstruct.engine.validation import (
    validate_account_id,
    validate_amount,
    validate_currency,
    validate_date,
    validate_instruction,
    validate_involved_accounts,
)
from payinstruct.engine.execution import execute_instruction, should_execute_now
from payinstruct.engine.error_context import build_error_context, raise_with_context
from payinstruct.engine.processor import process_payment_instruction

__all__ = [
    "resolve_involved_accounts",
    "validate_account_id",
    "validate_amount",
    "validate_currency",
    "validate_date",
    "validate_instruction",
    "validate_involved_accounts",
    "execute_instruction",
    "should_execute_now",
    "build_error_context",
    "raise_with_context",
    "process_payment_instruction",
]
