"""Error context construction for failed instructions."""

import math
from typing import List, Optional, Union

from payinstruct.errors import PaymentInstructionError
from payinstruct.models.account import Account, AccountBalance
from payinstruct.models.constants import SYNTAX_STATUS_CODES, StatusCode
from payinstruct.models.instruction import ParsedInstruction, ValidatedInstruction
from payinstruct.models.transaction import ErrorContext, TransactionStatus

InstructionData = Union[ParsedInstruction, ValidatedInstruction]


def _reported_amount(amount):
    # NaN and infinities have no JSON form
    if isinstance(amount, float) and not math.isfinite(amount):
        return None
    return amount


def build_error_context(
    code: StatusCode,
    message: str,
    instruction: Optional[InstructionData] = None,
    accounts: Optional[List[Account]] = None,
) -> ErrorContext:
    """Describe what was known when an instruction failed.

    Syntax failures (SY01, SY03) carry no instruction data and no accounts.
    Every other failure reports the instruction fields it has and the
    accounts resolved so far, with balance equal to balance_before.
    """
    if code in SYNTAX_STATUS_CODES or instruction is None:
        return ErrorContext(
            status=TransactionStatus.FAILED,
            status_reason=message,
            status_code=code.value,
            accounts=[],
        )

    return ErrorContext(
        type=instruction.transaction_type.value,
        amount=_reported_amount(instruction.amount),
        currency=instruction.currency,
        debit_account=instruction.debit_account_id,
        credit_account=instruction.credit_account_id,
        execute_by=None,
        status=TransactionStatus.FAILED,
        status_reason=message,
        status_code=code.value,
        accounts=[AccountBalance.unchanged(account) for account in accounts or []],
    )


def raise_with_context(
    code: StatusCode,
    message: str,
    instruction: Optional[InstructionData] = None,
    accounts: Optional[List[Account]] = None,
) -> None:
    """Raise a PaymentInstructionError whose context is built from the known data."""
    context = build_error_context(code, message, instruction, accounts)
    raise PaymentInstructionError(message, code, context=context)
