"""Execution of validated instructions against the involved accounts.

Nothing is persisted: execution projects the new balances and reports them.
Future-dated instructions are classified as pending and leave balances as-is.
"""

import logging
from datetime import date
from typing import Dict, List

from payinstruct.models.account import Account, AccountBalance
from payinstruct.models.constants import PaymentMessage, StatusCode
from payinstruct.models.instruction import ValidatedInstruction
from payinstruct.models.transaction import TransactionResult, TransactionStatus
from payinstruct.result import Err, Ok, Result

logger = logging.getLogger(__name__)


def should_execute_now(instruction: ValidatedInstruction, today: date) -> bool:
    """Undated instructions and dates up to today run now; later dates wait."""
    return instruction.date is None or instruction.date <= today


def execute_instruction(
    instruction: ValidatedInstruction,
    accounts: List[Account],
    today: date,
) -> Result[TransactionResult]:
    """Apply (or defer) the transfer described by a validated instruction.

    Args:
        instruction: Instruction that passed semantic validation
        accounts: The two involved accounts, in any order
        today: Current UTC calendar day

    Returns:
        Ok with the TransactionResult, or Err(CU01 | AC01)
    """
    account_currency = accounts[0].currency
    if instruction.currency != account_currency:
        return Err(
            code=StatusCode.CURRENCY_MISMATCH,
            message=PaymentMessage.instruction_currency_mismatch(account_currency, instruction.currency),
        )

    by_id = {account.id: account for account in accounts}
    debit_account = by_id[instruction.debit_account_id]
    credit_account = by_id[instruction.credit_account_id]

    # Checked against the current balance, even when the transfer is deferred
    if debit_account.balance < instruction.amount:
        return Err(
            code=StatusCode.INSUFFICIENT_FUNDS,
            message=PaymentMessage.insufficient_funds(debit_account.id),
        )

    execute_now = should_execute_now(instruction, today)

    final_balances: Dict[str, int] = {account.id: account.balance for account in accounts}
    if execute_now:
        final_balances[debit_account.id] -= instruction.amount
        final_balances[credit_account.id] += instruction.amount

    result = TransactionResult(
        type=instruction.transaction_type.value,
        amount=instruction.amount,
        currency=instruction.currency,
        debit_account=debit_account.id,
        credit_account=credit_account.id,
        execute_by=None if execute_now else instruction.date.isoformat(),
        status=TransactionStatus.SUCCESSFUL if execute_now else TransactionStatus.PENDING,
        status_code=(
            StatusCode.TRANSACTION_SUCCESSFUL.value if execute_now else StatusCode.TRANSACTION_PENDING.value
        ),
        accounts=[
            AccountBalance(
                id=account.id,
                balance=final_balances[account.id],
                balance_before=account.balance,
                currency=account.currency.upper(),
            )
            for account in accounts
        ],
    )
    logger.debug(
        f"Instruction {result.status}: {instruction.amount} {instruction.currency} "
        f"{debit_account.id} -> {credit_account.id}"
    )
    return Ok(result)
