"""Payment instruction pipeline.

tokenize -> parse -> resolve accounts -> validate instruction -> validate
accounts -> execute. The first failing stage ends processing with a
PaymentInstructionError; no stage after it runs and no balance is changed.
"""

import logging
from datetime import date
from typing import Any, Mapping, Optional, Union

from payinstruct.clock import utc_today
from payinstruct.engine.accounts import resolve_involved_accounts
from payinstruct.engine.error_context import raise_with_context
from payinstruct.engine.execution import execute_instruction
from payinstruct.engine.validation import validate_instruction, validate_involved_accounts
from payinstruct.instruction.grammar import parse_instruction_tokens
from payinstruct.instruction.tokenizer import tokenize
from payinstruct.models.instruction import PaymentInstructionRequest
from payinstruct.models.transaction import TransactionResult
from payinstruct.result import is_err

logger = logging.getLogger(__name__)


def process_payment_instruction(
    request: Union[PaymentInstructionRequest, Mapping[str, Any]],
    *,
    today: Optional[date] = None,
) -> TransactionResult:
    """Interpret one payment instruction against the supplied accounts.

    Args:
        request: PaymentInstructionRequest, or a mapping validated into one
        today: Current UTC calendar day (defaults to the real one)

    Returns:
        TransactionResult with status successful (AP00) or pending (AP02)

    Raises:
        pydantic.ValidationError: If the request payload is not well-formed
        PaymentInstructionError: On any instruction failure, with its context
    """
    if not isinstance(request, PaymentInstructionRequest):
        request = PaymentInstructionRequest.model_validate(request)
    today = today or utc_today()

    tokens = tokenize(request.instruction)
    parsed = parse_instruction_tokens(tokens)
    if is_err(parsed):
        logger.warning(f"Instruction rejected ({parsed.code.value}): {parsed.message}")
        raise_with_context(parsed.code, parsed.message)
    instruction = parsed.value

    resolved = resolve_involved_accounts(request.accounts, instruction)
    if is_err(resolved):
        logger.warning(f"Instruction rejected ({resolved.code.value}): {resolved.message}")
        raise_with_context(resolved.code, resolved.message, instruction, [])
    involved_accounts = resolved.value

    validated = validate_instruction(instruction)
    if is_err(validated):
        logger.warning(f"Instruction rejected ({validated.code.value}): {validated.message}")
        raise_with_context(validated.code, validated.message, instruction, involved_accounts)

    accounts_check = validate_involved_accounts(involved_accounts)
    if is_err(accounts_check):
        logger.warning(f"Instruction rejected ({accounts_check.code.value}): {accounts_check.message}")
        raise_with_context(accounts_check.code, accounts_check.message, instruction, involved_accounts)

    executed = execute_instruction(validated.value, involved_accounts, today)
    if is_err(executed):
        logger.warning(f"Instruction rejected ({executed.code.value}): {executed.message}")
        raise_with_context(executed.code, executed.message, validated.value, involved_accounts)

    result = executed.value
    logger.info(
        f"Instruction {result.status} ({result.status_code}): {result.type} {result.amount} "
        f"{result.currency} {result.debit_account} -> {result.credit_account}"
    )
    return result
