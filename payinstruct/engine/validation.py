"""Semantic validation for parsed instructions and their accounts.

Each check returns the first failure it finds; callers stop at the first Err.
"""

import logging
import re
from datetime import date
from typing import List, Optional

from payinstruct.models.account import Account
from payinstruct.models.constants import (
    ACCOUNT_ID_SPECIAL_CHARACTERS,
    DATE_TEXT_LENGTH,
    SUPPORTED_CURRENCIES,
    PaymentMessage,
    StatusCode,
)
from payinstruct.models.instruction import ParsedInstruction, ValidatedInstruction
from payinstruct.result import Err, Ok, Result, is_err

logger = logging.getLogger(__name__)

_ACCOUNT_ID_RE = re.compile(r"[A-Za-z0-9" + re.escape(ACCOUNT_ID_SPECIAL_CHARACTERS) + r"]*")
_DATE_PART_RE = re.compile(r"[+-]?[0-9]+")


def validate_account_id(account_id: str) -> Result[str]:
    """Account ids may only hold ASCII letters, digits, '-', '.' and '@'."""
    if not _ACCOUNT_ID_RE.fullmatch(account_id):
        return Err(
            code=StatusCode.INVALID_ACCOUNT_ID,
            message=PaymentMessage.invalid_account_id(account_id),
        )
    return Ok(account_id)


def validate_currency(currency: str) -> Result[str]:
    """Check a currency code against the supported list, ignoring case."""
    normalized = currency.upper()
    if normalized not in SUPPORTED_CURRENCIES:
        return Err(
            code=StatusCode.UNSUPPORTED_CURRENCY,
            message=PaymentMessage.unsupported_currency(currency),
        )
    return Ok(normalized)


def validate_amount(amount) -> Result[int]:
    if isinstance(amount, bool) or not isinstance(amount, int) or amount <= 0:
        return Err(
            code=StatusCode.INVALID_AMOUNT,
            message=PaymentMessage.invalid_amount(amount),
        )
    return Ok(amount)


def _date_part(text: str) -> Optional[int]:
    return int(text) if _DATE_PART_RE.fullmatch(text) else None


def validate_date(date_text: str) -> Result[date]:
    """Validate a YYYY-MM-DD string and convert it to a calendar date.

    Month and day ranges follow the actual calendar, so 2024-02-29 is valid
    and 2023-02-29 is not. Years outside 1..9999 are rejected.
    """
    invalid = Err(
        code=StatusCode.INVALID_DATE_FORMAT,
        message=PaymentMessage.invalid_date_format(date_text),
    )
    if len(date_text) != DATE_TEXT_LENGTH:
        return invalid
    if date_text[4] != "-" or date_text[7] != "-":
        return invalid

    year = _date_part(date_text[0:4])
    month = _date_part(date_text[5:7])
    day = _date_part(date_text[8:10])
    if year is None or month is None or day is None:
        return invalid

    try:
        return Ok(date(year, month, day))
    except ValueError:
        return invalid


def validate_instruction(instruction: ParsedInstruction) -> Result[ValidatedInstruction]:
    """Run the instruction-level checks in order.

    Order: account id characters (debit, then credit), same account, amount,
    currency, then date when one was given.
    """
    for account_id in (instruction.debit_account_id, instruction.credit_account_id):
        id_check = validate_account_id(account_id)
        if is_err(id_check):
            return id_check

    if instruction.debit_account_id == instruction.credit_account_id:
        return Err(code=StatusCode.SAME_ACCOUNT_ERROR, message=PaymentMessage.SAME_ACCOUNT_ERROR)

    amount_check = validate_amount(instruction.amount)
    if is_err(amount_check):
        return amount_check

    currency_check = validate_currency(instruction.currency)
    if is_err(currency_check):
        return currency_check

    execute_on = None
    if instruction.date:
        date_check = validate_date(instruction.date)
        if is_err(date_check):
            return date_check
        execute_on = date_check.value

    return Ok(
        ValidatedInstruction(
            transaction_type=instruction.transaction_type,
            amount=amount_check.value,
            currency=currency_check.value,
            debit_account_id=instruction.debit_account_id,
            credit_account_id=instruction.credit_account_id,
            date=execute_on,
        )
    )


def validate_involved_accounts(accounts: List[Account]) -> Result[List[Account]]:
    """Check the resolved accounts: id characters, supported currencies, one shared currency."""
    for account in accounts:
        id_check = validate_account_id(account.id)
        if is_err(id_check):
            return id_check

    for account in accounts:
        currency_check = validate_currency(account.currency)
        if is_err(currency_check):
            return currency_check

    currencies = {account.currency for account in accounts}
    if len(currencies) > 1:
        logger.debug(f"Involved accounts disagree on currency: {sorted(currencies)}")
        return Err(code=StatusCode.CURRENCY_MISMATCH, message=PaymentMessage.CURRENCY_MISMATCH)

    return Ok(accounts)
