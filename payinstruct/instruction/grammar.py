"""Positional grammar for payment instructions.

Two sentence forms are accepted, keyed by the leading keyword:

    DEBIT  <amount> <currency> FROM ACCOUNT <debit>  FOR CREDIT TO ACCOUNT <credit> [ON <date>]
    CREDIT <amount> <currency> TO ACCOUNT   <credit> FOR DEBIT FROM ACCOUNT <debit> [ON <date>]

Keywords match case-insensitively. Amount, account ids and date are captured
raw; the semantic validator decides whether they are acceptable.
"""

from __future__ import annotations

import logging
import math
import re
import sys
from dataclasses import dataclass
from typing import List, Sequence, Tuple, Union

from payinstruct.result import Err, Ok, Result
from payinstruct.instruction.tokenizer import tokenize
from payinstruct.models.constants import (
    DATE_KEYWORD,
    MAX_INSTRUCTION_TOKENS,
    MIN_INSTRUCTION_TOKENS,
    PaymentMessage,
    StatusCode,
)
from payinstruct.models.instruction import ParsedInstruction, TransactionType

logger = logging.getLogger(__name__)

# Fixed token positions shared by both forms
_TYPE_POS = 0
_AMOUNT_POS = 1
_CURRENCY_POS = 2
_FIRST_PHRASE_POS = 3
_FIRST_ACCOUNT_POS = 5
_SECOND_PHRASE_POS = 6
_SECOND_ACCOUNT_POS = 10

_DECIMAL_INTEGER_RE = re.compile(r"[+-]?[0-9]+")
_PREFIXED_INTEGER_RE = re.compile(r"0[xX][0-9a-fA-F]+|0[oO][0-7]+|0[bB][01]+")


@dataclass(frozen=True)
class _GrammarArm:
    first_phrase: Tuple[str, ...]
    second_phrase: Tuple[str, ...]
    first_account_is_debit: bool

    @property
    def first_keyword(self) -> str:
        return " ".join(self.first_phrase)

    @property
    def second_keyword(self) -> str:
        return " ".join(self.second_phrase)


_GRAMMAR = {
    TransactionType.DEBIT: _GrammarArm(
        first_phrase=("FROM", "ACCOUNT"),
        second_phrase=("FOR", "CREDIT", "TO", "ACCOUNT"),
        first_account_is_debit=True,
    ),
    TransactionType.CREDIT: _GrammarArm(
        first_phrase=("TO", "ACCOUNT"),
        second_phrase=("FOR", "DEBIT", "FROM", "ACCOUNT"),
        first_account_is_debit=False,
    ),
}


def _narrow(value: Union[int, float]) -> Union[int, float]:
    # Integers past the float range read as infinite, like an overflowing number literal
    if isinstance(value, int):
        if abs(value) > sys.float_info.max:
            return math.inf if value > 0 else -math.inf
        return value
    if math.isfinite(value) and value.is_integer():
        return int(value)
    return value


def parse_amount(token: str) -> Union[int, float]:
    """Capture the raw numeric value of an amount token.

    Plain decimal integers are kept exact, and unsigned 0x/0o/0b literals are
    read in their base. Anything else goes through float(), so "100.50"
    becomes 100.5 and "1e3" becomes 1000. Integers too large for a float
    become infinite. Non-ASCII or unparseable tokens become NaN.
    """
    if not token.isascii() or "_" in token:
        return math.nan
    if _DECIMAL_INTEGER_RE.fullmatch(token):
        try:
            return _narrow(int(token))
        except ValueError:
            # More digits than int() converts from a string
            return _narrow(float(token))
    if _PREFIXED_INTEGER_RE.fullmatch(token):
        return _narrow(int(token, 0))
    try:
        value = float(token)
    except ValueError:
        return math.nan
    return _narrow(value)


def _phrase_at(tokens: Sequence[str], position: int, length: int) -> Tuple[str, ...]:
    return tuple(token.upper() for token in tokens[position:position + length])


def _missing_keyword(keyword: str) -> Err:
    return Err(
        code=StatusCode.MISSING_REQUIRED_KEYWORD,
        message=PaymentMessage.missing_required_keyword(keyword),
    )


def parse_instruction_tokens(tokens: List[str]) -> Result[ParsedInstruction]:
    """Parse a token sequence into a ParsedInstruction.

    Returns Err(SY03) when the token count is outside [11, 13] and Err(SY01)
    naming the first keyword phrase that is missing or out of place.
    A 12-token instruction has no dedicated length error: it falls through to
    the ON check against its second-to-last token.
    """
    if len(tokens) < MIN_INSTRUCTION_TOKENS or len(tokens) > MAX_INSTRUCTION_TOKENS:
        logger.debug(f"Malformed instruction: {len(tokens)} tokens")
        return Err(
            code=StatusCode.MALFORMED_INSTRUCTION,
            message=PaymentMessage.MALFORMED_INSTRUCTION,
        )

    try:
        transaction_type = TransactionType(tokens[_TYPE_POS].upper())
    except ValueError:
        return _missing_keyword("DEBIT or CREDIT")

    arm = _GRAMMAR[transaction_type]

    if _phrase_at(tokens, _FIRST_PHRASE_POS, len(arm.first_phrase)) != arm.first_phrase:
        return _missing_keyword(arm.first_keyword)
    first_account_id = tokens[_FIRST_ACCOUNT_POS]

    if _phrase_at(tokens, _SECOND_PHRASE_POS, len(arm.second_phrase)) != arm.second_phrase:
        return _missing_keyword(arm.second_keyword)
    second_account_id = tokens[_SECOND_ACCOUNT_POS]

    date_text = None
    if len(tokens) > MIN_INSTRUCTION_TOKENS:
        if tokens[-2].upper() != DATE_KEYWORD:
            return _missing_keyword(DATE_KEYWORD)
        date_text = tokens[-1]

    if arm.first_account_is_debit:
        debit_account_id, credit_account_id = first_account_id, second_account_id
    else:
        debit_account_id, credit_account_id = second_account_id, first_account_id

    return Ok(
        ParsedInstruction(
            transaction_type=transaction_type,
            amount=parse_amount(tokens[_AMOUNT_POS]),
            currency=tokens[_CURRENCY_POS].upper(),
            debit_account_id=debit_account_id,
            credit_account_id=credit_account_id,
            date=date_text,
        )
    )


def parse_instruction(instruction: str) -> Result[ParsedInstruction]:
    """Tokenize and parse an instruction string."""
    return parse_instruction_tokens(tokenize(instruction))
