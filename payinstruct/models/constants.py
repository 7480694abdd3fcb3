"""Constants for payinstruct.

This module centralizes status codes, message templates and grammar limits used
throughout the interpreter. Everything here is read-only process-wide data.
"""

from enum import Enum


class StatusCode(str, Enum):
    """Outcome status codes reported for every processed instruction."""
    INVALID_AMOUNT = "AM01"
    CURRENCY_MISMATCH = "CU01"
    UNSUPPORTED_CURRENCY = "CU02"
    INSUFFICIENT_FUNDS = "AC01"
    SAME_ACCOUNT_ERROR = "AC02"
    ACCOUNT_NOT_FOUND = "AC03"
    INVALID_ACCOUNT_ID = "AC04"
    INVALID_DATE_FORMAT = "DT01"
    MISSING_REQUIRED_KEYWORD = "SY01"
    MALFORMED_INSTRUCTION = "SY03"
    TRANSACTION_SUCCESSFUL = "AP00"
    TRANSACTION_PENDING = "AP02"


# Codes raised before any structured instruction data exists
SYNTAX_STATUS_CODES = frozenset({
    StatusCode.MISSING_REQUIRED_KEYWORD,
    StatusCode.MALFORMED_INSTRUCTION,
})


class PaymentMessage:
    """Human-readable message templates, keyed like StatusCode."""

    CURRENCY_MISMATCH = "Both accounts must have the same currency."
    SAME_ACCOUNT_ERROR = "Debit and credit accounts cannot be the same"
    MALFORMED_INSTRUCTION = "The payment instruction is malformed."
    TRANSACTION_SUCCESSFUL = "Transaction executed successfully"
    TRANSACTION_PENDING = "Transaction scheduled for future execution"

    @staticmethod
    def invalid_amount(amount) -> str:
        return f"The amount {amount} is not a valid positive number."

    @staticmethod
    def instruction_currency_mismatch(account_currency: str, instruction_currency: str) -> str:
        return (
            f"Account currency {account_currency} does not match "
            f"instruction currency {instruction_currency}."
        )

    @staticmethod
    def unsupported_currency(currency: str) -> str:
        supported = ", ".join(SUPPORTED_CURRENCIES)
        return f"The currency {currency} is not supported. Only {supported} are supported."

    @staticmethod
    def insufficient_funds(account_id: str) -> str:
        return f"Insufficient funds in debit account - {account_id}."

    @staticmethod
    def account_not_found(account_id: str) -> str:
        return f"Account ID: {account_id} specified in instruction is not in the provided accounts list"

    @staticmethod
    def invalid_account_id(account_id: str) -> str:
        return f"Account ID {account_id} contains invalid characters."

    @staticmethod
    def invalid_date_format(date_text: str) -> str:
        return f"The date {date_text} is not in a valid YYYY-MM-DD format."

    @staticmethod
    def missing_required_keyword(keyword: str) -> str:
        return f"The required keyword {keyword} is missing from the instruction."


# Currencies
SUPPORTED_CURRENCIES = ("NGN", "USD", "GBP", "GHS")

# Account ids: ASCII letters and digits plus these characters
ACCOUNT_ID_SPECIAL_CHARACTERS = "-.@"

# Grammar
MIN_INSTRUCTION_TOKENS = 11  # no date clause
MAX_INSTRUCTION_TOKENS = 13  # "... ON YYYY-MM-DD"
DATE_KEYWORD = "ON"
DATE_TEXT_LENGTH = 10  # YYYY-MM-DD
