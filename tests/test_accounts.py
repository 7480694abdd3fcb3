"""Tests for account resolution and the Account input model."""

import pytest
from pydantic import ValidationError

from payinstruct.engine.accounts import resolve_involved_accounts
from payinstruct.models.account import Account
from payinstruct.models.constants import StatusCode
from payinstruct.models.instruction import ParsedInstruction, TransactionType
from payinstruct.result import Err, Ok


def _instruction(debit, credit):
    return ParsedInstruction(
        transaction_type=TransactionType.DEBIT,
        amount=10,
        currency="USD",
        debit_account_id=debit,
        credit_account_id=credit,
    )


@pytest.fixture
def accounts():
    return [
        Account(id="c", balance=5, currency="USD"),
        Account(id="a", balance=100, currency="USD"),
        Account(id="x", balance=0, currency="USD"),
        Account(id="b", balance=50, currency="USD"),
    ]


class TestResolveInvolvedAccounts:

    def test_returns_both_in_supplied_order(self, accounts):
        result = resolve_involved_accounts(accounts, _instruction("b", "a"))
        assert isinstance(result, Ok)
        assert [acc.id for acc in result.value] == ["a", "b"]

    def test_missing_debit_reported_first(self, accounts):
        result = resolve_involved_accounts(accounts, _instruction("nope", "also-nope"))
        assert isinstance(result, Err)
        assert result.code == StatusCode.ACCOUNT_NOT_FOUND
        assert result.message == (
            "Account ID: nope specified in instruction is not in the provided accounts list"
        )

    def test_missing_credit(self, accounts):
        result = resolve_involved_accounts(accounts, _instruction("a", "zz"))
        assert result.code == StatusCode.ACCOUNT_NOT_FOUND
        assert "zz" in result.message

    def test_ids_are_case_sensitive(self, accounts):
        result = resolve_involved_accounts(accounts, _instruction("A", "b"))
        assert result.code == StatusCode.ACCOUNT_NOT_FOUND

    def test_empty_account_list(self):
        result = resolve_involved_accounts([], _instruction("a", "b"))
        assert result.code == StatusCode.ACCOUNT_NOT_FOUND


class TestAccountModel:

    def test_normalizes_id_and_currency(self):
        account = Account(id="  acc-1 ", balance=10, currency=" usd ")
        assert account.id == "acc-1"
        assert account.currency == "USD"

    def test_rejects_negative_balance(self):
        with pytest.raises(ValidationError):
            Account(id="a", balance=-1, currency="USD")

    def test_rejects_blank_id(self):
        with pytest.raises(ValidationError):
            Account(id="   ", balance=1, currency="USD")

    def test_is_immutable(self):
        account = Account(id="a", balance=1, currency="USD")
        with pytest.raises(ValidationError):
            account.balance = 2
