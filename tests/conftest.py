"""Pytest fixtures and configuration for payinstruct tests."""

import pytest
from datetime import date
from fastapi.testclient import TestClient

from payinstruct.jobs.audit import audit_trail
from payinstruct.models.account import Account


# Pinned "today" shared by the pipeline and API tests
FIXED_TODAY = date(2025, 6, 15)


@pytest.fixture
def today():
    """Fixed current UTC day for timing decisions."""
    return FIXED_TODAY


@pytest.fixture
def usd_accounts():
    """Two USD accounts with enough funds for a 500 transfer."""
    return [
        Account(id="N90394", balance=1000, currency="USD"),
        Account(id="N9122", balance=500, currency="USD"),
    ]


@pytest.fixture
def ngn_accounts():
    """Two NGN accounts with hyphenated ids."""
    return [
        Account(id="acc-001", balance=1000, currency="NGN"),
        Account(id="acc-002", balance=500, currency="NGN"),
    ]


@pytest.fixture
def make_request():
    """Build a raw request payload from accounts and an instruction string."""
    def _make(accounts, instruction):
        return {
            "accounts": [
                a.model_dump() if isinstance(a, Account) else a
                for a in accounts
            ],
            "instruction": instruction,
        }
    return _make


@pytest.fixture(autouse=True)
def clean_audit_trail():
    """Each test starts and ends with an empty audit trail."""
    audit_trail.clear()
    yield
    audit_trail.clear()


@pytest.fixture
def test_client(today):
    """Create a FastAPI test client with "today" pinned."""
    from payinstruct.api.app import app, get_today

    app.dependency_overrides[get_today] = lambda: today

    with TestClient(app) as client:
        yield client

    # Clean up dependency overrides
    app.dependency_overrides.clear()
