"""Account data models for payinstruct."""

from pydantic import BaseModel, Field, field_validator


class Account(BaseModel):
    """An account as supplied by the caller. Never mutated during a request."""

    id: str = Field(..., min_length=1, description="Account identifier (case-sensitive)")
    balance: int = Field(..., ge=0, description="Current balance in minor-free whole units")
    currency: str = Field(..., description="ISO currency code, uppercased on input")

    @field_validator("id", mode="before")
    @classmethod
    def _strip_id(cls, v):
        return v.strip() if isinstance(v, str) else v

    @field_validator("currency", mode="before")
    @classmethod
    def _normalize_currency(cls, v):
        return v.strip().upper() if isinstance(v, str) else v

    class Config:
        """Pydantic configuration."""
        frozen = True


class AccountBalance(BaseModel):
    """Account as reported back to the caller, before and after the transfer."""

    id: str
    balance: int
    balance_before: int
    currency: str

    @classmethod
    def unchanged(cls, account: Account) -> "AccountBalance":
        """Report an account with no balance effect applied."""
        return cls(
            id=account.id,
            balance=account.balance,
            balance_before=account.balance,
            currency=account.currency,
        )
