"""Mini README: Typed input for the "Add Expense" form.

``ExpenseForm`` lists exactly the fields the form submits and validates them
before anything reaches the ledger: the amount must parse as a non-negative
decimal, the description must contain text, and the payment mode and category
must come from their enumerations.
"""

from __future__ import annotations

from datetime import date

from pydantic import BaseModel, Field, validator

from ..ledger import ExpenseCategory, ExpenseDraft, PaymentMode


class ExpenseForm(BaseModel):
    """Validated payload of the add-expense dialog."""

    amount: float = Field(
        ...,
        ge=0,
        allow_inf_nan=False,
        description="Amount in the user's currency unit.",
    )
    description: str = Field(..., description="Free-text label shown in the daily list.")
    payment_mode: PaymentMode = Field(PaymentMode.CASH, description="How the expense was paid.")
    category: ExpenseCategory = Field(..., description="Expense category.")

    @validator("amount", pre=True)
    def _parse_amount(cls, value: object) -> object:
        """Treat blank text as missing so the required check reports it."""

        if isinstance(value, str):
            value = value.strip()
            if not value:
                raise ValueError("Amount is required")
        return value

    @validator("amount")
    def _drop_negative_zero(cls, value: float) -> float:
        """``-0`` passes the bound; store it as plain zero."""

        return value + 0.0

    @validator("description")
    def _require_description(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Description is required")
        return value

    @validator("payment_mode", pre=True)
    def _coerce_payment_mode(cls, value: object) -> object:
        if isinstance(value, str):
            return PaymentMode.from_str(value)
        return value

    @validator("category", pre=True)
    def _coerce_category(cls, value: object) -> object:
        if isinstance(value, str):
            if not value.strip():
                raise ValueError("Category is required")
            return ExpenseCategory.from_str(value)
        return value

    def to_draft(self, on: date) -> ExpenseDraft:
        """Attach the selected calendar day and hand the fields to the ledger."""

        return ExpenseDraft(
            date=on,
            amount=self.amount,
            description=self.description,
            payment_mode=self.payment_mode,
            category=self.category,
        )
