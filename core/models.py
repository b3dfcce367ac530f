from __future__ import annotations

from decimal import Decimal
from enum import Enum
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from core.presets import MAX_MONTHLY_AMOUNT


def _money(alias: str, **bounds):
    """Monthly amount in dollars and cents, capped at ``MAX_MONTHLY_AMOUNT``."""
    if "gt" not in bounds:
        bounds.setdefault("ge", 0)
    return Field(
        Decimal("0"),
        le=MAX_MONTHLY_AMOUNT,
        decimal_places=2,
        allow_inf_nan=False,
        alias=alias,
        **bounds,
    )


class Classification(str, Enum):
    GOOD = "Good"
    FAIR = "Fair"
    POOR = "Poor"


class DTIInput(BaseModel):
    """Monthly income and debt obligations for one DTI calculation.

    Attribute names are snake_case; the camelCase names used by the form
    are accepted as aliases.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True, validate_default=True)

    monthly_gross_income: Decimal = _money("monthlyGrossIncome", gt=0)
    current_rent_mortgage: Decimal = _money("currentRentMortgage")
    new_mortgage_payment: Decimal = _money("newMortgagePayment")
    car_payment: Decimal = _money("carPayment")
    credit_cards: Decimal = _money("creditCards")
    student_loans: Decimal = _money("studentLoans")
    personal_loans: Decimal = _money("personalLoans")
    other_debts: Decimal = _money("otherDebts")
    include_new_mortgage: bool = Field(False, alias="includeNewMortgage")


class DTIResult(BaseModel):
    total_debt: Decimal
    ratio_percent: Decimal
    classification: Classification


class FieldError(BaseModel):
    field: str
    kind: Literal["coercion", "constraint"]
    message: str


class ValidationOutcome(BaseModel):
    record: Optional[DTIInput] = None
    errors: List[FieldError] = Field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors


class Submission(BaseModel):
    """Terminal state of one form submission: a result or a list of errors."""

    record: Optional[DTIInput] = None
    result: Optional[DTIResult] = None
    errors: List[FieldError] = Field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.result is not None
