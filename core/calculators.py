"""Debt-to-income calculations.

Everything here is a pure function of a validated :class:`DTIInput`.
Callers are expected to run :func:`core.validation.validate` first; the
engine itself has no failure modes because income is guaranteed positive.
"""
from __future__ import annotations

import logging
from collections.abc import Mapping
from decimal import Decimal, ROUND_HALF_UP

import pandas as pd

from core.models import Classification, DTIInput, DTIResult, Submission
from core.presets import DTI_BANDS
from core.validation import validate

logger = logging.getLogger(__name__)

# (label, attribute) in form order
DEBT_LINES = [
    ("Current Rent/Mortgage", "current_rent_mortgage"),
    ("New Mortgage Payment", "new_mortgage_payment"),
    ("Car Payment", "car_payment"),
    ("Credit Cards", "credit_cards"),
    ("Student Loans", "student_loans"),
    ("Personal Loans", "personal_loans"),
    ("Other Debts", "other_debts"),
]


def _counts(record: DTIInput, attr: str) -> bool:
    """Whether a debt line is part of the total for this record."""
    if attr == "new_mortgage_payment":
        return record.include_new_mortgage
    return True


def compute_total_debt(record: DTIInput) -> Decimal:
    """Sum the monthly debt payments.

    The new mortgage payment is only added when ``include_new_mortgage`` is
    set; otherwise its value is ignored entirely.
    """

    # start from +0 so a sum of signed zeros is +0
    total = (
        Decimal("0")
        + record.current_rent_mortgage
        + record.car_payment
        + record.credit_cards
        + record.student_loans
        + record.personal_loans
        + record.other_debts
    )
    if record.include_new_mortgage:
        total += record.new_mortgage_payment
    return total


def compute_ratio(record: DTIInput) -> Decimal:
    """Return total debt as an unrounded percentage of gross monthly income."""

    return compute_total_debt(record) / record.monthly_gross_income * 100


def classify(ratio_percent) -> Classification:
    """Map a ratio (in percent) to its tier. Boundary values take the better tier."""

    if ratio_percent <= DTI_BANDS["Good"]:
        return Classification.GOOD
    if ratio_percent <= DTI_BANDS["Fair"]:
        return Classification.FAIR
    return Classification.POOR


def calculate(record: DTIInput) -> DTIResult:
    ratio = compute_ratio(record)
    result = DTIResult(
        total_debt=compute_total_debt(record),
        ratio_percent=ratio,
        classification=classify(ratio),
    )
    logger.debug("DTI calculated: %s", result.classification.value)
    return result


def evaluate(raw: Mapping) -> Submission:
    """Handle one form submission: validate, then compute only if valid."""

    outcome = validate(raw)
    if not outcome.ok:
        return Submission(errors=outcome.errors)
    return Submission(record=outcome.record, result=calculate(outcome.record))


def format_ratio(ratio_percent) -> str:
    """Format a ratio for display, e.g. ``Decimal("37.5")`` -> ``"37.50%"``.

    Display only: classification must always use the unrounded ratio.
    """

    value = ratio_percent if isinstance(ratio_percent, Decimal) else Decimal(str(ratio_percent))
    return f"{value.quantize(Decimal('0.01'), rounding=ROUND_HALF_UP)}%"


def debt_breakdown(record: DTIInput) -> pd.DataFrame:
    """Tabulate each debt line with its share of gross monthly income.

    Lines that do not count toward the total (the new mortgage payment when
    it is not included) are listed with ``Included=False`` and a zero share.
    """

    income = record.monthly_gross_income
    rows = []
    for label, attr in DEBT_LINES:
        payment = getattr(record, attr) + 0
        included = _counts(record, attr)
        share = payment / income * 100 if included else Decimal("0")
        rows.append(
            {
                "Debt": label,
                "MonthlyPayment": float(payment),
                "Included": included,
                "PctOfIncome": float(share),
            }
        )
    return pd.DataFrame(rows, columns=["Debt", "MonthlyPayment", "Included", "PctOfIncome"])
