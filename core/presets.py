from decimal import Decimal

DISCLAIMER = (
    "Ratios are estimates based on the amounts entered. Lenders apply their own "
    "overlays and may count obligations differently; a 36% back-end ratio is the "
    "conventional comfort zone and 43% the common qualified-mortgage ceiling."
)

# Upper bound (inclusive) of each classification tier, in percent. Anything
# above the last bound is "Poor".
DTI_BANDS = {"Good": Decimal("36"), "Fair": Decimal("43")}

TIER_COLORS = {"Good": "green", "Fair": "orange", "Poor": "red"}

INCOME_FIELD = "monthlyGrossIncome"
NEW_MORTGAGE_FIELD = "newMortgagePayment"
INCLUDE_NEW_MORTGAGE_FIELD = "includeNewMortgage"

# Debt lines in form order. The new mortgage payment only counts when
# ``includeNewMortgage`` is set.
DEBT_FIELDS = [
    "currentRentMortgage",
    "newMortgagePayment",
    "carPayment",
    "creditCards",
    "studentLoans",
    "personalLoans",
    "otherDebts",
]

FIELD_ORDER = [INCOME_FIELD] + DEBT_FIELDS + [INCLUDE_NEW_MORTGAGE_FIELD]

# Ceiling for any single monthly amount. Together with the two-decimal limit
# it keeps every ratio within ordinary Decimal range.
MAX_MONTHLY_AMOUNT = Decimal("1000000000")

FORM_DEFAULTS = {**{f: "0" for f in [INCOME_FIELD] + DEBT_FIELDS}, INCLUDE_NEW_MORTGAGE_FIELD: False}
