import re
import streamlit as st

# Guidance rendered under each field title. Keys are the form field names.
FIELD_GUIDANCE = {
    "monthlyGrossIncome": "Total monthly income before taxes and deductions.",
    "currentRentMortgage": "Rent or existing mortgage payment you will keep paying.",
    "newMortgagePayment": "Estimated payment on the mortgage you are applying for.",
    "includeNewMortgage": "Count the new mortgage payment in total debts.",
    "carPayment": "Monthly auto loan or lease payment.",
    "creditCards": "Minimum monthly payments across all cards.",
    "studentLoans": "Required monthly student loan payment.",
    "personalLoans": "Monthly payment on personal or installment loans.",
    "otherDebts": "Alimony, child support or any other recurring obligation.",
}

FIELD_LABELS = {
    "monthlyGrossIncome": "Monthly Gross Income",
    "currentRentMortgage": "Current Rent/Mortgage",
    "newMortgagePayment": "New Mortgage Payment",
    "includeNewMortgage": "Include New Mortgage Payment",
}


def pretty_label(field: str) -> str:
    """Convert field keys to more readable labels."""

    if field in FIELD_LABELS:
        return FIELD_LABELS[field]
    label = re.sub(r"(_|-)+", " ", field)
    return re.sub(r"(?<!^)(?=[A-Z])", " ", label).strip().title()


def widget_key(field: str) -> str:
    return f"dti_{field}"


def money_input_with_help(field: str, disabled: bool = False) -> str:
    """Text input for a money amount with guidance between the title and control."""

    disp = pretty_label(field)
    st.markdown(f"**{disp}**")
    help = FIELD_GUIDANCE.get(field, "")
    if help:
        st.caption(help)
    return st.text_input(disp, key=widget_key(field), label_visibility="collapsed", disabled=disabled)


def checkbox_with_help(field: str) -> bool:
    disp = pretty_label(field)
    val = st.checkbox(disp, key=widget_key(field))
    help = FIELD_GUIDANCE.get(field, "")
    if help:
        st.caption(help)
    return val
