import logging

import streamlit as st

from core.calculators import debt_breakdown, evaluate, format_ratio
from core.presets import (
    DEBT_FIELDS,
    DISCLAIMER,
    FIELD_ORDER,
    FORM_DEFAULTS,
    INCLUDE_NEW_MORTGAGE_FIELD,
    INCOME_FIELD,
    NEW_MORTGAGE_FIELD,
    TIER_COLORS,
)
from ui.components import checkbox_with_help, money_input_with_help, widget_key

logger = logging.getLogger(__name__)

SUBMISSION_KEY = "dti_submission"


def init_form_state():
    ss = st.session_state
    for field, default in FORM_DEFAULTS.items():
        ss.setdefault(widget_key(field), default)
    ss.setdefault(SUBMISSION_KEY, None)


def collect_raw_values() -> dict:
    """Read the current widget values keyed by form field name."""
    return {field: st.session_state.get(widget_key(field)) for field in FIELD_ORDER}


def _on_submit():
    # Runs before the rerun triggered by the submit button, so widget state
    # already holds the values the user just entered.
    submission = evaluate(collect_raw_values())
    if not submission.ok:
        logger.info("DTI submission rejected with %d field error(s)", len(submission.errors))
    st.session_state[SUBMISSION_KEY] = submission


def _field_errors() -> dict:
    submission = st.session_state.get(SUBMISSION_KEY)
    if submission is None:
        return {}
    return {e.field: e.message for e in submission.errors}


def render_dti_form():
    errors = _field_errors()
    with st.form("dti_form"):
        for field in [INCOME_FIELD] + DEBT_FIELDS:
            money_input_with_help(field)
            if field in errors:
                st.error(errors[field])
            if field == NEW_MORTGAGE_FIELD:
                checkbox_with_help(INCLUDE_NEW_MORTGAGE_FIELD)
                if INCLUDE_NEW_MORTGAGE_FIELD in errors:
                    st.error(errors[INCLUDE_NEW_MORTGAGE_FIELD])
        st.form_submit_button("Calculate Ratio", on_click=_on_submit)


def render_result():
    submission = st.session_state.get(SUBMISSION_KEY)
    if submission is None or not submission.ok:
        return None
    res = submission.result
    tier = res.classification.value
    st.subheader("Result")
    st.markdown(f"Your Debt-to-Income Ratio: **{format_ratio(res.ratio_percent)}**")
    st.markdown(f"Classification: **:{TIER_COLORS[tier]}[{tier}]**")
    st.caption(f"Total Monthly Debts: ${res.total_debt:,.2f}")
    st.dataframe(
        debt_breakdown(submission.record),
        hide_index=True,
        column_config={
            "MonthlyPayment": st.column_config.NumberColumn("Monthly Payment", format="$%.2f"),
            "PctOfIncome": st.column_config.NumberColumn("% of Income", format="%.2f%%"),
        },
    )
    st.caption(DISCLAIMER)
    return res


def render_dti_calculator():
    """Render the calculator form and, after a valid submission, its result."""
    init_form_state()
    st.header("Debt-to-Income Ratio Calculator")
    render_dti_form()
    return render_result()
