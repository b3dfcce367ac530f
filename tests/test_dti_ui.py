from streamlit.testing.v1 import AppTest

from core.version import version_label


def calculator_app():
    from ui.dti_form import render_dti_calculator

    render_dti_calculator()


def _fill(at, **values):
    for field, val in values.items():
        at.text_input(key=f"dti_{field}").input(val)


def _submit(at):
    next(b for b in at.button if b.label == "Calculate Ratio").click()
    at.run()


def _markdown(at):
    return [m.value for m in at.markdown]


def test_form_renders_with_zero_defaults_and_no_result():
    at = AppTest.from_function(calculator_app, default_timeout=10)
    at.run()
    assert at.text_input(key="dti_monthlyGrossIncome").value == "0"
    assert at.checkbox(key="dti_includeNewMortgage").value is False
    assert not any("Debt-to-Income Ratio:" in m for m in _markdown(at))
    assert len(at.error) == 0


def test_submit_existing_debts_shows_ratio_and_fair():
    at = AppTest.from_function(calculator_app, default_timeout=10)
    at.run()
    _fill(
        at,
        monthlyGrossIncome="5000",
        currentRentMortgage="1200",
        carPayment="300",
        creditCards="150",
        studentLoans="200",
        otherDebts="50",
    )
    _submit(at)
    md = _markdown(at)
    assert "Your Debt-to-Income Ratio: **38.00%**" in md
    assert "Classification: **:orange[Fair]**" in md
    assert any(c.value == "Total Monthly Debts: $1,900.00" for c in at.caption)
    assert len(at.error) == 0


def test_new_mortgage_counts_only_when_checked():
    at = AppTest.from_function(calculator_app, default_timeout=10)
    at.run()
    _fill(at, monthlyGrossIncome="4000", currentRentMortgage="1000", newMortgagePayment="500")
    _submit(at)
    assert "Your Debt-to-Income Ratio: **25.00%**" in _markdown(at)

    at.checkbox(key="dti_includeNewMortgage").check()
    _submit(at)
    md = _markdown(at)
    assert "Your Debt-to-Income Ratio: **37.50%**" in md
    assert "Classification: **:orange[Fair]**" in md


def test_invalid_fields_show_inline_errors_and_no_result():
    at = AppTest.from_function(calculator_app, default_timeout=10)
    at.run()
    _fill(at, monthlyGrossIncome="0", carPayment="-20", creditCards="abc")
    _submit(at)
    assert [e.value for e in at.error] == [
        "Income must be greater than 0",
        "Must be 0 or greater",
        "Must be a number",
    ]
    assert not any("Debt-to-Income Ratio:" in m for m in _markdown(at))


def test_failed_resubmission_replaces_previous_result():
    at = AppTest.from_function(calculator_app, default_timeout=10)
    at.run()
    _fill(at, monthlyGrossIncome="10000")
    _submit(at)
    md = _markdown(at)
    assert "Your Debt-to-Income Ratio: **0.00%**" in md
    assert "Classification: **:green[Good]**" in md

    _fill(at, monthlyGrossIncome="-5")
    _submit(at)
    assert [e.value for e in at.error] == ["Income must be greater than 0"]
    assert not any("Debt-to-Income Ratio:" in m for m in _markdown(at))


def test_poor_ratio_is_red():
    at = AppTest.from_function(calculator_app, default_timeout=10)
    at.session_state["dti_monthlyGrossIncome"] = "3000"
    at.session_state["dti_personalLoans"] = "1500"
    at.run()
    _submit(at)
    assert "Classification: **:red[Poor]**" in _markdown(at)


def test_page_mounts_calculator():
    at = AppTest.from_file("../app.py", default_timeout=10)
    at.run()
    assert not at.exception
    assert at.header[0].value == "Debt-to-Income Ratio Calculator"
    assert any(b.label == "Calculate Ratio" for b in at.button)
    assert at.caption[0].value.startswith(version_label())


def test_out_of_range_amount_shows_error_instead_of_crashing():
    at = AppTest.from_function(calculator_app, default_timeout=10)
    at.run()
    _fill(at, monthlyGrossIncome="5000", carPayment="1e1000000")
    _submit(at)
    assert not at.exception
    assert [e.value for e in at.error] == ["Must be 1,000,000,000 or less"]
    assert not any("Debt-to-Income Ratio:" in m for m in _markdown(at))
