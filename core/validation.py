"""Input validation for the DTI form.

``validate`` turns the raw widget values (strings for money fields, a bool
for the new-mortgage checkbox) into a typed :class:`DTIInput`. Bad input is
reported as data, one :class:`FieldError` per offending field, never raised.
"""
from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Dict, List

from pydantic import ValidationError

from core.models import DTIInput, FieldError, ValidationOutcome
from core.presets import FIELD_ORDER, INCLUDE_NEW_MORTGAGE_FIELD, INCOME_FIELD

logger = logging.getLogger(__name__)

INCOME_MESSAGE = "Income must be greater than 0"
DEBT_MESSAGE = "Must be 0 or greater"
NUMBER_MESSAGE = "Must be a number"
BOOLEAN_MESSAGE = "Must be true or false"

LIMIT_MESSAGE = "Must be 1,000,000,000 or less"
CENTS_MESSAGE = "Use at most 2 decimal places"

CONSTRAINT_ERRORS = {"greater_than", "greater_than_equal", "less_than_equal", "decimal_max_places"}

# Accept both the form's camelCase keys and the model's attribute names.
_FIELD_NAMES: Dict[str, str] = {}
for _name, _info in DTIInput.model_fields.items():
    _FIELD_NAMES[_name] = _info.alias
    _FIELD_NAMES[_info.alias] = _info.alias


def _normalize(raw: Mapping) -> Dict[str, Any]:
    """Copy ``raw`` with surrounding whitespace stripped from strings."""
    return {k: v.strip() if isinstance(v, str) else v for k, v in raw.items()}


def _to_field_error(field: str, error_type: str) -> FieldError:
    if error_type == "less_than_equal":
        return FieldError(field=field, kind="constraint", message=LIMIT_MESSAGE)
    if error_type == "decimal_max_places":
        return FieldError(field=field, kind="constraint", message=CENTS_MESSAGE)
    if error_type in CONSTRAINT_ERRORS:
        message = INCOME_MESSAGE if field == INCOME_FIELD else DEBT_MESSAGE
        return FieldError(field=field, kind="constraint", message=message)
    message = BOOLEAN_MESSAGE if field == INCLUDE_NEW_MORTGAGE_FIELD else NUMBER_MESSAGE
    return FieldError(field=field, kind="coercion", message=message)


def validate(raw: Mapping) -> ValidationOutcome:
    """Validate raw form values and collect every field error at once.

    Missing keys fall back to the model defaults (zero / ``False``), so an
    absent income is reported as a constraint violation. Unknown keys are
    ignored. ``raw`` is never modified.
    """

    if not isinstance(raw, Mapping):
        raise TypeError(f"raw form values must be a mapping, got {type(raw).__name__}")
    try:
        record = DTIInput.model_validate(_normalize(raw))
    except ValidationError as exc:
        by_field: Dict[str, FieldError] = {}
        for err in exc.errors():
            field = _FIELD_NAMES.get(str(err["loc"][0]), str(err["loc"][0]))
            by_field.setdefault(field, _to_field_error(field, err["type"]))
        errors: List[FieldError] = [by_field[f] for f in FIELD_ORDER if f in by_field]
        logger.debug("DTI input rejected for fields: %s", ", ".join(e.field for e in errors))
        return ValidationOutcome(errors=errors)
    return ValidationOutcome(record=record)
