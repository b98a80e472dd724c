"""
Input review for the assumption form.

Nothing here blocks a projection: invalid amounts are coerced to 0 by
data_prep.inputs, and this module only reports what will be coerced or ignored
so the dashboard can tell the user.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Mapping

from core.schema import FIXED_INPUT_FIELDS, INPUT_FIELD_ALIASES
from core.utils import coerce_amount, invalid_amount_reason
from engine.records import Assumptions


@dataclass
class ValidationResult:
    """Collects all validation warnings/errors for one set of raw inputs."""
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    def summary(self) -> str:
        lines = []
        if self.errors:
            lines.append(f"ERRORS ({len(self.errors)}):")
            for e in self.errors:
                lines.append(f"  ✗ {e}")
        if self.warnings:
            lines.append(f"WARNINGS ({len(self.warnings)}):")
            for w in self.warnings:
                lines.append(f"  ⚠ {w}")
        if not lines:
            lines.append("✓ All checks passed.")
        return "\n".join(lines)


def _lookup(raw: Mapping[str, Any], name: str, alias: str) -> Any:
    # The alias wins when both keys are present, as in AssumptionInputs.
    if alias in raw:
        return raw[alias]
    return raw.get(name)


_FIXED_VALUES = {
    "commission_per_shipment": Assumptions.COMMISSION_PER_SHIPMENT,
    "credit_card_commission_rate": Assumptions.CREDIT_CARD_COMMISSION_RATE,
}


def validate_inputs(raw: Any) -> ValidationResult:
    """
    Review raw assumption inputs.
    Returns a ValidationResult; errors are structural only, warnings are informational.
    """
    result = ValidationResult()

    if not isinstance(raw, Mapping):
        result.errors.append(f"Inputs must be a mapping of field names to values, got {type(raw).__name__}.")
        return result

    # --- Amounts that will be replaced by 0 ---
    for name, alias in INPUT_FIELD_ALIASES.items():
        value = _lookup(raw, name, alias)
        reason = invalid_amount_reason(value)
        if reason is not None:
            result.warnings.append(f"{alias} is {reason} ({value!r}); using 0.")

    # --- Churn is collected but not applied ---
    churn = coerce_amount(_lookup(raw, "annual_churn_rate", "annualChurnRate"))
    if churn > 0:
        result.warnings.append(
            f"annualChurnRate ({churn:g}%) is recorded but does not affect the projection."
        )

    # --- Fixed rates cannot be overridden ---
    for name, alias in FIXED_INPUT_FIELDS.items():
        value = _lookup(raw, name, alias)
        if value is None:
            continue
        fixed = _FIXED_VALUES[name]
        if invalid_amount_reason(value) is not None or coerce_amount(value) != fixed:
            result.warnings.append(
                f"{alias} is fixed at {fixed:g}; supplied value {value!r} is ignored."
            )

    return result
