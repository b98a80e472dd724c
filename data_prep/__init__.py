"""
Input preparation: coercing raw form values into engine assumptions, validation.
"""

from .inputs import AssumptionInputs, parse_assumptions
from .validators import ValidationResult, validate_inputs

__all__ = [
    "AssumptionInputs",
    "parse_assumptions",
    "ValidationResult",
    "validate_inputs",
]
