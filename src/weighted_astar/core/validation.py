"""
Validation components for caller-supplied graph data.

Distances and node weights must be finite, non-negative real numbers. The
helpers here are used both for the lazy checks the graph model performs on
every read and for eager whole-graph validation.
"""

import math
from dataclasses import dataclass, field
from numbers import Real
from typing import Any, Dict, List, Optional

from .exceptions import InvalidWeightError


@dataclass
class ValidationResult:
    """
    Container for validation results.

    Attributes:
        is_valid (bool): Whether the validation passed successfully
        errors (List[str]): List of validation error messages
        warnings (List[str]): List of validation warning messages
        context (Optional[Dict[str, Any]]): Additional context about the validation
    """

    is_valid: bool
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    context: Optional[Dict[str, Any]] = None

    def raise_for_errors(self) -> None:
        """Raise InvalidWeightError with the first error, if any."""
        if self.errors:
            raise InvalidWeightError(self.errors[0])


def check_value(value: Any, label: str) -> Optional[str]:
    """Return an error message if value is not a finite, non-negative number."""
    # bool is a Real subclass but never a meaningful distance
    if isinstance(value, bool) or not isinstance(value, Real):
        return f"{label} must be numeric, got {type(value).__name__}"
    if math.isnan(value) or math.isinf(value):
        return f"{label} must be a finite number, got {value}"
    if value < 0:
        return f"{label} must be non-negative, got {value}"
    return None


def ensure_value(value: Any, label: str) -> float:
    """Return value as float, raising InvalidWeightError if it is not usable."""
    error = check_value(value, label)
    if error:
        raise InvalidWeightError(error)
    return float(value)
