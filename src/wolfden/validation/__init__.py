"""Runtime rule validation.

Modules:
- types.py: ValidationViolation, ValidationSeverity
- exceptions.py: ValidationError
- roster_consistency.py: R.1-R.4 roster and outcome checks
"""

from .types import ValidationViolation, ValidationSeverity
from .exceptions import ValidationError
from .roster_consistency import validate_roster, validate_outcome

__all__ = [
    "ValidationViolation",
    "ValidationSeverity",
    "ValidationError",
    "validate_roster",
    "validate_outcome",
]
