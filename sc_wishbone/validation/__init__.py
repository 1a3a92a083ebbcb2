from .errors import ValidationError, ValidationIssue
from .inputs import validate_inputs

__all__ = ["ValidationError", "ValidationIssue", "validate_inputs"]
