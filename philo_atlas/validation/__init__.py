from .errors import ValidationIssue
from .dataset_validation import validate_entry_items

__all__ = ["ValidationIssue", "validate_entry_items"]
