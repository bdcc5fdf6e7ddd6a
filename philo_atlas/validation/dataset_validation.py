from __future__ import annotations

import numbers
from typing import Any, List

from philo_atlas.validation.errors import ValidationIssue

REQUIRED_FIELDS = ("id", "region")


def _is_coordinate(value: Any) -> bool:
    if not isinstance(value, (list, tuple)) or len(value) != 2:
        return False
    return all(
        isinstance(v, numbers.Real) and not isinstance(v, bool) for v in value
    )


def validate_entry_items(items: List[Any]) -> List[ValidationIssue]:
    """
    Check every raw entry has an id, a region and a (lat, lng) location.

    Returns the list of issues; an empty list means the payload is usable.
    """
    issues: List[ValidationIssue] = []
    seen_ids: set = set()

    for idx, item in enumerate(items):
        if not isinstance(item, dict):
            issues.append(ValidationIssue("ENTRY_NOT_OBJECT", f"Entry #{idx} is not an object.", idx))
            continue

        for key in REQUIRED_FIELDS:
            if item.get(key) in (None, ""):
                issues.append(ValidationIssue(f"ENTRY_MISSING_{key.upper()}", f"Entry #{idx} has no '{key}'.", idx))

        entry_id = item.get("id")
        if entry_id is not None:
            if isinstance(entry_id, bool) or not isinstance(entry_id, int) or entry_id <= 0:
                issues.append(
                    ValidationIssue("ENTRY_BAD_ID", f"Entry #{idx} id {entry_id!r} is not a positive integer.", idx)
                )
            elif entry_id in seen_ids:
                issues.append(ValidationIssue("ENTRY_DUPLICATE_ID", f"Entry id {entry_id} appears twice.", idx))
            else:
                seen_ids.add(entry_id)

        location = item.get("location", item.get("coordinate"))
        if location is None:
            issues.append(ValidationIssue("ENTRY_MISSING_LOCATION", f"Entry #{idx} has no 'location'.", idx))
        elif not _is_coordinate(location):
            issues.append(
                ValidationIssue("ENTRY_BAD_LOCATION", f"Entry #{idx} location {location!r} is not [lat, lng].", idx)
            )

    return issues
