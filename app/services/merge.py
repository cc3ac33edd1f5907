"""
Partial-update merge for departments.
"""
from typing import Any, Dict, Tuple

from app.models.department import Department
from app.schemas.department import DepartmentUpdate

MERGEABLE_FIELDS: Tuple[str, ...] = ("name", "address", "code")


def has_value(value: Any) -> bool:
    """A patch value counts only when it is neither None nor an empty string."""
    return value is not None and value != ""


def merged_fields(existing: Department, patch: DepartmentUpdate) -> Dict[str, Any]:
    """Field values ``existing`` would hold after merging ``patch``, without touching it."""
    values = {field: getattr(existing, field) for field in MERGEABLE_FIELDS}
    for field in MERGEABLE_FIELDS:
        value = getattr(patch, field, None)
        if has_value(value):
            values[field] = value
    return values


def merge_department(existing: Department, patch: DepartmentUpdate) -> Department:
    """
    Apply a partial update to a stored department.

    Each of name, address and code is overwritten only when the patch
    carries a value for it; None and "" leave the stored value alone, so no
    field can be cleared this way. The patch id is ignored.

    Args:
        existing: Department previously loaded from the store
        patch: Partial department data

    Returns:
        The same ``existing`` instance, modified in place
    """
    for field in MERGEABLE_FIELDS:
        value = getattr(patch, field, None)
        if has_value(value):
            setattr(existing, field, value)
    return existing
