from __future__ import annotations

from typing import Any

from src.core.errors import BadRequestError


def normalize_user_id(value: Any) -> int:
    """Coerce a CRM or path user id to the canonical integer identity."""
    if isinstance(value, bool) or value is None:
        raise BadRequestError(f"Invalid userId: {value}. Must be a number.")
    if isinstance(value, int):
        return value
    try:
        as_float = float(str(value).strip())
    except ValueError as exc:
        raise BadRequestError(f"Invalid userId: {value}. Must be a number.") from exc
    if not as_float.is_integer():
        raise BadRequestError(f"Invalid userId: {value}. Must be a number.")
    return int(as_float)
