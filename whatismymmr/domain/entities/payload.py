"""Lenient access to decoded JSON; payloads are never validated."""
from typing import Any, Mapping, Optional


def as_mapping(value: Any) -> Optional[Mapping[str, Any]]:
    """``value`` if it is a JSON object, else None (treated as missing)."""
    return value if isinstance(value, Mapping) else None


def get_field(data: Any, key: str) -> Any:
    """``data[key]``, or None when ``data`` is not an object or lacks the key."""
    mapping = as_mapping(data)
    return mapping.get(key) if mapping is not None else None
