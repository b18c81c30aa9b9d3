"""JSON serialization of listing models."""

from dataclasses import fields, is_dataclass
from datetime import date, datetime
from enum import Enum
from typing import Any

# Python attribute name -> JSON key where camel-casing alone is not enough
FIELD_ALIASES = {
    "property_id": "id",
    "search_id": "id",
}


def to_camel(name: str) -> str:
    """Convert ``snake_case`` to ``camelCase``."""
    head, *rest = name.split("_")
    return head + "".join(part[:1].upper() + part[1:] for part in rest)


def to_dict(obj: Any) -> dict:
    """Convert a dataclass to a JSON-ready dict with camelCase keys.

    Parameters
    ----------
    obj : Any
        A dataclass instance, or a dict which is returned with its values
        serialized.

    Returns
    -------
    dict
        Serialized dictionary.
    """
    if is_dataclass(obj) and not isinstance(obj, type):
        return {
            FIELD_ALIASES.get(f.name, to_camel(f.name)): serialize_value(getattr(obj, f.name))
            for f in fields(obj)
        }
    if isinstance(obj, dict):
        return {k: serialize_value(v) for k, v in obj.items()}
    return {"value": str(obj)}


def to_dicts(objs: Any) -> list[dict]:
    """Serialize each item of an iterable with ``to_dict``."""
    return [to_dict(obj) for obj in objs]


def serialize_value(value: Any) -> Any:
    """Serialize a value for JSON output."""
    if is_dataclass(value) and not isinstance(value, type):
        return to_dict(value)
    elif isinstance(value, Enum):
        return value.value
    elif isinstance(value, datetime):
        return value.isoformat()
    elif isinstance(value, date):
        return value.isoformat()
    elif isinstance(value, dict):
        return {k: serialize_value(v) for k, v in value.items()}
    elif isinstance(value, (list, tuple)):
        return [serialize_value(v) for v in value]
    return value
