"""JSON-ready conversion of transaction records for the sinks."""

from dataclasses import fields, is_dataclass
from datetime import date, time
from decimal import Decimal
from enum import Enum
from typing import Any


def serialize_value(value: Any) -> Any:
    """Convert one field value to a JSON-compatible value.

    ``Decimal`` becomes a string so money keeps its exact scale
    (``"635.90"``, not ``635.9``). ``date``, ``datetime`` and ``time`` use
    ISO format; enums use their wire value.
    """
    if isinstance(value, Decimal):
        return str(value)
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (date, time)):
        return value.isoformat()
    if isinstance(value, dict):
        return {key: serialize_value(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [serialize_value(item) for item in value]
    return value


def record_to_dict(obj: Any) -> dict[str, Any]:
    """Field-by-field conversion of a flat dataclass such as ``TransactionRecord``.

    Properties like ``total_charges`` are derived and left out.
    """
    return {f.name: serialize_value(getattr(obj, f.name)) for f in fields(obj)}


def to_dict(obj: Any) -> dict[str, Any]:
    """Convert whatever a sink is handed into a JSON object."""
    if is_dataclass(obj) and not isinstance(obj, type):
        return record_to_dict(obj)
    if isinstance(obj, dict):
        return serialize_value(obj)
    return {"value": str(obj)}
