"""Positional argument extraction for engine calls.

The engine takes every method's parameters as a flat JSON array, e.g.
``balance.query`` -> ``[user_id, asset, asset, ...]``.
"""

from __future__ import annotations

import dataclasses
from decimal import Decimal
from enum import Enum
from typing import Any

from pydantic import BaseModel

from viabtc_rpc.utils.exceptions import ExtractionError

_SCALARS = (str, int, float, bool)


def _normalize_leaf(value: Any, *, name: str) -> Any:
    if isinstance(value, Enum):
        return _normalize_leaf(value.value, name=name)
    if value is None or isinstance(value, _SCALARS):
        return value
    if isinstance(value, Decimal):
        return str(value)
    raise ExtractionError(
        f"unsupported argument type for {name}: {type(value).__name__}",
        value_type=type(value).__name__,
    )


def _field_items(params: Any) -> list[tuple[str, Any]]:
    if isinstance(params, BaseModel):
        return [(key, getattr(params, key)) for key in type(params).model_fields]
    if dataclasses.is_dataclass(params) and not isinstance(params, type):
        return [(f.name, getattr(params, f.name)) for f in dataclasses.fields(params)]
    if isinstance(params, dict):
        return [(str(key), value) for key, value in params.items()]
    return []


def extract_arguments(params: Any) -> list[Any]:
    """
    Normalize a call's parameter value into the positional argument list.

    Structured values (pydantic models, dataclasses, dicts) contribute their
    field values in declaration order; a list-valued field is spread in place.
    Raises ExtractionError for values that have no wire representation.
    """
    if params is None:
        return []
    if isinstance(params, (list, tuple)):
        return [_normalize_leaf(item, name=f"params[{i}]") for i, item in enumerate(params)]
    if isinstance(params, (BaseModel, dict)) or (
        dataclasses.is_dataclass(params) and not isinstance(params, type)
    ):
        args: list[Any] = []
        for key, value in _field_items(params):
            if isinstance(value, (list, tuple)):
                args.extend(_normalize_leaf(item, name=f"{key}[{i}]") for i, item in enumerate(value))
            else:
                args.append(_normalize_leaf(value, name=key))
        return args
    return [_normalize_leaf(params, name="params")]
