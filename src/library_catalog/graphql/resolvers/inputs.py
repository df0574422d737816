"""
Conversion of GraphQL input objects into catalog mutation payloads
"""

import dataclasses
from typing import Any

import strawberry


def input_values(input: Any, *, drop_none: bool = False) -> dict[str, Any]:
    """
    Collect the fields a client actually supplied.

    Fields left ``UNSET`` are omitted, so a partial update only touches what
    the request named. With ``drop_none`` explicit nulls are omitted too,
    which lets creation fall back to the catalog's defaults.
    """
    values = {}
    for field in dataclasses.fields(input):
        value = getattr(input, field.name)
        if value is strawberry.UNSET or (drop_none and value is None):
            continue
        values[field.name] = value
    return values
