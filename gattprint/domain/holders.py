from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Any, Iterable, Mapping, Optional, Union


@dataclass(frozen=True)
class FieldHolder:
    """
    A decoded value for one named field.

    The value may be an ``int``, ``Decimal``, ``float``, ``str`` or ``None``.
    The typed getters return the supplied default whenever the value cannot
    be read in the requested domain.
    """
    name: str
    value: Any = None

    def get_integer(self, default: Optional[int] = None) -> Optional[int]:
        value = self.value
        if isinstance(value, bool):
            return int(value)
        if isinstance(value, int):
            return value
        if isinstance(value, float):
            return int(value) if math.isfinite(value) else default
        if isinstance(value, Decimal):
            return int(value) if value.is_finite() else default
        if isinstance(value, str):
            try:
                return int(value.strip(), 10)
            except ValueError:
                return default
        return default

    def get_decimal(self, default: Optional[Decimal] = None) -> Optional[Decimal]:
        value = self.value
        if isinstance(value, Decimal):
            return value if value.is_finite() else default
        if isinstance(value, (bool, int)):
            return Decimal(int(value))
        if isinstance(value, float):
            return Decimal(repr(value)) if math.isfinite(value) else default
        if isinstance(value, str):
            try:
                parsed = Decimal(value.strip())
            except InvalidOperation:
                return default
            return parsed if parsed.is_finite() else default
        return default

    def get_string(self) -> str:
        if self.value is None:
            return ""
        return str(self.value)


ValueSet = Union[Iterable[FieldHolder], Mapping[str, Any]]


def as_holders(values: ValueSet) -> list[FieldHolder]:
    """Accept either field holders or a plain name -> value mapping."""
    if isinstance(values, Mapping):
        return [FieldHolder(name=name, value=value) for name, value in values.items()]
    return list(values)


def find_holder(holders: Iterable[FieldHolder], field_name: str) -> Optional[FieldHolder]:
    wanted = field_name.casefold()
    for holder in holders:
        if holder.name.casefold() == wanted:
            return holder
    return None
