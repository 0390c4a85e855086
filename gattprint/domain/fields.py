"""
Minimal characteristic catalog contract: the ordered fields of a
characteristic, their formats and the optional pretty-print template.
"""
from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict


class NumericDomain(Enum):
    INTEGER = "integer"
    DECIMAL = "decimal"


class FieldType(Enum):
    BOOLEAN = "boolean"
    UINT = "uint"
    SINT = "sint"
    FLOAT_IEEE754 = "float_ieee754"
    FLOAT_IEEE11073 = "float_ieee11073"
    UTF8S = "utf8s"
    UTF16S = "utf16s"
    STRUCT = "struct"

    @property
    def numeric_domain(self) -> Optional[NumericDomain]:
        return _NUMERIC_DOMAINS.get(self)


_NUMERIC_DOMAINS: dict[FieldType, NumericDomain] = {
    FieldType.UINT: NumericDomain.INTEGER,
    FieldType.SINT: NumericDomain.INTEGER,
    FieldType.FLOAT_IEEE754: NumericDomain.DECIMAL,
    FieldType.FLOAT_IEEE11073: NumericDomain.DECIMAL,
}


class FieldSpec(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    type: FieldType


class Characteristic(BaseModel):
    """
    A characteristic as described by the specification catalog.

    Attributes:
        name: The characteristic name, e.g. ``"Heart Rate Measurement"``.
        fields: Declared fields in declaration order.
        pretty_print: The pretty-print template, if the catalog provides one.
    """
    model_config = ConfigDict(frozen=True)

    name: str
    fields: tuple[FieldSpec, ...] = ()
    pretty_print: Optional[str] = None
