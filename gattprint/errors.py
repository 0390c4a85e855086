from __future__ import annotations


class GattPrintError(Exception):
    pass


class UnsupportedOperationError(GattPrintError, NotImplementedError):
    pass


class TemplateError(GattPrintError, ValueError):
    """Raised when a pretty-print template cannot be parsed or bound to fields."""


class FieldLookupError(GattPrintError, KeyError):
    def __init__(self, field_name: str) -> None:
        super().__init__(field_name)
        self.field_name = field_name

    def __str__(self) -> str:
        return f"Field '{self.field_name}' not present in value set"


__all__ = ["GattPrintError", "UnsupportedOperationError", "TemplateError", "FieldLookupError"]
