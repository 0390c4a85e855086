from gattprint.core.binary import BitSequence
from gattprint.domain import Characteristic, FieldHolder, FieldSpec, FieldType
from gattprint.errors import FieldLookupError, GattPrintError, TemplateError, UnsupportedOperationError
from gattprint.parsing.ieee11073 import decode_float, decode_sfloat
from gattprint.parsing.integers import decode_twos_complement
from gattprint.prettyprint import Formatter, FormatterFactory, build_formatter
from importlib.metadata import PackageNotFoundError, version

__all__ = [
    "BitSequence",
    "Characteristic",
    "FieldHolder",
    "FieldSpec",
    "FieldType",
    "FieldLookupError",
    "GattPrintError",
    "TemplateError",
    "UnsupportedOperationError",
    "decode_float",
    "decode_sfloat",
    "decode_twos_complement",
    "Formatter",
    "FormatterFactory",
    "build_formatter",
]

try:
    __version__ = version("gattprint")
except PackageNotFoundError:
    __version__ = "0.0.0"
