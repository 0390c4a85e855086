from gattprint.domain.fields import Characteristic, FieldSpec, FieldType, NumericDomain
from gattprint.domain.holders import FieldHolder, as_holders

__all__ = ["Characteristic", "FieldSpec", "FieldType", "NumericDomain", "FieldHolder", "as_holders"]
