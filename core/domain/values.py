# Modelo canónico de valores de celda

from dataclasses import dataclass
from enum import Enum
from typing import List, Union

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

Scalar = Union[None, bool, int, float, str]


class ValueKind(str, Enum):
    """Variantes del valor canónico"""

    NULL = "null"
    BOOLEAN = "boolean"
    INTEGER = "integer"
    FLOAT = "float"
    DECIMAL_TEXT = "decimal_text"
    TEXT = "text"
    BINARY_HEX = "binary_hex"
    DATETIME_TEXT = "datetime_text"
    DATE_TEXT = "date_text"
    TIME_TEXT = "time_text"


@dataclass(frozen=True)
class Value:
    """
    Valor de celda normalizado a un escalar compatible con JSON.

    Los tipos cuya precisión nativa excede a int64/float64 (decimal, binario,
    fechas) se representan como texto.
    """

    kind: ValueKind
    data: Scalar = None

    @classmethod
    def null(cls) -> "Value":
        return cls(ValueKind.NULL)

    @classmethod
    def boolean(cls, value: bool) -> "Value":
        return cls(ValueKind.BOOLEAN, bool(value))

    @classmethod
    def integer(cls, value: int) -> "Value":
        if not INT64_MIN <= value <= INT64_MAX:
            raise ValueError(f"Entero fuera de rango int64: {value}")
        return cls(ValueKind.INTEGER, int(value))

    @classmethod
    def float64(cls, value: float) -> "Value":
        return cls(ValueKind.FLOAT, float(value))

    @classmethod
    def decimal_text(cls, value: str) -> "Value":
        return cls(ValueKind.DECIMAL_TEXT, value)

    @classmethod
    def text(cls, value: str) -> "Value":
        return cls(ValueKind.TEXT, value)

    @classmethod
    def binary_hex(cls, value: str) -> "Value":
        return cls(ValueKind.BINARY_HEX, value)

    @classmethod
    def datetime_text(cls, value: str) -> "Value":
        return cls(ValueKind.DATETIME_TEXT, value)

    @classmethod
    def date_text(cls, value: str) -> "Value":
        return cls(ValueKind.DATE_TEXT, value)

    @classmethod
    def time_text(cls, value: str) -> "Value":
        return cls(ValueKind.TIME_TEXT, value)

    @property
    def is_null(self) -> bool:
        return self.kind is ValueKind.NULL

    def to_json(self) -> Scalar:
        return self.data


Row = List[Value]
