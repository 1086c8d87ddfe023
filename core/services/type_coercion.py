# Decodificación de celdas: cascada ordenada de tipos nativos -> Value canónico

import datetime
import decimal
import logging
import math
import struct
import uuid
from dataclasses import dataclass
from typing import Any, Iterable, Optional, Sequence, Tuple

from core.domain.values import INT64_MAX, INT64_MIN, Row, Value

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RawCell:
    """Celda tal como la entrega el driver, con el tipo que declara la columna"""

    value: Any
    wire_type: Optional[type] = None

    @property
    def declared_type(self) -> type:
        if self.wire_type is not None:
            return self.wire_type
        return type(self.value)


class CellDecoder:
    """
    Intento de extracción para un tipo nativo.

    `accepts` comprueba el tipo declarado de la columna (coincidencia exacta,
    así bool no pasa por int ni datetime por date); `extract` retorna None si
    el valor no se puede representar con este decodificador.
    """

    name = "decoder"
    wire_types: Tuple[type, ...] = ()

    def accepts(self, cell: RawCell) -> bool:
        return cell.declared_type in self.wire_types

    def extract(self, value: Any) -> Optional[Value]:
        raise NotImplementedError


class TextDecoder(CellDecoder):
    name = "text"
    wire_types = (str,)

    def extract(self, value):
        if isinstance(value, str):
            return Value.text(value)
        return None


class IntegerDecoder(CellDecoder):
    wire_types = (int,)

    def __init__(self, name: str, minimum: int, maximum: int):
        self.name = name
        self.minimum = minimum
        self.maximum = maximum

    def extract(self, value):
        if isinstance(value, bool) or not isinstance(value, int):
            return None
        if self.minimum <= value <= self.maximum:
            return Value.integer(value)
        return None


class Float32Decoder(CellDecoder):
    name = "f32"
    wire_types = (float,)

    def extract(self, value):
        if not isinstance(value, float) or not math.isfinite(value):
            return None
        try:
            narrowed = struct.unpack("f", struct.pack("f", value))[0]
        except OverflowError:
            return None
        if narrowed != value:
            return None
        return Value.float64(value)


class Float64Decoder(CellDecoder):
    name = "f64"
    wire_types = (float,)

    def extract(self, value):
        if isinstance(value, float) and math.isfinite(value):
            return Value.float64(value)
        return None


class DecimalDecoder(CellDecoder):
    name = "decimal"
    wire_types = (decimal.Decimal,)

    def extract(self, value):
        if isinstance(value, decimal.Decimal) and value.is_finite():
            # notación posicional, sin pasar por float binario
            return Value.decimal_text(format(value, "f"))
        return None


class BooleanDecoder(CellDecoder):
    name = "bool"
    wire_types = (bool,)

    def extract(self, value):
        if isinstance(value, bool):
            return Value.boolean(value)
        return None


def _format_date(value: datetime.date) -> str:
    return f"{value.year:04d}-{value.month:02d}-{value.day:02d}"


def _format_time(value) -> str:
    return f"{value.hour:02d}:{value.minute:02d}:{value.second:02d}"


class DateTimeDecoder(CellDecoder):
    name = "datetime"
    wire_types = (datetime.datetime,)

    def extract(self, value):
        if isinstance(value, datetime.datetime):
            return Value.datetime_text(f"{_format_date(value)} {_format_time(value)}")
        return None


class DateDecoder(CellDecoder):
    name = "date"
    wire_types = (datetime.date,)

    def extract(self, value):
        if isinstance(value, datetime.date) and not isinstance(value, datetime.datetime):
            return Value.date_text(_format_date(value))
        return None


class TimeDecoder(CellDecoder):
    name = "time"
    wire_types = (datetime.time,)

    def extract(self, value):
        if isinstance(value, datetime.time):
            return Value.time_text(_format_time(value))
        return None


class UuidDecoder(CellDecoder):
    name = "uuid"
    wire_types = (uuid.UUID,)

    def extract(self, value):
        if isinstance(value, uuid.UUID):
            return Value.text(str(value))
        return None


class BinaryDecoder(CellDecoder):
    name = "binary"
    wire_types = (bytes, bytearray, memoryview)

    def extract(self, value):
        if isinstance(value, (bytes, bytearray, memoryview)):
            return Value.binary_hex(bytes(value).hex())
        return None


# El orden es parte del contrato: del tipo más específico al más general
DEFAULT_DECODERS: Tuple[CellDecoder, ...] = (
    TextDecoder(),
    IntegerDecoder("u8", 0, 2**8 - 1),
    IntegerDecoder("i16", -(2**15), 2**15 - 1),
    IntegerDecoder("i32", -(2**31), 2**31 - 1),
    IntegerDecoder("i64", INT64_MIN, INT64_MAX),
    Float32Decoder(),
    Float64Decoder(),
    DecimalDecoder(),
    BooleanDecoder(),
    DateTimeDecoder(),
    DateDecoder(),
    TimeDecoder(),
    UuidDecoder(),
    BinaryDecoder(),
)


class TypeCoercionPipeline:
    """Decodifica celdas crudas sin catálogo previo de tipos; nunca falla"""

    def __init__(self, decoders: Sequence[CellDecoder] = DEFAULT_DECODERS):
        self.decoders = tuple(decoders)

    def decode(self, cell: RawCell) -> Value:
        if cell.value is None:
            return Value.null()

        for decoder in self.decoders:
            if not decoder.accepts(cell):
                continue
            try:
                value = decoder.extract(cell.value)
            except Exception as e:
                logger.debug(f"Decoder {decoder.name} falló: {e}")
                continue
            if value is not None:
                return value

        logger.debug(f"Celda no decodificable ({cell.declared_type.__name__}), se usa NULL")
        return Value.null()

    def decode_row(self, cells: Iterable[RawCell]) -> Row:
        return [self.decode(cell) for cell in cells]

    def decode_values(
        self, values: Sequence[Any], wire_types: Sequence[Optional[type]]
    ) -> Row:
        """Decodifica una fila del driver usando los tipos de cursor.description"""
        return self.decode_row(
            RawCell(value, wire_type) for value, wire_type in zip(values, wire_types)
        )
