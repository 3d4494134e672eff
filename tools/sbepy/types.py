"""
Type system: schema primitive types mapped to Python type names, struct
format codes and encoded widths.

Ref: https://docs.python.org/3/library/struct.html#format-characters
"""

from enum import Enum
from types import MappingProxyType
from typing import Iterable


class PrimitiveType(Enum):
    """Schema primitive kinds, keyed by their schema spelling."""
    CHAR = "char"
    INT8 = "int8"
    INT16 = "int16"
    INT32 = "int32"
    INT64 = "int64"
    UINT8 = "uint8"
    UINT16 = "uint16"
    UINT32 = "uint32"
    UINT64 = "uint64"
    FLOAT = "float"
    DOUBLE = "double"


class ByteOrder(Enum):
    """Schema byteOrder attribute values."""
    LITTLE_ENDIAN = "littleEndian"
    BIG_ENDIAN = "bigEndian"


# Primitive type → Python type name.
TYPE_NAME_MAP = MappingProxyType({
    PrimitiveType.CHAR:   "bytes",
    PrimitiveType.INT8:   "int",
    PrimitiveType.INT16:  "int",
    PrimitiveType.INT32:  "int",
    PrimitiveType.INT64:  "int",
    PrimitiveType.UINT8:  "int",
    PrimitiveType.UINT16: "int",
    PrimitiveType.UINT32: "int",
    PrimitiveType.UINT64: "int",
    PrimitiveType.FLOAT:  "float",
    PrimitiveType.DOUBLE: "float",
})

# Primitive type → struct format character.
STRUCT_CODE_MAP = MappingProxyType({
    PrimitiveType.CHAR:   "s",
    PrimitiveType.INT8:   "b",
    PrimitiveType.INT16:  "h",
    PrimitiveType.INT32:  "i",
    PrimitiveType.INT64:  "q",
    PrimitiveType.UINT8:  "B",
    PrimitiveType.UINT16: "H",
    PrimitiveType.UINT32: "I",
    PrimitiveType.UINT64: "Q",
    PrimitiveType.FLOAT:  "f",
    PrimitiveType.DOUBLE: "d",
})

# Primitive type → encoded size in bytes.
SIZE_MAP = MappingProxyType({
    PrimitiveType.CHAR:   1,
    PrimitiveType.INT8:   1,
    PrimitiveType.INT16:  2,
    PrimitiveType.INT32:  4,
    PrimitiveType.INT64:  8,
    PrimitiveType.UINT8:  1,
    PrimitiveType.UINT16: 2,
    PrimitiveType.UINT32: 4,
    PrimitiveType.UINT64: 8,
    PrimitiveType.FLOAT:  4,
    PrimitiveType.DOUBLE: 8,
})

# Byte order → struct byte-order prefix (standard sizes, no padding).
BYTE_ORDER_MAP = MappingProxyType({
    ByteOrder.LITTLE_ENDIAN: "<",
    ByteOrder.BIG_ENDIAN:    ">",
})


def _check_complete(table, keys, table_name):
    missing = [k.name for k in keys if k not in table]
    if missing:
        raise RuntimeError(
            f"{table_name} has no entry for: {', '.join(missing)}")


_check_complete(TYPE_NAME_MAP, PrimitiveType, "TYPE_NAME_MAP")
_check_complete(STRUCT_CODE_MAP, PrimitiveType, "STRUCT_CODE_MAP")
_check_complete(SIZE_MAP, PrimitiveType, "SIZE_MAP")
_check_complete(BYTE_ORDER_MAP, ByteOrder, "BYTE_ORDER_MAP")


def python_type_name(primitive_type: PrimitiveType) -> str:
    """Map a primitive type to the Python type that holds its value."""
    return TYPE_NAME_MAP[primitive_type]


def python_type_code(primitive_type: PrimitiveType) -> str:
    """Map a primitive type to its struct format character."""
    return STRUCT_CODE_MAP[primitive_type]


def primitive_size(primitive_type: PrimitiveType) -> int:
    return SIZE_MAP[primitive_type]


def python_endian_code(byte_order: ByteOrder) -> str:
    """Map a byte order to its struct byte-order prefix."""
    return BYTE_ORDER_MAP[byte_order]


def struct_format(byte_order: ByteOrder,
                  primitive_types: Iterable[PrimitiveType]) -> str:
    """
    Build a struct format string for a run of primitives.

    The prefix selects standard sizes, so the result always agrees with
    ``struct_size`` for the same primitives.
    """
    codes = "".join(python_type_code(t) for t in primitive_types)
    return python_endian_code(byte_order) + codes


def struct_size(primitive_types: Iterable[PrimitiveType]) -> int:
    return sum(primitive_size(t) for t in primitive_types)
