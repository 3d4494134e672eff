"""
Literal rendering: schema constant text to Python literal source.
"""

import re

from .types import PrimitiveType

NAN_LITERAL = "float('nan')"

_UINT64_MASK = 0xFFFFFFFFFFFFFFFF
_INT64_MIN = -(1 << 63)

DECIMAL_PATTERN = re.compile(r"-?[0-9]+")

_PASS_THROUGH = {
    PrimitiveType.INT8,
    PrimitiveType.INT16,
    PrimitiveType.INT32,
    PrimitiveType.INT64,
    PrimitiveType.UINT8,
    PrimitiveType.UINT16,
    PrimitiveType.UINT32,
}


def _uint64_literal(value: str) -> str:
    # Either spelling of the 64-bit pattern is accepted: "-1" and
    # "18446744073709551615" are the same value. No sign, spaces or
    # digit separators beyond a leading minus.
    if not DECIMAL_PATTERN.fullmatch(value):
        raise ValueError(f"not an integer literal: {value!r}")
    n = int(value)
    if n < _INT64_MIN or n > _UINT64_MASK:
        raise ValueError(f"value {value!r} does not fit in 64 bits")
    return str(n & _UINT64_MASK)


def generate_literal(primitive_type: PrimitiveType, value: str) -> str:
    """
    Render a schema constant as a Python literal.

    Args:
        primitive_type: Declared type of the constant.
        value: Constant text exactly as it appears in the schema.

    Returns:
        Python source for the value.

    Raises:
        ValueError: If a uint64 value is not a 64-bit integer.
        KeyError: If ``primitive_type`` has no literal form.
    """
    if primitive_type is PrimitiveType.CHAR:
        return '"' + value + '"'
    if primitive_type in _PASS_THROUGH:
        return value
    if primitive_type is PrimitiveType.UINT64:
        return _uint64_literal(value)
    if primitive_type in (PrimitiveType.FLOAT, PrimitiveType.DOUBLE):
        if value.endswith("NaN"):
            return NAN_LITERAL
        return value
    raise KeyError(primitive_type)


def generate_py_doc(indent: str, description: str) -> str:
    """
    Render a schema description as a docstring block at ``indent``.

    Returns an empty string when there is no description.
    """
    if not description or not description.strip():
        return ""
    lines = [line.rstrip() for line in description.strip().splitlines()]
    if len(lines) == 1:
        return f'{indent}"""{lines[0]}"""\n'
    body = "".join(f"{indent}{line}\n" if line else "\n" for line in lines)
    return f'{indent}"""\n{body}{indent}"""\n'
