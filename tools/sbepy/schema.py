"""
YAML message description parser and validator for the constants tool.

Parses a YAML message description into a MessageDescription dataclass,
resolving primitive type and byte order names against the type tables.
"""

import math
import re

import yaml
from dataclasses import dataclass, field
from typing import List, Optional

from .naming import format_constant_name, format_property_name
from .types import ByteOrder, PrimitiveType

IDENTIFIER_PATTERN = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")


class ValidationError(Exception):
    """Raised when a message YAML file fails validation."""
    pass


@dataclass
class FieldDescription:
    """One typed entry of a message; ``constant`` is the schema text, if any."""
    name: str
    primitive_type: PrimitiveType
    constant: Optional[str] = None
    description: str = ""

    @property
    def is_constant(self) -> bool:
        return self.constant is not None


@dataclass
class MessageDescription:
    """Parsed message description."""
    name: str
    byte_order: ByteOrder
    fields: List[FieldDescription] = field(default_factory=list)
    description: str = ""


def _require(data: dict, key: str, context: str = "root") -> object:
    """Require a key in a dict, raising ValidationError if missing."""
    if key not in data or data[key] is None:
        raise ValidationError(
            f"Missing required field '{key}' in {context} section"
        )
    return data[key]


def _parse_primitive_type(name: object, context: str) -> PrimitiveType:
    try:
        return PrimitiveType(str(name))
    except ValueError:
        known = ", ".join(t.value for t in PrimitiveType)
        raise ValidationError(
            f"Unknown primitive type '{name}' in {context} (expected one of: {known})"
        )


def _parse_byte_order(name: object) -> ByteOrder:
    try:
        return ByteOrder(str(name))
    except ValueError:
        raise ValidationError(
            f"Unknown byteOrder '{name}' (expected littleEndian or bigEndian)"
        )


def _parse_name(value: object, context: str) -> str:
    name = str(value)
    if not name:
        raise ValidationError(f"Empty name in {context}")
    if not IDENTIFIER_PATTERN.fullmatch(name):
        raise ValidationError(
            f"Name '{name}' in {context} is not a valid identifier"
        )
    return name


def _constant_text(value: object) -> str:
    """Turn a YAML scalar back into schema constant text."""
    # safe_load resolves .nan and .inf to floats, whose str() is not
    # valid Python source.
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "float('inf')" if value > 0 else "float('-inf')"
    return str(value)


def _parse_field(index: int, entry: object) -> FieldDescription:
    context = f"fields[{index}]"
    if not isinstance(entry, dict):
        raise ValidationError(f"{context} must be a mapping with name and type")

    name = _parse_name(_require(entry, "name", context), context)
    primitive_type = _parse_primitive_type(_require(entry, "type", context), context)

    constant = entry.get("constant")
    if constant is not None:
        constant = _constant_text(constant)

    return FieldDescription(
        name=name,
        primitive_type=primitive_type,
        constant=constant,
        description=str(entry.get("description") or ""),
    )


def parse_message_yaml(yaml_str: str) -> MessageDescription:
    """Parse a YAML message description string into a MessageDescription.

    Args:
        yaml_str: YAML string containing the message description.

    Returns:
        MessageDescription with all parsed fields.

    Raises:
        ValidationError: If required fields are missing or invalid.
    """
    if not yaml_str or not yaml_str.strip():
        raise ValidationError("Empty YAML input")

    try:
        data = yaml.safe_load(yaml_str)
    except yaml.YAMLError as e:
        raise ValidationError(f"Invalid YAML: {e}")

    if not isinstance(data, dict):
        raise ValidationError("YAML root must be a mapping")

    # ---- message section ----
    message_section = _require(data, "message")
    if not isinstance(message_section, dict):
        raise ValidationError("message section must be a mapping")
    name = _parse_name(_require(message_section, "name", "message"), "message")

    byte_order = ByteOrder.LITTLE_ENDIAN
    if message_section.get("byteOrder") is not None:
        byte_order = _parse_byte_order(message_section["byteOrder"])

    # ---- fields section ----
    fields_section = _require(data, "fields")
    if not isinstance(fields_section, list) or not fields_section:
        raise ValidationError("fields section must be a non-empty list")

    # Names are compared as generated: maxQty and MaxQty are both MAX_QTY.
    fields = []
    seen = set()
    emitted = {}
    for index, entry in enumerate(fields_section):
        fd = _parse_field(index, entry)
        if fd.name in seen:
            raise ValidationError(f"Duplicate field name '{fd.name}'")
        if fd.is_constant:
            key = ("constant", format_constant_name(fd.name))
        else:
            key = ("field", format_property_name(fd.name))
        if key in emitted:
            raise ValidationError(
                f"Field names '{emitted[key]}' and '{fd.name}' both "
                f"generate '{key[1]}'"
            )
        seen.add(fd.name)
        emitted[key] = fd.name
        fields.append(fd)

    return MessageDescription(
        name=name,
        byte_order=byte_order,
        fields=fields,
        description=str(message_section.get("description") or ""),
    )
