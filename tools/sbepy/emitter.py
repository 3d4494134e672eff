"""
Emitter: renders a MessageDescription as a Python constants module.

Generated layout:

    MAX_QTY = 18446744073709551615

    class TradeCaptureLayout:
        FORMAT = "<Qd"
        ENCODED_LENGTH = 16
        FIELDS = (...)

        @staticmethod
        def describe(values): ...
"""

import io

from .literals import generate_literal, generate_py_doc
from .naming import format_class_name, format_constant_name, format_property_name
from .schema import MessageDescription
from .separators import Separator, append
from .types import python_type_name, struct_format, struct_size

INDENT = "    "


def layout_class_name(name: str) -> str:
    return format_class_name(name) + "Layout"


def _emit_constants(out: io.StringIO, desc: MessageDescription):
    for fd in desc.fields:
        if not fd.is_constant:
            continue
        if fd.description:
            append(out, "", f"# {fd.description}")
        literal = generate_literal(fd.primitive_type, fd.constant)
        append(out, "", f"{format_constant_name(fd.name)} = {literal}")


def _emit_describe(out: io.StringIO, names, indent: str):
    body = indent + INDENT
    append(out, indent, "@staticmethod")
    append(out, indent, "def describe(values):")
    append(out, body, 'builder = ""')
    Separator.BEGIN_COMPOSITE.append_to_generated_builder(out, body, "builder")
    for i, name in enumerate(names):
        if i > 0:
            Separator.FIELD.append_to_generated_builder(out, body, "builder")
        append(out, body, f'builder += "{name}"')
        Separator.KEY_VALUE.append_to_generated_builder(out, body, "builder")
        append(out, body, f"builder += str(values[{i}])")
    Separator.END_COMPOSITE.append_to_generated_builder(out, body, "builder")
    append(out, body, "return builder")


def _emit_layout(out: io.StringIO, desc: MessageDescription):
    encoded = [fd for fd in desc.fields if not fd.is_constant]
    types = [fd.primitive_type for fd in encoded]
    names = [format_property_name(fd.name) for fd in encoded]

    append(out, "", f"class {layout_class_name(desc.name)}:")
    doc = generate_py_doc(INDENT, desc.description)
    if doc:
        out.write(doc)
        append(out, "", "")
    append(out, INDENT, f'FORMAT = "{struct_format(desc.byte_order, types)}"')
    append(out, INDENT, f"ENCODED_LENGTH = {struct_size(types)}")
    append(out, INDENT, "FIELDS = (")
    for name in names:
        append(out, INDENT * 2, f'"{name}",')
    append(out, INDENT, ")")
    append(out, INDENT, "TYPES = (")
    for fd in encoded:
        append(out, INDENT * 2, f"{python_type_name(fd.primitive_type)},")
    append(out, INDENT, ")")
    append(out, "", "")
    _emit_describe(out, names, INDENT)


def emit_constants_module(desc: MessageDescription) -> str:
    """Generate the Python source for a message's constants and layout."""
    out = io.StringIO()

    append(out, "", '"""')
    append(out, "", f"Generated by tools.sbepy for message '{desc.name}'. Do not edit.")
    append(out, "", '"""')
    append(out, "", "")

    has_constants = any(fd.is_constant for fd in desc.fields)
    if has_constants:
        _emit_constants(out, desc)
        append(out, "", "")
        append(out, "", "")

    _emit_layout(out, desc)
    return out.getvalue()
