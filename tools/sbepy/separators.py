"""
Separators and the line-append primitive used to build generated source.
"""

from enum import Enum
from typing import TextIO


class Separator(Enum):
    """
    Punctuation written by generated ``__str__`` methods.

    Group and array share brackets; the first tuple element keeps them
    distinct members rather than enum aliases.
    """
    BEGIN_GROUP = ("group", "[")
    END_GROUP = ("group", "]")
    BEGIN_COMPOSITE = ("composite", "(")
    END_COMPOSITE = ("composite", ")")
    BEGIN_SET = ("set", "{")
    END_SET = ("set", "}")
    BEGIN_ARRAY = ("array", "[")
    END_ARRAY = ("array", "]")
    FIELD = ("field", "|")
    KEY_VALUE = ("key_value", "=")
    ENTRY = ("entry", ",")

    def __init__(self, construct: str, symbol: str):
        self.construct = construct
        self.symbol = symbol

    def __str__(self) -> str:
        return self.symbol

    def append_to_generated_builder(self, builder: TextIO, indent: str,
                                    builder_name: str):
        """Emit a statement that adds this separator to ``builder_name``."""
        append(builder, indent, f"{builder_name} += str('{self.symbol}')")


def append(builder: TextIO, indent: str, line: str):
    """Write one line of generated code: indent, line, newline."""
    builder.write(indent)
    builder.write(line)
    builder.write("\n")
