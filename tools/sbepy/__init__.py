"""
sbepy: Python target mapping for the binary-encoding schema code generator.

Maps schema primitive types to Python type names, struct format codes and
widths; converts schema identifiers to Python casing; renders schema
constants as Python literals; and provides the separator and line-append
helpers that generated-source templates build on.
"""
