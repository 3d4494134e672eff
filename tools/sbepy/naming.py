"""
Identifier casing: schema camelCase names to Python property, class,
constant and module names.
"""

import re

# Lowercase or non-letter followed by an uppercase letter. Runs of capitals
# are never split.
CAM_SNAKE_PATTERN = re.compile(r"([^_A-Z])([A-Z])")


def _require_name(s: str) -> str:
    if not s:
        raise ValueError("identifier must not be empty")
    return s


def _single_char(mapped: str, original: str) -> str:
    # A case mapping that expands ("ß" -> "SS") leaves the character as is.
    return mapped if len(mapped) == 1 else original


def to_upper_first_char(s: str) -> str:
    """Uppercase the first character, leaving the rest untouched."""
    _require_name(s)
    return _single_char(s[0].upper(), s[0]) + s[1:]


def to_lower_first_char(s: str) -> str:
    """Lowercase the first character, leaving the rest untouched."""
    _require_name(s)
    return _single_char(s[0].lower(), s[0]) + s[1:]


def format_property_name(s: str) -> str:
    return to_lower_first_char(s)


def format_class_name(s: str) -> str:
    return to_upper_first_char(s)


def format_module_name(s: str) -> str:
    return cam_to_snake(s)


def cam_to_snake(s: str, to_upper_first: bool = True) -> str:
    """
    Convert CamelCase to snake_case.

    With ``to_upper_first`` the first character is uppercased before the
    split, which is what callers want when snake-casing a class name.

        >>> cam_to_snake("simpleCamelCase")
        'simple_camel_case'
        >>> cam_to_snake("HTTPServer")
        'httpserver'
    """
    if to_upper_first:
        s = to_upper_first_char(s)
    return CAM_SNAKE_PATTERN.sub(r"\1_\2", s).lower()


def format_constant_name(s: str) -> str:
    """Schema name to a module-level constant name (UPPER_SNAKE)."""
    return cam_to_snake(s, to_upper_first=False).upper()
