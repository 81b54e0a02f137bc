"""
JavaScript naming utilities.

Identifier checks, quoting and case helpers for the generated
JavaScript source.
"""

import re

_IDENTIFIER_RE = re.compile(r"[A-Za-z_$][A-Za-z0-9_$]*")


def capitalize_first(name: str) -> str:
    """Uppercase the first character only (``press`` -> ``Press``)."""
    return name[:1].upper() + name[1:]


def is_valid_identifier(name: str) -> bool:
    """Check whether a name can be used unquoted as an object key."""
    return _IDENTIFIER_RE.fullmatch(name) is not None


def quote_string(value: str, quote: str = "'") -> str:
    """
    Render a string literal.

    Args:
        value: Raw string value
        quote: Quote character to wrap the literal in

    Returns:
        Quoted and escaped literal
    """
    escaped = (
        value.replace("\\", "\\\\")
        .replace(quote, f"\\{quote}")
        .replace("\n", "\\n")
        .replace("\r", "\\r")
        .replace("\t", "\\t")
    )
    return f"{quote}{escaped}{quote}"


def property_key(name: str) -> str:
    """Render an object key, quoting it only when required."""
    if is_valid_identifier(name):
        return name
    return quote_string(name)
