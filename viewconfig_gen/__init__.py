"""
viewconfig_gen - native component view config generator.

Turns a component schema (props, events, commands, inheritance) into the
JavaScript view config module a rendering host uses to validate, diff and
dispatch values for native-backed views.
"""

from .codegen import (
    generate_view_configs,
    GeneratorError,
    UnknownTypeAnnotation,
    InvalidInheritance,
    UnknownEventBubblingType,
)

__version__ = "0.1.0"

__all__ = [
    "generate_view_configs",
    "GeneratorError",
    "UnknownTypeAnnotation",
    "InvalidInheritance",
    "UnknownEventBubblingType",
    "__version__",
]
