"""
Exceptions raised while generating view configurations.

Every error here is fatal: generation for the whole library is aborted.
"""

from typing import Any


class GeneratorError(Exception):
    """Base exception for code generation errors."""

    pass


class UnknownTypeAnnotation(GeneratorError):
    """A prop or array element type outside the supported set."""

    def __init__(self, name: Any, array_element: bool = False):
        self.name = name
        self.array_element = array_element
        if array_element:
            message = f'Received unknown array native typeAnnotation: "{name}"'
        else:
            message = f'Received unknown typeAnnotation: "{name}"'
        super().__init__(message)


class InvalidInheritance(GeneratorError):
    """An extendsProps entry that does not name a known base."""

    def __init__(self, extends_type: str, known_type_name: str):
        self.extends_type = extends_type
        self.known_type_name = known_type_name
        super().__init__(
            f"Invalid extended type: type={extends_type!r}, "
            f"knownTypeName={known_type_name!r}"
        )


class UnknownEventBubblingType(GeneratorError):
    """An event whose bubblingType is neither 'bubble' nor 'direct'."""

    def __init__(self, event_name: str, bubbling_type: Any):
        self.event_name = event_name
        self.bubbling_type = bubbling_type
        super().__init__(
            f'Received unknown bubblingType "{bubbling_type}" for event "{event_name}"'
        )
