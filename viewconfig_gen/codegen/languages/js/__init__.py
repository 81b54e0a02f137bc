"""
JavaScript view config generator module.

Generates native component view config modules from component schemas.
"""

from .generator import (
    ViewConfigGenerator,
    create_view_config_generator,
    output_file_name,
)
from .types import PropTypeMapper, ValidatorDescriptor, ValidatorKind, map_prop_type
from .events import (
    EventRegistration,
    normalize_event_name,
    classify_event,
    build_event_types,
    build_event_valid_attributes,
)
from .commands import emit_commands
from .view_config import ViewConfigBuilder, ComponentModule, resolve_native_name
from .imports import ImportSet, RuntimeImport
from .printer import JSPrinter

__all__ = [
    # Generator
    "ViewConfigGenerator",
    "create_view_config_generator",
    "output_file_name",
    # Type mapping
    "PropTypeMapper",
    "ValidatorDescriptor",
    "ValidatorKind",
    "map_prop_type",
    # Events
    "EventRegistration",
    "normalize_event_name",
    "classify_event",
    "build_event_types",
    "build_event_valid_attributes",
    # Commands
    "emit_commands",
    # View config
    "ViewConfigBuilder",
    "ComponentModule",
    "resolve_native_name",
    # Imports and printing
    "ImportSet",
    "RuntimeImport",
    "JSPrinter",
]
