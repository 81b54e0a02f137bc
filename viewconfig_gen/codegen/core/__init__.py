"""
Core code generation components.

Provides base classes and utilities used by all generators.
"""

from .errors import (
    GeneratorError,
    UnknownTypeAnnotation,
    InvalidInheritance,
    UnknownEventBubblingType,
)
from .generator import CodeGenerator, GenerationResult, generate_code
from .schema import (
    Schema,
    Module,
    Component,
    Prop,
    Event,
    Command,
    CommandParam,
    ExtendsEntry,
    PrimitiveKind,
    PrimitiveTypeAnnotation,
    ReservedPrimitive,
    ReservedPropTypeAnnotation,
    ArrayTypeAnnotation,
    BubblingType,
    convert_schema,
    dump_schema,
)
from .config import GeneratorConfig, ConfigManager, ConfigError, load_config
from .templates import TemplateEngine, TemplateError, create_template_engine

__all__ = [
    # Errors
    "GeneratorError",
    "UnknownTypeAnnotation",
    "InvalidInheritance",
    "UnknownEventBubblingType",
    # Base generator interface
    "CodeGenerator",
    "GenerationResult",
    "generate_code",
    # Schema system - core data structures
    "Schema",
    "Module",
    "Component",
    "Prop",
    "Event",
    "Command",
    "CommandParam",
    "ExtendsEntry",
    "PrimitiveKind",
    "PrimitiveTypeAnnotation",
    "ReservedPrimitive",
    "ReservedPropTypeAnnotation",
    "ArrayTypeAnnotation",
    "BubblingType",
    "convert_schema",
    "dump_schema",
    # Configuration system
    "GeneratorConfig",
    "ConfigManager",
    "ConfigError",
    "load_config",
    # Template system
    "TemplateEngine",
    "TemplateError",
    "create_template_engine",
]
