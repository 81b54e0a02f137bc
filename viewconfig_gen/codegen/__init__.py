"""
View Config Code Generation Module

Generates native component view config modules from component schemas.
"""

from typing import Any, Dict, Mapping, Optional, Union

from .registry import (
    GeneratorRegistry,
    RegistryError,
    get_generator,
    get_language_info,
    list_supported_languages,
)
from .core.generator import CodeGenerator, GenerationResult, generate_code
from .core.errors import (
    GeneratorError,
    UnknownTypeAnnotation,
    InvalidInheritance,
    UnknownEventBubblingType,
)
from .core.schema import Schema, convert_schema
from .core.config import GeneratorConfig, ConfigError, load_config


def generate_view_configs(
    library_name: str,
    schema: Union[Schema, Mapping[str, Any]],
    config: Optional[Union[GeneratorConfig, Dict[str, Any]]] = None,
) -> Dict[str, str]:
    """
    Generate the view config module for a library.

    Args:
        library_name: Library name, used for the output file name
        schema: Typed schema or the raw schema JSON
        config: Generator configuration or overrides

    Returns:
        ``{"<library_name>NativeViewConfig": source}``

    Raises:
        GeneratorError: If the schema contains unsupported constructs
    """
    generator = get_generator("viewconfig", config)
    return generator.generate(library_name, schema)


__all__ = [
    "GeneratorRegistry",
    "RegistryError",
    "CodeGenerator",
    "GenerationResult",
    "GeneratorError",
    "UnknownTypeAnnotation",
    "InvalidInheritance",
    "UnknownEventBubblingType",
    "Schema",
    "GeneratorConfig",
    "ConfigError",
    "convert_schema",
    "generate_code",
    "generate_view_configs",
    "get_generator",
    "get_language_info",
    "list_supported_languages",
    "load_config",
]
