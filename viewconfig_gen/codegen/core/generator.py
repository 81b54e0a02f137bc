"""
Base generator interface for all code generation targets.

A generator turns a whole library schema into a mapping of output file
names (without extension) to source text.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Mapping, Optional, Union
from pathlib import Path

from .config import GeneratorConfig
from .errors import GeneratorError
from .schema import Schema, Component, convert_schema
from .templates import TemplateEngine, create_template_engine


class CodeGenerator(ABC):
    """Abstract base class for all code generators."""

    def __init__(self, config: Optional[GeneratorConfig] = None):
        self.config = config or GeneratorConfig()
        self._template_engine: Optional[TemplateEngine] = None

    @property
    @abstractmethod
    def language_name(self) -> str:
        """Registry name of the generator (e.g., 'viewconfig')."""
        pass

    @property
    def file_extension(self) -> str:
        return self.config.file_extension

    # Template hooks

    def get_template_directory(self) -> Optional[Path]:
        """Directory of template files, or None for in-memory templates only."""
        return None

    def builtin_templates(self) -> Mapping[str, str]:
        """In-memory templates shipped with the generator, name -> source."""
        return {}

    def template_filters(self) -> Mapping[str, Callable[..., str]]:
        """Extra Jinja2 filters the generator's templates use."""
        return {}

    @property
    def template_engine(self) -> TemplateEngine:
        """Template engine, created on first use."""
        if self._template_engine is None:
            engine = create_template_engine(
                self.get_template_directory(), self.builtin_templates()
            )
            for name, func in self.template_filters().items():
                engine.add_filter(name, func)
            self._template_engine = engine
        return self._template_engine

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        return self.template_engine.render_template(template_name, context)

    def template_exists(self, template_name: str) -> bool:
        return self.template_engine.template_exists(template_name)

    # Generation

    @abstractmethod
    def generate(
        self, library_name: str, schema: Union[Schema, Mapping[str, Any]]
    ) -> Dict[str, str]:
        """
        Generate all output files for a library.

        Args:
            library_name: Name of the library being generated
            schema: Typed schema or the raw schema JSON

        Returns:
            Mapping of output file name to generated source
        """
        pass

    @abstractmethod
    def generate_single_component(
        self, component_name: str, component: Component, imports: Any
    ) -> str:
        """
        Generate the code for one component.

        Args:
            component_name: Name of the component
            component: Component to generate code for
            imports: Import accumulator shared by the whole invocation
        """
        pass

    def validate_schema(self, schema: Schema) -> List[str]:
        """Non-fatal observations about a schema; fatal problems raise during generate."""
        warnings = []

        for module_name, module in schema.modules.items():
            if module.is_component_module and not module.components:
                warnings.append(f"Module '{module_name}' declares no components")

        for _, component_name, component in schema.iter_components():
            if not component.props and not component.events:
                warnings.append(f"Component '{component_name}' has no props or events")
            if not component.extends_props:
                warnings.append(
                    f"Component '{component_name}' does not extend any base props"
                )

        return warnings

    def format_code(self, code: str) -> str:
        """
        Normalize whitespace in generated code.

        Trailing whitespace is stripped, runs of blank lines collapse to one,
        and the result ends with exactly one newline.
        """
        lines: List[str] = []
        for line in code.split("\n"):
            line = line.rstrip()
            if line or (lines and lines[-1]):
                lines.append(line)

        while lines and not lines[-1]:
            lines.pop()
        return "\n".join(lines) + "\n"


@dataclass
class GenerationResult:
    """Generated files plus warnings and metadata about the run."""

    files: Dict[str, str]
    warnings: List[str] = field(default_factory=list)
    metadata: Dict[str, Any] = field(default_factory=dict)


def generate_code(
    generator: CodeGenerator,
    library_name: str,
    schema: Union[Schema, Mapping[str, Any]],
) -> GenerationResult:
    """
    Generate code and collect warnings and metadata.

    Errors raised by the generator propagate unchanged.
    """
    files = generator.generate(library_name, schema)

    if not isinstance(schema, Schema):
        schema = convert_schema(schema)

    metadata = {
        "generator": generator.language_name,
        "file_extension": generator.file_extension,
        "library_name": library_name,
        "module_count": sum(
            1 for module in schema.modules.values() if module.is_component_module
        ),
        "component_count": sum(1 for _ in schema.iter_components()),
    }

    return GenerationResult(files, generator.validate_schema(schema), metadata)


__all__ = ["CodeGenerator", "GeneratorError", "GenerationResult", "generate_code"]
