"""
View config generator implementation.

Generates one JavaScript module per library holding the view config,
default export and command dispatchers of every native component.
"""

from typing import Any, Callable, Dict, Mapping, Optional, Union

from ...core.config import GeneratorConfig, load_config
from ...core.generator import CodeGenerator
from ...core.schema import Schema, Component, convert_schema, dump_schema
from ....logging_config import get_logger
from .imports import ImportSet
from .naming import quote_string
from .printer import JSPrinter
from .templates import (
    BUILTIN_TEMPLATES,
    FILE_BANNER,
    FILE_TEMPLATE_NAME,
    COMPONENT_TEMPLATE_NAME,
    missing_component_message,
)
from .view_config import ViewConfigBuilder, ComponentModule

logger = get_logger(__name__)

OUTPUT_FILE_SUFFIX = "NativeViewConfig"


def output_file_name(library_name: str) -> str:
    """Name of the single output file for a library (no extension)."""
    return f"{library_name}{OUTPUT_FILE_SUFFIX}"


class ViewConfigGenerator(CodeGenerator):
    """Code generator for native component view configs."""

    def __init__(self, config: Optional[GeneratorConfig] = None):
        """Initialize generator with configuration."""
        super().__init__(config)
        self.printer = JSPrinter.from_config(self.config)
        self.builder = ViewConfigBuilder()

    @property
    def language_name(self) -> str:
        """Return the generator name."""
        return "viewconfig"

    def builtin_templates(self) -> Mapping[str, str]:
        return BUILTIN_TEMPLATES

    def template_filters(self) -> Mapping[str, Callable[..., str]]:
        return {"js_string": quote_string}

    def generate(
        self, library_name: str, schema: Union[Schema, Mapping[str, Any]]
    ) -> Dict[str, str]:
        """
        Generate the view config module for every component of a library.

        Args:
            library_name: Library name, used for the output file name
            schema: Typed schema or the raw schema JSON

        Returns:
            ``{"<library_name>NativeViewConfig": source}``
        """
        try:
            if not isinstance(schema, Schema):
                schema = convert_schema(schema)

            imports = ImportSet()
            module_outputs = []

            for module_name, module in schema.modules.items():
                if not module.is_component_module:
                    logger.debug(
                        "Skipping module %s of type %s", module_name, module.type
                    )
                    continue

                component_outputs = [
                    self.generate_single_component(component_name, component, imports)
                    for component_name, component in module.components.items()
                ]
                module_output = "\n\n".join(component_outputs)
                if module_output:
                    module_outputs.append(module_output)

            source = self.render_template(
                FILE_TEMPLATE_NAME,
                {
                    "banner": FILE_BANNER,
                    "imports": imports.statements(),
                    "body": "\n\n".join(module_outputs),
                },
            )

            return {output_file_name(library_name): self.format_code(source)}

        except Exception:
            logger.error("Error parsing schema for %s", library_name)
            logger.error(dump_schema(schema))
            raise

    def generate_single_component(
        self, component_name: str, component: Component, imports: ImportSet
    ) -> str:
        """Generate the module text for one component."""
        module = self.builder.build_component_module(
            component_name, component, imports
        )
        return self.render_component(module)

    def render_component(self, module: ComponentModule) -> str:
        """Render a built component module through the component template."""
        context = {
            "component_name": module.component_name,
            "native_component_name": module.native_component_name,
            "deprecated_component_name": module.deprecated_component_name,
            "missing_component_error": None,
            "indent": self.config.indent,
            "view_config": self.printer.print(module.view_config),
            "commands": None,
        }

        if module.needs_name_fallback:
            context["missing_component_error"] = missing_component_message(
                module.component_name, module.deprecated_component_name
            )
        if module.commands is not None:
            context["commands"] = self.printer.print(module.commands)

        return self.render_template(COMPONENT_TEMPLATE_NAME, context).strip()


def create_view_config_generator(
    config: Optional[Dict[str, Any]] = None,
) -> ViewConfigGenerator:
    """Create a view config generator from a dict of overrides."""
    return ViewConfigGenerator(load_config("viewconfig", custom_config=config))
