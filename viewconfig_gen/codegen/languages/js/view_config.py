"""
View config assembly for a single component.

Resolves inheritance, maps props and events into the descriptor object,
and collects everything the component's module needs.
"""

from dataclasses import dataclass
from typing import Optional

from ...core.errors import InvalidInheritance
from ...core.schema import Component, ExtendsEntry
from ....logging_config import get_logger
from .commands import emit_commands
from .events import build_event_types, build_event_valid_attributes
from .imports import ImportSet, NATIVE_COMPONENT_REGISTRY, UI_MANAGER
from .nodes import Literal, ObjectExpression, Property, NamedExport
from .types import PropTypeMapper

logger = get_logger(__name__)

REACT_NATIVE_BUILT_IN_TYPE = "ReactNativeBuiltInType"
REACT_NATIVE_CORE_VIEW_PROPS = "ReactNativeCoreViewProps"
CORE_VIEW_PROPS_BASE = (REACT_NATIVE_BUILT_IN_TYPE, REACT_NATIVE_CORE_VIEW_PROPS)


@dataclass
class ComponentModule:
    """Everything needed to render one component's module."""

    component_name: str
    native_component_name: str
    view_config: ObjectExpression
    deprecated_component_name: Optional[str] = None
    commands: Optional[NamedExport] = None

    @property
    def needs_name_fallback(self) -> bool:
        return self.deprecated_component_name is not None


class ViewConfigBuilder:
    """Builds the view config descriptor and module for a component."""

    def __init__(self, type_mapper: Optional[PropTypeMapper] = None):
        self.type_mapper = type_mapper or PropTypeMapper()

    def resolve_extends(self, component: Component, imports: ImportSet):
        """
        Check inherited bases and register their imports.

        Raises:
            InvalidInheritance: For any unrecognized type/knownTypeName
        """
        for entry in component.extends_props:
            self._resolve_extends_entry(entry, imports)

    def _resolve_extends_entry(self, entry: ExtendsEntry, imports: ImportSet):
        if (entry.type, entry.known_type_name) != CORE_VIEW_PROPS_BASE:
            raise InvalidInheritance(entry.type, entry.known_type_name)
        imports.add(NATIVE_COMPONENT_REGISTRY)

    def build_view_config(
        self, component_name: str, component: Component, imports: ImportSet
    ) -> ObjectExpression:
        """
        Build ``{uiViewClassName, bubblingEventTypes?, directEventTypes?,
        validAttributes}`` for a component.

        Args:
            component_name: Schema name of the component
            component: The component
            imports: Import accumulator for the current run

        Returns:
            The descriptor object
        """
        self.resolve_extends(component, imports)

        valid_attributes = ObjectExpression(
            [
                Property(
                    prop.name,
                    self.type_mapper.map_prop_type(
                        prop.type_annotation, imports
                    ).to_node(),
                )
                for prop in component.props
            ]
        )
        if component.events:
            valid_attributes.properties.append(
                build_event_valid_attributes(component.events, imports)
            )

        bubbling, direct = build_event_types(component.events)

        properties = [
            Property(
                "uiViewClassName",
                Literal(resolve_native_name(component_name, component)),
            )
        ]
        if bubbling is not None:
            properties.append(Property("bubblingEventTypes", bubbling))
        if direct is not None:
            properties.append(Property("directEventTypes", direct))
        properties.append(Property("validAttributes", valid_attributes))

        return ObjectExpression(properties)

    def build_component_module(
        self, component_name: str, component: Component, imports: ImportSet
    ) -> ComponentModule:
        """Build the descriptor, commands and name fallback for a component."""
        logger.debug("Building view config for %s", component_name)

        deprecated_name = component.paper_component_name_deprecated
        if deprecated_name:
            imports.add(UI_MANAGER)
        imports.add(NATIVE_COMPONENT_REGISTRY)

        view_config = self.build_view_config(component_name, component, imports)
        commands = emit_commands(component.commands, imports)

        return ComponentModule(
            component_name=component_name,
            native_component_name=resolve_native_name(component_name, component),
            view_config=view_config,
            deprecated_component_name=deprecated_name or None,
            commands=commands,
        )


def resolve_native_name(component_name: str, component: Component) -> str:
    """The name the native side registers the component under."""
    if component.paper_component_name is not None:
        return component.paper_component_name
    return component_name
