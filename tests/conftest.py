"""
Pytest configuration and shared fixtures for viewconfig_gen tests.

Schemas are given in the raw JSON shape produced by the schema parser.
"""

import json
import logging

import pytest

from viewconfig_gen.codegen.core.config import GeneratorConfig
from viewconfig_gen.codegen.languages.js import ImportSet, ViewConfigGenerator
from viewconfig_gen.logging_config import PACKAGE_LOGGER


CORE_VIEW_PROPS = {
    "type": "ReactNativeBuiltInType",
    "knownTypeName": "ReactNativeCoreViewProps",
}


def reserved(name):
    return {"type": "ReservedPropTypeAnnotation", "name": name}


def component(**overrides):
    """Raw component with core view props and nothing else."""
    raw = {
        "extendsProps": [dict(CORE_VIEW_PROPS)],
        "props": [],
        "events": [],
        "commands": [],
    }
    raw.update(overrides)
    return raw


def component_module(components):
    return {"type": "Component", "components": components}


@pytest.fixture(autouse=True)
def restore_package_logger():
    """Undo any setup_logging() call made by a test."""
    logger = logging.getLogger(PACKAGE_LOGGER)
    level, handlers, propagate = logger.level, logger.handlers[:], logger.propagate
    yield
    for handler in logger.handlers:
        if handler not in handlers:
            handler.close()
    logger.setLevel(level)
    logger.handlers[:] = handlers
    logger.propagate = propagate


@pytest.fixture
def make_component():
    """Factory for raw components extending the core view props."""
    return component


@pytest.fixture
def reserved_type():
    """Factory for raw reserved type annotations."""
    return reserved


@pytest.fixture
def imports():
    """A fresh import accumulator."""
    return ImportSet()


@pytest.fixture
def generator():
    """A view config generator with default configuration."""
    return ViewConfigGenerator(GeneratorConfig())


@pytest.fixture
def simple_schema():
    """One module, one component with a color and a boolean prop."""
    return {
        "modules": {
            "MyComponent": component_module(
                {
                    "MyComponent": component(
                        props=[
                            {"name": "tintColor", "typeAnnotation": reserved("ColorPrimitive")},
                            {"name": "disabled", "typeAnnotation": {"type": "BooleanTypeAnnotation"}},
                        ]
                    )
                }
            )
        }
    }


@pytest.fixture
def eventful_schema():
    """A component with events, a command and both legacy names."""
    return {
        "modules": {
            "EventfulView": component_module(
                {
                    "EventfulView": component(
                        events=[
                            {"name": "onChange", "bubblingType": "bubble"},
                            {
                                "name": "onEnd",
                                "bubblingType": "direct",
                                "paperTopLevelNameDeprecated": "paperEnd",
                            },
                        ],
                        commands=[
                            {
                                "name": "scrollTo",
                                "typeAnnotation": {
                                    "params": [{"name": "x"}, {"name": "y"}]
                                },
                            }
                        ],
                        paperComponentName="RCTEventfulView",
                        paperComponentNameDeprecated="EventfulViewLegacy",
                    )
                }
            )
        }
    }


@pytest.fixture
def two_module_schema():
    """Two Component modules and one non-component module in between."""
    return {
        "modules": {
            "Zeta": component_module({"ZetaView": component()}),
            "NativeSomething": {"type": "NativeModule", "spec": {}},
            "Alpha": component_module({"AlphaView": component()}),
        }
    }


@pytest.fixture
def schema_file(tmp_path, simple_schema):
    """The simple schema written to a JSON file."""
    path = tmp_path / "schema.json"
    path.write_text(json.dumps(simple_schema), encoding="utf-8")
    return path

