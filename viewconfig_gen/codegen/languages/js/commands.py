"""
Command dispatcher synthesis.
"""

from typing import Optional, Sequence

from ...core.schema import Command
from .imports import ImportSet, DISPATCH_COMMAND
from .nodes import (
    Literal,
    Identifier,
    ArrayExpression,
    CallExpression,
    ObjectExpression,
    Method,
    NamedExport,
)

COMMANDS_EXPORT_NAME = "Commands"
TARGET_REF_PARAM = "ref"


def build_command_method(command: Command, dispatch_name: str) -> Method:
    """``name(ref, ...params) { dispatchCommand(ref, 'name', [...params]); }``"""
    param_names = [param.name for param in command.params]
    call = CallExpression(
        Identifier(dispatch_name),
        [
            Identifier(TARGET_REF_PARAM),
            Literal(command.name),
            ArrayExpression([Identifier(name) for name in param_names]),
        ],
    )
    return Method(command.name, [TARGET_REF_PARAM, *param_names], [call])


def emit_commands(
    commands: Sequence[Command], imports: ImportSet
) -> Optional[NamedExport]:
    """
    Bundle a component's commands into one exported object.

    Args:
        commands: Commands in declared order
        imports: Accumulator receiving the dispatch import

    Returns:
        The ``Commands`` export, or None when there are no commands
    """
    if not commands:
        return None

    dispatch_name = imports.add(DISPATCH_COMMAND)
    methods = [build_command_method(command, dispatch_name) for command in commands]
    return NamedExport(COMMANDS_EXPORT_NAME, ObjectExpression(methods))
