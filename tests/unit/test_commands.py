"""
Unit tests for command dispatcher synthesis.
"""

from viewconfig_gen.codegen.core.schema import Command, CommandParam
from viewconfig_gen.codegen.languages.js import imports as runtime
from viewconfig_gen.codegen.languages.js.commands import (
    COMMANDS_EXPORT_NAME,
    build_command_method,
    emit_commands,
)
from viewconfig_gen.codegen.languages.js.nodes import (
    ArrayExpression,
    CallExpression,
    Identifier,
    Literal,
)
from viewconfig_gen.codegen.languages.js.printer import JSPrinter


def command(name, *params):
    return Command(name, [CommandParam(param) for param in params])


class TestEmitCommands:
    """Commands become one exported object of dispatcher methods."""

    def test_no_commands(self, imports):
        assert emit_commands([], imports) is None
        assert runtime.DISPATCH_COMMAND not in imports

    def test_dispatch_import_added(self, imports):
        emit_commands([command("focus")], imports)

        assert list(imports) == [runtime.DISPATCH_COMMAND]

    def test_methods_in_declared_order(self, imports):
        export = emit_commands(
            [command("scrollTo", "x", "y"), command("focus"), command("blur")], imports
        )

        assert export.name == COMMANDS_EXPORT_NAME
        assert export.value.keys() == ["scrollTo", "focus", "blur"]

    def test_printed_without_params(self, imports):
        export = emit_commands([command("focus")], imports)

        assert JSPrinter().print(export) == (
            "export const Commands = {\n"
            "  focus(ref) {\n"
            "    dispatchCommand(ref, 'focus', []);\n"
            "  },\n"
            "};"
        )


class TestBuildCommandMethod:
    """Each method forwards its parameters to the dispatcher."""

    def test_params_follow_ref(self):
        method = build_command_method(command("scrollTo", "x", "y", "animated"), "dispatchCommand")

        assert method.key == "scrollTo"
        assert method.params == ["ref", "x", "y", "animated"]

    def test_dispatch_call(self):
        method = build_command_method(command("setValue", "value"), "dispatchCommand")

        (call,) = method.body
        assert call == CallExpression(
            Identifier("dispatchCommand"),
            [
                Identifier("ref"),
                Literal("setValue"),
                ArrayExpression([Identifier("value")]),
            ],
        )
