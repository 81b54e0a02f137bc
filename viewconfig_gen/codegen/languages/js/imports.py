"""
Host runtime capabilities referenced by generated view configs.

Each capability is resolved by the generated module at its own runtime;
the generator only needs the identifier and the import statement.
"""

from dataclasses import dataclass
from typing import Iterator, List, Set


@dataclass(frozen=True)
class RuntimeImport:
    """A named host capability and the statement that binds it."""

    identifier: str
    statement: str


NATIVE_COMPONENT_REGISTRY = RuntimeImport(
    "NativeComponentRegistry",
    "const NativeComponentRegistry = require('react-native/Libraries/NativeComponent/NativeComponentRegistry');",
)
UI_MANAGER = RuntimeImport(
    "UIManager",
    "const {UIManager} = require('react-native');",
)
DISPATCH_COMMAND = RuntimeImport(
    "dispatchCommand",
    "const {dispatchCommand} = require('react-native/Libraries/ReactNative/RendererProxy');",
)
CONDITIONALLY_IGNORED_EVENT_HANDLERS = RuntimeImport(
    "ConditionallyIgnoredEventHandlers",
    "const {ConditionallyIgnoredEventHandlers} = require('react-native/Libraries/NativeComponent/ViewConfigIgnore');",
)
PROCESS_COLOR = RuntimeImport(
    "processColor",
    "const processColor = require('react-native/Libraries/StyleSheet/processColor');",
)
PROCESS_COLOR_ARRAY = RuntimeImport(
    "processColorArray",
    "const processColorArray = require('react-native/Libraries/StyleSheet/processColorArray');",
)
RESOLVE_ASSET_SOURCE = RuntimeImport(
    "resolveAssetSource",
    "const resolveAssetSource = require('react-native/Libraries/Image/resolveAssetSource');",
)
POINTS_DIFFER = RuntimeImport(
    "pointsDiffer",
    "const pointsDiffer = require('react-native/Libraries/Utilities/differ/pointsDiffer');",
)
INSETS_DIFFER = RuntimeImport(
    "insetsDiffer",
    "const insetsDiffer = require('react-native/Libraries/Utilities/differ/insetsDiffer');",
)


class ImportSet:
    """
    Import statements required by one generation run.

    Created per ``generate`` call and passed explicitly to each builder.
    """

    def __init__(self):
        self._imports: Set[RuntimeImport] = set()

    def add(self, runtime_import: RuntimeImport) -> str:
        """Register an import and return the identifier it binds."""
        self._imports.add(runtime_import)
        return runtime_import.identifier

    def statements(self) -> List[str]:
        """Unique import statements in lexicographic order."""
        return sorted({imp.statement for imp in self._imports})

    def __contains__(self, runtime_import: RuntimeImport) -> bool:
        return runtime_import in self._imports

    def __iter__(self) -> Iterator[RuntimeImport]:
        return iter(sorted(self._imports, key=lambda imp: imp.statement))

    def __len__(self) -> int:
        return len(self._imports)
