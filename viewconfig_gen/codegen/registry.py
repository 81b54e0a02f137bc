"""
Registry of output targets for view config generation.

A target is a ``CodeGenerator`` subclass known under a primary name and
any number of aliases. The built-in ``viewconfig`` target is registered
on first use.
"""

from pathlib import Path
from typing import Dict, List, Optional, Type, Union, Any

from .core.generator import CodeGenerator
from .core.config import GeneratorConfig, load_config

ConfigSource = Union[GeneratorConfig, Dict[str, Any], str, Path, None]


class RegistryError(Exception):
    """Exception raised for registry-related errors."""

    pass


class GeneratorRegistry:
    """Maps target names and aliases to generator classes."""

    def __init__(self):
        self._targets: Dict[str, Type[CodeGenerator]] = {}
        self._aliases: Dict[str, str] = {}

    def register(
        self,
        language: str,
        generator_class: Type[CodeGenerator],
        aliases: Optional[List[str]] = None,
        replace: bool = False,
    ):
        """
        Register a target.

        Args:
            language: Primary target name (e.g., 'viewconfig')
            generator_class: Class implementing CodeGenerator
            aliases: Alternative names for the target
            replace: Overwrite an existing registration; otherwise an
                existing primary name is left untouched

        Raises:
            RegistryError: If the class is not a generator or an alias is taken
        """
        if not (isinstance(generator_class, type) and issubclass(generator_class, CodeGenerator)):
            raise RegistryError("Generator class must inherit from CodeGenerator")

        name = language.lower()
        if name in self._targets and not replace:
            return

        alias_keys = [a.lower() for a in aliases or [] if a.lower() != name]
        if not replace:
            for alias in alias_keys:
                self._check_alias(alias, name)

        self._targets[name] = generator_class
        for alias in alias_keys:
            self._aliases[alias] = name

    def _check_alias(self, alias: str, name: str):
        if alias in self._targets:
            raise RegistryError(f"Alias '{alias}' conflicts with existing primary name")
        owner = self._aliases.get(alias)
        if owner is not None and owner != name:
            raise RegistryError(f"Alias '{alias}' already points to '{owner}'")

    def unregister(self, language: str):
        """Remove a target together with its aliases."""
        name = language.lower()
        self._targets.pop(name, None)
        self._aliases = {a: t for a, t in self._aliases.items() if t != name}

    def resolve_name(self, language: str) -> str:
        """
        Resolve a name or alias to the primary target name.

        Raises:
            RegistryError: If the name is not registered
        """
        key = language.lower()
        if key in self._targets:
            return key
        if key in self._aliases:
            return self._aliases[key]

        raise RegistryError(
            f"No generator registered for: {language}. "
            f"Available: {', '.join(self.list_languages())}"
        )

    def get_generator_class(self, language: str) -> Type[CodeGenerator]:
        return self._targets[self.resolve_name(language)]

    def create_generator(self, language: str, config: ConfigSource = None) -> CodeGenerator:
        """
        Instantiate a target's generator.

        Args:
            language: Target name or alias
            config: A GeneratorConfig, a dict of overrides, a JSON config
                file path, or None for the target defaults

        Raises:
            RegistryError: If the config cannot be resolved or the
                generator fails to initialize
        """
        name = self.resolve_name(language)
        generator_class = self._targets[name]

        try:
            return generator_class(self._resolve_config(name, config))
        except RegistryError:
            raise
        except Exception as e:
            raise RegistryError(f"Failed to create {language} generator: {e}") from e

    @staticmethod
    def _resolve_config(name: str, config: ConfigSource) -> GeneratorConfig:
        if config is None:
            return load_config(name)
        if isinstance(config, GeneratorConfig):
            return config
        if isinstance(config, dict):
            return load_config(name, custom_config=config)
        if isinstance(config, (str, Path)):
            return load_config(name, config_file=config)
        raise RegistryError(f"Invalid config type: {type(config)}")

    def list_languages(self) -> List[str]:
        return sorted(self._targets)

    def get_aliases_for_language(self, language: str) -> List[str]:
        name = language.lower()
        return sorted(alias for alias, target in self._aliases.items() if target == name)

    def is_supported(self, language: str) -> bool:
        key = language.lower()
        return key in self._targets or key in self._aliases

    def get_language_info(self, language: str) -> Dict[str, Any]:
        """
        Describe a target for listings.

        Raises:
            RegistryError: If not found
        """
        name = self.resolve_name(language)
        generator_class = self._targets[name]
        generator = generator_class(load_config(name))

        return {
            "name": generator.language_name,
            "class": generator_class.__name__,
            "file_extension": generator.file_extension,
            "aliases": self.get_aliases_for_language(name),
            "module": generator_class.__module__,
        }


_global_registry: Optional[GeneratorRegistry] = None


def get_registry() -> GeneratorRegistry:
    """Get the global registry, registering built-in targets on first use."""
    global _global_registry
    if _global_registry is None:
        _global_registry = GeneratorRegistry()
        _register_builtin_targets(_global_registry)
    return _global_registry


def _register_builtin_targets(registry: GeneratorRegistry):
    # Imported here to avoid a circular import
    from .languages.js import ViewConfigGenerator

    registry.register("viewconfig", ViewConfigGenerator, aliases=["js", "view-config"])


def register_generator(
    language: str,
    generator_class: Type[CodeGenerator],
    aliases: Optional[List[str]] = None,
):
    """Register a target in the global registry."""
    get_registry().register(language, generator_class, aliases)


def get_generator(language: str = "viewconfig", config: ConfigSource = None) -> CodeGenerator:
    """Create a generator from the global registry."""
    return get_registry().create_generator(language, config)


def list_supported_languages() -> List[str]:
    return get_registry().list_languages()


def is_language_supported(language: str) -> bool:
    return get_registry().is_supported(language)


def get_language_info(language: str) -> Dict[str, Any]:
    return get_registry().get_language_info(language)
