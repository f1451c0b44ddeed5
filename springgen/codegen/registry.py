"""
Registry of the available code generation targets.

Targets are looked up by primary name or alias (case-insensitive). The
global registry registers the built-in Spring and Java model generators the
first time it is used.
"""

from pathlib import Path
from typing import Any, Dict, List, Optional, Type, Union

from .core.config import GeneratorConfig, load_config
from .core.generator import CodeGenerator
from ..logging_config import get_logger

logger = get_logger(__name__)

ConfigSource = Optional[Union[GeneratorConfig, Dict[str, Any], str, Path]]


class RegistryError(Exception):
    """Exception raised for registry lookups and registrations."""

    pass


class GeneratorRegistry:
    """Maps target names and aliases to generator classes."""

    def __init__(self):
        self._targets: Dict[str, Type[CodeGenerator]] = {}
        self._aliases: Dict[str, str] = {}

    def register(
        self,
        target: str,
        generator_class: Type[CodeGenerator],
        aliases: Optional[List[str]] = None,
        replace: bool = False,
    ):
        """
        Add a generator class under ``target``.

        An already registered target is left alone unless ``replace`` is set.

        Raises:
            RegistryError: If the class is not a CodeGenerator or an alias
                is taken
        """
        if not (isinstance(generator_class, type) and issubclass(generator_class, CodeGenerator)):
            raise RegistryError(
                f"{generator_class!r} is not a CodeGenerator subclass"
            )

        key = target.lower()
        if key in self._targets and not replace:
            logger.debug("Target %s is already registered", key)
            return

        self._targets[key] = generator_class
        logger.debug("Registered %s for target %s", generator_class.__name__, key)

        for alias in aliases or []:
            alias_key = alias.lower()
            if alias_key == key:
                continue
            owner = self._aliases.get(alias_key)
            if not replace and alias_key in self._targets:
                raise RegistryError(f"Alias '{alias}' is already a primary target name")
            if not replace and owner is not None and owner != key:
                raise RegistryError(f"Alias '{alias}' already points to '{owner}'")
            self._aliases[alias_key] = key

    def unregister(self, target: str):
        """Remove a target together with its aliases."""
        key = target.lower()
        self._targets.pop(key, None)
        self._aliases = {a: t for a, t in self._aliases.items() if t != key}

    def resolve_name(self, target: str) -> str:
        """
        Primary name for a target name or alias.

        Raises:
            RegistryError: If nothing is registered under the name
        """
        key = target.lower()
        if key in self._targets:
            return key
        if key in self._aliases:
            return self._aliases[key]
        raise RegistryError(
            f"Unknown target '{target}'. Available: {', '.join(self.list_languages())}"
        )

    def get_generator_class(self, target: str) -> Type[CodeGenerator]:
        return self._targets[self.resolve_name(target)]

    def create_generator(self, target: str, config: ConfigSource = None) -> CodeGenerator:
        """
        Instantiate the generator for ``target``.

        ``config`` may be a ready GeneratorConfig, a dict of overrides, the
        path of a JSON config file, or None for the target defaults.
        """
        key = self.resolve_name(target)

        if isinstance(config, GeneratorConfig):
            resolved = config
        elif isinstance(config, dict):
            resolved = load_config(key, custom_config=config)
        elif isinstance(config, (str, Path)):
            resolved = load_config(key, config_file=config)
        elif config is None:
            resolved = load_config(key)
        else:
            raise RegistryError(f"Invalid config type: {type(config).__name__}")

        return self._targets[key](resolved)

    def list_languages(self) -> List[str]:
        return sorted(self._targets)

    def get_aliases_for_language(self, target: str) -> List[str]:
        key = target.lower()
        return sorted(a for a, t in self._aliases.items() if t == key)

    def is_supported(self, target: str) -> bool:
        key = target.lower()
        return key in self._targets or key in self._aliases

    def get_language_info(self, target: str) -> Dict[str, Any]:
        """Describe a target: name, class, file extension and aliases."""
        key = self.resolve_name(target)
        generator_class = self._targets[key]

        # Generators that require a project name get a placeholder
        sample = generator_class(load_config(key, custom_config={"name": key}))

        return {
            "name": sample.language_name,
            "class": generator_class.__name__,
            "file_extension": sample.file_extension,
            "aliases": self.get_aliases_for_language(key),
            "module": generator_class.__module__,
        }


_registry: Optional[GeneratorRegistry] = None


def get_registry() -> GeneratorRegistry:
    """The process-wide registry with the built-in targets registered."""
    global _registry
    if _registry is None:
        _registry = GeneratorRegistry()
        _register_builtin_targets(_registry)
    return _registry


def _register_builtin_targets(registry: GeneratorRegistry):
    from .languages.java import JavaModelGenerator
    from .languages.spring import SpringGenerator

    registry.register("spring", SpringGenerator, aliases=["spring-boot", "p"])
    registry.register("java", JavaModelGenerator, aliases=["java-model"])


def get_generator(language: str, config: ConfigSource = None) -> CodeGenerator:
    return get_registry().create_generator(language, config)


def list_supported_languages() -> List[str]:
    return get_registry().list_languages()


def is_language_supported(language: str) -> bool:
    return get_registry().is_supported(language)


def get_language_info(language: str) -> Dict[str, Any]:
    return get_registry().get_language_info(language)


def list_all_language_info() -> Dict[str, Dict[str, Any]]:
    """Info for every registered target, keyed by primary name."""
    return {name: get_language_info(name) for name in list_supported_languages()}
