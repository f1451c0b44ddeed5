"""
springgen code generation module.

Generates Spring Boot source code from API project descriptions.
"""

from .registry import (
    GeneratorRegistry,
    RegistryError,
    get_generator,
    get_language_info,
    list_all_language_info,
    list_supported_languages,
)
from .core.builder import CodeBuilder, ScopeComposer, BuilderError, build_text
from .core.generator import (
    CodeGenerator,
    GeneratedFile,
    GenerationResult,
    GeneratorError,
    generate_code,
)
from .core.model import (
    Project,
    Module,
    Entity,
    EntityField,
    EntityType,
    ReqMethod,
    ElementPath,
    ProjectError,
    load_project,
)
from .core.config import GeneratorConfig, ConfigError, get_config_manager, load_config
from .writer import write_generated_file, write_files

__version__ = "1.0.0"


def generate_from_document(document, language="spring", config=None):
    """
    Generate code from a parsed project document without writing files.

    Args:
        document: Parsed JSON project document
        language: Target name
        config: Generator configuration dict, path or GeneratorConfig

    Returns:
        GenerationResult with generated files
    """
    project = load_project(document)
    generator = get_generator(language, config)
    return generate_code(generator, project)


__all__ = [
    "GeneratorRegistry",
    "RegistryError",
    "CodeBuilder",
    "ScopeComposer",
    "BuilderError",
    "build_text",
    "CodeGenerator",
    "GeneratedFile",
    "GenerationResult",
    "GeneratorError",
    "Project",
    "Module",
    "Entity",
    "EntityField",
    "EntityType",
    "ReqMethod",
    "ElementPath",
    "ProjectError",
    "GeneratorConfig",
    "ConfigError",
    "generate_code",
    "generate_from_document",
    "get_config_manager",
    "get_generator",
    "get_language_info",
    "list_all_language_info",
    "list_supported_languages",
    "load_config",
    "load_project",
    "write_generated_file",
    "write_files",
]
