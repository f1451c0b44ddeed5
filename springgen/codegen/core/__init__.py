"""
Core code generation components.

Provides the structural builder, project model and base classes used by all
generators.
"""

from .buffer import LineBuffer, DEFAULT_INDENT_UNIT
from .builder import CodeBuilder, ScopeComposer, BuilderError, build_text
from .generator import (
    CodeGenerator,
    GeneratorError,
    GeneratedFile,
    GenerationResult,
    generate_code,
)
from .model import (
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
from .naming import NameSanitizer, NamingCase
from .config import GeneratorConfig, ConfigManager, ConfigError, load_config
from .templates import TemplateEngine, TemplateError, create_template_engine

__all__ = [
    # Structural builder
    "LineBuffer",
    "DEFAULT_INDENT_UNIT",
    "CodeBuilder",
    "ScopeComposer",
    "BuilderError",
    "build_text",
    # Base generator interface
    "CodeGenerator",
    "GeneratorError",
    "GeneratedFile",
    "GenerationResult",
    "generate_code",
    # Project model
    "Project",
    "Module",
    "Entity",
    "EntityField",
    "EntityType",
    "ReqMethod",
    "ElementPath",
    "ProjectError",
    "load_project",
    # Naming utilities
    "NameSanitizer",
    "NamingCase",
    # Configuration system
    "GeneratorConfig",
    "ConfigManager",
    "ConfigError",
    "load_config",
    # Template system
    "TemplateEngine",
    "TemplateError",
    "create_template_engine",
]
