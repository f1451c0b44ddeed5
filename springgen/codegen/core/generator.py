"""
Generator base class and result types.

A generator turns a :class:`Project` into :class:`GeneratedFile` objects.
Generation is pure; writing to disk is left to the caller (see
``codegen.writer``) or to target-specific orchestration.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional

from .builder import CodeBuilder
from .config import GeneratorConfig
from .model import Project
from .templates import TemplateEngine, create_template_engine
from ...logging_config import get_logger

logger = get_logger(__name__)

# Longest run of blank lines kept by format_code
MAX_BLANK_LINES = 2


class GeneratorError(Exception):
    """Exception raised when code cannot be generated."""

    pass


@dataclass
class GeneratedFile:
    """One emission unit: a path relative to the output root and its text."""

    path: Path
    content: str


class CodeGenerator(ABC):
    """Base class of all targets."""

    def __init__(self, config: Optional[GeneratorConfig] = None):
        self.config = config or GeneratorConfig()
        self._template_engine: Optional[TemplateEngine] = None

    @property
    @abstractmethod
    def language_name(self) -> str:
        """Primary target name, e.g. ``spring``."""

    @property
    @abstractmethod
    def file_extension(self) -> str:
        """Extension of generated source files, e.g. ``.java``."""

    def get_template_directory(self) -> Optional[Path]:
        """Directory of this target's templates, or None if it has none."""
        return None

    @property
    def template_engine(self) -> TemplateEngine:
        """Template engine bound to :meth:`get_template_directory`, created lazily."""
        if self._template_engine is None:
            self._template_engine = create_template_engine(self.get_template_directory())
        return self._template_engine

    def new_builder(self) -> CodeBuilder:
        """Fresh builder for one emission unit, indented as configured."""
        return CodeBuilder(self.config.indent_unit)

    @abstractmethod
    def generate(self, project: Project) -> List[GeneratedFile]:
        """
        Produce every emission unit of ``project``.

        Returns:
            Generated files with paths relative to the output root
        """

    def validate_project(self, project: Project) -> List[str]:
        """
        Structural warnings about ``project``.

        Subclasses extend the list with target-specific checks.
        """
        warnings = []
        if not project.modules:
            warnings.append(f"Project '{project.name}' has no modules")
        warnings.extend(
            f"Module '{module.name}' has no entities"
            for module in project.modules.values()
            if not module.entities
        )
        return warnings

    def format_code(self, code: str) -> str:
        """
        Normalize generated text.

        Trailing whitespace is removed, blank-line runs are capped, the
        configured line ending is applied and the text ends with exactly one
        line ending.
        """
        lines: List[str] = []
        blank_run = 0
        for line in code.split("\n"):
            line = line.rstrip()
            blank_run = blank_run + 1 if not line else 0
            if blank_run <= MAX_BLANK_LINES:
                lines.append(line)

        while lines and not lines[-1]:
            lines.pop()

        ending = self.config.line_ending
        return ending.join(lines) + ending


class GenerationResult:
    """Files, warnings and metadata of one generation run."""

    def __init__(
        self,
        files: Optional[List[GeneratedFile]] = None,
        warnings: Optional[List[str]] = None,
        metadata: Optional[Dict[str, Any]] = None,
    ):
        self.files = files or []
        self.warnings = warnings or []
        self.metadata = metadata or {}
        self.success = True
        self.error_message: Optional[str] = None
        self.exception: Optional[Exception] = None

    @classmethod
    def error(cls, message: str, exception: Optional[Exception] = None) -> "GenerationResult":
        """A failed result carrying ``message``."""
        result = cls()
        result.success = False
        result.error_message = message
        result.exception = exception
        return result


def generate_code(generator: CodeGenerator, project: Project) -> GenerationResult:
    """
    Run ``generator`` on ``project`` without writing anything.

    Files are passed through :meth:`CodeGenerator.format_code`. Exceptions
    from generation are reported in a failed result instead of propagating.
    """
    try:
        warnings = generator.validate_project(project)
        files = [
            GeneratedFile(f.path, generator.format_code(f.content))
            for f in generator.generate(project)
        ]
    except Exception as e:
        logger.error("Code generation failed: %s", e)
        return GenerationResult.error(f"Code generation failed: {e}", exception=e)

    return GenerationResult(
        files,
        warnings,
        {
            "language": generator.language_name,
            "file_extension": generator.file_extension,
            "project": project.name,
            "module_count": len(project.modules),
            "file_count": len(files),
        },
    )
