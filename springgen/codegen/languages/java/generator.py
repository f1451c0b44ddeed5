"""
Java model generator implementation.

Emits one plain Java class (or enum) per entity so that the request and
response types referenced by generated resources exist in the target package.
"""

from pathlib import Path
from typing import List, Optional

from ...core.builder import CodeBuilder
from ...core.config import GeneratorConfig
from ...core.generator import CodeGenerator, GeneratedFile
from ...core.model import Entity, EntityType, Project
from ....logging_config import get_logger
from .naming import (
    accessor_name,
    enum_constant_name,
    package_to_path_parts,
    property_name,
)
from .types import java_type

logger = get_logger(__name__)


class JavaModelGenerator(CodeGenerator):
    """Code generator for Java model classes."""

    def __init__(self, config: Optional[GeneratorConfig] = None):
        """Initialize Java generator with configuration."""
        super().__init__(config)
        self.accessors = self.config.custom.get("accessors", True)

    @property
    def language_name(self) -> str:
        return "java"

    @property
    def file_extension(self) -> str:
        return ".java"

    def generate(self, project: Project) -> List[GeneratedFile]:
        """Generate one file per non-abstract entity."""
        package_dir = Path("java", *package_to_path_parts(project.target_package))
        files = []

        for module, entity in project.iter_entities():
            if entity.is_abstract:
                logger.debug("Skipping abstract entity %s.%s", module.name, entity.name)
                continue

            b = self.new_builder()
            b.flat().add(lambda b: self.write_entity(b, project, entity))
            files.append(
                GeneratedFile(
                    package_dir / f"{entity.name}{self.file_extension}", b.render()
                )
            )

        return files

    def write_entity(self, b: CodeBuilder, project: Project, entity: Entity):
        """Emit the compilation unit of one entity."""
        if project.target_package:
            b(f"package {project.target_package};\n")

        if entity.type == EntityType.ENUM:
            self._write_description(b, entity)
            b.open_scope(f"public enum {entity.name}").add(
                lambda b: self._write_enum_constants(b, entity)
            )
            return

        b("import java.util.*;\n")
        self._write_description(b, entity)
        b.open_scope(f"public class {entity.name}").add(
            lambda b: self._write_class_body(b, entity)
        )

    def _write_description(self, b: CodeBuilder, entity: Entity):
        if entity.description and self.config.add_comments:
            b("/**")
            for line in entity.description.splitlines():
                b(f" * {line}".rstrip())
            b(" */")

    def _write_enum_constants(self, b: CodeBuilder, entity: Entity):
        names = [enum_constant_name(f.name) for f in entity.fields]
        for i, name in enumerate(names):
            b(f"{name}{';' if i == len(names) - 1 else ','}")

    def _write_class_body(self, b: CodeBuilder, entity: Entity):
        fields = [(property_name(f.name), java_type(f), f) for f in entity.fields]

        for name, type_name, field in fields:
            if field.description and self.config.add_comments:
                b(f"/** {field.description} */")
            b(f"private {type_name} {name};")

        if fields:
            b("")
        b.open_scope(f"public {entity.name}()").add(lambda b: None)

        if not self.accessors:
            return

        for name, type_name, field in fields:
            b("")
            b.open_scope(f"public {type_name} {accessor_name('get', field.name)}()").add(
                lambda b: b(f"return {name};")
            )
            b("")
            b.open_scope(
                f"public void {accessor_name('set', field.name)}({type_name} {name})"
            ).add(lambda b: b(f"this.{name} = {name};"))
