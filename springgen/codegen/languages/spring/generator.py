"""
Spring Boot code generator implementation.

Generates one REST resource (class or interface) per module and an
application bootstrap class from the project's request entities.
"""

import shutil
from pathlib import Path
from typing import List, Optional

from ...core.builder import CodeBuilder
from ...core.config import GeneratorConfig
from ...core.generator import (
    CodeGenerator,
    GeneratedFile,
    GenerationResult,
    GeneratorError,
)
from ...core.model import Entity, EntityType, Module, Project, ReqMethod
from ...writer import write_files
from ....logging_config import get_logger
from ..java.generator import JavaModelGenerator
from ..java.naming import package_to_path_parts
from .config import MAPPING_ANNOTATIONS, SpringConfig
from .demo import DemoGenerator
from .materializer import TEMPLATE_DIR, TemplateMaterializer

logger = get_logger(__name__)


class SpringGenerator(CodeGenerator):
    """Code generator for Spring Boot REST resources."""

    def __init__(self, config: Optional[GeneratorConfig] = None):
        """Initialize Spring generator with configuration."""
        super().__init__(config)
        self.spring = SpringConfig.from_generator_config(self.config)

    @property
    def language_name(self) -> str:
        return "spring"

    @property
    def file_extension(self) -> str:
        return ".java"

    def get_template_directory(self) -> Optional[Path]:
        return TEMPLATE_DIR

    def package_for(self, project: Project) -> str:
        """Package of the generated code; defaults to the project's package."""
        return self.spring.package or project.target_package

    def java_dir(self, project: Project) -> Path:
        """Source directory of the package, relative to the output root."""
        return Path("src", "main", "java", *package_to_path_parts(self.package_for(project)))

    def resource_name(self, module: Module) -> str:
        prefix = "I" if self.spring.use_interface else ""
        return f"{prefix}{module.name}Resource"

    def application_name(self) -> str:
        return f"{self.spring.name.capitalize()}Application"

    # Eligibility

    @staticmethod
    def mapping_for(entity: Entity) -> Optional[str]:
        """Mapping annotation prefix, or None if the method has no Spring mapping."""
        return MAPPING_ANNOTATIONS.get(entity.method or ReqMethod.POST)

    def is_eligible(self, entity: Entity) -> bool:
        """Only non-abstract requests with a mapping and a response produce code."""
        if entity.type != EntityType.REQUEST or entity.is_abstract:
            return False
        if self.mapping_for(entity) is None:
            return False
        return entity.response is not None and bool(entity.response.name)

    def validate_project(self, project: Project) -> List[str]:
        """Report requests that are skipped for reasons other than being abstract."""
        warnings = super().validate_project(project)

        for module, entity in project.iter_entities():
            if entity.type != EntityType.REQUEST or entity.is_abstract:
                continue
            where = f"{module.name}.{entity.name}"
            if self.mapping_for(entity) is None:
                warnings.append(
                    f"Request {where} skipped: method {entity.method.value} has no Spring mapping"
                )
            elif entity.response is None:
                warnings.append(f"Request {where} skipped: no response type")

        if not self.package_for(project):
            warnings.append("No package configured and project has no target package")

        return warnings

    # Emission units

    def write_module(self, b: CodeBuilder, project: Project, module: Module) -> int:
        """
        Emit the resource unit of one module.

        Args:
            b: Builder for this unit
            project: Project being generated
            module: Module to emit

        Returns:
            Number of request methods emitted
        """
        package = self.package_for(project)
        cname = self.resource_name(module)
        kind = "interface" if self.spring.use_interface else "class"
        req_count = 0

        def resource_body(b: CodeBuilder):
            nonlocal req_count
            for entity in module.entities.values():
                if not self.is_eligible(entity):
                    logger.debug("Skipping %s.%s", module.name, entity.name)
                    continue
                self.write_request_method(b, project, entity)
                req_count += 1

        def unit(b: CodeBuilder):
            b(f"package {package}.{module.name.lower()};\n")
            b("import java.util.*;")
            b(f"import {project.target_package}.*;")
            b("import org.springframework.web.bind.annotation.*;\n")
            if not self.spring.use_interface:
                b("@RestController")
            b.open_scope(f"public {kind} {cname}").add(resource_body)

        b.flat().add(unit)
        return req_count

    def write_request_method(self, b: CodeBuilder, project: Project, entity: Entity):
        """Emit the mapping annotation and method for one eligible request."""
        resp = entity.response.name
        signature = f"public {resp} do{entity.name}(@RequestBody {entity.name} req)"

        b(f'@{self.mapping_for(entity)}Mapping("{entity.path}")')
        if self.spring.use_interface:
            b(f"{signature};\n")
            return

        def body(b: CodeBuilder):
            if self.spring.use_demo:
                DemoGenerator(project, entity.response).as_function_body(b)
            else:
                b("// TODO: implement this method")
                b("return null;")

        b.open_scope(signature).add(body)

    def write_application(self, b: CodeBuilder, project: Project):
        """Emit the Spring Boot application class."""
        name = self.application_name()

        def unit(b: CodeBuilder):
            b(f"package {self.package_for(project)};\n")
            b("import org.springframework.boot.SpringApplication;")
            b("import org.springframework.boot.autoconfigure.SpringBootApplication;\n")
            b("@SpringBootApplication")
            b.open_scope(f"public class {name}").add(
                lambda b: b.open_scope("public static void main(String[] args)").add(
                    lambda b: b(f"SpringApplication.run({name}.class, args);")
                )
            )

        b.flat().add(unit)

    def generate(self, project: Project) -> List[GeneratedFile]:
        """Generate module resources and the application class."""
        java_dir = self.java_dir(project)
        files = []

        for module in project.modules.values():
            b = self.new_builder()
            try:
                req_count = self.write_module(b, project, module)
            except Exception:
                b.discard()
                logger.error("Failed to emit module %s", module.name)
                raise

            if req_count == 0:
                logger.info("Module %s has no eligible requests; no file", module.name)
                continue

            path = java_dir / module.name.lower() / f"{self.resource_name(module)}.java"
            files.append(GeneratedFile(path, b.render()))

        b = self.new_builder()
        self.write_application(b, project)
        files.append(GeneratedFile(java_dir / f"{self.application_name()}.java", b.render()))

        return files

    def process(self, project: Project, output_dir: str | Path) -> GenerationResult:
        """
        Generate the complete Spring project into ``output_dir``.

        Args:
            project: Project model
            output_dir: Root directory of the generated project

        Returns:
            GenerationResult with the generated files; metadata["written"]
            lists every path put on disk
        """
        root = Path(output_dir)
        warnings = self.validate_project(project)
        if not self.package_for(project):
            raise GeneratorError("Cannot generate Spring code without a package")

        if not self.spring.incremental and root.exists():
            logger.info("Cleaning %s", root)
            shutil.rmtree(root)

        generated = []
        if self.spring.include_api:
            api = JavaModelGenerator(self.config)
            generated.extend(
                GeneratedFile(Path("src", "main") / f.path, api.format_code(f.content))
                for f in api.generate(project)
            )

        generated.extend(
            GeneratedFile(f.path, self.format_code(f.content))
            for f in self.generate(project)
        )
        written = write_files(root, generated)

        if not self.spring.incremental:
            materializer = TemplateMaterializer(
                self.get_template_directory(), self.template_engine
            )
            context = materializer.build_context(
                self.spring.name, project.version, self.package_for(project)
            )
            written.extend(materializer.materialize(root, context))

        result = GenerationResult(
            generated,
            warnings,
            {
                "language": self.language_name,
                "project": project.name,
                "package": self.package_for(project),
                "output_dir": str(root),
                "written": [str(p) for p in written],
            },
        )

        failed = len(generated) - len([p for p in written if p.suffix == ".java"])
        if failed > 0:
            result.success = False
            result.error_message = f"{failed} file(s) could not be written"
        return result


def create_spring_generator(name: str, **options) -> SpringGenerator:
    """Create a Spring generator for the named project with default settings."""
    return SpringGenerator(GeneratorConfig(custom={"name": name, **options}))
