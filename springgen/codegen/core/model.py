"""
Project model consumed by the generators.

Converts a JSON project document into modules and typed entities that the
language generators read. The model is never mutated by a generator.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Any
from enum import Enum

from ...logging_config import get_logger

logger = get_logger(__name__)


class ProjectError(Exception):
    """Exception raised for malformed project documents."""

    pass


class EntityType(Enum):
    """Kinds of entities a module can hold."""

    REQUEST = "request"
    RESPONSE = "response"
    DATA = "data"
    ENUM = "enum"


class ReqMethod(Enum):
    """HTTP methods a request entity can declare."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
    PATCH = "PATCH"
    HEAD = "HEAD"


# Field types that are not entity references
PRIMITIVE_TYPES = {
    "string",
    "int",
    "integer",
    "long",
    "float",
    "double",
    "bool",
    "boolean",
    "date",
}


@dataclass(frozen=True)
class ElementPath:
    """Reference to an entity by module and entity name."""

    module: str
    name: str

    @classmethod
    def parse(cls, value: str, default_module: str) -> "ElementPath":
        """Parse ``Module.Name`` or a bare ``Name`` owned by ``default_module``."""
        value = value.strip()
        if not value:
            raise ProjectError("Empty element reference")
        if "." in value:
            module, _, name = value.rpartition(".")
            return cls(module=module, name=name)
        return cls(module=default_module, name=value)

    def __str__(self) -> str:
        return f"{self.module}.{self.name}"


@dataclass
class EntityField:
    """A single field of an entity."""

    name: str
    type: str
    is_list: bool = False
    description: Optional[str] = None

    # Set for fields whose type is another entity
    ref: Optional[ElementPath] = None

    @property
    def is_primitive(self) -> bool:
        return self.ref is None


@dataclass
class Entity:
    """A typed definition inside a module."""

    name: str
    type: EntityType
    is_abstract: bool = False
    method: Optional[ReqMethod] = None
    path: str = ""
    response: Optional[ElementPath] = None
    fields: List[EntityField] = field(default_factory=list)
    description: Optional[str] = None

    @property
    def is_request(self) -> bool:
        return self.type == EntityType.REQUEST


@dataclass
class Module:
    """A named group of entities, iterated in declaration order."""

    name: str
    entities: Dict[str, Entity] = field(default_factory=dict)

    def add_entity(self, entity: Entity) -> None:
        if entity.name in self.entities:
            raise ProjectError(
                f"Duplicate entity '{entity.name}' in module '{self.name}'"
            )
        self.entities[entity.name] = entity


@dataclass
class Project:
    """Top-level project description."""

    name: str
    version: str = "0.0.1"
    target_package: str = ""
    modules: Dict[str, Module] = field(default_factory=dict)

    def add_module(self, module: Module) -> None:
        if module.name in self.modules:
            raise ProjectError(f"Duplicate module '{module.name}'")
        self.modules[module.name] = module

    def resolve(self, path: ElementPath) -> Optional[Entity]:
        """Look up the entity a path points to, or None."""
        module = self.modules.get(path.module)
        if module is None:
            return None
        return module.entities.get(path.name)

    def iter_entities(self):
        """Yield ``(module, entity)`` pairs in declaration order."""
        for module in self.modules.values():
            for entity in module.entities.values():
                yield module, entity


def _parse_method(value: Any, where: str) -> Optional[ReqMethod]:
    if value is None:
        return None
    try:
        return ReqMethod(str(value).upper())
    except ValueError:
        raise ProjectError(f"Unknown HTTP method '{value}' in {where}")


def _parse_field(data: Any, module_name: str, where: str) -> EntityField:
    if not isinstance(data, dict) or "name" not in data:
        raise ProjectError(f"Field definitions in {where} need a 'name'")

    type_name = str(data.get("type", "string"))
    is_list = bool(data.get("list", False))
    if type_name.endswith("[]"):
        type_name = type_name[:-2]
        is_list = True

    ref = None
    if type_name.lower() not in PRIMITIVE_TYPES:
        ref = ElementPath.parse(type_name, module_name)
        type_name = ref.name

    return EntityField(
        name=str(data["name"]),
        type=type_name,
        is_list=is_list,
        description=data.get("description"),
        ref=ref,
    )


def _parse_entity(name: str, data: Any, module_name: str) -> Entity:
    where = f"entity '{module_name}.{name}'"
    if not isinstance(data, dict):
        raise ProjectError(f"Definition of {where} must be an object")

    raw_type = str(data.get("type", "data")).lower()
    try:
        entity_type = EntityType(raw_type)
    except ValueError:
        raise ProjectError(f"Unknown entity type '{raw_type}' in {where}")

    response = data.get("response")
    return Entity(
        name=name,
        type=entity_type,
        is_abstract=bool(data.get("abstract", False)),
        method=_parse_method(data.get("method"), where),
        path=str(data.get("path", "")),
        response=ElementPath.parse(response, module_name) if response else None,
        fields=[_parse_field(f, module_name, where) for f in data.get("fields", [])],
        description=data.get("description"),
    )


def _check_references(project: Project) -> None:
    """Every response and field reference must point to a known entity."""
    for module, entity in project.iter_entities():
        refs = [entity.response] if entity.response else []
        refs.extend(f.ref for f in entity.fields if f.ref)
        for ref in refs:
            if project.resolve(ref) is None:
                raise ProjectError(
                    f"Unresolved reference '{ref}' in entity "
                    f"'{module.name}.{entity.name}'"
                )


def load_project(data: Dict[str, Any]) -> Project:
    """
    Convert a JSON project document into a :class:`Project`.

    Args:
        data: Parsed JSON document

    Returns:
        Project with modules and entities in document order

    Raises:
        ProjectError: If the document is malformed
    """
    if not isinstance(data, dict):
        raise ProjectError("Project document must be a JSON object")

    name = data.get("name")
    if not name:
        raise ProjectError("Project document needs a 'name'")

    project = Project(
        name=str(name),
        version=str(data.get("version", "0.0.1")),
        target_package=str(
            data.get("targetPackage", data.get("target_package", ""))
        ),
    )

    modules = data.get("modules", {})
    if not isinstance(modules, dict):
        raise ProjectError("'modules' must map module names to definitions")

    for module_name, module_data in modules.items():
        if module_data is not None and not isinstance(module_data, dict):
            raise ProjectError(f"Definition of module '{module_name}' must be an object")
        module = Module(name=module_name)
        entities = (module_data or {}).get("entities", {})
        if not isinstance(entities, dict):
            raise ProjectError(f"'entities' of module '{module_name}' must be an object")
        for entity_name, entity_data in entities.items():
            module.add_entity(_parse_entity(entity_name, entity_data, module_name))
        project.add_module(module)

    _check_references(project)

    logger.debug(
        "Loaded project '%s' with %d module(s)", project.name, len(project.modules)
    )
    return project
