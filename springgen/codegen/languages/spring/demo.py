"""
Demo response generation.

Emits a method body that builds a synthetic instance of a response entity,
so generated resources return data before any real logic exists.
"""

from typing import FrozenSet

from ...core.builder import CodeBuilder
from ...core.model import ElementPath, Entity, EntityField, EntityType, Project
from ..java.naming import accessor_name, enum_constant_name, property_name
from ..java.types import BOXED_TYPES, demo_literal, java_element_type


class DemoGenerator:
    """Writes demo construction code for one response entity.

    Every nested entity value and every list is built inside its own
    ``{ }`` block. Local variable names are numbered because Java rejects a
    local that shadows one from an enclosing block. An entity already being
    constructed further up is left unset, which stops reference cycles.
    """

    def __init__(self, project: Project, path: ElementPath):
        self.project = project
        self.path = path
        self._counter = 0

    def as_function_body(self, b: CodeBuilder):
        """Emit statements ending in a ``return`` of the demo value."""
        entity = self.project.resolve(self.path)
        if entity is None:
            b(f"// No demo data: unknown response type {self.path}")
            b("return null;")
            return

        if entity.type == EntityType.ENUM:
            b(f"return {enum_value(entity)};")
            return

        self._counter = 0
        self._construct(b, entity, "ret", frozenset({self.path}))
        b("return ret;")

    def _next_var(self, field: EntityField) -> str:
        self._counter += 1
        return f"{property_name(field.name).rstrip('_')}{self._counter}"

    def _construct(
        self, b: CodeBuilder, entity: Entity, var: str, visiting: FrozenSet[ElementPath]
    ):
        b(f"{entity.name} {var} = new {entity.name}();")
        for field in entity.fields:
            setter = accessor_name("set", field.name)
            if field.is_list:
                self._write_list(b, field, f"{var}.{setter}", visiting)
            elif self._is_nested(field, visiting):
                b.open_scope().add(
                    lambda b: b(
                        f"{var}.{setter}({self._write_nested(b, field, visiting)});"
                    )
                )
            elif self._is_settable(field):
                b(f"{var}.{setter}({self._simple_value(field)});")

    def _write_list(
        self,
        b: CodeBuilder,
        field: EntityField,
        setter_call: str,
        visiting: FrozenSet[ElementPath],
    ):
        element = java_element_type(field)
        element = BOXED_TYPES.get(element, element)
        list_var = self._next_var(field)

        def body(b: CodeBuilder):
            b(f"List<{element}> {list_var} = new ArrayList<>();")
            if self._is_nested(field, visiting):
                b(f"{list_var}.add({self._write_nested(b, field, visiting)});")
            elif self._is_settable(field):
                b(f"{list_var}.add({self._simple_value(field)});")
            b(f"{setter_call}({list_var});")

        b.open_scope().add(body)

    def _write_nested(
        self, b: CodeBuilder, field: EntityField, visiting: FrozenSet[ElementPath]
    ) -> str:
        """Construct a nested entity in the current block and return its local."""
        nested_var = self._next_var(field)
        target = self.project.resolve(field.ref)
        self._construct(b, target, nested_var, visiting | {field.ref})
        return nested_var

    def _is_nested(self, field: EntityField, visiting: FrozenSet[ElementPath]) -> bool:
        """True for references to class entities not already under construction."""
        if field.ref is None or field.ref in visiting:
            return False
        target = self.project.resolve(field.ref)
        return target is not None and target.type != EntityType.ENUM

    def _is_settable(self, field: EntityField) -> bool:
        if field.ref is None:
            return True
        target = self.project.resolve(field.ref)
        return target is not None and target.type == EntityType.ENUM

    def _simple_value(self, field: EntityField) -> str:
        if field.ref is None:
            return demo_literal(field)
        return enum_value(self.project.resolve(field.ref))


def enum_value(entity: Entity) -> str:
    """First constant of an enum entity, or ``null`` for an empty enum."""
    if not entity.fields:
        return "null"
    return f"{entity.name}.{enum_constant_name(entity.fields[0].name)}"
