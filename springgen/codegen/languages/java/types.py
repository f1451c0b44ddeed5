"""
Java type mapping for entity fields.
"""

from ...core.model import EntityField

# Primitive field types to Java types
JAVA_TYPE_MAP = {
    "string": "String",
    "int": "int",
    "integer": "int",
    "long": "long",
    "float": "float",
    "double": "double",
    "bool": "boolean",
    "boolean": "boolean",
    "date": "Date",
}

# Generic type arguments cannot be primitives
BOXED_TYPES = {
    "int": "Integer",
    "long": "Long",
    "float": "Float",
    "double": "Double",
    "boolean": "Boolean",
}


def java_element_type(field: EntityField) -> str:
    """Java type of a single value of the field (ignoring ``is_list``)."""
    if field.ref is not None:
        return field.ref.name
    return JAVA_TYPE_MAP.get(field.type.lower(), "Object")


def java_type(field: EntityField) -> str:
    """Java type used to declare the field."""
    element = java_element_type(field)
    if field.is_list:
        return f"List<{BOXED_TYPES.get(element, element)}>"
    return element


# Characters that must be escaped inside a Java string literal
JAVA_STRING_ESCAPES = str.maketrans(
    {"\\": "\\\\", '"': '\\"', "\n": "\\n", "\r": "\\r", "\t": "\\t"}
)


def java_string_literal(text: str) -> str:
    """Quote ``text`` as a Java string literal."""
    return f'"{text.translate(JAVA_STRING_ESCAPES)}"'


def demo_literal(field: EntityField) -> str:
    """Java expression producing a synthetic value for a primitive field."""
    return {
        "String": java_string_literal(f"{field.name}-demo"),
        "int": "1",
        "long": "1L",
        "float": "1.0f",
        "double": "1.0",
        "boolean": "true",
        "Date": "new Date()",
    }.get(java_element_type(field), "null")
