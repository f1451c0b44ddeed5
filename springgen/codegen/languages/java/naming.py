"""
Java-specific naming utilities and sanitization.

Handles Java reserved words, builtin type names and package/path naming.
"""

from ...core.naming import NameSanitizer, NamingCase, capitalize_first


# Java reserved words (including literals and contextual keywords)
JAVA_RESERVED_WORDS = {
    "abstract",
    "assert",
    "boolean",
    "break",
    "byte",
    "case",
    "catch",
    "char",
    "class",
    "const",
    "continue",
    "default",
    "do",
    "double",
    "else",
    "enum",
    "extends",
    "final",
    "finally",
    "float",
    "for",
    "goto",
    "if",
    "implements",
    "import",
    "instanceof",
    "int",
    "interface",
    "long",
    "native",
    "new",
    "package",
    "private",
    "protected",
    "public",
    "return",
    "short",
    "static",
    "strictfp",
    "super",
    "switch",
    "synchronized",
    "this",
    "throw",
    "throws",
    "transient",
    "try",
    "void",
    "volatile",
    "while",
    "true",
    "false",
    "null",
    "var",
    "record",
    "yield",
}

# java.lang types a generated class must not shadow
JAVA_BUILTIN_TYPES = {
    "Object",
    "String",
    "Integer",
    "Long",
    "Double",
    "Float",
    "Boolean",
    "Class",
    "System",
    "Exception",
}


def create_java_sanitizer() -> NameSanitizer:
    """Create a name sanitizer configured for Java."""
    return NameSanitizer(JAVA_RESERVED_WORDS, JAVA_BUILTIN_TYPES)


def sanitize_java_field_name(name: str) -> str:
    """Sanitize name for a Java field (camelCase)."""
    return create_java_sanitizer().sanitize_name(name, NamingCase.CAMEL_CASE)


def is_valid_package_name(package: str) -> bool:
    """Check a dotted Java package name."""
    if not package:
        return False
    return all(
        part.isidentifier() and part not in JAVA_RESERVED_WORDS
        for part in package.split(".")
    )


def package_to_path_parts(package: str) -> list[str]:
    """Split ``com.example.api`` into ``['com', 'example', 'api']``."""
    return [part for part in package.split(".") if part]


def property_name(name: str) -> str:
    """Java field name for an entity field."""
    return sanitize_java_field_name(name)


# Final methods of java.lang.Object
OBJECT_METHODS = {"getClass", "notify", "notifyAll", "wait"}


def accessor_name(prefix: str, name: str) -> str:
    """Bean accessor for a field, e.g. ``accessor_name("get", "user_id")``."""
    accessor = f"{prefix}{capitalize_first(property_name(name).rstrip('_'))}"
    if accessor in OBJECT_METHODS:
        accessor = f"{accessor}_"
    return accessor


def enum_constant_name(name: str) -> str:
    """Java enum constant for an enum entity member."""
    return create_java_sanitizer().sanitize_name(name, NamingCase.SCREAMING_SNAKE)
